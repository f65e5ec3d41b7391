"""Tests for depth-bounded directory expansion."""

import pytest

from obsidian_rest.core.directory_walker import walk_directory


def listing_from(tree):
    calls: list[str] = []

    async def list_directory(directory: str) -> list[str]:
        calls.append(directory)
        return tree[directory]

    return list_directory, calls


class TestWalkDirectory:
    @pytest.mark.asyncio
    async def test_directory_entry_precedes_its_contents(self):
        list_directory, calls = listing_from({"": ["a.md", "b/"], "b": ["c.md"]})

        entries = await walk_directory(list_directory, "", max_depth=2)

        assert entries == ["a.md", "b/", "b/c.md"]
        assert calls == ["", "b"]

    @pytest.mark.asyncio
    async def test_depth_first_order_across_siblings(self):
        tree = {
            "": ["x/", "y.md", "z/"],
            "x": ["x1.md", "x2/"],
            "x/x2": ["deep.md"],
            "z": ["z1.md"],
        }
        list_directory, _ = listing_from(tree)

        entries = await walk_directory(list_directory)

        assert entries == ["x/", "x/x1.md", "x/x2/", "x/x2/deep.md", "y.md", "z/", "z/z1.md"]

    @pytest.mark.asyncio
    async def test_stops_below_max_depth(self):
        tree = {
            "": ["l1/"],
            "l1": ["l2/"],
            "l1/l2": ["l3/", "note.md"],
            "l1/l2/l3": ["too-deep.md"],
        }
        list_directory, calls = listing_from(tree)

        entries = await walk_directory(list_directory, max_depth=2)

        assert entries == ["l1/", "l1/l2/", "l1/l2/l3/", "l1/l2/note.md"]
        assert "l1/l2/l3" not in calls

    @pytest.mark.asyncio
    async def test_cyclic_listing_terminates(self):
        calls: list[str] = []

        async def list_directory(directory: str) -> list[str]:
            calls.append(directory)
            return ["loop/"]

        entries = await walk_directory(list_directory, max_depth=2)

        assert entries == ["loop/", "loop/loop/", "loop/loop/loop/"]
        assert len(calls) == 3

    @pytest.mark.asyncio
    async def test_zero_depth_lists_only_start(self):
        list_directory, calls = listing_from({"": ["a/", "b.md"]})

        assert await walk_directory(list_directory, max_depth=0) == ["a/", "b.md"]
        assert calls == [""]

    @pytest.mark.asyncio
    async def test_starting_directory_prefixes_entries(self):
        tree = {"Projects": ["plan.md", "archive/"], "Projects/archive": ["old.md"]}
        list_directory, _ = listing_from(tree)

        entries = await walk_directory(list_directory, "Projects")

        assert entries == ["Projects/plan.md", "Projects/archive/", "Projects/archive/old.md"]

    @pytest.mark.asyncio
    async def test_empty_directory(self):
        list_directory, _ = listing_from({"": []})
        assert await walk_directory(list_directory) == []

    @pytest.mark.asyncio
    async def test_listing_failure_propagates(self):
        async def list_directory(directory: str) -> list[str]:
            if directory:
                raise RuntimeError("listing failed")
            return ["sub/"]

        with pytest.raises(RuntimeError, match="listing failed"):
            await walk_directory(list_directory)
