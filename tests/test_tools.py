"""Tests for the MCP tool wrappers."""

import pytest

from obsidian_rest import mcp, set_repository
from obsidian_rest.errors import OperationFailedError
from obsidian_rest.models import (
    ActiveNoteInput,
    BulkApplyTagsInput,
    BulkFrontmatterArrayInput,
    GetNoteInput,
    ListDirectoryInput,
    NoteFrontmatterArrayInput,
    PatchNoteInput,
    PeriodicNoteContentInput,
    PeriodicNoteInput,
    SearchVaultInput,
    ServerInfoInput,
    WriteNoteInput,
)
from obsidian_rest.tools import (
    bulk_tools,
    frontmatter_tools,
    note_tools,
    periodic_tools,
    search_tools,
)


@pytest.fixture(autouse=True)
def shared_repository(repository):
    set_repository(repository)
    yield repository
    set_repository(None)


@pytest.mark.asyncio
async def test_all_tool_families_registered():
    names = {tool.name for tool in await mcp.list_tools()}

    assert {
        "get_obsidian_server_info",
        "get_active_obsidian_note",
        "patch_obsidian_note",
        "set_obsidian_frontmatter_array",
        "search_obsidian_vault",
        "list_obsidian_directory",
        "bulk_apply_tags_from_search",
        "bulk_append_frontmatter_array",
        "get_periodic_note",
        "append_to_periodic_note",
    } <= names


class TestNoteTools:
    @pytest.mark.asyncio
    async def test_server_info(self):
        result = await note_tools.get_obsidian_server_info(ServerInfoInput())
        assert result == {"service": "Obsidian Local REST API", "version": "3.0.1"}

    @pytest.mark.asyncio
    async def test_write_then_read(self, api):
        written = await note_tools.create_or_update_obsidian_note(
            WriteNoteInput(filename="Plan.md", content="# Plan")
        )
        assert written == {"filename": "Plan.md", "status": "written"}

        note = await note_tools.get_obsidian_note(GetNoteInput(filename="Plan.md"))
        assert note == {"filename": "Plan.md", "content": "# Plan"}

    @pytest.mark.asyncio
    async def test_active_note(self, api):
        api.add_note("a.md", "hello")
        api.active = "a.md"

        result = await note_tools.get_active_obsidian_note(ActiveNoteInput())
        assert result["content"] == "hello"

    @pytest.mark.asyncio
    async def test_patch_reports_parameters(self, api):
        api.add_note("Plan.md", "body")

        result = await note_tools.patch_obsidian_note(
            PatchNoteInput(
                filename="Plan.md",
                content="x",
                operation="prepend",
                target_type="block",
                target="^ref",
            )
        )

        assert result == {
            "filename": "Plan.md",
            "status": "patched",
            "operation": "prepend",
            "target_type": "block",
            "target": "^ref",
        }

    @pytest.mark.asyncio
    async def test_errors_propagate(self):
        with pytest.raises(OperationFailedError):
            await note_tools.get_obsidian_note(GetNoteInput(filename="missing.md"))


class TestFrontmatterTools:
    @pytest.mark.asyncio
    async def test_append_array(self, api):
        api.add_note("Plan.md", "body", {"tags": ["a"]})

        result = await frontmatter_tools.append_obsidian_frontmatter_array(
            NoteFrontmatterArrayInput(filename="Plan.md", key="tags", values=["b"])
        )

        assert result == {"filename": "Plan.md", "key": "tags", "value": ["b"], "status": "appended"}
        assert api.frontmatter["Plan.md"]["tags"] == ["a", "b"]


class TestSearchTools:
    @pytest.mark.asyncio
    async def test_search(self, api):
        api.search_hits = [{"filename": "m1.md", "score": 0.9}]

        result = await search_tools.search_obsidian_vault(SearchVaultInput(query="meeting"))

        assert result == {
            "query": "meeting",
            "results": [{"path": "m1.md", "score": 0.9}],
            "total_results": 1,
        }

    @pytest.mark.asyncio
    async def test_list_directory(self, api):
        api.directories = {"": ["a.md", "b/"], "b": ["c.md"]}

        result = await search_tools.list_obsidian_directory(ListDirectoryInput())

        assert result == {"directory": "", "entries": ["a.md", "b/", "b/c.md"], "total": 3}


class TestBulkTools:
    @pytest.mark.asyncio
    async def test_bulk_apply_tags_payload(self, api):
        api.add_note("m1.md")
        api.search_hits = [{"filename": "m1.md", "score": 0.9}, {"filename": "m2.md", "score": 0.5}]

        result = await bulk_tools.bulk_apply_tags_from_search(
            BulkApplyTagsInput(query="meeting", tags=["#meetings"])
        )

        assert result["successful"] == ["m1.md"]
        assert result["failed"] == [
            {"filename": "m2.md", "error": "Repository operation failed (404): Not Found"}
        ]
        assert result["total_processed"] == 2
        assert result["query"] == "meeting"
        assert api.frontmatter["m1.md"]["tags"] == ["meetings"]

    @pytest.mark.asyncio
    async def test_bulk_replace_array(self, api):
        api.add_note("x.md", "", {"owners": ["old"]})
        api.search_hits = [{"filename": "x.md", "score": 1}]

        await bulk_tools.bulk_replace_frontmatter_array(
            BulkFrontmatterArrayInput(query="x", key="owners", values=["new"])
        )

        assert api.frontmatter["x.md"]["owners"] == ["new"]


class TestPeriodicTools:
    @pytest.mark.asyncio
    async def test_append_then_get(self, api):
        appended = await periodic_tools.append_to_periodic_note(
            PeriodicNoteContentInput(period="daily", content="- entry")
        )
        assert appended == {
            "period": "daily",
            "year": None,
            "month": None,
            "day": None,
            "status": "appended",
        }

        note = await periodic_tools.get_periodic_note(PeriodicNoteInput(period="daily"))
        assert note["period"] == "daily"
        assert note["content"] == "- entry"

    @pytest.mark.asyncio
    async def test_dated_delete(self, api):
        api.periodic["/periodic/yearly/2024/1/1/"] = "# 2024"

        result = await periodic_tools.delete_periodic_note(
            PeriodicNoteInput(period="yearly", year=2024, month=1, day=1)
        )

        assert result["status"] == "deleted"
        assert api.periodic == {}
