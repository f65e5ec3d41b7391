"""Failure taxonomy for the repository layer."""

from __future__ import annotations


class RepositoryError(Exception):
    """Base class for failures detected while talking to the Local REST API."""


class OperationFailedError(RepositoryError):
    """The API answered with a non-2xx status code."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"Repository operation failed ({status_code}): {message}")


class InvalidResponseError(RepositoryError):
    """No usable status code could be obtained for a request."""

    def __init__(self) -> None:
        super().__init__("Invalid repository response")
