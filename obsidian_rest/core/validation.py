"""Status-code validation for Local REST API responses."""

from __future__ import annotations

import httpx

from obsidian_rest.core.executor import ApiResponse
from obsidian_rest.errors import InvalidResponseError, OperationFailedError


def validate_status(status_code: int | None) -> None:
    """Raise a repository error unless ``status_code`` is in ``[200, 300)``.

    Args:
        status_code: Raw HTTP status, or ``None`` when the transport produced no
            response object.

    Raises:
        InvalidResponseError: If no status code is available.
        OperationFailedError: If the status is outside the 2xx range. The message
            is the standard reason phrase for the code.
    """
    if status_code is None:
        raise InvalidResponseError()

    if not 200 <= status_code < 300:
        message = httpx.codes.get_reason_phrase(status_code) or "Unknown Status"
        raise OperationFailedError(status_code, message)


def validate_response(response: ApiResponse) -> None:
    """Validate the status code carried by ``response``."""
    validate_status(response.status_code)
