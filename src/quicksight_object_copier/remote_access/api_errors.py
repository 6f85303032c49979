"""QuickSight API error taxonomy."""

from __future__ import annotations

RESOURCE_NOT_FOUND_CODE = "ResourceNotFoundException"


class QuickSightApiError(Exception):
    """Raised when a QuickSight API operation fails."""

    def __init__(self, operation: str, message: str, *, error_code: str | None = None) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation
        self.error_code = error_code


class NotFoundError(QuickSightApiError):
    """Raised when an operation addresses an object that does not exist."""


class RemoteError(QuickSightApiError):
    """Raised for any other API failure (validation, conflict, throttling, network)."""
