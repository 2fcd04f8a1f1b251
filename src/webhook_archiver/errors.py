"""Error types raised by the webhook pipeline."""

from typing import Any, Dict, Optional


class ArchiverError(Exception):
    """Base exception for pipeline failures."""

    def __init__(
        self,
        message: str,
        code: str = "internal_error",
        data: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON error body returned by the HTTP layer."""
        error = {
            "code": self.code,
            "message": self.message,
        }

        if self.data:
            error["data"] = self.data

        return error


class ArchiveError(ArchiverError):
    """Error for archive I/O failures (create, read member, finalize)."""

    def __init__(self, message: str, data: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="archive_failed", data=data)


class PublishError(ArchiverError):
    """Error for remote transfer failures."""

    def __init__(self, message: str, data: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="publish_failed", data=data)
