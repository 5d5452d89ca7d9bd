"""
Tabular Export - Custom Exceptions

Defines the exception hierarchy for the export engine.
All exceptions inherit from TabularExportError for unified error handling.
"""

from typing import Any


class TabularExportError(Exception):
    """Base exception for all export engine errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for reporting."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# -----------------------------------------------------------------------------
# Export Exceptions
# -----------------------------------------------------------------------------


class ExportError(TabularExportError):
    """Base exception for export-related errors."""


class UnsupportedFormatError(ExportError):
    """Raised when an unsupported export format is requested."""

    def __init__(self, format: str, supported: list[str], **kwargs: Any) -> None:
        super().__init__(
            f"Unsupported format: {format}. Supported: {', '.join(supported)}",
            details={"format": format, "supported": supported},
            **kwargs,
        )
        self.format = format


class ExportIOError(ExportError):
    """Raised when the target file cannot be opened or written."""

    def __init__(self, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Could not write {path}: {reason}",
            details={"path": path, "reason": reason},
            **kwargs,
        )
        self.path = path


class ExportEncodingError(ExportError):
    """Raised when the document cannot be represented in the output charset."""

    def __init__(self, path: str, encoding: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Could not encode {path} as {encoding}: {reason}",
            details={"path": path, "encoding": encoding, "reason": reason},
            **kwargs,
        )
        self.path = path
        self.encoding = encoding
