"""
Tabular Export - Constants and Enumerations

Defines the export formats, their descriptors and the default values used
across the engine.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from tabular_export.shared.exceptions import UnsupportedFormatError


class ExportFormat(str, Enum):
    """Supported export document formats."""

    DELIMITED = "delimited"
    SPREADSHEET_MARKUP = "spreadsheet_markup"
    PRINTABLE_HYPERTEXT = "printable_hypertext"
    PLAIN_HYPERTEXT = "plain_hypertext"

    def __str__(self) -> str:
        return self.value

    @property
    def descriptor(self) -> "FormatDescriptor":
        return FORMAT_DESCRIPTORS[self]

    @property
    def extension(self) -> str:
        return FORMAT_DESCRIPTORS[self].extension

    @classmethod
    def parse(cls, value: "ExportFormat | str") -> "ExportFormat":
        """
        Resolve a format from a member, its id or a file extension.

        Args:
            value: Format id ("delimited"), extension ("csv", ".xls") or member

        Returns:
            The matching ExportFormat

        Raises:
            UnsupportedFormatError: If nothing matches
        """
        if isinstance(value, cls):
            return value

        key = str(value).strip().lower()
        for fmt in cls:
            if key == fmt.value:
                return fmt

        key = key.lstrip(".")
        for fmt, descriptor in FORMAT_DESCRIPTORS.items():
            if key == descriptor.extension:
                return fmt

        raise UnsupportedFormatError(str(value), [fmt.value for fmt in cls])

    @classmethod
    def for_path(cls, path: str | Path) -> "ExportFormat | None":
        """Get the format whose extension matches the path suffix, if any."""
        suffix = Path(path).suffix.lower().lstrip(".")
        for fmt, descriptor in FORMAT_DESCRIPTORS.items():
            if suffix == descriptor.extension:
                return fmt
        return None


@dataclass(frozen=True)
class FormatDescriptor:
    """Static metadata identifying an output format."""

    format: ExportFormat
    display_name: str
    extension: str

    @property
    def filter_label(self) -> str:
        return f"{self.display_name} (*.{self.extension})"


FORMAT_DESCRIPTORS: dict[ExportFormat, FormatDescriptor] = {
    ExportFormat.DELIMITED: FormatDescriptor(ExportFormat.DELIMITED, "CSV Files", "csv"),
    ExportFormat.SPREADSHEET_MARKUP: FormatDescriptor(
        ExportFormat.SPREADSHEET_MARKUP, "Excel Files", "xls"
    ),
    # Print-styled hypertext; the file is not a binary PDF
    ExportFormat.PRINTABLE_HYPERTEXT: FormatDescriptor(
        ExportFormat.PRINTABLE_HYPERTEXT, "PDF Files", "pdf"
    ),
    ExportFormat.PLAIN_HYPERTEXT: FormatDescriptor(
        ExportFormat.PLAIN_HYPERTEXT, "HTML Files", "html"
    ),
}

# -----------------------------------------------------------------------------
# Export Defaults
# -----------------------------------------------------------------------------
DEFAULT_TITLE = "Data Export"
DEFAULT_COMPANY_NAME = "Business Management System"
DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_OUTPUT_ENCODING = "utf-8"

# Format used when the target path gives no hint
DEFAULT_FORMAT = ExportFormat.DELIMITED

# -----------------------------------------------------------------------------
# Document Styling
# -----------------------------------------------------------------------------
SPREADSHEET_HEADER_COLOR = "#4472C4"
SPREADSHEET_BORDER_COLOR = "#D0D0D0"
REPORT_ACCENT_COLOR = "#1976D2"
