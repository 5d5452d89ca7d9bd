"""
Tabular Export - Export Configuration

Immutable options shared by every encoder.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Iterable

from tabular_export.shared.config import Settings
from tabular_export.shared.constants import (
    DEFAULT_COMPANY_NAME,
    DEFAULT_TIMESTAMP_FORMAT,
    DEFAULT_TITLE,
)


@dataclass(frozen=True)
class ExportConfig:
    """
    Options controlling one export.

    selected_columns=None exports every column. Names that match no column
    are ignored.
    """

    title: str = DEFAULT_TITLE
    subtitle: str = ""
    include_header: bool = True
    include_footer: bool = True
    include_timestamp: bool = True
    selected_columns: tuple[str, ...] | None = None

    # Printed on the header line of every document
    company_name: str = DEFAULT_COMPANY_NAME
    timestamp_format: str = field(default=DEFAULT_TIMESTAMP_FORMAT, repr=False)

    def __post_init__(self) -> None:
        if self.selected_columns is not None and not isinstance(self.selected_columns, tuple):
            object.__setattr__(self, "selected_columns", tuple(self.selected_columns))

    @classmethod
    def with_title(cls, title: str) -> "ExportConfig":
        """Default configuration carrying only a title."""
        return cls(title=title)

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: Any) -> "ExportConfig":
        """Seed company name and timestamp format from application settings."""
        values: dict[str, Any] = {
            "company_name": settings.export.company_name,
            "timestamp_format": settings.export.timestamp_format,
        }
        values.update(overrides)
        return cls(**values)

    def select(self, columns: Iterable[str] | None) -> "ExportConfig":
        """Copy of this configuration restricted to the given column names."""
        return replace(self, selected_columns=None if columns is None else tuple(columns))
