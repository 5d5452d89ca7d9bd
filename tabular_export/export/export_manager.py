"""
Tabular Export - Export Manager

Unified interface for exporting tables to every supported format.
Selects the encoder, fixes the file extension and writes the document.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Type

from tabular_export.export.base_encoder import BaseEncoder, Clock
from tabular_export.export.columns import resolve_columns
from tabular_export.export.csv_encoder import CSVEncoder
from tabular_export.export.data_source import TabularDataSource
from tabular_export.export.html_encoder import HTMLEncoder, PrintableHTMLEncoder
from tabular_export.export.options import ExportConfig
from tabular_export.export.spreadsheet_encoder import SpreadsheetEncoder
from tabular_export.shared.config import Settings, get_settings
from tabular_export.shared.constants import ExportFormat
from tabular_export.shared.exceptions import (
    ExportEncodingError,
    ExportError,
    ExportIOError,
    UnsupportedFormatError,
)
from tabular_export.shared.logging import LoggerMixin


@dataclass(frozen=True)
class ExportResult:
    """Outcome of one export call."""

    format: ExportFormat
    path: Path
    rows_exported: int = 0
    columns_exported: int = 0
    error: ExportError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Re-raise the captured error, if any."""
        if self.error is not None:
            raise self.error


def with_extension(path: str | Path, format: ExportFormat) -> Path:
    """
    Append the format's extension unless the name already ends with it.

    The path must have a file name; ExportManager.export reports an empty
    one as an ExportIOError before calling this.
    """
    path = Path(path)
    extension = f".{format.extension}"
    if path.name.lower().endswith(extension):
        return path
    return path.with_name(path.name + extension)


class ExportManager(LoggerMixin):
    """
    Manages table exports across formats.

    Usage:
        manager = ExportManager()

        # Export to a specific format
        config = ExportConfig(title="Products")
        result = manager.export(source, config, ExportFormat.DELIMITED, "products")

        # Export with defaults and a title only
        manager.quick_export_html(source, "Products", "products.html")
    """

    # Defaults; each manager works on its own copy
    DEFAULT_ENCODERS: dict[ExportFormat, Type[BaseEncoder]] = {
        ExportFormat.DELIMITED: CSVEncoder,
        ExportFormat.SPREADSHEET_MARKUP: SpreadsheetEncoder,
        ExportFormat.PRINTABLE_HYPERTEXT: PrintableHTMLEncoder,
        ExportFormat.PLAIN_HYPERTEXT: HTMLEncoder,
    }

    def __init__(self, settings: Settings | None = None, clock: Clock = datetime.now) -> None:
        """
        Initialize export manager.

        Args:
            settings: Application settings (default: cached environment settings)
            clock: Timestamp source handed to the encoders
        """
        self.settings = settings or get_settings()
        self.clock = clock
        self._encoders: dict[ExportFormat, Type[BaseEncoder]] = dict(self.DEFAULT_ENCODERS)

    @property
    def encoding(self) -> str:
        return self.settings.export.output_encoding

    def _get_encoder(self, format: ExportFormat) -> BaseEncoder:
        """Create an encoder for the format."""
        if format not in self._encoders:
            raise UnsupportedFormatError(
                str(format),
                [str(f) for f in self._encoders.keys()],
            )
        return self._encoders[format](clock=self.clock)

    def export(
        self,
        source: TabularDataSource,
        config: ExportConfig,
        format: ExportFormat | str,
        target_path: str | Path,
    ) -> ExportResult:
        """
        Export a table to a single format.

        Args:
            source: Table to export
            config: Export options
            format: Export format (member, id or extension)
            target_path: Destination; the format's extension is appended if missing

        Returns:
            ExportResult carrying either the written path or the failure

        Raises:
            UnsupportedFormatError: If the format is not recognized
        """
        format = ExportFormat.parse(format)
        if not Path(target_path).name:
            error = ExportIOError(str(target_path), "target path has no file name")
            self.logger.error("Export failed", format=str(format), error=error.message)
            return ExportResult(format, Path(target_path), error=error)
        return self._write(source, config, format, with_extension(target_path, format))

    def _write(
        self,
        source: TabularDataSource,
        config: ExportConfig,
        format: ExportFormat,
        path: Path,
    ) -> ExportResult:
        encoder = self._get_encoder(format)

        self.logger.info("Starting export", format=str(format), path=str(path))

        columns = resolve_columns(source, config)
        document = encoder.encode(source, columns, config)

        try:
            # Encoded before the target is opened
            payload = document.to_bytes(self.encoding)
            with open(path, "wb") as f:
                f.write(payload)
        except (UnicodeError, LookupError) as e:
            error: ExportError = ExportEncodingError(str(path), self.encoding, str(e))
        except OSError as e:
            error = ExportIOError(str(path), e.strerror or str(e))
        else:
            self.logger.info(
                "Export complete",
                format=str(format),
                count=source.row_count,
                path=str(path),
            )
            return ExportResult(format, path, source.row_count, len(columns))

        self.logger.error("Export failed", format=str(format), path=str(path), error=error.message)
        return ExportResult(format, path, error=error)

    def export_all(
        self,
        source: TabularDataSource,
        config: ExportConfig,
        target_stem: str | Path,
        formats: list[ExportFormat | str] | None = None,
    ) -> dict[ExportFormat, ExportResult]:
        """
        Export a table to several formats sharing one base name.

        Args:
            source: Table to export
            config: Export options
            target_stem: Path without extension
            formats: Formats to write (default: all supported)

        Returns:
            Dictionary mapping format to its export result
        """
        if formats is None:
            formats = self.get_supported_formats()

        results = {}
        for fmt in formats:
            fmt = ExportFormat.parse(fmt)
            results[fmt] = self.export(source, config, fmt, target_stem)
        return results

    # -------------------------------------------------------------------------
    # Quick exports: title only, path used as given
    # -------------------------------------------------------------------------

    def _quick_export(
        self,
        source: TabularDataSource,
        title: str,
        path: str | Path,
        format: ExportFormat,
    ) -> ExportResult:
        return self._write(source, ExportConfig.with_title(title), format, Path(path))

    def quick_export_csv(self, source: TabularDataSource, title: str, path: str | Path) -> ExportResult:
        return self._quick_export(source, title, path, ExportFormat.DELIMITED)

    def quick_export_excel(self, source: TabularDataSource, title: str, path: str | Path) -> ExportResult:
        return self._quick_export(source, title, path, ExportFormat.SPREADSHEET_MARKUP)

    def quick_export_pdf(self, source: TabularDataSource, title: str, path: str | Path) -> ExportResult:
        return self._quick_export(source, title, path, ExportFormat.PRINTABLE_HYPERTEXT)

    def quick_export_html(self, source: TabularDataSource, title: str, path: str | Path) -> ExportResult:
        return self._quick_export(source, title, path, ExportFormat.PLAIN_HYPERTEXT)

    def get_supported_formats(self) -> list[ExportFormat]:
        """Get list of formats this manager can export."""
        return list(self._encoders.keys())

    def register_encoder(self, format: ExportFormat, encoder_class: Type[BaseEncoder]) -> None:
        """Register a custom encoder for a format on this manager only."""
        self._encoders[format] = encoder_class
