"""
Tabular Export - Base Encoder

Abstract base class for all document formats.
Provides the shared assembly loop and the header/row/footer interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from tabular_export.export.data_source import TabularDataSource
from tabular_export.export.options import ExportConfig
from tabular_export.shared.constants import ExportFormat, FormatDescriptor
from tabular_export.shared.logging import LoggerMixin

Clock = Callable[[], datetime]


@dataclass(frozen=True)
class EncodedDocument:
    """Fully rendered output of one export, tagged with its format."""

    descriptor: FormatDescriptor
    text: str

    @property
    def format(self) -> ExportFormat:
        return self.descriptor.format

    def to_bytes(self, encoding: str = "utf-8") -> bytes:
        return self.text.encode(encoding)


class BaseEncoder(ABC, LoggerMixin):
    """
    Abstract base class for document encoders.

    Subclasses must implement:
    - encode_header(): Lines before the first data row
    - encode_row(): Lines for one data row
    - encode_footer(): Lines after the last data row
    """

    format: ExportFormat

    def __init__(self, clock: Clock = datetime.now) -> None:
        """
        Initialize encoder.

        Args:
            clock: Source of the generation/completion timestamps
        """
        self.clock = clock

    @property
    def descriptor(self) -> FormatDescriptor:
        return self.format.descriptor

    def _timestamp(self, config: ExportConfig) -> str:
        """Current time formatted for the document."""
        return self.clock().strftime(config.timestamp_format)

    @abstractmethod
    def encode_header(
        self,
        source: TabularDataSource,
        columns: list[int],
        config: ExportConfig,
    ) -> list[str]:
        """Lines emitted before the data rows."""
        ...

    @abstractmethod
    def encode_row(
        self,
        source: TabularDataSource,
        row: int,
        columns: list[int],
        config: ExportConfig,
    ) -> list[str]:
        """Lines for a single data row."""
        ...

    @abstractmethod
    def encode_footer(
        self,
        source: TabularDataSource,
        columns: list[int],
        config: ExportConfig,
    ) -> list[str]:
        """Lines emitted after the data rows."""
        ...

    def encode(
        self,
        source: TabularDataSource,
        columns: list[int],
        config: ExportConfig,
    ) -> EncodedDocument:
        """
        Render a complete document.

        Args:
            source: Table to encode
            columns: Resolved column indices, in output order
            config: Export options

        Returns:
            The encoded document, one "\\n" after every line
        """
        lines = self.encode_header(source, columns, config)
        for row in range(source.row_count):
            lines.extend(self.encode_row(source, row, columns, config))
        lines.extend(self.encode_footer(source, columns, config))

        self.logger.debug(
            "Encoded document",
            format=str(self.format),
            rows=source.row_count,
            columns=len(columns),
        )
        return EncodedDocument(self.descriptor, "".join(f"{line}\n" for line in lines))
