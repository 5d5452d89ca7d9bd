"""
Tabular Export - CSV Encoder

Encodes tables as quoted comma-separated values with comment-prefixed
header and footer blocks.
"""

from tabular_export.export.base_encoder import BaseEncoder
from tabular_export.export.data_source import TabularDataSource
from tabular_export.export.escaping import cell_text, quote_csv_field
from tabular_export.export.options import ExportConfig
from tabular_export.shared.constants import ExportFormat


class CSVEncoder(BaseEncoder):
    """
    Encode tables as CSV.

    Features:
    - Every field quoted, embedded quotes doubled
    - Optional "# " comment block with title, company and timestamp
    - Optional footer with the row count
    """

    format = ExportFormat.DELIMITED

    COMMENT = "#"

    def _comment(self, text: str = "") -> str:
        return f"{self.COMMENT} {text}" if text else self.COMMENT

    def encode_header(
        self,
        source: TabularDataSource,
        columns: list[int],
        config: ExportConfig,
    ) -> list[str]:
        lines = []
        if config.include_header:
            lines.append(self._comment(config.title))
            if config.subtitle:
                lines.append(self._comment(config.subtitle))
            lines.append(self._comment(config.company_name))
            if config.include_timestamp:
                lines.append(self._comment(f"Generated on: {self._timestamp(config)}"))
            lines.append(self._comment())

        lines.append(",".join(quote_csv_field(source.column_name(c)) for c in columns))
        return lines

    def encode_row(
        self,
        source: TabularDataSource,
        row: int,
        columns: list[int],
        config: ExportConfig,
    ) -> list[str]:
        return [",".join(quote_csv_field(cell_text(source.value(row, c))) for c in columns)]

    def encode_footer(
        self,
        source: TabularDataSource,
        columns: list[int],
        config: ExportConfig,
    ) -> list[str]:
        if not config.include_footer:
            return []
        return [
            self._comment(),
            self._comment(f"Total rows: {source.row_count}"),
            self._comment(f"Export completed: {self._timestamp(config)}"),
        ]
