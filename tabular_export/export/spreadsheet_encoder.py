"""
Tabular Export - Spreadsheet Encoder

Encodes tables as an XML Spreadsheet 2003 workbook that office suites open
as a native sheet. Written as text, no spreadsheet library required.
"""

from tabular_export.export.base_encoder import BaseEncoder
from tabular_export.export.data_source import TabularDataSource
from tabular_export.export.escaping import cell_text, escape_xml, is_numeric
from tabular_export.export.options import ExportConfig
from tabular_export.shared.constants import (
    SPREADSHEET_BORDER_COLOR,
    SPREADSHEET_HEADER_COLOR,
    ExportFormat,
)


class SpreadsheetEncoder(BaseEncoder):
    """
    Encode tables as a single-worksheet XML spreadsheet.

    Row layout (1-based):
    - title, subtitle and timestamp rows spanning all columns, then a
      blank row (only with include_header)
    - the column header row
    - one row per table row, numeric cells typed as Number

    include_footer has no effect on this format.
    """

    format = ExportFormat.SPREADSHEET_MARKUP

    STYLES = [
        '<Style ss:ID="Header">',
        '<Font ss:Bold="1" ss:Size="12" ss:Color="#FFFFFF"/>',
        f'<Interior ss:Color="{SPREADSHEET_HEADER_COLOR}" ss:Pattern="Solid"/>',
        "</Style>",
        '<Style ss:ID="Title">',
        '<Font ss:Bold="1" ss:Size="16"/>',
        '<Alignment ss:Horizontal="Center"/>',
        "</Style>",
        '<Style ss:ID="Data">',
        "<Borders>",
        '<Border ss:Position="Bottom" ss:LineStyle="Continuous" ss:Weight="1"'
        f' ss:Color="{SPREADSHEET_BORDER_COLOR}"/>',
        "</Borders>",
        "</Style>",
    ]

    def _banner_rows(self, config: ExportConfig) -> list[tuple[str, str | None]]:
        """(text, style) for each merged row above the column headers."""
        if not config.include_header:
            return []
        rows: list[tuple[str, str | None]] = [(config.title, "Title")]
        if config.subtitle:
            rows.append((config.subtitle, None))
        if config.include_timestamp:
            rows.append((f"Generated: {self._timestamp(config)}", None))
        return rows

    def _header_row_index(self, config: ExportConfig) -> int:
        if not config.include_header:
            return 1
        banner = 1 + bool(config.subtitle) + bool(config.include_timestamp)
        # Banner rows plus one blank row
        return banner + 2

    @staticmethod
    def _cell(
        value: str,
        data_type: str = "String",
        style: str | None = None,
        merge: int | None = None,
    ) -> list[str]:
        attrs = ""
        if merge is not None:
            attrs += f' ss:MergeAcross="{merge}"'
        if style is not None:
            attrs += f' ss:StyleID="{style}"'
        return [
            f"<Cell{attrs}>",
            f'<Data ss:Type="{data_type}">{value}</Data>',
            "</Cell>",
        ]

    def encode_header(
        self,
        source: TabularDataSource,
        columns: list[int],
        config: ExportConfig,
    ) -> list[str]:
        lines = [
            '<?xml version="1.0"?>',
            '<?mso-application progid="Excel.Sheet"?>',
            '<Workbook xmlns="urn:schemas-microsoft-com:office:spreadsheet"',
            ' xmlns:o="urn:schemas-microsoft-com:office:office"',
            ' xmlns:x="urn:schemas-microsoft-com:office:excel"',
            ' xmlns:ss="urn:schemas-microsoft-com:office:spreadsheet">',
            '<DocumentProperties xmlns="urn:schemas-microsoft-com:office:office">',
            f"<Title>{escape_xml(config.title)}</Title>",
            f"<Author>{escape_xml(config.company_name)}</Author>",
            f"<Created>{self._timestamp(config)}</Created>",
            "</DocumentProperties>",
            "<Styles>",
            *self.STYLES,
            "</Styles>",
            f'<Worksheet ss:Name="{escape_xml(config.title)}">',
            "<Table>",
        ]

        merge = max(len(columns) - 1, 0)
        for index, (text, style) in enumerate(self._banner_rows(config), start=1):
            lines.append(f'<Row ss:Index="{index}">')
            lines.extend(self._cell(escape_xml(text), style=style, merge=merge))
            lines.append("</Row>")

        lines.append(f'<Row ss:Index="{self._header_row_index(config)}">')
        for c in columns:
            lines.extend(self._cell(escape_xml(source.column_name(c)), style="Header"))
        lines.append("</Row>")
        return lines

    def encode_row(
        self,
        source: TabularDataSource,
        row: int,
        columns: list[int],
        config: ExportConfig,
    ) -> list[str]:
        index = self._header_row_index(config) + row + 1
        lines = [f'<Row ss:Index="{index}">']
        for c in columns:
            value = source.value(row, c)
            data_type = "Number" if is_numeric(value) else "String"
            lines.extend(self._cell(escape_xml(cell_text(value)), data_type, style="Data"))
        lines.append("</Row>")
        return lines

    def encode_footer(
        self,
        source: TabularDataSource,
        columns: list[int],
        config: ExportConfig,
    ) -> list[str]:
        return ["</Table>", "</Worksheet>", "</Workbook>"]
