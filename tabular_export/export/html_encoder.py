"""
Tabular Export - HTML Report Encoders

Encodes tables as self-contained styled HTML reports. The printable variant
adds a print button that is hidden from printed output; its files carry the
.pdf extension so the user saves them as PDF from the browser.
"""

from tabular_export.export.base_encoder import BaseEncoder
from tabular_export.export.data_source import TabularDataSource
from tabular_export.export.escaping import cell_text, escape_html
from tabular_export.export.options import ExportConfig
from tabular_export.shared.constants import REPORT_ACCENT_COLOR, ExportFormat

STYLESHEET = [
    "body { font-family: 'Segoe UI', Arial, sans-serif; margin: 20px; }",
    ".header { text-align: center; margin-bottom: 30px; "
    f"border-bottom: 2px solid {REPORT_ACCENT_COLOR}; padding-bottom: 10px; }}",
    f".title {{ font-size: 24px; font-weight: bold; color: {REPORT_ACCENT_COLOR}; margin-bottom: 5px; }}",
    ".subtitle { font-size: 16px; color: #666; margin-bottom: 5px; }",
    ".info { font-size: 12px; color: #999; }",
    "table { width: 100%; border-collapse: collapse; margin-top: 20px; }",
    f"th {{ background-color: {REPORT_ACCENT_COLOR}; color: white; padding: 12px 8px; "
    "text-align: left; font-weight: bold; }",
    "td { padding: 8px; border-bottom: 1px solid #ddd; }",
    "tr:nth-child(even) { background-color: #f9f9f9; }",
    "tr:hover { background-color: #f5f5f5; }",
    ".footer { margin-top: 30px; border-top: 1px solid #ddd; padding-top: 10px; "
    "font-size: 12px; color: #666; }",
    "@media print { body { margin: 0; } .no-print { display: none; } }",
]

PRINT_TRIGGER = [
    "<script>",
    "function printReport() { window.print(); }",
    "</script>",
    '<div class="no-print" style="margin-top: 20px; text-align: center;">',
    '<button onclick="printReport()" style="padding: 10px 20px; '
    f"background-color: {REPORT_ACCENT_COLOR}; color: white; border: none; "
    'border-radius: 4px; cursor: pointer;">Print / Save as PDF</button>',
    "</div>",
]


class PrintableHTMLEncoder(BaseEncoder):
    """
    Encode tables as a print-ready HTML report.

    Features:
    - Embedded stylesheet with alternating row shading
    - Optional title block and summary footer
    - Print button hidden by the print media rules
    """

    format = ExportFormat.PRINTABLE_HYPERTEXT

    print_trigger = True

    def encode_header(
        self,
        source: TabularDataSource,
        columns: list[int],
        config: ExportConfig,
    ) -> list[str]:
        lines = [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '<meta charset="UTF-8">',
            f"<title>{escape_html(config.title)}</title>",
            "<style>",
            *STYLESHEET,
            "</style>",
            "</head>",
            "<body>",
        ]

        if config.include_header:
            lines.append('<div class="header">')
            lines.append(f'<div class="title">{escape_html(config.title)}</div>')
            if config.subtitle:
                lines.append(f'<div class="subtitle">{escape_html(config.subtitle)}</div>')
            lines.append(f'<div class="info">{escape_html(config.company_name)}')
            if config.include_timestamp:
                lines.append(f" - Generated on {self._timestamp(config)}")
            lines.append("</div>")
            lines.append("</div>")

        lines.extend(["<table>", "<thead>", "<tr>"])
        lines.extend(f"<th>{escape_html(source.column_name(c))}</th>" for c in columns)
        lines.extend(["</tr>", "</thead>", "<tbody>"])
        return lines

    def encode_row(
        self,
        source: TabularDataSource,
        row: int,
        columns: list[int],
        config: ExportConfig,
    ) -> list[str]:
        cells = [f"<td>{escape_html(cell_text(source.value(row, c)))}</td>" for c in columns]
        return ["<tr>", *cells, "</tr>"]

    def encode_footer(
        self,
        source: TabularDataSource,
        columns: list[int],
        config: ExportConfig,
    ) -> list[str]:
        lines = ["</tbody>", "</table>"]

        if config.include_footer:
            lines.append('<div class="footer">')
            lines.append(f"<strong>Summary:</strong> {source.row_count} records exported")
            if config.include_timestamp:
                lines.append(f" | Export completed: {self._timestamp(config)}")
            lines.append("</div>")

        if self.print_trigger:
            lines.extend(PRINT_TRIGGER)

        lines.extend(["</body>", "</html>"])
        return lines


class HTMLEncoder(PrintableHTMLEncoder):
    """Encode tables as an HTML report without the print button."""

    format = ExportFormat.PLAIN_HYPERTEXT

    print_trigger = False
