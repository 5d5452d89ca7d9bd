"""
Unit tests for the document encoders.
"""

import csv
import io

import pytest

from tabular_export.export import (
    CSVEncoder,
    ExportConfig,
    HTMLEncoder,
    ListDataSource,
    PrintableHTMLEncoder,
    SpreadsheetEncoder,
    resolve_columns,
)
from tabular_export.export.html_encoder import PRINT_TRIGGER
from tabular_export.shared.constants import ExportFormat


def encode(encoder, source, config):
    return encoder.encode(source, resolve_columns(source, config), config)


class TestCSVEncoder:
    """Tests for CSV encoder."""

    def test_full_document(self, people, clock, stamp):
        config = ExportConfig(title="People", subtitle="Staff")
        document = encode(CSVEncoder(clock=clock), people, config)

        assert document.text == (
            "# People\n"
            "# Staff\n"
            "# Business Management System\n"
            f"# Generated on: {stamp}\n"
            "#\n"
            '"ID","Name"\n'
            '"1","Smith, John"\n'
            '"2","O\'Brien"\n'
            "#\n"
            "# Total rows: 2\n"
            f"# Export completed: {stamp}\n"
        )
        assert document.format == ExportFormat.DELIMITED

    def test_without_header_and_footer(self, people, clock):
        config = ExportConfig(include_header=False, include_footer=False)
        document = encode(CSVEncoder(clock=clock), people, config)

        assert document.text == '"ID","Name"\n"1","Smith, John"\n"2","O\'Brien"\n'

    def test_header_without_timestamp_or_subtitle(self, people, clock):
        config = ExportConfig(title="People", include_timestamp=False, company_name="Acme")
        lines = encode(CSVEncoder(clock=clock), people, config).text.splitlines()

        assert lines[:4] == ["# People", "# Acme", "#", '"ID","Name"']

    def test_round_trip(self, products, clock):
        config = ExportConfig(include_header=False, include_footer=False)
        text = encode(CSVEncoder(clock=clock), products, config).text

        rows = list(csv.reader(io.StringIO(text, newline="")))
        assert rows[0] == ["ID", "Name", "Stock"]
        assert rows[1:] == [
            ["1", "Widget", "40"],
            ["2", 'Gadget "Pro"', "0"],
            ["3", "Bolts & <Nuts>", "12.5"],
            ["4", "", ""],
        ]

    def test_row_count(self, products, clock):
        text = encode(CSVEncoder(clock=clock), products, ExportConfig()).text
        data_lines = [line for line in text.splitlines() if not line.startswith("#")]

        # Column header row + one line per row
        assert len(data_lines) == products.row_count + 1

    def test_escapes_column_names(self, clock):
        source = ListDataSource(['Say "hi"'], [("x",)])
        config = ExportConfig(include_header=False, include_footer=False)
        text = encode(CSVEncoder(clock=clock), source, config).text

        assert text.splitlines()[0] == '"Say ""hi"""'


class TestSpreadsheetEncoder:
    """Tests for the XML spreadsheet encoder."""

    def test_document_structure(self, products, clock):
        text = encode(SpreadsheetEncoder(clock=clock), products, ExportConfig()).text

        assert text.startswith('<?xml version="1.0"?>\n<?mso-application progid="Excel.Sheet"?>\n')
        assert "<Author>Business Management System</Author>" in text
        assert text.count("<Style ss:ID=") == 3
        assert text.endswith("</Table>\n</Worksheet>\n</Workbook>\n")

    def test_title_rows(self, products, clock, stamp):
        config = ExportConfig(title="Stock & Co", subtitle="Q1")
        lines = encode(SpreadsheetEncoder(clock=clock), products, config).text.splitlines()

        assert '<Worksheet ss:Name="Stock &amp; Co">' in lines
        start = lines.index('<Row ss:Index="1">')
        assert lines[start + 1 : start + 4] == [
            '<Cell ss:MergeAcross="2" ss:StyleID="Title">',
            '<Data ss:Type="String">Stock &amp; Co</Data>',
            "</Cell>",
        ]
        assert lines[lines.index('<Row ss:Index="2">') + 2] == '<Data ss:Type="String">Q1</Data>'
        assert lines[lines.index('<Row ss:Index="3">') + 2] == (
            f'<Data ss:Type="String">Generated: {stamp}</Data>'
        )
        # Row 4 is left blank
        assert '<Row ss:Index="4">' not in lines
        assert lines[lines.index('<Row ss:Index="5">') + 1] == '<Cell ss:StyleID="Header">'
        assert '<Row ss:Index="9">' in lines
        assert '<Row ss:Index="10">' not in lines

    def test_without_header_starts_at_first_row(self, products, clock):
        config = ExportConfig(include_header=False)
        lines = encode(SpreadsheetEncoder(clock=clock), products, config).text.splitlines()

        assert lines[lines.index('<Row ss:Index="1">') + 1] == '<Cell ss:StyleID="Header">'
        assert '<Row ss:Index="5">' in lines
        assert "ss:MergeAcross" not in "\n".join(lines)

    def test_cell_types(self, products, clock):
        text = encode(SpreadsheetEncoder(clock=clock), products, ExportConfig()).text

        assert '<Data ss:Type="Number">40</Data>' in text
        assert '<Data ss:Type="Number">12.5</Data>' in text
        assert '<Data ss:Type="String">Gadget &quot;Pro&quot;</Data>' in text
        assert '<Data ss:Type="String">Bolts &amp; &lt;Nuts&gt;</Data>' in text
        assert '<Data ss:Type="String"></Data>' in text

    def test_non_finite_floats_are_strings(self, clock):
        source = ListDataSource(["Ratio"], [(float("nan"),), (float("inf"),), (0.5,)])
        text = encode(SpreadsheetEncoder(clock=clock), source, ExportConfig()).text

        assert '<Data ss:Type="String">nan</Data>' in text
        assert '<Data ss:Type="String">inf</Data>' in text
        assert '<Data ss:Type="Number">0.5</Data>' in text
        assert "Number\">nan" not in text

    def test_booleans_are_strings(self, clock):
        source = ListDataSource(["Active"], [(True,)])
        text = encode(SpreadsheetEncoder(clock=clock), source, ExportConfig()).text

        assert '<Data ss:Type="String">True</Data>' in text

    def test_row_count(self, products, clock):
        text = encode(SpreadsheetEncoder(clock=clock), products, ExportConfig()).text

        assert text.count('<Cell ss:StyleID="Data">') == products.row_count * products.column_count

    def test_footer_option_has_no_effect(self, products, clock):
        encoder = SpreadsheetEncoder(clock=clock)
        with_footer = encode(encoder, products, ExportConfig(include_footer=True)).text
        without_footer = encode(encoder, products, ExportConfig(include_footer=False)).text

        assert with_footer == without_footer

    def test_merge_width_with_no_columns(self, products, clock):
        config = ExportConfig(selected_columns=("Missing",))
        text = encode(SpreadsheetEncoder(clock=clock), products, config).text

        assert 'ss:MergeAcross="0"' in text


class TestHTMLEncoders:
    """Tests for the printable and plain HTML report encoders."""

    def test_plain_body_cells(self, people, clock):
        text = encode(HTMLEncoder(clock=clock), people, ExportConfig()).text

        assert "<td>O'Brien</td>" in text
        assert "<td>Smith, John</td>" in text
        assert "<th>ID</th>" in text
        assert "printReport" not in text

    def test_printable_has_print_trigger(self, people, clock):
        text = encode(PrintableHTMLEncoder(clock=clock), people, ExportConfig()).text

        assert 'onclick="printReport()"' in text
        assert "@media print { body { margin: 0; } .no-print { display: none; } }" in text
        assert text.endswith("</div>\n</body>\n</html>\n")

    def test_plain_is_printable_without_trigger(self, products, clock):
        config = ExportConfig(title="Stock", subtitle="All items")
        printable = encode(PrintableHTMLEncoder(clock=clock), products, config).text
        plain = encode(HTMLEncoder(clock=clock), products, config).text

        trigger = "".join(f"{line}\n" for line in PRINT_TRIGGER)
        assert printable.replace(trigger, "") == plain

    def test_header_block(self, people, clock, stamp):
        config = ExportConfig(title="A & B", subtitle="<sub>")
        text = encode(HTMLEncoder(clock=clock), people, config).text

        assert "<title>A &amp; B</title>" in text
        assert '<div class="title">A &amp; B</div>' in text
        assert '<div class="subtitle">&lt;sub&gt;</div>' in text
        assert f'<div class="info">Business Management System\n - Generated on {stamp}\n</div>' in text

    def test_footer_block(self, people, clock, stamp):
        text = encode(HTMLEncoder(clock=clock), people, ExportConfig()).text

        assert (
            '<div class="footer">\n'
            "<strong>Summary:</strong> 2 records exported\n"
            f" | Export completed: {stamp}\n"
            "</div>\n"
        ) in text

    def test_header_and_footer_disabled(self, people, clock):
        config = ExportConfig(include_header=False, include_footer=False)
        text = encode(HTMLEncoder(clock=clock), people, config).text

        assert '<div class="header">' not in text
        assert '<div class="footer">' not in text
        assert "Business Management System" not in text

    def test_without_timestamp(self, people, clock, stamp):
        config = ExportConfig(include_timestamp=False)
        text = encode(HTMLEncoder(clock=clock), people, config).text

        assert stamp not in text
        assert "<strong>Summary:</strong> 2 records exported\n</div>" in text

    @pytest.mark.parametrize("encoder_class", [HTMLEncoder, PrintableHTMLEncoder])
    def test_row_count(self, encoder_class, products, clock):
        text = encode(encoder_class(clock=clock), products, ExportConfig()).text

        assert text.count("<tr>") == products.row_count + 1
