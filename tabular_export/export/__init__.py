"""
Tabular Export - Export Module

Multi-format document encoding for in-memory tables.
"""

from tabular_export.export.base_encoder import BaseEncoder, EncodedDocument
from tabular_export.export.columns import resolve_columns
from tabular_export.export.csv_encoder import CSVEncoder
from tabular_export.export.data_source import ArrowDataSource, ListDataSource, TabularDataSource
from tabular_export.export.export_manager import ExportManager, ExportResult, with_extension
from tabular_export.export.html_encoder import HTMLEncoder, PrintableHTMLEncoder
from tabular_export.export.options import ExportConfig
from tabular_export.export.spreadsheet_encoder import SpreadsheetEncoder

__all__ = [
    "TabularDataSource",
    "ListDataSource",
    "ArrowDataSource",
    "ExportConfig",
    "resolve_columns",
    "BaseEncoder",
    "EncodedDocument",
    "CSVEncoder",
    "SpreadsheetEncoder",
    "PrintableHTMLEncoder",
    "HTMLEncoder",
    "ExportManager",
    "ExportResult",
    "with_extension",
]
