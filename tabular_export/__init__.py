"""
Tabular Export

Turns in-memory tables into CSV, XML spreadsheet and HTML report documents.
"""

__version__ = "1.0.0"
