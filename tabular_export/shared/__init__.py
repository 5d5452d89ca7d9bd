"""
Tabular Export - Shared Module

Common utilities, configuration, and constants used across the engine.
"""

from tabular_export.shared.config import Settings, get_settings, settings
from tabular_export.shared.constants import FORMAT_DESCRIPTORS, ExportFormat, FormatDescriptor
from tabular_export.shared.exceptions import (
    ExportEncodingError,
    ExportError,
    ExportIOError,
    TabularExportError,
    UnsupportedFormatError,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "settings",
    # Constants
    "ExportFormat",
    "FormatDescriptor",
    "FORMAT_DESCRIPTORS",
    # Exceptions
    "TabularExportError",
    "ExportError",
    "UnsupportedFormatError",
    "ExportIOError",
    "ExportEncodingError",
]
