"""
Shared fixtures for the export tests.
"""

import tempfile
from datetime import datetime
from pathlib import Path

import pytest

from tabular_export.export import ListDataSource

FIXED_NOW = datetime(2024, 3, 15, 9, 30, 0)
FIXED_STAMP = "2024-03-15 09:30:00"


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def stamp():
    return FIXED_STAMP


@pytest.fixture
def people():
    return ListDataSource(["ID", "Name"], [(1, "Smith, John"), (2, "O'Brien")])


@pytest.fixture
def products():
    return ListDataSource(
        ["ID", "Name", "Stock"],
        [
            (1, "Widget", 40),
            (2, 'Gadget "Pro"', 0),
            (3, "Bolts & <Nuts>", 12.5),
            (4, None, None),
        ],
    )


@pytest.fixture
def temp_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
