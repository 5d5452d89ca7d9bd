"""
Tabular Export - Data Sources

Read-only table abstraction consumed by the encoders, plus in-memory and
Arrow-backed implementations.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Protocol, Sequence, runtime_checkable

import pyarrow as pa


@runtime_checkable
class TabularDataSource(Protocol):
    """
    Read-only view of a table of named columns.

    Cell values are None, a string or a number. The engine only reads from
    a data source and expects it to stay unchanged during one export.
    """

    @property
    def column_count(self) -> int: ...

    @property
    def row_count(self) -> int: ...

    def column_name(self, index: int) -> str: ...

    def value(self, row: int, column: int) -> Any: ...


@dataclass(frozen=True, init=False)
class ListDataSource:
    """
    Immutable snapshot over column names and row sequences.

    Rows shorter than the column list read as None for the missing cells.
    """

    columns: tuple[str, ...]
    rows: tuple[tuple[Any, ...], ...] = field(default=(), repr=False)

    def __init__(self, columns: Sequence[str], rows: Iterable[Sequence[Any]] = ()) -> None:
        object.__setattr__(self, "columns", tuple(str(c) for c in columns))
        object.__setattr__(self, "rows", tuple(tuple(r) for r in rows))

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        columns: Sequence[str] | None = None,
    ) -> "ListDataSource":
        """
        Build a data source from dictionaries.

        Args:
            records: One mapping per row
            columns: Column order (default: keys in first-seen order)
        """
        records = list(records)
        if columns is None:
            seen: dict[str, None] = {}
            for record in records:
                for key in record:
                    seen.setdefault(key, None)
            columns = list(seen)
        return cls(columns, [[record.get(c) for c in columns] for record in records])

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def column_name(self, index: int) -> str:
        return self.columns[index]

    def value(self, row: int, column: int) -> Any:
        cells = self.rows[row]
        if column >= len(cells):
            return None
        return cells[column]


class ArrowDataSource:
    """Data source backed by a pyarrow Table."""

    def __init__(self, table: pa.Table) -> None:
        self._table = table
        # Materialize once so cell access is O(1)
        self._columns = [column.to_pylist() for column in table.columns]

    @property
    def table(self) -> pa.Table:
        return self._table

    @property
    def column_count(self) -> int:
        return self._table.num_columns

    @property
    def row_count(self) -> int:
        return self._table.num_rows

    def column_name(self, index: int) -> str:
        return self._table.column_names[index]

    def value(self, row: int, column: int) -> Any:
        return self._columns[column][row]
