"""
Tabular Export - Column Resolver

Maps an export configuration onto the column indices of a data source.
"""

from tabular_export.export.data_source import TabularDataSource
from tabular_export.export.options import ExportConfig
from tabular_export.shared.logging import get_logger

logger = get_logger(__name__)


def resolve_columns(source: TabularDataSource, config: ExportConfig) -> list[int]:
    """
    Get the indices of the columns to emit.

    Columns always come out in the table's own order, whatever order the
    names were selected in. Unknown names are skipped and a repeated name
    only picks its first matching column.

    Args:
        source: Table being exported
        config: Export options

    Returns:
        Ordered list of column indices
    """
    if config.selected_columns is None:
        return list(range(source.column_count))

    wanted = set(config.selected_columns)
    emitted: set[str] = set()
    indices = []
    for index in range(source.column_count):
        name = source.column_name(index)
        if name in wanted and name not in emitted:
            indices.append(index)
            emitted.add(name)

    unmatched = [name for name in dict.fromkeys(config.selected_columns) if name not in emitted]
    if unmatched:
        logger.warning("Ignoring unknown columns", unmatched=unmatched)

    return indices
