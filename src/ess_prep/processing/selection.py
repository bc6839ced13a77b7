"""
Column selection (projection) for labelled tables.
"""

from typing import List, Sequence

from ..errors import MissingColumnError, PipelineConfigError
from ..tables import LabelledTable


def check_columns(table: LabelledTable, columns: Sequence[str]) -> None:
    """
    Verify that every requested column exists, without touching any rows.

    Raises:
        PipelineConfigError: If a column is requested twice
        MissingColumnError: If any requested column is absent (all are listed)
    """
    seen = set()
    repeated: List[str] = []
    for col in columns:
        if col in seen and col not in repeated:
            repeated.append(col)
        seen.add(col)
    if repeated:
        raise PipelineConfigError(f"Columns requested more than once for {table.name}: {repeated}")

    missing = [c for c in columns if c not in table.data.columns]
    if missing:
        raise MissingColumnError(table.name, missing, table.columns)


def select_columns(table: LabelledTable, columns: Sequence[str]) -> LabelledTable:
    """
    Project a table to exactly `columns`, in that order.

    Row order and the labels of retained columns are preserved.
    """
    check_columns(table, columns)
    return table.with_data(table.data.loc[:, list(columns)].copy())
