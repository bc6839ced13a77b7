"""
Unit-level merge of paradata, sample design data and survey responses.

The contact-form paradata has one row for every sampled unit, responding or
not, so it anchors the merge: sample data and responses are left-joined onto
it. Units without a sample or response row keep missing values in those
columns rather than being dropped.
"""

from typing import Optional

import pandas as pd

from ..errors import (
    ColumnCollisionError,
    DuplicateKeyError,
    MissingColumnError,
    PipelineConfigError,
)
from ..tables import LabelledTable


def check_unique_key(table: LabelledTable, key: str) -> None:
    """
    Raises:
        MissingColumnError: If `key` is not a column of the table
        DuplicateKeyError: If any value of `key` occurs more than once
    """
    if key not in table.data.columns:
        raise MissingColumnError(table.name, [key], table.columns)

    dupes = table.data[key][table.data[key].duplicated()]
    if len(dupes):
        raise DuplicateKeyError(table.name, key, pd.unique(dupes).tolist())


def _left_join(left: LabelledTable, right: LabelledTable, key: str) -> LabelledTable:
    overlap = (set(left.columns) & set(right.columns)) - {key}
    if overlap:
        raise ColumnCollisionError(
            f"Columns present in both {left.name} and {right.name}: {sorted(overlap)}"
        )

    right_data = right.data
    if right_data[key].dtype != left.data[key].dtype:
        right_data = right_data.astype({key: left.data[key].dtype})

    merged = left.data.merge(
        right_data,
        on=key,
        how='left',
        sort=False,
        validate='one_to_one',
    )

    column_labels = {**left.column_labels, **right.column_labels}
    value_labels = {**left.value_labels, **right.value_labels}
    return LabelledTable(merged, column_labels, value_labels, name=left.name)


def merge_units(
    paradata: LabelledTable,
    sample: LabelledTable,
    responses: LabelledTable,
    key: str = 'idno',
    sort_by: Optional[str] = 'outnic',
    name: str = 'merged',
) -> LabelledTable:
    """
    Left-join sample data and responses onto paradata.

    Args:
        paradata: Anchor table, one row per sampled unit
        sample: Sample design data (psu, inclusion probability, ...)
        responses: Interview answers; only respondents have a row
        key: Unit identifier column shared by all three tables
        sort_by: Paradata column to stable-sort the result by (None = keep
                 paradata order)
        name: Name of the merged table

    Returns:
        LabelledTable with exactly one row per paradata row

    Raises:
        DuplicateKeyError: If any input has a repeated key
        ColumnCollisionError: If two inputs share a non-key column
    """
    for table in (paradata, sample, responses):
        check_unique_key(table, key)

    if sort_by is not None and sort_by not in paradata.data.columns:
        raise MissingColumnError(paradata.name, [sort_by], paradata.columns)

    merged = _left_join(paradata, sample, key)
    merged = _left_join(merged, responses, key)

    data = merged.data
    if sort_by is not None:
        data = data.sort_values(sort_by, kind='stable', na_position='last')
    data = data.reset_index(drop=True)

    if len(data) != len(paradata.data):
        raise PipelineConfigError(
            f"Merged table has {len(data):,} rows but {paradata.name} has {len(paradata.data):,}; "
            f"the merge must keep one row per sampled unit"
        )
    return LabelledTable(data, merged.column_labels, merged.value_labels, name=name)
