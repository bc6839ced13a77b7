"""
Per-column schema for survey extracts.

Raw extracts mix identifiers, numeric answers and coded categorical answers in
loosely-typed columns. A schema declares the kind of each analysis column so
that the table is checked and coerced once, right after loading:

- IDENTIFIER columns must be complete (no missing values)
- NUMERIC columns become nullable Float64 (missing is pd.NA)
- CATEGORICAL columns have their stored codes replaced by display labels and
  become pandas Categoricals; a declared category set is closed
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .errors import MissingColumnError, SchemaError, UnknownCategoryError
from .tables import LabelledTable


class ColumnKind(Enum):
    IDENTIFIER = 'identifier'
    NUMERIC = 'numeric'
    CATEGORICAL = 'categorical'


@dataclass(frozen=True)
class ColumnSpec:
    """
    Declared type of one column.

    Attributes:
        name: Column name in the source extract
        kind: IDENTIFIER, NUMERIC or CATEGORICAL
        categories: For CATEGORICAL columns, the closed set of display labels
                    in their natural order. None means the set is taken from
                    the file's value labels (or, failing that, the data).
        missing_codes: Stored codes that mean "no substantive answer"
                       (e.g. ESS 7777 Refusal, 8888 Don't know). They are
                       read as missing before the column is typed.
    """
    name: str
    kind: ColumnKind
    categories: Optional[Tuple[str, ...]] = None
    missing_codes: Tuple[Any, ...] = ()

    def __post_init__(self):
        if self.categories is not None and self.kind is not ColumnKind.CATEGORICAL:
            raise SchemaError(f"Column '{self.name}': categories only apply to categorical columns")
        if self.missing_codes and self.kind is ColumnKind.IDENTIFIER:
            raise SchemaError(f"Column '{self.name}': identifiers cannot have missing codes")


def identifier(name: str) -> ColumnSpec:
    return ColumnSpec(name, ColumnKind.IDENTIFIER)


def numeric(name: str, missing_codes: Iterable = ()) -> ColumnSpec:
    return ColumnSpec(name, ColumnKind.NUMERIC, missing_codes=tuple(missing_codes))


def categorical(
    name: str,
    categories: Optional[Iterable[str]] = None,
    missing_codes: Iterable = (),
) -> ColumnSpec:
    return ColumnSpec(
        name,
        ColumnKind.CATEGORICAL,
        tuple(categories) if categories is not None else None,
        tuple(missing_codes),
    )


def apply_schema(table: LabelledTable, specs: Sequence[ColumnSpec]) -> LabelledTable:
    """
    Check and coerce the declared columns of a table.

    Columns without a spec are left untouched. The input table is not modified.

    Raises:
        MissingColumnError: If a declared column is not in the table
        SchemaError: If a column's values do not fit its declared kind
    """
    missing = [s.name for s in specs if s.name not in table.data.columns]
    if missing:
        raise MissingColumnError(table.name, missing, table.columns)

    df = table.data.copy()
    for spec in specs:
        if spec.missing_codes:
            df[spec.name] = _drop_missing_codes(df[spec.name], spec.missing_codes)

        if spec.kind is ColumnKind.IDENTIFIER:
            df[spec.name] = _coerce_identifier(df[spec.name], table.name)
        elif spec.kind is ColumnKind.NUMERIC:
            df[spec.name] = _coerce_numeric(df[spec.name], table.name)
        else:
            df[spec.name] = _coerce_categorical(
                df[spec.name],
                table.value_labels.get(spec.name, {}),
                spec.categories,
            )

    return table.with_data(df)


def _drop_missing_codes(series: pd.Series, codes: Tuple[Any, ...]) -> pd.Series:
    values = series.astype(object)
    is_code = values.isin(codes) | values.astype(str).isin({str(c) for c in codes})
    return values.mask(is_code & values.notna(), None)


def _coerce_identifier(series: pd.Series, table_name: str) -> pd.Series:
    n_missing = int(series.isna().sum())
    if n_missing:
        raise SchemaError(
            f"Identifier column '{series.name}' in {table_name} has {n_missing:,} missing values"
        )

    numeric_values = pd.to_numeric(series, errors='coerce')
    if numeric_values.notna().all() and np.all(np.mod(numeric_values.to_numpy(dtype=float), 1) == 0):
        return numeric_values.astype('Int64')
    return series.astype('string')


def _coerce_numeric(series: pd.Series, table_name: str) -> pd.Series:
    values = series.astype(object) if isinstance(series.dtype, pd.CategoricalDtype) else series
    converted = pd.to_numeric(values, errors='coerce')

    bad = series[converted.isna() & series.notna()]
    if len(bad):
        examples = sorted({str(v) for v in bad})[:5]
        raise SchemaError(
            f"Numeric column '{series.name}' in {table_name} has non-numeric values: {examples}"
        )
    return converted.astype('Float64')


def _coerce_categorical(
    series: pd.Series,
    value_labels: Dict[Any, str],
    categories: Optional[Tuple[str, ...]],
) -> pd.Series:
    known_labels = set(value_labels.values())
    unlabelled = set()

    def to_label(value):
        if pd.isna(value):
            return None
        if value in value_labels:
            return value_labels[value]
        if value_labels and value not in known_labels:
            unlabelled.add(value)
            return None
        # Already a display label (or an unlabelled text column)
        return str(value)

    labels = series.astype(object).map(to_label)

    if unlabelled:
        raise SchemaError(
            f"Categorical column '{series.name}' has codes without a value label: "
            f"{sorted(str(u) for u in unlabelled)}"
        )

    observed = set(labels.dropna())
    if categories is not None:
        unknown = observed - set(categories)
        if unknown:
            raise UnknownCategoryError(str(series.name), unknown, categories)
        ordered_categories: List[str] = list(categories)
    elif value_labels:
        ordered_categories = _labels_in_code_order(value_labels)
    else:
        ordered_categories = sorted(observed)

    return pd.Series(
        pd.Categorical(labels, categories=ordered_categories),
        index=series.index,
        name=series.name,
    )


def _labels_in_code_order(value_labels: Dict[Any, str]) -> List[str]:
    try:
        codes = sorted(value_labels)
    except TypeError:
        codes = list(value_labels)

    ordered = []
    for code in codes:
        label = value_labels[code]
        if label not in ordered:
            ordered.append(label)
    return ordered
