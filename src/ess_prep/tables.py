"""
Labelled tabular data.

Statistical-package files (SPSS, Stata) carry a human-readable label for each
variable and a code -> label mapping for categorical variables. A pandas
DataFrame keeps neither, so LabelledTable carries them alongside the data.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pandas as pd


@dataclass
class LabelledTable:
    """
    A DataFrame together with its variable and value labels.

    Attributes:
        data: The rows, one per unit
        column_labels: column name -> variable label (e.g. 'cgtsday' ->
                       'How many cigarettes smoke on typical day')
        value_labels: column name -> {stored code: display label}
        name: Short name used in log and error messages
    """
    data: pd.DataFrame
    column_labels: Dict[str, str] = field(default_factory=dict)
    value_labels: Dict[str, Dict[Any, str]] = field(default_factory=dict)
    name: str = 'table'

    @property
    def columns(self) -> List[str]:
        return list(self.data.columns)

    @property
    def n_rows(self) -> int:
        return len(self.data)

    @property
    def n_columns(self) -> int:
        return len(self.data.columns)

    def label_for(self, column: str) -> str:
        """Variable label for a column, or '' when the source had none."""
        return self.column_labels.get(column, '')

    def with_data(self, data: pd.DataFrame, name: Optional[str] = None) -> 'LabelledTable':
        """
        Return a new table over `data`, keeping labels for surviving columns.
        """
        keep = set(data.columns)
        return LabelledTable(
            data=data,
            column_labels={c: l for c, l in self.column_labels.items() if c in keep},
            value_labels={c: dict(v) for c, v in self.value_labels.items() if c in keep},
            name=name or self.name,
        )

    def __repr__(self) -> str:
        return f"LabelledTable(name={self.name!r}, rows={self.n_rows:,}, columns={self.n_columns})"
