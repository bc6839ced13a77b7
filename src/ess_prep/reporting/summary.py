"""
Descriptive summaries of a prepared table.

Everything here is read-only: tables are inspected, never modified.
"""

import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

import numpy as np
import pandas as pd

from ..errors import MissingColumnError
from ..tables import LabelledTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SurveySummary:
    """Dimensions of a merged table and its respondent partition."""
    n_rows: int
    n_columns: int
    n_respondents: int
    n_nonrespondents: int

    @property
    def response_rate(self) -> Optional[float]:
        if self.n_rows == 0:
            return None
        return self.n_respondents / self.n_rows

    def to_dict(self) -> dict:
        return {**asdict(self), 'response_rate': self.response_rate}


def respondent_mask(table: LabelledTable, outcome_col: str, complete_value) -> pd.Series:
    """
    Boolean mask, True for units whose contact outcome is a complete interview.

    A missing outcome counts as a non-respondent, so the mask and its
    negation always partition the table.
    """
    if outcome_col not in table.data.columns:
        raise MissingColumnError(table.name, [outcome_col], table.columns)

    outcome = table.data[outcome_col].astype(object)
    return (outcome == complete_value).fillna(False).astype(bool)


def summarize(table: LabelledTable, outcome_col: str, complete_value) -> SurveySummary:
    """Count rows, columns, respondents and non-respondents."""
    is_respondent = respondent_mask(table, outcome_col, complete_value)
    n_respondents = int(is_respondent.sum())
    return SurveySummary(
        n_rows=table.n_rows,
        n_columns=table.n_columns,
        n_respondents=n_respondents,
        n_nonrespondents=table.n_rows - n_respondents,
    )


def variable_listing(table: LabelledTable) -> pd.DataFrame:
    """
    One row per column: its name and its variable label ('' if none).
    """
    return pd.DataFrame({
        'variable': table.columns,
        'label': [table.label_for(c) for c in table.columns],
    })


def write_variable_listing(table: LabelledTable, path: Path, sep: str = ',') -> Path:
    """Save the variable listing of `table` as a delimited text file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    variable_listing(table).to_csv(path, sep=sep, index=False)
    logger.info(f"Variable listing for {table.name} saved to {path}")
    return path


def format_summary(summary: SurveySummary, title: str = 'Summary') -> str:
    lines = [title, '=' * 50]
    lines.append(f"Rows:             {summary.n_rows:,}")
    lines.append(f"Columns:          {summary.n_columns:,}")
    lines.append(f"Respondents:      {summary.n_respondents:,}")
    lines.append(f"Non-respondents:  {summary.n_nonrespondents:,}")
    if summary.response_rate is not None:
        lines.append(f"Response rate:    {summary.response_rate:.1%}")
    return '\n'.join(lines)


def head_preview(
    table: LabelledTable,
    n: int = 5,
    sample: bool = False,
    seed: Optional[int] = None,
) -> str:
    """
    Text preview of the first `n` rows (or `n` random rows if `sample`).

    Random previews draw from a generator seeded with `seed`; no global
    random state is touched.
    """
    if sample:
        n = min(n, table.n_rows)
        preview = table.data.sample(n=n, random_state=np.random.default_rng(seed)) if n else table.data.head(0)
    else:
        preview = table.data.head(n)

    header = f"{table.name}: {table.n_rows:,} rows x {table.n_columns} columns"
    return header + '\n' + preview.to_string(max_cols=20)


def format_variable_listing(table: LabelledTable) -> str:
    listing = variable_listing(table)
    width = max([len(v) for v in listing['variable']] + [8])
    return '\n'.join(
        f"{row.variable:<{width}}  {row.label}" for row in listing.itertuples(index=False)
    )
