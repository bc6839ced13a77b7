"""
Derived outcome variables.

Two outcomes are derived from the raw ESS health-module answers:

cigarettes_per_day
    The survey only asks current smokers how many cigarettes they smoke, so
    the raw answer is missing for everyone else. Never-smokers, former smokers
    and people who only smoked a few times truly smoke 0 per day, so they are
    set to 0. Everybody else keeps the raw answer, missing included.

alcohol_grams_per_day
    Respondents report what they drink on a typical weekday and on a typical
    weekend day "as if" they drank that day. A 7-day average is taken
    (5 weekdays, 2 weekend days) and then scaled down by how often they
    actually drink. Each frequency category has exactly one adjustment.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

import pandas as pd

from ..errors import MissingColumnError, SchemaError
from ..tables import LabelledTable


class SmokingStatus(Enum):
    """Answer categories of the ESS cigarette smoking behaviour question."""
    DAILY = 'I smoke daily'
    NOT_EVERY_DAY = 'I smoke but not every day'
    FORMER = "I don't smoke now but I used to"
    FEW_TIMES = 'I have only smoked a few times'
    NEVER = 'I have never smoked'

    @property
    def is_current_smoker(self) -> bool:
        return self in (SmokingStatus.DAILY, SmokingStatus.NOT_EVERY_DAY)


NON_SMOKER_STATUSES = tuple(s.value for s in SmokingStatus if not s.is_current_smoker)


class AlcoholFrequency(Enum):
    """Answer categories of the ESS alcohol frequency question (last 12 months)."""
    EVERY_DAY = 'Every day'
    SEVERAL_TIMES_A_WEEK = 'Several times a week'
    ONCE_A_WEEK = 'Once a week'
    TWO_TO_THREE_TIMES_A_MONTH = '2-3 times a month'
    ONCE_A_MONTH = 'Once a month'
    LESS_THAN_ONCE_A_MONTH = 'Less than once a month'
    NEVER = 'Never'

    @property
    def divisor(self) -> Optional[float]:
        """
        Factor the daily baseline is divided by. None for NEVER, whose
        result is 0 whatever the reported quantities.
        """
        return _FREQUENCY_DIVISORS[self]


_FREQUENCY_DIVISORS: Dict[AlcoholFrequency, Optional[float]] = {
    AlcoholFrequency.EVERY_DAY: 1.0,
    AlcoholFrequency.SEVERAL_TIMES_A_WEEK: 2.5,
    AlcoholFrequency.ONCE_A_WEEK: 7.0,
    AlcoholFrequency.TWO_TO_THREE_TIMES_A_MONTH: 10.0,
    AlcoholFrequency.ONCE_A_MONTH: 30.0,
    AlcoholFrequency.LESS_THAN_ONCE_A_MONTH: 50.0,
    AlcoholFrequency.NEVER: None,
}

WEEKDAYS_PER_WEEK = 5
WEEKEND_DAYS_PER_WEEK = 2


@dataclass(frozen=True)
class RecodeColumns:
    """
    Source columns feeding the recodes. Defaults are the ESS round 7 names.
    """
    smoking_status: str = 'cgtsmke'
    cigarettes_raw: str = 'cgtsday'
    alcohol_frequency: str = 'alcfreq'
    alcohol_weekday: str = 'alcwkdy'
    alcohol_weekend: str = 'alcwknd'

    cigarettes_out: str = 'cigarettes_per_day'
    alcohol_out: str = 'alcohol_grams_per_day'

    @property
    def inputs(self) -> list:
        return [
            self.smoking_status,
            self.cigarettes_raw,
            self.alcohol_frequency,
            self.alcohol_weekday,
            self.alcohol_weekend,
        ]


OUTCOME_LABELS = {
    'cigarettes_per_day': 'Cigarettes smoked on a typical day (0 for non-smokers)',
    'alcohol_grams_per_day': 'Average daily alcohol consumption, adjusted for drinking frequency',
}


def _as_float(series: pd.Series) -> pd.Series:
    if series.dtype == object or isinstance(series.dtype, pd.CategoricalDtype):
        series = pd.to_numeric(series.astype(object), errors='coerce')
    return series.astype('Float64')


def recode_cigarettes(status: pd.Series, raw: pd.Series) -> pd.Series:
    """
    Cigarettes per day: 0 for non-current smokers, raw value otherwise.

    A missing raw value stays missing for current smokers and for units with
    no smoking status.

    Raises:
        SchemaError: If a current smoker's raw count is not a whole number
    """
    raw = _as_float(raw)
    non_smoker = status.astype(object).isin(NON_SMOKER_STATUSES)
    counts = raw.mask(non_smoker, 0)

    fractional = (counts.notna() & (counts % 1 != 0)).fillna(False).astype(bool)
    if fractional.any():
        examples = sorted({float(v) for v in counts[fractional]})[:5]
        raise SchemaError(
            f"Cigarette counts must be whole numbers, found {examples} in '{raw.name}'"
        )
    return counts.astype('Int64')


def daily_alcohol_baseline(weekday: pd.Series, weekend: pd.Series) -> pd.Series:
    """Week-weighted daily quantity, as if the respondent drank every day."""
    weekday = _as_float(weekday)
    weekend = _as_float(weekend)
    total_days = WEEKDAYS_PER_WEEK + WEEKEND_DAYS_PER_WEEK
    return (weekday * WEEKDAYS_PER_WEEK + weekend * WEEKEND_DAYS_PER_WEEK) / total_days


def recode_alcohol(frequency: pd.Series, weekday: pd.Series, weekend: pd.Series) -> pd.Series:
    """
    Alcohol per day, scaled by drinking frequency.

    'Never' gives exactly 0. Otherwise the result is missing when either
    quantity or the frequency is missing.

    Raises:
        ValueError: If a frequency label is not an AlcoholFrequency value
    """
    labels = frequency.astype(object)
    observed = set(labels.dropna())
    unknown = observed - {f.value for f in AlcoholFrequency}
    if unknown:
        raise ValueError(f"Unknown alcohol frequency labels: {sorted(map(str, unknown))}")

    divisors = labels.map(
        {f.value: f.divisor for f in AlcoholFrequency if f.divisor is not None}
    )
    divisors = pd.to_numeric(divisors, errors='coerce').astype('Float64')

    grams = daily_alcohol_baseline(weekday, weekend) / divisors
    never = (labels == AlcoholFrequency.NEVER.value).fillna(False).astype(bool)
    return grams.mask(never, 0.0)


def recode_outcomes(
    table: LabelledTable,
    columns: Optional[RecodeColumns] = None,
) -> LabelledTable:
    """
    Append cigarettes_per_day and alcohol_grams_per_day to a table.

    Returns a new table; the input is left as it was.

    Raises:
        MissingColumnError: If a recode input column is not in the table
    """
    columns = columns or RecodeColumns()

    missing = [c for c in columns.inputs if c not in table.data.columns]
    if missing:
        raise MissingColumnError(table.name, missing, table.columns)

    df = table.data.copy()
    df[columns.cigarettes_out] = recode_cigarettes(
        df[columns.smoking_status], df[columns.cigarettes_raw]
    )
    df[columns.alcohol_out] = recode_alcohol(
        df[columns.alcohol_frequency],
        df[columns.alcohol_weekday],
        df[columns.alcohol_weekend],
    )

    result = table.with_data(df)
    result.column_labels[columns.cigarettes_out] = OUTCOME_LABELS['cigarettes_per_day']
    result.column_labels[columns.alcohol_out] = OUTCOME_LABELS['alcohol_grams_per_day']
    return result
