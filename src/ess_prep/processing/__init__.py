"""
Table processing: column selection, unit-level merge and outcome recodes.

Example usage:
    from ess_prep.processing import select_columns, merge_units, recode_outcomes

    merged = merge_units(paradata, sample, responses, key='idno', sort_by='outnic')
    merged = recode_outcomes(merged)
"""

from .selection import (
    check_columns,
    select_columns,
)

from .merge import (
    check_unique_key,
    merge_units,
)

from .recode import (
    SmokingStatus,
    AlcoholFrequency,
    RecodeColumns,
    NON_SMOKER_STATUSES,
    recode_cigarettes,
    recode_alcohol,
    daily_alcohol_baseline,
    recode_outcomes,
)

__all__ = [
    # Selection
    'check_columns',
    'select_columns',
    # Merge
    'check_unique_key',
    'merge_units',
    # Recodes
    'SmokingStatus',
    'AlcoholFrequency',
    'RecodeColumns',
    'NON_SMOKER_STATUSES',
    'recode_cigarettes',
    'recode_alcohol',
    'daily_alcohol_baseline',
    'recode_outcomes',
]
