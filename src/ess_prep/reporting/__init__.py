"""
Read-only reporting on prepared tables.
"""

from .summary import (
    SurveySummary,
    respondent_mask,
    summarize,
    variable_listing,
    write_variable_listing,
    format_summary,
    format_variable_listing,
    head_preview,
)

__all__ = [
    'SurveySummary',
    'respondent_mask',
    'summarize',
    'variable_listing',
    'write_variable_listing',
    'format_summary',
    'format_variable_listing',
    'head_preview',
]
