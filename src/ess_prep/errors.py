"""
Exception types for the preparation pipeline.

Every configuration problem (a requested column that does not exist, a
duplicated unit identifier, a value outside a declared category set) derives
from PipelineConfigError, which is itself a ValueError so callers that only
care about "bad input" can catch that.
"""

from typing import Iterable, List


class PipelineConfigError(ValueError):
    """Base class for errors that must abort a run before any output."""


class MissingColumnError(PipelineConfigError):
    """One or more requested columns are absent from a source table."""

    def __init__(self, table_name: str, missing: Iterable[str], available: Iterable[str]):
        self.table_name = table_name
        self.missing: List[str] = list(missing)
        self.available: List[str] = list(available)
        preview = self.available[:10]
        suffix = '...' if len(self.available) > 10 else ''
        super().__init__(
            f"Columns not found in {table_name}: {self.missing}. "
            f"Available columns: {preview}{suffix}"
        )


class DuplicateKeyError(PipelineConfigError):
    """A join key occurs more than once in a table that must be unique on it."""

    def __init__(self, table_name: str, key: str, duplicates: Iterable):
        self.table_name = table_name
        self.key = key
        self.duplicates = list(duplicates)
        preview = self.duplicates[:10]
        suffix = '...' if len(self.duplicates) > 10 else ''
        super().__init__(
            f"Duplicate {key} values in {table_name}: "
            f"{len(self.duplicates):,} duplicated ids, e.g. {preview}{suffix}"
        )


class ColumnCollisionError(PipelineConfigError):
    """Two tables being joined share a non-key column."""


class SchemaError(PipelineConfigError):
    """A column does not conform to its declared kind."""


class UnknownCategoryError(SchemaError):
    """A categorical column holds labels outside its closed category set."""

    def __init__(self, column: str, unknown: Iterable[str], allowed: Iterable[str]):
        self.column = column
        self.unknown = sorted(str(u) for u in unknown)
        self.allowed = list(allowed)
        super().__init__(
            f"Column '{column}' has values outside its category set: {self.unknown}. "
            f"Allowed: {self.allowed}"
        )
