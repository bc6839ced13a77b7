"""
Extract loading module.

This module provides the SurveyLoader class, which finds and loads the
configured ESS extracts from a local directory, and filter_country, which
scopes a loaded extract to one country.
"""

import warnings
from typing import Any, Dict, List, Optional

from ..config.base import DataPaths
from ..config.extracts import EXTRACT_REGISTRY, ExtractConfig, get_extract_config
from ..errors import MissingColumnError
from ..tables import LabelledTable
from .file_io import find_data_file, load_file


class SurveyLoader:
    """
    Loads survey extracts from a local directory.

    Example:
        >>> from ess_prep.config import DataPaths
        >>> paths = DataPaths(raw_data_dir='~/data/ess7', output_dir='./outputs')
        >>> loader = SurveyLoader(paths)
        >>>
        >>> # Load a single extract
        >>> responses = loader.load_extract('responses')
        >>>
        >>> # Load all three
        >>> tables = loader.load_all()
    """

    def __init__(self, paths: DataPaths, verbose: bool = True):
        """
        Initialize the loader.

        Args:
            paths: DataPaths configuration with directory locations
            verbose: If True, print progress messages
        """
        self.paths = paths
        self.verbose = verbose
        self._cache: Dict[str, LabelledTable] = {}

    def _log(self, message: str) -> None:
        """Print message if verbose mode is enabled."""
        if self.verbose:
            print(message)

    def load_extract(self, name: str, use_cache: bool = True) -> LabelledTable:
        """
        Load one extract's data and labels.

        Args:
            name: Extract name ('responses', 'sample' or 'paradata')
            use_cache: If True, return cached data if available
        """
        if use_cache and name in self._cache:
            self._log(f"✓ {name}: loaded from cache")
            return self._cache[name]

        config = get_extract_config(name)
        self._log(f"Loading {config.description}...")

        filepath = find_data_file(self.paths.raw_data_dir, config.get_file_patterns())
        table = load_file(filepath)
        table.name = name
        self._log(f"  {filepath.name}: {table.n_rows:,} rows, {table.n_columns} columns")

        self._cache[name] = table
        return table

    def load_all(self, names: Optional[List[str]] = None) -> Dict[str, LabelledTable]:
        """
        Load several extracts (None = every configured extract).

        Any failure is raised; a partial set of extracts is never returned.
        """
        if names is None:
            names = list(EXTRACT_REGISTRY.keys())
        return {name: self.load_extract(name) for name in names}

    def clear_cache(self, name: Optional[str] = None) -> None:
        if name:
            self._cache.pop(name, None)
        else:
            self._cache.clear()

    def get_info(self, name: str) -> Dict[str, Any]:
        """
        Get information about an extract configuration (plus size, if loaded).
        """
        config: ExtractConfig = get_extract_config(name)

        info = {
            'name': config.name,
            'description': config.description,
            'id_col': config.id_col,
            'country_col': config.country_col,
            'columns': config.column_names,
            'data_dir': str(self.paths.raw_data_dir),
        }

        if name in self._cache:
            table = self._cache[name]
            info['n_rows'] = table.n_rows
            info['n_columns'] = table.n_columns

        return info


def filter_country(
    table: LabelledTable,
    country: str,
    country_col: str = 'cntry',
) -> LabelledTable:
    """
    Keep the rows of one country.

    `country` may be the display label ('United Kingdom') or the stored code
    ('GB'); both are matched through the column's value labels. No matching
    rows gives an empty table and a warning.

    Raises:
        MissingColumnError: If the country column is absent
    """
    if country_col not in table.data.columns:
        raise MissingColumnError(table.name, [country_col], table.columns)

    accepted = {country}
    for code, label in table.value_labels.get(country_col, {}).items():
        if label == country or code == country:
            accepted.update([code, label])

    mask = table.data[country_col].astype(object).isin(accepted)
    filtered = table.data.loc[mask].reset_index(drop=True)

    if filtered.empty:
        warnings.warn(f"{table.name}: no rows with {country_col} == {country!r}")

    return table.with_data(filtered)
