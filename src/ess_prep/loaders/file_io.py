"""
File loaders for different survey data formats.

This module provides functions to load survey extracts from various file
formats (SPSS SAV, Stata DTA, CSV). SAV and DTA files are read with
pyreadstat so that variable labels and value labels are kept; stored codes
are left as-is and only turned into labels by the column schema.
"""

import warnings
from pathlib import Path
from typing import List

import pandas as pd
import pyreadstat

from ..tables import LabelledTable


def load_csv(
    filepath: Path,
    encoding: str = 'utf-8',
    **kwargs
) -> LabelledTable:
    """
    Load a CSV file. CSV files carry no labels.

    Args:
        filepath: Path to the CSV file
        encoding: File encoding (default: utf-8)
        **kwargs: Additional arguments passed to pd.read_csv
    """
    encodings_to_try = [encoding, 'utf-8', 'latin-1', 'cp1252']

    # Set low_memory=False to avoid mixed type warnings
    kwargs.setdefault('low_memory', False)

    for enc in encodings_to_try:
        try:
            df = pd.read_csv(filepath, encoding=enc, **kwargs)
            return LabelledTable(df, name=Path(filepath).stem)
        except UnicodeDecodeError:
            continue

    warnings.warn(f"Could not decode {filepath} with standard encodings, ignoring undecodable bytes")
    df = pd.read_csv(filepath, encoding='utf-8', encoding_errors='ignore', **kwargs)
    return LabelledTable(df, name=Path(filepath).stem)


def _from_pyreadstat(df: pd.DataFrame, meta, filepath: Path) -> LabelledTable:
    column_labels = {
        col: label
        for col, label in (meta.column_names_to_labels or {}).items()
        if label
    }
    return LabelledTable(
        data=df,
        column_labels=column_labels,
        value_labels=dict(meta.variable_value_labels or {}),
        name=Path(filepath).stem,
    )


def load_spss(filepath: Path, **kwargs) -> LabelledTable:
    """
    Load an SPSS SAV file with its variable and value labels.

    User-defined missing codes (refusal, don't know, no answer) are read as
    missing values.
    """
    df, meta = pyreadstat.read_sav(str(filepath), user_missing=False, **kwargs)
    return _from_pyreadstat(df, meta, filepath)


def load_stata(filepath: Path, **kwargs) -> LabelledTable:
    """Load a Stata DTA file with its variable and value labels."""
    df, meta = pyreadstat.read_dta(str(filepath), **kwargs)
    return _from_pyreadstat(df, meta, filepath)


def load_file(
    filepath: Path,
    encoding: str = 'utf-8',
    **kwargs
) -> LabelledTable:
    """
    Load a data file, automatically detecting format from extension.

    Supported formats: .csv, .dta, .sav

    Args:
        filepath: Path to the data file
        encoding: Encoding for CSV files
        **kwargs: Additional arguments passed to the appropriate loader
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Data file not found: {filepath}")

    suffix = filepath.suffix.lower()

    if suffix == '.csv':
        return load_csv(filepath, encoding=encoding, **kwargs)
    elif suffix == '.dta':
        return load_stata(filepath, **kwargs)
    elif suffix == '.sav':
        return load_spss(filepath, **kwargs)
    else:
        raise ValueError(
            f"Unsupported file format: {suffix}. "
            f"Supported formats: .csv, .dta, .sav"
        )


def find_data_file(directory: Path, patterns: List[str]) -> Path:
    """
    Find the data file for an extract.

    Patterns are tried in order; the first pattern that matches anything
    wins. Within a pattern, the alphabetically last file is taken, which for
    ESS file names is the latest edition (e.g. ESS7e02_2 over ESS7e02_1).

    Raises:
        FileNotFoundError: If the directory does not exist
        ValueError: If no pattern matches
    """
    directory = Path(directory)

    if not directory.exists():
        raise FileNotFoundError(f"Directory not found: {directory}")

    for pattern in patterns:
        matches = sorted(directory.glob(pattern))
        if matches:
            if len(matches) > 1:
                warnings.warn(
                    f"{len(matches)} files match '{pattern}' in {directory}; using {matches[-1].name}"
                )
            return matches[-1]

    raise ValueError(
        f"No data files found in {directory} matching patterns: {patterns}"
    )
