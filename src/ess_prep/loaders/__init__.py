"""
Data loading module for the preparation pipeline.

Example usage:
    from ess_prep.config import DataPaths
    from ess_prep.loaders import SurveyLoader, filter_country

    paths = DataPaths(raw_data_dir='~/data/ess7', output_dir='./outputs')
    loader = SurveyLoader(paths)

    responses = filter_country(loader.load_extract('responses'), 'United Kingdom')
"""

from .file_io import (
    load_csv,
    load_stata,
    load_spss,
    load_file,
    find_data_file,
)

from .survey_loader import (
    SurveyLoader,
    filter_country,
)

__all__ = [
    # Main class
    'SurveyLoader',
    'filter_country',
    # File loaders (rarely needed directly)
    'load_csv',
    'load_stata',
    'load_spss',
    'load_file',
    'find_data_file',
]
