"""
ESS prep: data preparation for the European Social Survey, UK subset.

This package provides tools for:
- Loading ESS extracts (responses, sample design data, contact-form paradata)
  with their variable and value labels
- Scoping them to one country and typing the analysis columns
- Merging them into one row per sampled unit, respondent or not
- Recoding cigarette and alcohol consumption
- Summarising the result

Quick Start:
    from ess_prep.config import DataPaths, PipelineConfig
    from ess_prep.pipeline import PreparationPipeline

    paths = DataPaths(raw_data_dir='~/data/ess7', output_dir='./outputs')
    result = PreparationPipeline(paths, PipelineConfig()).run()
    print(result.summary)

Modules:
    config: Configuration management (paths, extracts, run settings)
    loaders: Data loading (SAV, DTA, CSV) and country filtering
    schema: Per-column types checked at load time
    processing: Selection, merge and outcome recodes
    reporting: Read-only summaries and the variable listing
    pipeline: End-to-end orchestration (PreparationPipeline)
"""

__version__ = '0.1.0'

from .config import (
    DataPaths,
    PipelineConfig,
    EXTRACT_REGISTRY,
    get_extract_config,
    list_extracts,
    load_config,
)

from .errors import (
    PipelineConfigError,
    MissingColumnError,
    DuplicateKeyError,
    ColumnCollisionError,
    SchemaError,
    UnknownCategoryError,
)

from .tables import LabelledTable

from .loaders import (
    SurveyLoader,
    filter_country,
)

from .pipeline import PreparationPipeline, PipelineResult

__all__ = [
    # Version
    '__version__',
    # Config
    'DataPaths',
    'PipelineConfig',
    'EXTRACT_REGISTRY',
    'get_extract_config',
    'list_extracts',
    'load_config',
    # Errors
    'PipelineConfigError',
    'MissingColumnError',
    'DuplicateKeyError',
    'ColumnCollisionError',
    'SchemaError',
    'UnknownCategoryError',
    # Data
    'LabelledTable',
    # Loaders
    'SurveyLoader',
    'filter_country',
    # Pipeline
    'PreparationPipeline',
    'PipelineResult',
]
