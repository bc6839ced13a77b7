"""
Configuration module for the preparation pipeline.

Example usage:
    from ess_prep.config import DataPaths, PipelineConfig, get_extract_config, load_config

    # Load all config from a YAML file
    config = load_config('configs/ess_uk.yaml')
    paths = config['paths']

    # Or create directly without YAML
    paths = DataPaths(raw_data_dir='~/data/ess7', output_dir='./outputs')

    # Access extract configurations
    responses = get_extract_config('responses')
    print(responses.column_names)
"""

from .base import (
    DataPaths,
    PipelineConfig,
    load_config,
)

from .extracts import (
    ExtractConfig,
    EXTRACT_REGISTRY,
    get_extract_config,
    list_extracts,
    list_extracts_detailed,
)

__all__ = [
    # Base config classes
    'DataPaths',
    'PipelineConfig',
    'load_config',
    # Extract config
    'ExtractConfig',
    'EXTRACT_REGISTRY',
    'get_extract_config',
    'list_extracts',
    'list_extracts_detailed',
]
