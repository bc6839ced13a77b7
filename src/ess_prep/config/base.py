"""
Base configuration classes for the preparation pipeline.

This module provides path management and run settings, allowing the pipeline
to work across environments (local, cluster) without hardcoded paths.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Dict, Any, List
import os

import yaml


@dataclass
class DataPaths:
    """
    Paths configuration for raw extracts and outputs.

    Attributes:
        raw_data_dir: Directory containing the ESS extract files (SAV, DTA, CSV)
        output_dir: Directory for the variable listing and other artifacts

    Example:
        >>> paths = DataPaths.from_yaml("configs/ess_uk.yaml")
        >>> paths.raw_data_dir
        PosixPath('/home/analyst/data/ess7')

        >>> # Or create directly
        >>> paths = DataPaths(raw_data_dir='~/data/ess7', output_dir='./outputs')
    """
    raw_data_dir: Path
    output_dir: Path

    def __post_init__(self):
        """Convert string paths to Path objects and expand user/env vars."""
        self.raw_data_dir = self._resolve_path(self.raw_data_dir)
        self.output_dir = self._resolve_path(self.output_dir)

    @staticmethod
    def _resolve_path(path: Any) -> Path:
        """Resolve a path string, expanding ~ and environment variables."""
        expanded = os.path.expandvars(os.path.expanduser(str(path)))
        return Path(expanded)

    @classmethod
    def from_yaml(cls, config_path: Path | str) -> 'DataPaths':
        """
        Load paths from a YAML configuration file.

        Expected YAML structure:
            paths:
              raw_data: /path/to/ess
              output: /path/to/output

        Raises:
            FileNotFoundError: If config file doesn't exist
            KeyError: If required keys are missing from config
        """
        cfg = _read_yaml(config_path)
        paths_cfg = cfg.get('paths', {})

        required_keys = ['raw_data', 'output']
        missing = [k for k in required_keys if k not in paths_cfg]
        if missing:
            raise KeyError(f"Missing required path keys in config: {missing}")

        return cls.from_dict(paths_cfg)

    @classmethod
    def from_dict(cls, paths_dict: Dict[str, str]) -> 'DataPaths':
        """
        Create DataPaths from a dictionary with keys 'raw_data' and 'output'.
        """
        return cls(
            raw_data_dir=paths_dict['raw_data'],
            output_dir=paths_dict['output'],
        )

    def validate(self, check_writable: bool = True) -> List[str]:
        """
        Validate that configured paths exist and are accessible.

        Returns:
            List of warning/error messages (empty if all valid)
        """
        issues = []

        if not self.raw_data_dir.exists():
            issues.append(f"raw_data_dir does not exist: {self.raw_data_dir}")

        if not self.output_dir.exists():
            try:
                self.output_dir.mkdir(parents=True, exist_ok=True)
            except PermissionError:
                issues.append(f"Cannot create output_dir: {self.output_dir}")

        if check_writable and self.output_dir.exists():
            test_file = self.output_dir / '.write_test'
            try:
                test_file.touch()
                test_file.unlink()
            except PermissionError:
                issues.append(f"output_dir is not writable: {self.output_dir}")

        return issues

    def __repr__(self) -> str:
        return (
            f"DataPaths(\n"
            f"  raw_data_dir={self.raw_data_dir},\n"
            f"  output_dir={self.output_dir}\n"
            f")"
        )


@dataclass
class PipelineConfig:
    """
    Settings for one preparation run.

    Attributes:
        country: Country to keep, as display label or stored code
        merge_key: Unit identifier shared by the three extracts
        outcome_col: Paradata column holding the final contact outcome
        complete_value: The outcome label that marks a complete interview
        n_preview: Rows shown in head-of-table previews
        listing_filename: File name of the variable listing in output_dir
        listing_sep: Delimiter of the variable listing
    """
    country: str = 'United Kingdom'
    merge_key: str = 'idno'
    outcome_col: str = 'outnic'
    complete_value: str = 'Complete and valid interview related to CF'
    n_preview: int = 5
    listing_filename: str = 'ess_uk_variable_labels.csv'
    listing_sep: str = ','

    @classmethod
    def from_yaml(cls, config_path: Path | str) -> 'PipelineConfig':
        """Load pipeline settings from the 'pipeline' section of a YAML file."""
        cfg = _read_yaml(config_path)
        return cls.from_dict(cfg.get('pipeline', {}) or {})

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> 'PipelineConfig':
        defaults = cls()
        unknown = set(cfg) - set(defaults.__dict__)
        if unknown:
            raise KeyError(f"Unknown pipeline settings: {sorted(unknown)}")
        return cls(**{**defaults.__dict__, **cfg})


def _read_yaml(config_path: Path | str) -> Dict[str, Any]:
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_config(config_path: Path | str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Load a complete configuration file and return all config objects.

    Args:
        config_path: Path to the YAML configuration file
        overrides: Pipeline settings that replace the file's values
                   (e.g. from command-line flags)

    Returns:
        Dictionary with keys 'paths', 'pipeline'
    """
    config_path = Path(config_path)
    pipeline = PipelineConfig.from_yaml(config_path)
    if overrides:
        pipeline = PipelineConfig.from_dict({**pipeline.__dict__, **overrides})

    return {
        'paths': DataPaths.from_yaml(config_path),
        'pipeline': pipeline,
    }
