"""
Preparation pipeline for the ESS UK analysis file.

This module provides the PreparationPipeline class which orchestrates:
- Loading the three extracts via SurveyLoader
- Checking every requested column before any row is processed
- Filtering to one country and selecting the analysis variables
- Typing columns with their schema
- Merging to one row per sampled unit
- Recoding cigarette and alcohol consumption
- Reporting dimensions and saving the variable listing
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from ..config import DataPaths, PipelineConfig, ExtractConfig, EXTRACT_REGISTRY
from ..loaders import SurveyLoader, filter_country
from ..processing import check_columns, select_columns, merge_units, recode_outcomes, RecodeColumns
from ..reporting import (
    SurveySummary,
    summarize,
    format_summary,
    format_variable_listing,
    head_preview,
    write_variable_listing,
)
from ..schema import apply_schema
from ..tables import LabelledTable


@dataclass
class PipelineResult:
    """Outputs of one run."""
    extracts: Dict[str, LabelledTable]  # country-scoped, selected, typed
    merged: LabelledTable               # one row per sampled unit, with outcomes
    summary: SurveySummary
    listing_path: Optional[Path] = None


class PreparationPipeline:
    """
    Runs the full preparation from raw extracts to the merged analysis table.

    Example
    -------
    >>> from ess_prep.config import DataPaths, PipelineConfig
    >>> from ess_prep.pipeline import PreparationPipeline
    >>>
    >>> paths = DataPaths(raw_data_dir='~/data/ess7', output_dir='./outputs')
    >>> pipeline = PreparationPipeline(paths, PipelineConfig(country='United Kingdom'))
    >>> result = pipeline.run()
    >>> result.summary.n_respondents
    """

    def __init__(
        self,
        paths: DataPaths,
        config: Optional[PipelineConfig] = None,
        extracts: Optional[Dict[str, ExtractConfig]] = None,
        recode_columns: Optional[RecodeColumns] = None,
        verbose: bool = True,
    ):
        """
        Parameters
        ----------
        paths : DataPaths
            Raw data and output directories
        config : PipelineConfig, optional
            Run settings. If None, uses defaults (United Kingdom).
        extracts : dict[str, ExtractConfig], optional
            Must contain 'paradata', 'sample' and 'responses'.
            If None, uses EXTRACT_REGISTRY.
        recode_columns : RecodeColumns, optional
            Source columns of the recodes. If None, uses ESS names.
        verbose : bool, default True
            Print progress messages and the report
        """
        self.paths = paths
        self.config = config or PipelineConfig()
        self.extracts = extracts or EXTRACT_REGISTRY
        self.recode_columns = recode_columns or RecodeColumns()
        self.verbose = verbose

        self.loader = SurveyLoader(paths, verbose=verbose)

    def _log(self, message: str) -> None:
        """Print message if verbose mode is enabled."""
        if self.verbose:
            print(message)

    # -------------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------------

    def check_extracts(self, tables: Dict[str, LabelledTable]) -> None:
        """
        Verify every extract is present and has every requested column.

        Runs before any filtering so that configuration errors abort the
        run before any data is processed.
        """
        for name, extract in self.extracts.items():
            if name not in tables:
                raise KeyError(f"Extract '{name}' was not loaded")
            check_columns(tables[name], extract.required_columns)

    def prepare_extract(self, table: LabelledTable, extract: ExtractConfig) -> LabelledTable:
        """Filter to the target country, select and type the analysis columns."""
        scoped = filter_country(table, self.config.country, extract.country_col)
        selected = select_columns(scoped, extract.column_names)
        typed = apply_schema(selected, extract.columns)
        self._log(f"  {extract.name}: {typed.n_rows:,} rows, {typed.n_columns} columns")
        return typed

    def report(self, merged: LabelledTable, summary: SurveySummary) -> None:
        if not self.verbose:
            return
        print()
        print(format_summary(summary, title=f"{self.config.country}: merged units"))
        print()
        print(head_preview(merged, n=self.config.n_preview))
        print()
        print("Variables")
        print("-" * 50)
        print(format_variable_listing(merged))

    # -------------------------------------------------------------------------
    # Run
    # -------------------------------------------------------------------------

    def run(
        self,
        tables: Optional[Dict[str, LabelledTable]] = None,
        write_outputs: bool = True,
    ) -> PipelineResult:
        """
        Run the pipeline.

        Parameters
        ----------
        tables : dict[str, LabelledTable], optional
            Already-loaded raw extracts. If None, they are loaded from
            paths.raw_data_dir.
        write_outputs : bool, default True
            Save the variable listing to paths.output_dir

        Returns
        -------
        PipelineResult
        """
        if tables is None:
            tables = self.loader.load_all(list(self.extracts))

        self.check_extracts(tables)

        self._log(f"Preparing extracts for {self.config.country}...")
        prepared = {
            name: self.prepare_extract(tables[name], extract)
            for name, extract in self.extracts.items()
        }

        merged = merge_units(
            prepared['paradata'],
            prepared['sample'],
            prepared['responses'],
            key=self.config.merge_key,
            sort_by=self.config.outcome_col,
        )
        merged = recode_outcomes(merged, self.recode_columns)

        summary = summarize(merged, self.config.outcome_col, self.config.complete_value)
        self.report(merged, summary)

        listing_path = None
        if write_outputs:
            listing_path = write_variable_listing(
                merged,
                self.paths.output_dir / self.config.listing_filename,
                sep=self.config.listing_sep,
            )
            self._log(f"\nVariable listing saved to: {listing_path}")

        return PipelineResult(
            extracts=prepared,
            merged=merged,
            summary=summary,
            listing_path=listing_path,
        )
