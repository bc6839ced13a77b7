"""
Pipeline module: end-to-end preparation of the merged analysis table.

Example usage:
    from ess_prep.config import DataPaths, PipelineConfig
    from ess_prep.pipeline import PreparationPipeline

    paths = DataPaths(raw_data_dir='~/data/ess7', output_dir='./outputs')
    result = PreparationPipeline(paths, PipelineConfig()).run()
"""

from .pipeline import PreparationPipeline, PipelineResult

__all__ = ['PreparationPipeline', 'PipelineResult']
