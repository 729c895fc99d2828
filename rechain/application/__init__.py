from .chain_pipeline import ChainPipeline, PipelineStats

__all__ = ["ChainPipeline", "PipelineStats"]
