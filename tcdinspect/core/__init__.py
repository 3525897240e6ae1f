#!/usr/bin/env python3
"""
tcdinspect core: work area handling, decoder invocation and the decode pipeline.
"""

from .format_detector import FormatDetector, is_tcd
from .pipeline import DecodePipeline
from .workarea import PipelineStage, WorkArea

__all__ = ["DecodePipeline", "FormatDetector", "PipelineStage", "WorkArea", "is_tcd"]
