"""Application layer: etapas puras del pipeline de highlight."""

from .chunk_combiner import combine_chunks
from .gap_filler import fill_in_chunks
from .highlight_pipeline import find_all

__all__ = ["combine_chunks", "fill_in_chunks", "find_all"]
