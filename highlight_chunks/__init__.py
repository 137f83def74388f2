"""
highlight_chunks — partición de un texto en chunks resaltados / no resaltados.

API pública:
    find_all        pipeline completo (finder -> combiner -> gap filler)
    find_chunks     Match Finder por defecto (sustituible)
    combine_chunks  resolución de solapamientos (merge / split)
    fill_in_chunks  completado de huecos
"""

from .application.chunk_combiner import combine_chunks
from .application.gap_filler import fill_in_chunks
from .application.highlight_pipeline import find_all
from .crosscutting.exceptions import (
    HighlightError,
    InvalidPatternError,
    InvalidRangeError,
)
from .domain.entities import Chunk, Span
from .domain.services import MatchFinder
from .infrastructure.text.match_finder import (
    RegexMatchFinder,
    escape_reg_exp,
    find_chunks,
)
from .infrastructure.text.sanitizers import strip_accents
from .interfaces.schemas import ChunkOut, HighlightRequest, HighlightResponse

__all__ = [
    "find_all",
    "find_chunks",
    "combine_chunks",
    "fill_in_chunks",
    "Chunk",
    "Span",
    "MatchFinder",
    "RegexMatchFinder",
    "escape_reg_exp",
    "strip_accents",
    "HighlightError",
    "InvalidPatternError",
    "InvalidRangeError",
    "ChunkOut",
    "HighlightRequest",
    "HighlightResponse",
]
