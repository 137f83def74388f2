"""
===============================================================================
TARJETA CRC — application/highlight_pipeline.py
===============================================================================

Class:
    find_all (pipeline compuesto)

Responsibilities:
    - Orquestar Match Finder -> Chunk Combiner -> Gap Filler.
    - Permitir inyectar un Match Finder alternativo (sin herencia).
    - Pipeline puro, síncrono y sin estado compartido entre llamadas.

Collaborators:
    - domain.services.MatchFinder: puerto del finder
    - infrastructure.text.match_finder.find_chunks: finder por defecto
    - application.chunk_combiner.combine_chunks
    - application.gap_filler.fill_in_chunks
===============================================================================
"""

from __future__ import annotations

from typing import Sequence

from ..domain.entities import Chunk
from ..domain.services import MatchFinder, Sanitizer
from ..infrastructure.text.match_finder import find_chunks as default_find_chunks
from .chunk_combiner import combine_chunks
from .gap_filler import fill_in_chunks


def find_all(
    *,
    search_words: Sequence[str],
    text_to_highlight: str | None = None,
    case_sensitive: bool = False,
    auto_escape: bool = False,
    sanitize: Sanitizer | None = None,
    find_chunks: MatchFinder | None = None,
    spans: Sequence[Sequence[int]] = (),
    split_intersecting_chunks: bool = False,
) -> list[Chunk]:
    """
    Crea la partición completa del texto en chunks resaltados y no resaltados.

    Notas:
      - `text_to_highlight` vacío o None -> [].
      - `total_length` es la longitud del texto SIN sanitizar.
      - `sanitize` debe preservar la longitud: los offsets se leen sobre el
        texto original (strip_accents la preserva).
      - Los spans se recortan a [0, len(text_to_highlight)].
      - Errores de `sanitize` o de `find_chunks` se propagan tal cual.
    """
    finder = find_chunks or default_find_chunks
    text = text_to_highlight or ""

    raw_chunks = finder(
        search_words=search_words,
        text_to_highlight=text,
        case_sensitive=case_sensitive,
        auto_escape=auto_escape,
        sanitize=sanitize,
        spans=spans,
        split_intersecting_chunks=split_intersecting_chunks,
    )
    combined = combine_chunks(
        chunks=raw_chunks, split_intersecting_chunks=split_intersecting_chunks
    )
    return fill_in_chunks(chunks_to_highlight=combined, total_length=len(text))
