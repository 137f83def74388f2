"""
===============================================================================
TARJETA CRC — domain/services.py
===============================================================================

Módulo:
    Puertos del pipeline de highlight (Protocols)

Responsabilidades:
    - Definir el contrato del Match Finder para poder sustituirlo sin herencia.
    - Definir el tipo de las funciones de sanitización.

Colaboradores:
    - infrastructure/text/match_finder.py: implementación por defecto.
    - application/highlight_pipeline.py: consume el puerto.

Reglas:
    - SOLO interfaces: nada de implementación.
===============================================================================
"""

from __future__ import annotations

from typing import Callable, Protocol, Sequence

from .entities import Chunk

Sanitizer = Callable[[str], str]


class MatchFinder(Protocol):
    """
    Contrato para descubrir chunks crudos (posiblemente solapados).

    Cualquier callable con esta firma por keywords sirve: una función suelta,
    una lambda o una instancia con `__call__`.
    """

    def __call__(
        self,
        *,
        search_words: Sequence[str],
        text_to_highlight: str,
        case_sensitive: bool = False,
        auto_escape: bool = False,
        sanitize: Sanitizer | None = None,
        spans: Sequence[Sequence[int]] = (),
        split_intersecting_chunks: bool = False,
    ) -> list[Chunk]: ...
