"""
===============================================================================
TARJETA CRC — domain/entities.py
===============================================================================

Módulo:
    Entidades del dominio de highlight (Chunk, Span)

Responsabilidades:
    - Representar intervalos semiabiertos [start, end) sobre el texto.
    - Transportar la procedencia (términos / spans) cuando aplica la política
      "split".
    - Serializar al formato camelCase que consumen los renderers.

Colaboradores:
    - infrastructure/text/match_finder.py: crea chunks crudos.
    - application/chunk_combiner.py y application/gap_filler.py: crean chunks
      nuevos en cada etapa (nunca mutan).

Reglas:
    - Inmutabilidad (frozen dataclasses) y equality por valor.
    - Procedencia ausente = None, nunca una tupla vacía.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple


@dataclass(frozen=True, slots=True)
class Chunk:
    """
    Intervalo [start, end) con flag de highlight y procedencia opcional.

    Notas:
      - `highlight` es un placeholder (False) hasta que el Gap Filler asigna
        el valor final. No leerlo como verdad en etapas anteriores.
      - `term_indexes` / `span_indexes` solo existen bajo la política split.
    """

    start: int
    end: int
    highlight: bool = False
    term_indexes: Optional[Tuple[int, ...]] = None
    span_indexes: Optional[Tuple[int, ...]] = None

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start

    def text_of(self, text: str) -> str:
        """Extrae el fragmento de `text` cubierto por este chunk."""
        return text[self.start : self.end]

    def to_dict(self) -> Dict[str, Any]:
        """Serializa con las claves camelCase del contrato público."""
        out: Dict[str, Any] = {
            "start": self.start,
            "end": self.end,
            "highlight": self.highlight,
        }
        if self.term_indexes:
            out["searchWordsIndexes"] = list(self.term_indexes)
        if self.span_indexes:
            out["spansIndexes"] = list(self.span_indexes)
        return out


@dataclass(frozen=True, slots=True)
class Span:
    """Rango externo [start, end) que se resalta sin venir de un término."""

    start: int
    end: int

    @classmethod
    def from_pair(cls, pair: Sequence[int]) -> "Span":
        lo, hi = pair
        return cls(start=int(lo), end=int(hi))

    @property
    def is_valid(self) -> bool:
        return self.start <= self.end

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start

    def fits(self, length: int) -> bool:
        """True si el span cae dentro de [0, length]."""
        return 0 <= self.start and self.end <= length

    def clipped(self, length: int) -> "Span":
        """Recorta a [0, length]; puede quedar vacío."""
        start = min(max(self.start, 0), length)
        end = min(max(self.end, 0), length)
        return Span(start=start, end=end)
