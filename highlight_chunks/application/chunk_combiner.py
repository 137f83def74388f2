"""
===============================================================================
TARJETA CRC — application/chunk_combiner.py
===============================================================================

Módulo:
    Chunk Combiner (resolución de solapamientos)

Responsabilidades:
    - Reducir chunks crudos a un conjunto sin solapamientos conflictivos.
    - Dos políticas mutuamente excluyentes:
        * merge: une intervalos que se tocan o solapan (pierde procedencia).
        * split: descompone en intervalos atómicos etiquetados con los
          términos/spans que los cubren.
    - Servicio puro (sin IO, sin side effects).

Colaboradores:
    - domain.entities.Chunk
    - application/highlight_pipeline.py: consumidor
    - application/gap_filler.py: recibe la salida (ordenada y disjunta)

Algoritmo split (barrido de eventos):
    boundaries = {start, end} de cada chunk, deduplicados y ordenados.
    En cada boundary: primero desactivar (fin exclusivo), luego activar.
    Si hay algo activo, emitir [b[i], b[i+1]) con snapshot ordenado.
===============================================================================
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Tuple

from ..crosscutting.logger import logger
from ..domain.entities import Chunk


@dataclass
class _BoundaryEvents:
    """Eventos que disparan en un mismo boundary."""

    term_starts: list[int] = field(default_factory=list)
    term_ends: list[int] = field(default_factory=list)
    span_starts: list[int] = field(default_factory=list)
    span_ends: list[int] = field(default_factory=list)


def _advance(
    active: Tuple[int, ...], ending: Iterable[int], starting: Iterable[int]
) -> Tuple[int, ...]:
    """
    Nuevo snapshot (multiconjunto ordenado) tras aplicar fines y luego inicios.

    Un índice puede estar activo más de una vez si un finder custom emite
    chunks solapados del mismo término; cada fin retira una sola ocurrencia.
    """
    remaining = list(active)
    for index in ending:
        if index in remaining:
            remaining.remove(index)
    remaining.extend(starting)
    return tuple(sorted(remaining))


def _snapshot(active: Tuple[int, ...]) -> Optional[Tuple[int, ...]]:
    return tuple(sorted(set(active))) if active else None


def _merge(chunks: Sequence[Chunk]) -> list[Chunk]:
    # sorted() es estable: empates en start respetan el orden de entrada.
    ordered = sorted((c for c in chunks if not c.is_empty), key=lambda c: c.start)
    if not ordered:
        return []

    merged: list[Chunk] = []
    current = Chunk(start=ordered[0].start, end=ordered[0].end)
    for nxt in ordered[1:]:
        if nxt.start <= current.end:
            # nxt puede quedar completamente contenido en current.
            current = Chunk(start=current.start, end=max(current.end, nxt.end))
        else:
            merged.append(current)
            current = Chunk(start=nxt.start, end=nxt.end)
    merged.append(current)
    return merged


def _split(chunks: Sequence[Chunk]) -> list[Chunk]:
    events: defaultdict[int, _BoundaryEvents] = defaultdict(_BoundaryEvents)

    for chunk in chunks:
        if chunk.is_empty:
            logger.debug(
                "Chunk degenerado ignorado en split",
                extra={"start": chunk.start, "end": chunk.end},
            )
            continue
        start_events = events[chunk.start]
        end_events = events[chunk.end]
        for index in chunk.term_indexes or ():
            start_events.term_starts.append(index)
            end_events.term_ends.append(index)
        for index in chunk.span_indexes or ():
            start_events.span_starts.append(index)
            end_events.span_ends.append(index)

    boundaries = sorted(events)

    result: list[Chunk] = []
    active_terms: Tuple[int, ...] = ()
    active_spans: Tuple[int, ...] = ()
    for start, end in zip(boundaries, boundaries[1:]):
        at = events[start]
        active_terms = _advance(active_terms, at.term_ends, at.term_starts)
        active_spans = _advance(active_spans, at.span_ends, at.span_starts)

        if active_terms or active_spans:
            result.append(
                Chunk(
                    start=start,
                    end=end,
                    term_indexes=_snapshot(active_terms),
                    span_indexes=_snapshot(active_spans),
                )
            )
    return result


def combine_chunks(
    *, chunks: Sequence[Chunk], split_intersecting_chunks: bool = False
) -> list[Chunk]:
    """
    Combina chunks crudos según la política elegida.

    Reglas:
      - merge (default): salida mínima, disjunta y sin chunks que se toquen.
        Re-aplicarlo sobre su propia salida no cambia nada.
      - split: salida disjunta y ordenada; cada chunk lleva term_indexes y/o
        span_indexes no vacíos. Un intervalo sin cobertura no se emite.
      - Chunks con end <= start no aportan cobertura en ninguna política.
    """
    if split_intersecting_chunks:
        combined = _split(chunks)
    else:
        combined = _merge(chunks)

    logger.debug(
        "Chunk combiner completado",
        extra={
            "policy": "split" if split_intersecting_chunks else "merge",
            "input_chunks": len(chunks),
            "output_chunks": len(combined),
        },
    )
    return combined
