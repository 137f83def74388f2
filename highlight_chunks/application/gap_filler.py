"""
===============================================================================
TARJETA CRC — application/gap_filler.py
===============================================================================

Módulo:
    Gap Filler (partición completa del texto)

Responsabilidades:
    - Completar los huecos entre chunks resaltados con chunks no resaltados.
    - Asignar el `highlight` final (True para los chunks de entrada).
    - Garantizar cobertura exacta de [0, total_length) sin chunks vacíos.

Colaboradores:
    - application/chunk_combiner.py: provee la entrada ordenada y disjunta.
    - application/highlight_pipeline.py: consumidor.
===============================================================================
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from ..crosscutting.logger import logger
from ..domain.entities import Chunk


def fill_in_chunks(
    *, chunks_to_highlight: Sequence[Chunk], total_length: int
) -> list[Chunk]:
    """
    Dado un conjunto de chunks a resaltar, crea los chunks intermedios.

    Precondición: `chunks_to_highlight` ordenado por start y sin solapamientos
    (la salida del combiner lo cumple). Los chunks split adyacentes quedan
    pegados sin un chunk no resaltado en el medio.
    """
    all_chunks: list[Chunk] = []

    def append(
        start: int,
        end: int,
        highlight: bool,
        term_indexes: Optional[Tuple[int, ...]] = None,
        span_indexes: Optional[Tuple[int, ...]] = None,
    ) -> None:
        if end - start > 0:
            all_chunks.append(
                Chunk(
                    start=start,
                    end=end,
                    highlight=highlight,
                    term_indexes=term_indexes,
                    span_indexes=span_indexes,
                )
            )

    last_end = 0
    for chunk in chunks_to_highlight:
        append(last_end, chunk.start, False)
        append(chunk.start, chunk.end, True, chunk.term_indexes, chunk.span_indexes)
        last_end = chunk.end
    append(last_end, total_length, False)

    logger.debug(
        "Gap filler completado",
        extra={"total_length": total_length, "output_chunks": len(all_chunks)},
    )
    return all_chunks
