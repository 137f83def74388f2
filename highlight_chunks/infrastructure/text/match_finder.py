"""
===============================================================================
CRC CARD — infrastructure/text/match_finder.py
===============================================================================

Componente:
  Match Finder (descubrimiento de matches crudos)

Responsabilidades:
  - Encontrar todas las ocurrencias no solapadas de cada término en el texto.
  - Etiquetar cada ocurrencia con el índice del término (política split).
  - Agregar los spans externos como chunks crudos (solo política split).
  - Exponer:
      * find_chunks(...) -> list[Chunk] (motor)
      * RegexMatchFinder (servicio, cumple el puerto MatchFinder)

Colaboradores:
  - domain/entities.py (Chunk, Span)
  - infrastructure/text/sanitizers.py (identity)
  - crosscutting/config.py (strict_spans)

Decisiones:
  - Escaneo leftmost-first que retoma en el fin del match anterior.
  - Matches de longitud cero se descartan y fuerzan avanzar una posición
    (garantía de terminación).
  - El orden de salida no es significativo: el combiner reordena.
===============================================================================
"""

from __future__ import annotations

import re
from typing import Final, Iterator, Sequence

from ...crosscutting.config import get_settings
from ...crosscutting.exceptions import InvalidPatternError, InvalidRangeError
from ...crosscutting.logger import logger
from ...domain.entities import Chunk, Span
from ...domain.services import Sanitizer
from .sanitizers import identity

# Metacaracteres con significado especial para el motor de regex.
_REGEX_METACHARS: Final[re.Pattern] = re.compile(r"[\-\[\]\/\{\}\(\)\*\+\?\.\\\^\$\|]")


def escape_reg_exp(term: str) -> str:
    """Antepone una barra invertida a cada metacarácter: "text)" -> "text\\)"."""
    return _REGEX_METACHARS.sub(lambda m: "\\" + m.group(0), term)


def _compile(term: str, *, case_sensitive: bool) -> re.Pattern:
    flags = 0 if case_sensitive else re.IGNORECASE
    try:
        return re.compile(term, flags)
    except re.error as exc:
        raise InvalidPatternError(
            f"Search word is not a valid pattern: {term!r}", original_error=exc
        ) from exc


def _scan(pattern: re.Pattern, text: str) -> Iterator[tuple[int, int]]:
    """
    Itera (start, end) de cada match no vacío, sin solapamientos.

    Un match vacío (".*" al final, "w?" fuera de una "w") no se emite y
    obliga a avanzar una posición.
    """
    pos = 0
    while pos <= len(text):
        match = pattern.search(text, pos)
        if match is None:
            return
        start, end = match.span()
        if end > start:
            yield start, end
            pos = end
        else:
            pos = end + 1


def _reject_or_warn(
    message: str,
    *,
    log_message: str,
    strict_spans: bool,
    span_index: int,
    span: Span,
) -> None:
    """En modo estricto levanta InvalidRangeError; si no, loguea con su error_id."""
    error = InvalidRangeError(message)
    if strict_spans:
        raise error
    logger.warning(
        log_message,
        extra={
            "error_code": error.error_code,
            "error_id": error.error_id,
            "span_index": span_index,
            "start": span.start,
            "end": span.end,
        },
    )


def _span_chunks(
    spans: Sequence[Sequence[int]], *, text_length: int, strict_spans: bool
) -> list[Chunk]:
    chunks: list[Chunk] = []
    for span_index, pair in enumerate(spans):
        span = Span.from_pair(pair)
        if not span.is_valid:
            _reject_or_warn(
                f"Span {span_index} has start > end: [{span.start}, {span.end}]",
                log_message="Span inválido ignorado (start > end)",
                strict_spans=strict_spans,
                span_index=span_index,
                span=span,
            )
            continue
        if not span.fits(text_length):
            _reject_or_warn(
                f"Span {span_index} [{span.start}, {span.end}] "
                f"exceeds text bounds [0, {text_length}]",
                log_message="Span recortado a los límites del texto",
                strict_spans=strict_spans,
                span_index=span_index,
                span=span,
            )
            span = span.clipped(text_length)
        if span.is_empty:
            continue
        chunks.append(Chunk(start=span.start, end=span.end, span_indexes=(span_index,)))
    return chunks


def find_chunks(
    *,
    search_words: Sequence[str],
    text_to_highlight: str,
    case_sensitive: bool = False,
    auto_escape: bool = False,
    sanitize: Sanitizer | None = None,
    spans: Sequence[Sequence[int]] = (),
    split_intersecting_chunks: bool = False,
    strict_spans: bool | None = None,
) -> list[Chunk]:
    """
    Examina el texto y devuelve un chunk crudo por cada match.

    Importante:
      - `highlight` siempre es False acá (placeholder).
      - El índice de un término es su posición en `search_words` original;
        los términos vacíos se saltean pero conservan su lugar.
      - `spans` solo se usan con `split_intersecting_chunks`.
      - Los spans se recortan a [0, len(text_to_highlight)] (fuera de rango
        en modo estricto: InvalidRangeError).
      - Errores levantados por `sanitize` se propagan sin envolver.
    """
    sanitize = sanitize or identity
    text = sanitize(text_to_highlight or "")

    chunks: list[Chunk] = []
    for term_index, word in enumerate(search_words):
        if not word:
            continue
        term = sanitize(word)
        if not term:
            continue
        if auto_escape:
            term = escape_reg_exp(term)

        pattern = _compile(term, case_sensitive=case_sensitive)
        for start, end in _scan(pattern, text):
            if split_intersecting_chunks:
                chunks.append(Chunk(start=start, end=end, term_indexes=(term_index,)))
            else:
                chunks.append(Chunk(start=start, end=end))

    if spans:
        if split_intersecting_chunks:
            if strict_spans is None:
                strict_spans = get_settings().strict_spans
            span_chunks = _span_chunks(
                spans,
                text_length=len(text_to_highlight or ""),
                strict_spans=strict_spans,
            )
            chunks.extend(span_chunks)
        else:
            logger.warning(
                "Spans ignorados: requieren split_intersecting_chunks",
                extra={"span_count": len(spans)},
            )

    logger.debug(
        "Match finder completado",
        extra={"search_words": len(search_words), "raw_chunks": len(chunks)},
    )
    return chunks


class RegexMatchFinder:
    """
    Match Finder por defecto (regex).

    Diseño:
      - Fija `strict_spans` al construir (None = leer Settings).
      - `__call__` delega a `find_chunks`, así cumple el puerto MatchFinder.
    """

    __slots__ = ("_strict_spans",)

    def __init__(self, strict_spans: bool | None = None) -> None:
        self._strict_spans = strict_spans

    @property
    def strict_spans(self) -> bool | None:
        return self._strict_spans

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
    ) -> list[Chunk]:
        return find_chunks(
            search_words=search_words,
            text_to_highlight=text_to_highlight,
            case_sensitive=case_sensitive,
            auto_escape=auto_escape,
            sanitize=sanitize,
            spans=spans,
            split_intersecting_chunks=split_intersecting_chunks,
            strict_spans=self._strict_spans,
        )
