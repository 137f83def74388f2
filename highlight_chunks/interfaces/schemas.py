"""
===============================================================================
TARJETA CRC — interfaces/schemas.py
===============================================================================

Módulo:
    Schemas para el objeto de configuración de highlight (camelCase)

Responsabilidades:
    - DTOs request/response con los nombres del contrato público
      (searchWords, textToHighlight, splitIntersectingChunks, ...).
    - Validar tipos, límites y forma de los spans antes de correr el pipeline.

Colaboradores:
    - crosscutting.config.get_settings (defaults y límites)
    - application.highlight_pipeline.find_all
===============================================================================
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..application.highlight_pipeline import find_all
from ..crosscutting.config import get_settings
from ..domain.entities import Chunk
from ..domain.services import MatchFinder, Sanitizer


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------
class HighlightRequest(BaseModel):
    """Config de `find_all`. Acepta camelCase o snake_case."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    search_words: list[str] = Field(..., alias="searchWords")
    text_to_highlight: str | None = Field(default=None, alias="textToHighlight")
    case_sensitive: bool = Field(
        default_factory=lambda: get_settings().case_sensitive, alias="caseSensitive"
    )
    auto_escape: bool = Field(
        default_factory=lambda: get_settings().auto_escape, alias="autoEscape"
    )
    spans: list[tuple[int, int]] = Field(default_factory=list)
    split_intersecting_chunks: bool = Field(
        default_factory=lambda: get_settings().split_intersecting_chunks,
        alias="splitIntersectingChunks",
    )

    @field_validator("search_words")
    @classmethod
    def search_words_within_limit(cls, v: list[str]) -> list[str]:
        limit = get_settings().max_search_words
        if len(v) > limit:
            raise ValueError(f"searchWords admite como máximo {limit} términos")
        return v

    @field_validator("text_to_highlight")
    @classmethod
    def text_within_limit(cls, v: str | None) -> str | None:
        limit = get_settings().max_text_chars
        if v is not None and len(v) > limit:
            raise ValueError(f"textToHighlight admite como máximo {limit} caracteres")
        return v

    def run(
        self,
        *,
        sanitize: Sanitizer | None = None,
        find_chunks: MatchFinder | None = None,
    ) -> "HighlightResponse":
        chunks = find_all(
            search_words=self.search_words,
            text_to_highlight=self.text_to_highlight,
            case_sensitive=self.case_sensitive,
            auto_escape=self.auto_escape,
            sanitize=sanitize,
            find_chunks=find_chunks,
            spans=self.spans,
            split_intersecting_chunks=self.split_intersecting_chunks,
        )
        return HighlightResponse.from_chunks(chunks)


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------
class ChunkOut(BaseModel):
    """Chunk final serializable."""

    model_config = ConfigDict(populate_by_name=True)

    start: int
    end: int
    highlight: bool
    search_words_indexes: list[int] | None = Field(
        default=None, alias="searchWordsIndexes"
    )
    spans_indexes: list[int] | None = Field(default=None, alias="spansIndexes")

    @classmethod
    def from_chunk(cls, chunk: Chunk) -> "ChunkOut":
        return cls(
            start=chunk.start,
            end=chunk.end,
            highlight=chunk.highlight,
            search_words_indexes=list(chunk.term_indexes) if chunk.term_indexes else None,
            spans_indexes=list(chunk.span_indexes) if chunk.span_indexes else None,
        )


class HighlightResponse(BaseModel):
    """Response de highlight."""

    chunks: list[ChunkOut]

    @classmethod
    def from_chunks(cls, chunks: list[Chunk]) -> "HighlightResponse":
        return cls(chunks=[ChunkOut.from_chunk(c) for c in chunks])

    def to_list(self) -> list[dict[str, Any]]:
        """Lista de dicts camelCase; la procedencia ausente se omite."""
        return [c.model_dump(by_alias=True, exclude_none=True) for c in self.chunks]
