"""Interfaces: schemas del objeto de configuración."""

from .schemas import ChunkOut, HighlightRequest, HighlightResponse

__all__ = ["ChunkOut", "HighlightRequest", "HighlightResponse"]
