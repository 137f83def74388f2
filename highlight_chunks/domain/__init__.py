"""Dominio: entidades y puertos del pipeline de highlight."""

from .entities import Chunk, Span
from .services import MatchFinder, Sanitizer

__all__ = ["Chunk", "Span", "MatchFinder", "Sanitizer"]
