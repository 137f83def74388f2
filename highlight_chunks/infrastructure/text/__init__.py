"""Utilidades de texto (matching y sanitización)."""

from .match_finder import RegexMatchFinder, escape_reg_exp, find_chunks
from .sanitizers import identity, strip_accents

__all__ = [
    "find_chunks",
    "escape_reg_exp",
    "RegexMatchFinder",
    "identity",
    "strip_accents",
]
