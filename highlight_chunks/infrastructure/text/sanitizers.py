"""
===============================================================================
MÓDULO: Sanitizers — funciones de normalización previas al matching
===============================================================================

Responsabilidades:
  - Proveer la sanitización por defecto (identidad).
  - Proveer `strip_accents` para matching insensible a acentos.

Colaboradores:
  - infrastructure/text/match_finder.py: aplica el sanitizer al texto y a
    cada término.

Decisiones de diseño:
  - Funciones puras (sin IO, sin side effects).
  - Los offsets del resultado se interpretan sobre el texto original, por lo
    que un sanitizer debe preservar la longitud.
  - NFD (no NFKD): las formas de compatibilidad (ligaduras) cambian la longitud.
===============================================================================
"""

from __future__ import annotations

import unicodedata


def identity(text: str) -> str:
    return text


def strip_accents(text: str) -> str:
    """
    Quita diacríticos: "Éxámplé" -> "Example".

    Trabaja carácter a carácter: cada uno se reemplaza por su letra base
    (NFD sin marcas combinantes) solo si esa base es un único carácter.
    Marcas combinantes sueltas y sílabas Hangul quedan intactas, así que
    la salida siempre tiene la misma longitud que la entrada.
    """
    return "".join(_base_char(ch) for ch in text)


def _base_char(ch: str) -> str:
    base = "".join(
        c for c in unicodedata.normalize("NFD", ch) if not unicodedata.combining(c)
    )
    return base if len(base) == 1 else ch
