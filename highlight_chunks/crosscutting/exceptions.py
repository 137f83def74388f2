# highlight_chunks/crosscutting/exceptions.py
"""
===============================================================================
MÓDULO: Excepciones tipadas de highlight_chunks
===============================================================================

Objetivo
--------
Tener excepciones internas coherentes, con:
- error_code estable
- error_id para correlación con logs
- message “humana”

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  HighlightError + subclases

Responsabilidades:
  - Estandarizar errores del pipeline (rangos inválidos, patrones inválidos)
  - Generar error_id para rastreo

Colaboradores:
  - infrastructure/text/match_finder.py
  - crosscutting/logger.py
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4


class HighlightError(Exception):
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Clase:
      HighlightError

    Responsabilidades:
      - Base para errores internos del pipeline de highlight
      - Proveer error_code + error_id + message (error_id viaja en los logs)
    ----------------------------------------------------------------------------
    """

    error_code: str = "HIGHLIGHT_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)


class InvalidRangeError(HighlightError):
    """Span con lo > hi (solo en modo estricto)."""

    error_code: str = "INVALID_RANGE"


class InvalidPatternError(HighlightError):
    """Término sin escapar que no compila como expresión regular."""

    error_code: str = "INVALID_PATTERN"
