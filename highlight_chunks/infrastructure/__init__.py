"""Infraestructura: implementaciones concretas (matching por regex, sanitizers)."""
