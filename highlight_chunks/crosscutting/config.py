"""
Name: Highlighter Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables on first access
  - Provide defaults that match the library's documented behavior

Collaborators:
  - interfaces/schemas.py: reads defaults and request limits
  - infrastructure/text/match_finder.py: reads strict_spans
  - crosscutting/logger.py: reads log_level / log_json

Notes:
  - Environment variables use the HIGHLIGHT_ prefix (HIGHLIGHT_STRICT_SPANS=1)
  - Singleton via lru_cache
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables.

    Attributes:
        case_sensitive: Default for request-level case sensitivity (default: False)
        auto_escape: Default for escaping regex metacharacters (default: False)
        split_intersecting_chunks: Default combination policy (default: merge)
        strict_spans: Reject spans with lo > hi instead of ignoring them
        max_search_words: Maximum search words per request (default: 1000)
        max_text_chars: Maximum text length per request (default: 1_000_000)
        log_level: Logger level name (default: INFO)
        log_json: Emit JSON log lines (default: True)
    """

    # Matching defaults
    case_sensitive: bool = False
    auto_escape: bool = False
    split_intersecting_chunks: bool = False

    # Spans
    strict_spans: bool = False

    # Request limits
    max_search_words: int = 1000
    max_text_chars: int = 1_000_000

    # Observability
    log_level: str = "INFO"
    log_json: bool = True

    @field_validator("max_search_words", "max_text_chars")
    @classmethod
    def limits_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("request limits must be greater than 0")
        return v

    @field_validator("log_level")
    @classmethod
    def log_level_valid(cls, v: str) -> str:
        level = (v or "INFO").strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(
                "log_level must be DEBUG, INFO, WARNING, ERROR or CRITICAL"
            )
        return level

    model_config = SettingsConfigDict(
        env_prefix="HIGHLIGHT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()
