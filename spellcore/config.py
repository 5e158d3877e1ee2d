"""
Configuration management using Pydantic Settings.
Loads configuration from environment variables and .env file.
"""
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Configuration
    LOG_LEVEL: str = "INFO"

    # Spell-check Configuration
    SPELLCHECK_LANGUAGE: str = "en"  # Language code of the word list
    SPELLCHECK_WORDLIST_PATH: str = "data/dictionaries/en-words.txt"  # One word per line, optional count column
    SPELLCHECK_CACHE_PATH: Optional[str] = None  # Pickle cache file, disabled when unset
    SPELLCHECK_MAX_EDIT_DISTANCE: int = 2  # Default suggestion budget (1-3)
    SPELLCHECK_MAX_RELAXED_DISTANCE: int = 3  # Ceiling when widening an empty search
    SPELLCHECK_SUGGESTION_COUNT: int = 5  # Max suggestions per misspelled word
    SPELLCHECK_MIN_WORD_LENGTH: int = 1  # Skip words shorter than this
    SPELLCHECK_MAX_TEXT_LENGTH: int = 100_000  # Reject longer input

    # Logging Configuration (Optional - per-module log levels)
    APP_LOG_LEVEL: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def app_log_level(self) -> str:
        """Log level for spellcore loggers, falling back to LOG_LEVEL."""
        return (self.APP_LOG_LEVEL or self.LOG_LEVEL).upper()


# Global settings instance
settings = Settings()
