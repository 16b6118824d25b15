"""Configuration management for single-import.

Loads environment variables and provides centralized config access.
"""
import os
from pathlib import Path
from dotenv import load_dotenv
from single_import.analyzer.parser import LanguageParser

__version__ = "1.0.0"


class Config:
    """Configuration loader with environment variable support."""

    def __init__(self):
        """Initialize config by loading .env file."""
        # Load .env from project root
        project_root = Path(__file__).parent.parent
        env_path = project_root / ".env"
        load_dotenv(env_path)

        self._validate()

    def _validate(self):
        """Validate configured values.

        Raises:
            ValueError: If SINGLE_IMPORT_LANGUAGE names an unsupported grammar
        """
        if self.language not in LanguageParser.SUPPORTED_LANGUAGES:
            raise ValueError(
                f"SINGLE_IMPORT_LANGUAGE must be one of {', '.join(LanguageParser.SUPPORTED_LANGUAGES)}, "
                f"got {self.language!r}."
            )

    @property
    def language(self) -> str:
        """Get the default grammar for parsing statements.

        Priority:
        1. SINGLE_IMPORT_LANGUAGE environment variable
        2. Fallback to javascript

        Returns:
            Language name
        """
        return os.getenv("SINGLE_IMPORT_LANGUAGE", "javascript").strip().lower()


# Singleton instance
_config = None


def get_config() -> Config:
    """Get or create singleton Config instance.

    Returns:
        Config instance
    """
    global _config
    if _config is None:
        _config = Config()
    return _config
