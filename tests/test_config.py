"""Tests for environment-driven configuration."""

import pytest
from single_import import config as config_module
from single_import.config import Config, get_config


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any configured language so defaults apply."""
    monkeypatch.delenv("SINGLE_IMPORT_LANGUAGE", raising=False)
    return monkeypatch


class TestLanguage:
    """SINGLE_IMPORT_LANGUAGE selection and validation."""

    def test_defaults_to_javascript(self, clean_env):
        assert Config().language == 'javascript'

    def test_reads_environment(self, clean_env):
        clean_env.setenv("SINGLE_IMPORT_LANGUAGE", "typescript")
        assert Config().language == 'typescript'

    def test_value_is_normalized(self, clean_env):
        clean_env.setenv("SINGLE_IMPORT_LANGUAGE", " TSX ")
        assert Config().language == 'tsx'

    def test_unsupported_language_rejected(self, clean_env):
        clean_env.setenv("SINGLE_IMPORT_LANGUAGE", "cobol")
        with pytest.raises(ValueError, match="cobol"):
            Config()


class TestSingleton:
    """get_config caches one instance per process."""

    def test_same_instance(self, clean_env):
        clean_env.setattr(config_module, '_config', None)
        assert get_config() is get_config()
