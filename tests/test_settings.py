"""
Tests for Settings
==================
"""

import logging
import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from passforge import settings


class TestGetSetting:
    """Tests for dotted setting lookup."""

    def test_nested_value(self):
        assert settings.get_setting("markov.max_attempts") == 100
        assert settings.get_setting("markov.defaults.length") == 12

    def test_missing_returns_default(self):
        assert settings.get_setting("markov.nope", "fallback") == "fallback"
        assert settings.get_setting("nope.deeper.still") is None

    def test_scalar_has_no_children(self):
        assert settings.get_setting("markov.max_attempts.deeper", 7) == 7

    def test_require_setting_missing(self):
        with pytest.raises(ValueError, match="app.yaml"):
            settings.require_setting("markov.does_not_exist")

    def test_missing_config_file(self, monkeypatch, tmp_path):
        monkeypatch.setattr(settings, "APP_CONFIG_PATH", tmp_path / "app.yaml")
        settings.load_app_config.cache_clear()
        try:
            with pytest.raises(FileNotFoundError):
                settings.load_app_config()
        finally:
            monkeypatch.undo()
            settings.load_app_config.cache_clear()


class TestResolvePath:
    """Tests for resolve_path()."""

    def test_relative_to_package(self):
        path = settings.resolve_path("data/training_words.txt")
        assert path == settings.PACKAGE_ROOT / "data" / "training_words.txt"
        assert path.exists()

    def test_absolute_kept(self, tmp_path):
        assert settings.resolve_path(str(tmp_path)) == tmp_path

    def test_none_rejected(self):
        with pytest.raises(ValueError):
            settings.resolve_path(None)


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_configured_level(self):
        logger = settings.configure_logging()
        assert logger.name == "passforge"
        assert logger.level == logging.WARNING

    def test_explicit_level(self):
        logger = settings.configure_logging("debug")
        try:
            assert logger.level == logging.DEBUG
        finally:
            settings.configure_logging()

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            settings.configure_logging("LOUD")
