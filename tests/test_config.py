"""
Tests for configuration module.
"""

import importlib
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from encore.core import config
from encore.core.config import (
    PROJECT_NAME,
    PROJECT_VERSION,
    SOUNDCLOUD_CONFIG,
    ARTWORK_CONFIG,
    ERROR_MESSAGES,
)


def test_project_info():
    """Test project information constants."""
    assert PROJECT_NAME == "Encore"
    assert PROJECT_VERSION == "1.0.0"


def test_soundcloud_config():
    """Test SoundCloud configuration."""
    assert SOUNDCLOUD_CONFIG["OEMBED_URL"].startswith("http")
    assert SOUNDCLOUD_CONFIG["TIMEOUT"] > 0
    assert PROJECT_NAME in SOUNDCLOUD_CONFIG["USER_AGENT"]


def test_artwork_config():
    """Test artwork markers."""
    assert ARTWORK_CONFIG["SOURCE_SIZE"] == "-t500x500"
    assert ARTWORK_CONFIG["TARGET_SIZE"] == "-t1080x1080"
    assert ARTWORK_CONFIG["SOURCE_EXTENSION"] == ".jpg"
    assert ARTWORK_CONFIG["TARGET_EXTENSION"] == ".png"
    assert ARTWORK_CONFIG["MAX_WORKERS"] >= 1


def test_error_messages_format():
    """Test that templated messages accept their fields."""
    assert "404" in ERROR_MESSAGES["HTTP_STATUS"].format(status=404)
    assert "5" in ERROR_MESSAGES["TIMEOUT"].format(timeout=5)


def test_environment_variable_override(monkeypatch):
    """Test that environment variables override config."""
    monkeypatch.setenv("ENCORE_OEMBED_TIMEOUT", "2.5")
    monkeypatch.setenv("ENCORE_MAX_WORKERS", "3")
    monkeypatch.setenv("ENCORE_LOG_LEVEL", "debug")
    
    try:
        reloaded = importlib.reload(config)
        assert reloaded.SOUNDCLOUD_CONFIG["TIMEOUT"] == 2.5
        assert reloaded.ARTWORK_CONFIG["MAX_WORKERS"] == 3
        assert reloaded.LOGGING_CONFIG["LEVEL"] == "DEBUG"
    finally:
        monkeypatch.undo()
        importlib.reload(config)
