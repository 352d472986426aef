"""
Tests for settings validation.
"""

import pytest

from email_validation.config import Settings, get_settings


def test_defaults_are_valid():
    """The environment-driven defaults pass validation."""
    settings = get_settings()
    assert settings.validation_max_workers >= 1
    assert settings.validation_policy in ("shallow", "strict")


def test_settings_are_cached():
    """get_settings returns one shared instance."""
    assert get_settings() is get_settings()


@pytest.mark.parametrize(
    "overrides",
    [
        {"email_column": -1},
        {"validation_max_workers": 0},
        {"validation_policy": "paranoid"},
        {"domain_cache_ttl": 0},
        {"log_level": "VERBOSE"},
    ],
)
def test_invalid_settings(tmp_path, overrides):
    """Out-of-range values are rejected at construction."""
    with pytest.raises(ValueError):
        Settings(work_dir=tmp_path, log_dir=tmp_path, **overrides)


def test_settings_are_frozen(tmp_path):
    """Settings cannot be changed after construction."""
    settings = Settings(work_dir=tmp_path, log_dir=tmp_path)
    with pytest.raises(AttributeError):
        settings.email_column = 3  # type: ignore[misc]
