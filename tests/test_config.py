import pytest
from pydantic import ValidationError

from identicon import Settings, get_settings, new, with_size


def test_defaults():
    settings = Settings()
    assert settings.default_pixels == 250
    assert settings.default_size == 5
    assert settings.output_dir == "."


def test_env_overrides_defaults(monkeypatch):
    monkeypatch.setenv("IDENTICON_DEFAULT_PIXELS", "300")
    monkeypatch.setenv("IDENTICON_DEFAULT_SIZE", "7")
    icon = new("env", settings=Settings())
    assert icon.pixels == 300
    assert icon.size == 7


def test_options_win_over_settings(monkeypatch):
    monkeypatch.setenv("IDENTICON_DEFAULT_SIZE", "7")
    assert new("env", with_size(9), settings=Settings()).size == 9


def test_out_of_range_env_rejected(monkeypatch):
    monkeypatch.setenv("IDENTICON_DEFAULT_PIXELS", "50")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_log_level_normalised(monkeypatch):
    monkeypatch.setenv("IDENTICON_LOG_LEVEL", "debug")
    assert Settings().log_level == "DEBUG"


def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setenv("IDENTICON_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        Settings()
