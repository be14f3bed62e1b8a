from pathlib import Path

import pytest

from worldscribe.utils.settings import DEFAULT_CORS_ORIGINS, get_settings, refresh_settings


def test_defaults():
    settings = get_settings()
    assert settings.worlds_folder == Path.home() / "WorldScribe" / "Worlds"
    assert settings.max_image_bytes == 2_000_000
    assert settings.default_page_size == 10
    assert settings.max_page_size == 100
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("WORLDSCRIBE_WORLDS_FOLDER", str(tmp_path))
    monkeypatch.setenv("WORLDSCRIBE_MAX_IMAGE_BYTES", "1024")
    monkeypatch.setenv("WORLDSCRIBE_CORS_ORIGINS", "http://a.test, http://b.test,")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    refresh_settings()

    settings = get_settings()
    assert settings.worlds_folder == tmp_path
    assert settings.max_image_bytes == 1024
    assert settings.cors_origins == ("http://a.test", "http://b.test")
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["abc", "0", "-5", "  "])
def test_bad_integers_fall_back_to_default(monkeypatch, raw):
    monkeypatch.setenv("WORLDSCRIBE_DEFAULT_PAGE_SIZE", raw)
    refresh_settings()
    assert get_settings().default_page_size == 10


def test_settings_are_cached_until_refreshed(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("WORLDSCRIBE_MAX_PAGE_SIZE", "7")
    assert get_settings() is first
    refresh_settings()
    assert get_settings().max_page_size == 7
