import pytest

from gamerelease.core.config import load_settings, mask
from gamerelease.core.errors import ConfigurationError


def test_missing_key_is_configuration_error(monkeypatch):
    monkeypatch.delenv("IGDB_KEY", raising=False)
    with pytest.raises(ConfigurationError) as exc:
        load_settings(_env_file=None)
    assert "IGDB_KEY" in exc.value.message
    assert exc.value.to_dict()["code"] == "CONFIG_ERROR"


def test_blank_key_is_configuration_error(monkeypatch):
    monkeypatch.setenv("IGDB_KEY", "   ")
    with pytest.raises(ConfigurationError):
        load_settings(_env_file=None)


def test_key_from_environment(monkeypatch):
    monkeypatch.setenv("IGDB_KEY", "abc123secret")
    monkeypatch.delenv("IGDB_API_URL", raising=False)
    s = load_settings(_env_file=None)
    assert s.IGDB_KEY == "abc123secret"
    assert s.IGDB_API_URL == "https://api-endpoint.igdb.com"
    assert s.IGDB_PAGE_SIZE == 50
    assert s.RELEASE_TIMEZONE == "UTC"


def test_page_size_must_be_positive():
    with pytest.raises(ConfigurationError):
        load_settings(IGDB_KEY="k", IGDB_PAGE_SIZE=0, _env_file=None)


def test_mask():
    assert mask(None) == ""
    assert mask("short") == "****"
    assert mask("abcdefghijkl") == "abcd...ijkl"


def test_unknown_log_level_is_configuration_error():
    with pytest.raises(ConfigurationError) as exc:
        load_settings(IGDB_KEY="k", LOG_LEVEL="verbose", _env_file=None)
    assert "LOG_LEVEL" in exc.value.message


def test_log_level_from_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    env = tmp_path / ".env"
    env.write_text("IGDB_KEY=k\nLOG_LEVEL=warning\n")
    s = load_settings(_env_file=env)
    assert s.LOG_LEVEL == "WARNING"
