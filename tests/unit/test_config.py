import importlib

import pytest


def reload_config():
    import basic_auth_demo.config as config
    importlib.reload(config)
    return config


def test_defaults(monkeypatch):
    for name in ("BASIC_AUTH_PROTECTED_PATH", "BASIC_AUTH_HOST", "BASIC_AUTH_PORT", "BASIC_AUTH_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = reload_config().settings

    assert settings.PROTECTED_PATH == "/api/data"
    assert settings.HOST == "127.0.0.1"
    assert settings.PORT == 8000
    assert settings.LOG_LEVEL == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("BASIC_AUTH_PROTECTED_PATH", "/secret")
    monkeypatch.setenv("BASIC_AUTH_PORT", "9000")
    monkeypatch.setenv("BASIC_AUTH_LOG_LEVEL", "debug")
    settings = reload_config().settings

    assert settings.PROTECTED_PATH == "/secret"
    assert settings.PORT == 9000
    assert settings.LOG_LEVEL == "DEBUG"


def test_invalid_port_falls_back(monkeypatch):
    monkeypatch.setenv("BASIC_AUTH_PORT", "not-a-port")
    assert reload_config().settings.PORT == 8000


def teardown_module(module):
    # Leave a settings object built from the real environment for other tests
    reload_config()


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("BASIC_AUTH_LOG_LEVEL", "BASIC_FORMAT")
    assert reload_config().settings.LOG_LEVEL == "INFO"


def test_protected_path_gets_leading_slash(monkeypatch):
    monkeypatch.setenv("BASIC_AUTH_PROTECTED_PATH", "api/secret")
    assert reload_config().settings.PROTECTED_PATH == "/api/secret"


def test_empty_protected_path_uses_default(monkeypatch):
    monkeypatch.setenv("BASIC_AUTH_PROTECTED_PATH", "")
    assert reload_config().settings.PROTECTED_PATH == "/api/data"


def test_root_protected_path_rejected(monkeypatch):
    monkeypatch.setenv("BASIC_AUTH_PROTECTED_PATH", "/")
    with pytest.raises(ValueError, match="must not be '/'"):
        reload_config()


@pytest.mark.parametrize("path", ["", "/", "  ", "///"])
def test_normalize_protected_path_rejects_root(path):
    from basic_auth_demo.config import normalize_protected_path

    with pytest.raises(ValueError):
        normalize_protected_path(path)
