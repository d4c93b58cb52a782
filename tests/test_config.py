"""Tests for environment-driven configuration."""

import importlib

import pytest

import aro_utils.config as config


@pytest.fixture
def reload_config(monkeypatch):
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


class TestAppLensSettings:

    def test_endpoint_without_scheme_does_not_break_import(self, monkeypatch, reload_config):
        monkeypatch.setenv("APPLENS_ENDPOINT", "diag.example.com")
        monkeypatch.delenv("APPLENS_SCOPE", raising=False)

        reloaded = reload_config()

        assert reloaded.APPLENS_ENDPOINT == "diag.example.com"
        assert reloaded.APPLENS_SCOPE is None

    def test_scope_is_raw_env_value(self, monkeypatch, reload_config):
        monkeypatch.setenv("APPLENS_SCOPE", "api://applens/.default")

        assert reload_config().APPLENS_SCOPE == "api://applens/.default"

    def test_default_scope(self):
        assert config.default_scope("https://diag.example.com/api/invoke") == "https://diag.example.com/.default"

    def test_default_scope_rejects_bare_host(self):
        with pytest.raises(ValueError):
            config.default_scope("diag.example.com")
