# -*- coding: utf-8 -*-
from app.shared.config.settings_dev import DevSettings
from app.shared.config.settings_testing import EnvTestingSettings
from app.shared.config.settings_prod import ProdSettings


def test_dev_overrides_defaults():
    s = DevSettings()
    assert s.is_dev
    assert s.log_level.upper() == "DEBUG"
    assert s.log_format == "plain"
    assert s.db_sslmode == "disable"
    assert s.metrics_enabled is True


def test_test_overrides_defaults(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "test")
    s = EnvTestingSettings()
    assert s.is_test
    assert s.database_url == "sqlite://"
    assert s.log_level == "WARNING"
    assert s.metrics_enabled is False


def test_prod_overrides_defaults(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    # Limpiar variables de logging para verificar defaults de ProdSettings
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)

    s = ProdSettings()
    assert s.is_prod
    assert s.log_level.upper() == "INFO"
    assert s.log_format == "json"
    assert s.db_sslmode == "require"
# Fin del archivo tests/shared/config/test_settings_envs.py
