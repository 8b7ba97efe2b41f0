# -*- coding: utf-8 -*-
import pytest

from app.shared.config.config_loader import get_settings


def test_loader_returns_dev_by_default(monkeypatch):
    monkeypatch.delenv("PYTHON_ENV", raising=False)
    s = get_settings()
    assert s.is_dev is True
    assert s.python_env == "development"


def test_loader_selects_test(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "test")
    s = get_settings()
    assert s.is_test is True
    assert s.database_url == "sqlite://"


def test_loader_selects_prod(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    monkeypatch.setenv("DB_URL", "postgresql://u:p@db:5432/fichas")
    s = get_settings()
    assert s.is_prod is True
    assert s.database_url.startswith("postgresql+psycopg://")


def test_loader_caches_singleton():
    a = get_settings()
    b = get_settings()
    assert a is b


def test_prod_rejects_default_password(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    with pytest.raises(ValueError) as ei:
        get_settings()
    assert "DB_PASSWORD" in str(ei.value)


def test_prod_rejects_debug(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    monkeypatch.setenv("DB_URL", "postgresql://u:p@db:5432/fichas")
    monkeypatch.setenv("DEBUG", "true")
    with pytest.raises(ValueError):
        get_settings()


def test_fallback_range_must_be_ordered(monkeypatch):
    monkeypatch.setenv("STATS_FALLBACK_FROM", "2030-01-01")
    monkeypatch.setenv("STATS_FALLBACK_TO", "2020-01-01")
    with pytest.raises(ValueError) as ei:
        get_settings()
    assert "STATS_FALLBACK_FROM" in str(ei.value)
# Fin del archivo tests/shared/config/test_config_loader.py
