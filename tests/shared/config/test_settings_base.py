# -*- coding: utf-8 -*-
from datetime import date

import pytest
from pydantic import ValidationError

from app.shared.config.settings_base import BaseAppSettings, DEFAULT_PORTAL_PRIORITY


def test_database_url_builds_from_parts(monkeypatch):
    monkeypatch.setenv("DB_USER", "alice")
    monkeypatch.setenv("DB_PASSWORD", "s3cr3t!")
    monkeypatch.setenv("DB_HOST", "db.local")
    monkeypatch.setenv("DB_PORT", "5433")
    monkeypatch.setenv("DB_NAME", "fichas_db")
    monkeypatch.setenv("DB_SSLMODE", "prefer")
    s = BaseAppSettings()
    assert s.database_url.startswith("postgresql+psycopg://alice:")
    assert "s3cr3t%21" in s.database_url
    assert "db.local:5433/fichas_db" in s.database_url
    assert "sslmode=prefer" in s.database_url


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("postgres://u:p@h:5432/db", "postgresql+psycopg://u:p@h:5432/db"),
        ("postgresql://u:p@h:5432/db", "postgresql+psycopg://u:p@h:5432/db"),
        ("sqlite:///./fichas.db", "sqlite:///./fichas.db"),
    ],
)
def test_database_url_uses_DB_URL_and_normalizes(monkeypatch, raw, expected):
    monkeypatch.setenv("DB_URL", raw)
    s = BaseAppSettings()
    assert s.database_url == expected


def test_cors_origins_parsing_list(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.com, https://b.com , 'http://localhost:8080'")
    s = BaseAppSettings()
    assert s.get_cors_origins() == ["https://a.com", "https://b.com", "http://localhost:8080"]


def test_cors_origins_wildcard(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "*")
    s = BaseAppSettings()
    assert s.get_cors_origins() == ["*"]


@pytest.mark.parametrize(
    "env_value,expected",
    [
        ("", DEFAULT_PORTAL_PRIORITY),
        ("salud, familia ,  mujer", ["salud", "familia", "mujer"]),
        ('["mayores","salud"]', ["mayores", "salud"]),
        ("[no es json]", DEFAULT_PORTAL_PRIORITY),
    ],
)
def test_portal_priority_normalizer(monkeypatch, env_value, expected):
    monkeypatch.setenv("STATS_PORTAL_PRIORITY", env_value)
    s = BaseAppSettings()
    assert s.stats_portal_priority == expected


def test_stats_defaults():
    s = BaseAppSettings()
    assert s.stats_max_months == 600
    assert s.stats_fallback_from == date(2020, 1, 1)
    assert s.stats_fallback_to == date(2030, 1, 1)
    assert s.auth_caller_header == "X-Auth-User"
    assert s.auth_role_header == "X-Auth-Role"


def test_max_months_must_be_positive(monkeypatch):
    monkeypatch.setenv("STATS_MAX_MONTHS", "0")
    with pytest.raises(ValidationError):
        BaseAppSettings()
# Fin del archivo tests/shared/config/test_settings_base.py
