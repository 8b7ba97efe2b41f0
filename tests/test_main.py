# -*- coding: utf-8 -*-
"""
Tests de humo de la app principal (app.main).
"""
import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


@pytest.fixture
def client():
    from app.main import app

    return TestClient(app)


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == "active"


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["environment"] == "test"
    assert body["database"]["reachable"] is True


def test_rutas_de_estadisticas_montadas(client):
    paths = client.app.openapi()["paths"]
    assert "/api/stats/portales" in paths
    assert "/api/stats/tematicas-por-mes" in paths


def test_stats_sin_identidad_401_con_charset(client):
    r = client.get("/api/stats/portales")
    assert r.status_code == 401
    assert "charset=utf-8" in r.headers["content-type"].lower()
# Fin del archivo tests/test_main.py
