# -*- coding: utf-8 -*-
"""
Tests HTTP de /api/stats/*: autorización, mapeo de errores y forma de respuesta.
"""
from datetime import datetime

import pytest

from app.modules.fichas.routes import get_stats_service
from app.modules.fichas.stats.errors import ReferentialIntegrityError, UpstreamStoreError

ENDPOINTS = [
    "/api/stats/portales",
    "/api/stats/tematicas-distribucion",
    "/api/stats/ambitos",
    "/api/stats/tramite-online",
    "/api/stats/ambitos-por-portal",
    "/api/stats/portales-por-mes",
    "/api/stats/fichas-por-mes",
    "/api/stats/tematicas-por-mes?anio=2024",
]


# ---------------------------------------------------------------------------
# Autorización
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("url", ENDPOINTS)
def test_sin_identidad_401(client, url):
    assert client.get(url).status_code == 401


@pytest.mark.parametrize("url", ENDPOINTS)
def test_rol_desconocido_403(client, url):
    r = client.get(url, headers={"X-Auth-User": "u-1", "X-Auth-Role": "invitado"})
    assert r.status_code == 403


@pytest.mark.parametrize("url", ENDPOINTS)
def test_viewer_puede_leer(client, headers, url):
    assert client.get(url, headers=headers).status_code == 200


def test_denegado_no_ejecuta_el_motor(app, client):
    calls = []

    def _service():
        calls.append(1)
        raise AssertionError("el servicio no debe construirse")

    app.dependency_overrides[get_stats_service] = _service
    r = client.get("/api/stats/portales", headers={"X-Auth-User": "u-1", "X-Auth-Role": "nadie"})
    assert r.status_code == 403
    assert calls == []


# ---------------------------------------------------------------------------
# Errores
# ---------------------------------------------------------------------------
def test_tematicas_por_mes_sin_anio_400(client, headers):
    r = client.get("/api/stats/tematicas-por-mes", headers=headers)
    assert r.status_code == 400
    detail = r.json()["detail"]
    assert detail["error_code"] == "missing_required_parameter"
    assert "anio" in detail["detail"]


def test_rango_invertido_400(client, headers):
    r = client.get(
        "/api/stats/fichas-por-mes?created_desde=2024-05-01&created_hasta=2024-01-01",
        headers=headers,
    )
    assert r.status_code == 400
    assert r.json()["detail"]["error_code"] == "invalid_parameter"


def test_parametro_no_valido_no_da_422(client, headers):
    r = client.get("/api/stats/ambitos?ccaa_id=abc&mes=99", headers=headers)
    assert r.status_code == 200
    assert set(r.json()["metadata"]["ignored_params"]) == {"ccaa_id", "mes"}


class _FailingService:
    def __init__(self, exc):
        self.exc = exc

    def portales(self, params):
        raise self.exc


@pytest.mark.parametrize(
    "exc,code",
    [
        (UpstreamStoreError("bd caída"), "upstream_store_error"),
        (ReferentialIntegrityError("clave huérfana"), "referential_integrity_error"),
    ],
)
def test_errores_internos_500(app, client, headers, exc, code):
    app.dependency_overrides[get_stats_service] = lambda: _FailingService(exc)
    r = client.get("/api/stats/portales", headers=headers)
    assert r.status_code == 500
    assert r.json()["detail"]["error_code"] == code


# ---------------------------------------------------------------------------
# Forma de respuesta
# ---------------------------------------------------------------------------
def test_portales_forma(client, headers, seed):
    seed.portal(1, "familia", "Familia")
    seed.portal(2, "salud", "Salud")
    seed.ficha(portales=(1, 2))

    r = client.get("/api/stats/portales", headers=headers)
    body = r.json()
    assert r.status_code == 200
    assert body["data"][0] == {"group_key": "familia", "label": "Familia", "total": 1, "id": 1, "slug": "familia"}
    assert body["metadata"] == {
        "dimension": "portales",
        "total_unique_records": 1,
        "total_assignments": 2,
        "total_entries": 2,
    }


def test_fichas_por_mes_forma(client, headers, seed):
    seed.portal(1, "familia", "Familia")
    seed.ficha(created_at=datetime(2024, 1, 5), portales=(1,))

    r = client.get("/api/stats/fichas-por-mes?anio=2024", headers=headers)
    body = r.json()
    assert r.status_code == 200
    assert body["granularity"] == "absolute_month"
    assert body["range"]["origen"] == "anio"
    assert len(body["items"]) == 12
    assert body["items"][0]["bucket"] == "2024-01"
    assert body["items"][0]["counts"] == {"familia": 1}
    assert body["items"][0]["sin_portal"] == 0
    assert body["series"] == [{"key": "familia", "label": "Familia", "id": 1}]
    assert body["total_global"] == 1


def test_content_type_json(client, headers):
    r = client.get("/api/stats/ambitos", headers=headers)
    assert r.headers["content-type"].startswith("application/json")
# Fin del archivo tests/modules/fichas/routes/test_stats_routes.py
