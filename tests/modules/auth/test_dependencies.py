# -*- coding: utf-8 -*-
"""
Tests de las dependencias de autorización (cabeceras del proxy de sesión).

Se monta una app mínima con un endpoint protegido por
require_permission("fichas", ...).
"""
import pytest
from fastapi import APIRouter, Depends, FastAPI
from fastapi.testclient import TestClient

from app.modules.auth import CallerIdentity, require_permission


@pytest.fixture
def client():
    router = APIRouter()

    @router.get("/leer")
    def leer(caller: CallerIdentity = Depends(require_permission("fichas", "read"))):
        return {"caller": caller.caller_id, "role": caller.role}

    @router.get("/borrar")
    def borrar(caller: CallerIdentity = Depends(require_permission("fichas", "delete"))):
        return {"caller": caller.caller_id}

    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


def test_sin_identidad_devuelve_401(client):
    r = client.get("/leer")
    assert r.status_code == 401


def test_identidad_en_blanco_devuelve_401(client):
    r = client.get("/leer", headers={"X-Auth-User": "   "})
    assert r.status_code == 401


def test_sin_rol_se_asume_editor(client):
    r = client.get("/leer", headers={"X-Auth-User": "u-1"})
    assert r.status_code == 200
    assert r.json() == {"caller": "u-1", "role": "editor"}


def test_rol_desconocido_devuelve_403(client):
    r = client.get("/leer", headers={"X-Auth-User": "u-1", "X-Auth-Role": "superuser"})
    assert r.status_code == 403


def test_viewer_lee_pero_no_borra(client):
    headers = {"X-Auth-User": "u-2", "X-Auth-Role": "viewer"}
    assert client.get("/leer", headers=headers).status_code == 200
    assert client.get("/borrar", headers=headers).status_code == 403


def test_admin_borra(client):
    r = client.get("/borrar", headers={"X-Auth-User": "u-3", "X-Auth-Role": "ADMIN"})
    assert r.status_code == 200
# Fin del archivo tests/modules/auth/test_dependencies.py
