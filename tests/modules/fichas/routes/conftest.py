# -*- coding: utf-8 -*-
"""
Config de tests de rutas de estadísticas.

App FastAPI mínima con el router del módulo fichas; `get_db` se
sobreescribe con la sesión SQLite en memoria de tests/conftest.py.
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.db import get_db
from app.modules.fichas.routes import get_fichas_router

HEADERS = {"X-Auth-User": "u-test", "X-Auth-Role": "viewer"}


@pytest.fixture
def app(session_factory):
    app = FastAPI()
    app.include_router(get_fichas_router())

    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def headers():
    return dict(HEADERS)
# Fin del archivo tests/modules/fichas/routes/conftest.py
