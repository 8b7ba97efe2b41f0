# -*- coding: utf-8 -*-
import os
import pytest

from app.shared.config.config_loader import get_settings


@pytest.fixture(autouse=True)
def _isolate_env_and_cache(monkeypatch):
    """
    Aísla variables de entorno y limpia el caché de get_settings() en cada test.
    """
    # Asegura que no heredamos configuración del shell del dev
    for k in list(os.environ.keys()):
        if k.startswith(("DB_", "CORS_", "APP_", "STATS_", "LOG_", "AUTH_", "METRICS_")):
            monkeypatch.delenv(k, raising=False)
    monkeypatch.setenv("PYTHON_ENV", "development")
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()
# Fin del archivo tests/shared/config/conftest.py
