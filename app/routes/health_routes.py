# -*- coding: utf-8 -*-
"""
app/routes/health_routes.py

Endpoint básico de health check del Gestor de Fichas.

Autor: Gestor de Fichas
Fecha: 15/09/2026
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from app.core.settings import get_settings
from app.core.db import check_database_health

router = APIRouter()


@router.get(
    "/health",
    summary="Health check del backend",
    description=(
        "Devuelve el estado básico del servicio de estadísticas, incluyendo "
        "verificación simple de conectividad a la base de datos."
    ),
)
def health_check() -> dict:
    """
    Health check básico.

    Returns:
        dict: información mínima de estado de la aplicación.
    """
    settings = get_settings()

    db_ok = check_database_health()

    return {
        "status": "ok" if db_ok else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.python_env,
        "database": {
            "reachable": db_ok,
        },
        "service": {
            "name": settings.app_name,
            "version": settings.app_version,
        },
    }

# Fin del archivo app/routes/health_routes.py
