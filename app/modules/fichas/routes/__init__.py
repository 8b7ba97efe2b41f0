# -*- coding: utf-8 -*-
"""
app/modules/fichas/routes/__init__.py

Router principal del módulo Fichas (informes de estadísticas).

Autor: Gestor de Fichas
Fecha: 21/09/2026
"""
from fastapi import APIRouter

from .stats_routes import get_stats_service, router as stats_router


def get_fichas_router() -> APIRouter:
    """Ensambla los subrouters del módulo (hoy solo /api/stats)."""
    router = APIRouter()
    router.include_router(stats_router)
    return router


__all__ = ["get_fichas_router", "get_stats_service"]

# Fin del archivo app/modules/fichas/routes/__init__.py
