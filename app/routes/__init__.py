# -*- coding: utf-8 -*-
"""
app/routes/__init__.py

Ensamblador principal de ruteadores de la API.

Responsabilidades:
- Incluir el router de health (/health).
- Incluir los routers de módulos (informes de fichas en /api/stats).

Autor: Gestor de Fichas
Fecha: 15/09/2026
"""

from fastapi import APIRouter

from .health_routes import router as health_router
from app.modules.fichas.routes import get_fichas_router

router = APIRouter()

# Health check sin prefijo adicional
router.include_router(health_router)

# Módulo de fichas (estadísticas)
router.include_router(get_fichas_router())

__all__ = ["router"]

# Fin del archivo app/routes/__init__.py
