# -*- coding: utf-8 -*-
"""
app/core/__init__.py

Fachada unificada para componentes centrales del backend:
- Configuración (settings)
- Logging
- Motor de base de datos y sesiones

Esta capa envuelve la implementación existente en `app.shared.*` para
ofrecer puntos de entrada estables hacia el resto de los módulos.

Autor: Gestor de Fichas
Fecha: 15/09/2026
"""

from .settings import get_settings
from .logging import setup_logging
from .db import (
    get_engine,
    SessionLocal,
    Base,
    get_db,
    check_database_health,
)

__all__ = [
    "get_settings",
    "setup_logging",
    "get_engine",
    "SessionLocal",
    "Base",
    "get_db",
    "check_database_health",
]

# Fin del archivo app/core/__init__.py
