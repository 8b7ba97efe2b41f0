# -*- coding: utf-8 -*-
"""
app/shared/database/__init__.py

Re-exporta utilidades comunes de base de datos.

Autor: Gestor de Fichas
Fecha: 15/09/2026
"""

from __future__ import annotations

from .database import (
    get_engine,
    SessionLocal,
    get_db,
    check_database_health,
)
from .base import Base, NAMING_CONVENTION

__all__ = [
    "get_engine",
    "SessionLocal",
    "Base",
    "NAMING_CONVENTION",
    "get_db",
    "check_database_health",
]

# Fin del archivo app/shared/database/__init__.py
