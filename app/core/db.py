# -*- coding: utf-8 -*-
"""
app/core/db.py

Fachada para la capa de acceso a datos (SQLAlchemy síncrono).
Los módulos de negocio importan desde aquí sin acoplarse a `app.shared`.

Autor: Gestor de Fichas
Fecha: 15/09/2026
"""

from app.shared.database.database import (
    get_engine,
    SessionLocal,
    Base,
    get_db,
    check_database_health,
)


__all__ = [
    "get_engine",
    "SessionLocal",
    "Base",
    "get_db",
    "check_database_health",
]

# Fin del archivo app/core/db.py
