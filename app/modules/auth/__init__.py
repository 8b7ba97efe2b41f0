# -*- coding: utf-8 -*-
"""
app/modules/auth/__init__.py

Identidad del llamante (aportada por el proxy de sesión) y matriz de permisos.

Autor: Gestor de Fichas
Fecha: 16/09/2026
"""

from .permissions import Role, Resource, Action, PERMISSION_MATRIX, can, parse_role
from .dependencies import CallerIdentity, get_current_caller, require_permission

__all__ = [
    "Role",
    "Resource",
    "Action",
    "PERMISSION_MATRIX",
    "can",
    "parse_role",
    "CallerIdentity",
    "get_current_caller",
    "require_permission",
]
# Fin del archivo app/modules/auth/__init__.py
