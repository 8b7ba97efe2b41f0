# -*- coding: utf-8 -*-
"""
app/modules/auth/permissions.py

Matriz estática de permisos rol → recurso → acción.

Se consulta una única vez por petición, antes de invocar el motor de
estadísticas; si la matriz deniega, el motor nunca se ejecuta.

Autor: Gestor de Fichas
Fecha: 16/09/2026
"""

from __future__ import annotations

from enum import StrEnum
from typing import Mapping, Optional


class Role(StrEnum):
    """
    Roles que entrega el proxy de sesión.

    Valores:
    - admin  : acceso total
    - editor : lectura y edición de fichas
    - viewer : solo lectura
    """
    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"


class Resource(StrEnum):
    FICHAS = "fichas"
    LOOKUPS = "lookups"


class Action(StrEnum):
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


PERMISSION_MATRIX: Mapping[Resource, Mapping[Action, frozenset[Role]]] = {
    Resource.FICHAS: {
        Action.READ: frozenset({Role.ADMIN, Role.EDITOR, Role.VIEWER}),
        Action.CREATE: frozenset({Role.ADMIN, Role.EDITOR}),
        Action.UPDATE: frozenset({Role.ADMIN, Role.EDITOR}),
        Action.DELETE: frozenset({Role.ADMIN}),
    },
    Resource.LOOKUPS: {
        Action.READ: frozenset({Role.ADMIN, Role.EDITOR, Role.VIEWER}),
    },
}


def parse_role(value: Optional[str]) -> Optional[Role]:
    """Convierte el texto del proxy en Role; None si no es un rol conocido."""
    if value is None:
        return None
    try:
        return Role(value.strip().lower())
    except ValueError:
        return None


def can(role: Optional[Role], resource: str, action: str) -> bool:
    """
    True si `role` puede ejecutar `action` sobre `resource`.

    Recursos o acciones que no aparecen en la matriz se deniegan.
    """
    if role is None:
        return False
    try:
        allowed = PERMISSION_MATRIX[Resource(resource)].get(Action(action), frozenset())
    except ValueError:
        return False
    return role in allowed


__all__ = ["Role", "Resource", "Action", "PERMISSION_MATRIX", "parse_role", "can"]
# Fin del archivo app/modules/auth/permissions.py
