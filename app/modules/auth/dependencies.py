# -*- coding: utf-8 -*-
"""
app/modules/auth/dependencies.py

Dependencias de autorización para FastAPI.

La autenticación la resuelve un proxy de sesión externo, que reenvía
la identidad del llamante y su rol en cabeceras (nombres configurables
con AUTH_CALLER_HEADER / AUTH_ROLE_HEADER).

Provee:
- CallerIdentity: identidad opaca + rol
- get_current_caller: 401 si el proxy no aportó identidad
- require_permission(resource, action): 403 si la matriz deniega

Autor: Gestor de Fichas
Fecha: 16/09/2026
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from fastapi import Depends, Request

from app.shared.config import settings
from app.shared.utils.http_exceptions import ForbiddenException, UnauthorizedException

from .permissions import Role, can, parse_role

logger = logging.getLogger(__name__)

# Rol asumido cuando el proxy autentica pero no informa rol
DEFAULT_ROLE = Role.EDITOR


@dataclass(frozen=True)
class CallerIdentity:
    caller_id: str
    role: Optional[Role]
    raw_role: Optional[str] = None


def get_current_caller(request: Request) -> CallerIdentity:
    """
    Construye la identidad del llamante a partir de las cabeceras del proxy.

    Raises:
        UnauthorizedException (401): si falta la cabecera de identidad.
    """
    caller_id = (request.headers.get(settings.auth_caller_header) or "").strip()
    if not caller_id:
        raise UnauthorizedException()

    raw_role = request.headers.get(settings.auth_role_header)
    if raw_role is None or not raw_role.strip():
        return CallerIdentity(caller_id=caller_id, role=DEFAULT_ROLE)

    role = parse_role(raw_role)
    if role is None:
        logger.warning("[auth] Rol desconocido %r para caller=%s", raw_role, caller_id)
    return CallerIdentity(caller_id=caller_id, role=role, raw_role=raw_role)


def require_permission(resource: str, action: str) -> Callable[..., CallerIdentity]:
    """
    Fábrica de dependencias: exige permiso `resource:action`.

    Uso:
        @router.get("/x", dependencies=[Depends(require_permission("fichas", "read"))])
    """

    def _dependency(caller: CallerIdentity = Depends(get_current_caller)) -> CallerIdentity:
        if not can(caller.role, resource, action):
            logger.info(
                "[auth] Denegado %s:%s para caller=%s role=%s",
                resource, action, caller.caller_id, caller.raw_role or caller.role,
            )
            raise ForbiddenException()
        return caller

    return _dependency


__all__ = ["CallerIdentity", "DEFAULT_ROLE", "get_current_caller", "require_permission"]
# Fin del archivo app/modules/auth/dependencies.py
