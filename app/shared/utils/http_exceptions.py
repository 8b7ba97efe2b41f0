# -*- coding: utf-8 -*-
"""
app/shared/utils/http_exceptions.py

Excepciones HTTP personalizadas para la API del Gestor de Fichas.
Estandariza respuestas de error con códigos HTTP apropiados.

Cuando se indica `error_code`, el detalle viaja estructurado:
    {"detail": {"detail": "...", "error_code": "..."}}

Autor: Gestor de Fichas
Fecha: 15/09/2026
"""

from fastapi import HTTPException, status
from typing import Any, Dict, Optional


def _build_detail(detail: str, error_code: Optional[str]) -> Any:
    if error_code:
        return {"detail": detail, "error_code": error_code}
    return detail


class BadRequestException(HTTPException):
    """400 - Solicitud mal formada o parámetros inválidos"""
    def __init__(
        self,
        detail: str = "Solicitud inválida",
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_build_detail(detail, error_code),
            headers=headers
        )


class UnauthorizedException(HTTPException):
    """401 - Identidad del llamante ausente (el proxy de sesión no la aportó)"""
    def __init__(
        self,
        detail: str = "No autorizado - identidad ausente",
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers=headers
        )


class ForbiddenException(HTTPException):
    """403 - Acceso prohibido - usuario autenticado pero sin permisos"""
    def __init__(
        self,
        detail: str = "Acceso prohibido - permisos insuficientes",
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
            headers=headers
        )


class InternalServerException(HTTPException):
    """500 - Error interno del servidor"""
    def __init__(
        self,
        detail: str = "Error interno del servidor",
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=_build_detail(detail, error_code),
            headers=headers
        )


__all__ = [
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "InternalServerException",
]
# Fin del archivo app/shared/utils/http_exceptions.py
