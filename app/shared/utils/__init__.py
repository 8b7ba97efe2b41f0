# -*- coding: utf-8 -*-
"""
app/shared/utils/__init__.py

Exportación de utilidades comunes de la API.

Autor: Gestor de Fichas
Fecha: 15/09/2026
"""

from .base_models import UTF8SafeModel, Field
from .http_exceptions import (
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    InternalServerException,
)
from .json_response import UTF8JSONResponse, json_response_utf8

__all__ = [
    "UTF8SafeModel",
    "Field",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "InternalServerException",
    "UTF8JSONResponse",
    "json_response_utf8",
]
# Fin del archivo app/shared/utils/__init__.py
