# -*- coding: utf-8 -*-
"""
app/modules/fichas/stats/errors.py

Excepciones del motor de estadísticas.

Los parámetros con valor no reconocido no lanzan excepción: se ignoran
(quedan registrados en FilterSpec.ignored). Solo es error de uso lo que
no permite construir una consulta coherente.

Mapeo HTTP (lo hace la capa de rutas):
- InvalidParameterError          → 400
- MissingRequiredParameterError  → 400
- UpstreamStoreError             → 500
- ReferentialIntegrityError      → 500

Autor: Gestor de Fichas
Fecha: 17/09/2026
"""

from __future__ import annotations

from typing import Optional


class StatsError(Exception):
    """Base de los errores del motor de estadísticas."""

    error_code: str = "stats_error"

    def __init__(self, message: str, *, parameter: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.parameter = parameter


class InvalidParameterError(StatsError):
    """Rango vacío o invertido, o periodo que excede el máximo de meses."""

    error_code = "invalid_parameter"


class MissingRequiredParameterError(StatsError):
    """Falta un parámetro que el endpoint exige (p.ej. `anio`)."""

    error_code = "missing_required_parameter"


class UpstreamStoreError(StatsError):
    """Falló la lectura contra la base de datos."""

    error_code = "upstream_store_error"


class ReferentialIntegrityError(StatsError):
    """Una clave agregada no tiene entrada de referencia ni bucket."""

    error_code = "referential_integrity_error"


__all__ = [
    "StatsError",
    "InvalidParameterError",
    "MissingRequiredParameterError",
    "UpstreamStoreError",
    "ReferentialIntegrityError",
]
# Fin del archivo app/modules/fichas/stats/errors.py
