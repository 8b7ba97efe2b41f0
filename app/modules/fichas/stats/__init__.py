# -*- coding: utf-8 -*-
"""
app/modules/fichas/stats/__init__.py

Motor de estadísticas de fichas.

Etapas (de hojas a raíz):
- filters       : FilterSpec (normalización de parámetros)
- period        : resolución del periodo [desde, hasta)
- predicates    : GeoScopeResolver, TagSetFilter y PredicateComposer
- time_buckets  : secuencia de meses sin huecos
- aggregators   : AggregationEngine (conteos distintos y asignaciones)
- assembler     : ResultAssembler (relleno con ceros y orden)

Aquí solo se reexportan las etapas sin dependencias de base de datos;
`predicates`, `aggregators` y `assembler` se importan por su ruta.

Autor: Gestor de Fichas
Fecha: 17/09/2026
"""

from .errors import (
    InvalidParameterError,
    MissingRequiredParameterError,
    ReferentialIntegrityError,
    StatsError,
    UpstreamStoreError,
)
from .filters import FilterSpec
from .time_buckets import Bucket, generate_buckets, months_spanned
from .period import ResolvedPeriod, resolve_period

__all__ = [
    "StatsError",
    "InvalidParameterError",
    "MissingRequiredParameterError",
    "UpstreamStoreError",
    "ReferentialIntegrityError",
    "FilterSpec",
    "Bucket",
    "generate_buckets",
    "months_spanned",
    "ResolvedPeriod",
    "resolve_period",
]
# Fin del archivo app/modules/fichas/stats/__init__.py
