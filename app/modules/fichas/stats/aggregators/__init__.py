# -*- coding: utf-8 -*-
"""
app/modules/fichas/stats/aggregators/__init__.py

Autor: Gestor de Fichas
Fecha: 19/09/2026
"""

from .engine import (
    AggregationEngine,
    ExclusivityRow,
    GroupCount,
    LINK_PORTAL,
    LINK_TEMATICA,
    LinkSpec,
    SeriesCells,
    normalize_bucket,
)

__all__ = [
    "AggregationEngine",
    "ExclusivityRow",
    "GroupCount",
    "LINK_PORTAL",
    "LINK_TEMATICA",
    "LinkSpec",
    "SeriesCells",
    "normalize_bucket",
]
# Fin del archivo app/modules/fichas/stats/aggregators/__init__.py
