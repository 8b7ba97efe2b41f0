# -*- coding: utf-8 -*-
"""
app/modules/fichas/schemas/__init__.py

Autor: Gestor de Fichas
Fecha: 21/09/2026
"""

from .stats_schemas import (
    DistributionItem,
    DistributionMetadata,
    DistributionResponse,
    SeriesItem,
    SeriesKey,
    SeriesResponse,
    StatsRange,
)

__all__ = [
    "DistributionItem",
    "DistributionMetadata",
    "DistributionResponse",
    "SeriesItem",
    "SeriesKey",
    "SeriesResponse",
    "StatsRange",
]
# Fin del archivo app/modules/fichas/schemas/__init__.py
