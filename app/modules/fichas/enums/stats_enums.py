# -*- coding: utf-8 -*-
"""
app/modules/fichas/enums/stats_enums.py

Dimensiones de agregación y granularidades de serie temporal.

Autor: Gestor de Fichas
Fecha: 16/09/2026
"""

from enum import StrEnum


class StatsDimension(StrEnum):
    BY_PORTAL = "portales"
    BY_TEMATICA = "tematicas"
    BY_AMBITO = "ambitos"
    BY_TRAMITE = "tramite"
    BY_PORTAL_AMBITO = "ambitos_por_portal"
    BY_MONTH_PORTAL = "portales_por_mes"
    BY_MONTH = "fichas_por_mes"
    BY_MONTH_TEMATICA = "tematicas_por_mes"

    @property
    def is_time_series(self) -> bool:
        return self in (
            StatsDimension.BY_MONTH_PORTAL,
            StatsDimension.BY_MONTH,
            StatsDimension.BY_MONTH_TEMATICA,
        )


class SeriesGranularity(StrEnum):
    """
    - absolute_month : claves "YYYY-MM"
    - month_of_year  : claves 1..12 (mes sin año)
    """
    ABSOLUTE_MONTH = "absolute_month"
    MONTH_OF_YEAR = "month_of_year"


__all__ = ["StatsDimension", "SeriesGranularity"]
# Fin del archivo app/modules/fichas/enums/stats_enums.py
