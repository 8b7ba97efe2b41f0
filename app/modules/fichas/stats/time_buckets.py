# -*- coding: utf-8 -*-
"""
app/modules/fichas/stats/time_buckets.py

TimeBucketGenerator: secuencia contigua de meses para un rango [desde, hasta).

- absolute_month: una clave "YYYY-MM" por cada mes natural desde el mes que
  contiene `desde` hasta el que contiene `hasta - 1 tick`, sin huecos.
- month_of_year: los meses 1..12 que toca el rango, ordenados y sin repetir
  o solo el mes concreto pedido con `mes`.

Rango vacío o invertido → secuencia vacía. El número de meses se limita con
`max_months` (STATS_MAX_MONTHS) porque la salida crece con el periodo.

Autor: Gestor de Fichas
Fecha: 18/09/2026
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional, Union

from app.modules.fichas.enums import SeriesGranularity

from .errors import InvalidParameterError

BucketKey = Union[str, int]

_ONE_TICK = timedelta(microseconds=1)


@dataclass(frozen=True)
class Bucket:
    """Mes de la serie. `year` es None en granularidad month_of_year."""

    key: BucketKey
    month: int
    year: Optional[int] = None
    counts: dict[str, int] = field(default_factory=dict)
    total: int = 0
    assignments: int = 0
    extras: dict[str, int] = field(default_factory=dict)


def _month_index(moment: datetime) -> int:
    return moment.year * 12 + (moment.month - 1)


def months_spanned(start: datetime, end: datetime) -> int:
    """Número de meses naturales que toca [start, end); 0 si el rango está vacío."""
    if start >= end:
        return 0
    return _month_index(end - _ONE_TICK) - _month_index(start) + 1


def month_key(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def generate_buckets(
    start: datetime,
    end: datetime,
    granularity: SeriesGranularity = SeriesGranularity.ABSOLUTE_MONTH,
    *,
    max_months: int = 600,
    month_filter: Optional[int] = None,
) -> list[Bucket]:
    """
    Genera los buckets de la serie.

    Raises:
        InvalidParameterError: si el rango supera `max_months` meses
            (solo en absolute_month; month_of_year está acotado a 12).
    """
    span = months_spanned(start, end)
    if span == 0:
        return []

    first = _month_index(start)

    if granularity is SeriesGranularity.MONTH_OF_YEAR:
        if month_filter is not None:
            # El mes pedido siempre tiene su bucket, aunque el rango no lo toque
            return [Bucket(key=month_filter, month=month_filter)]
        months = sorted({((first + i) % 12) + 1 for i in range(min(span, 12))})
        return [Bucket(key=m, month=m) for m in months]

    if span > max_months:
        raise InvalidParameterError(
            f"El periodo solicitado abarca {span} meses; el máximo permitido es {max_months}",
            parameter="created_desde",
        )

    buckets = []
    for idx in range(first, first + span):
        year, month0 = divmod(idx, 12)
        buckets.append(Bucket(key=month_key(year, month0 + 1), month=month0 + 1, year=year))
    return buckets


__all__ = ["Bucket", "BucketKey", "months_spanned", "month_key", "generate_buckets"]
# Fin del archivo app/modules/fichas/stats/time_buckets.py
