# -*- coding: utf-8 -*-
"""
app/modules/fichas/stats/period.py

Resolución del periodo de una consulta a un rango semiabierto [desde, hasta).

Precedencia:
1. `anio` (+ `mes` opcional): año natural o mes concreto.
2. Rango libre `created_desde` / `created_hasta`; el extremo que falte se
   completa con el periodo observado en los datos, ampliado lo necesario
   para que nunca quede invertido (desde posterior a los datos → 0 fichas).
3. Sin nada: periodo observado (MIN/MAX de created_at, con hasta = MAX + 1 día).
   Si no hay datos, rango de reserva (STATS_FALLBACK_FROM / STATS_FALLBACK_TO).

`mes` sin `anio` no acota el rango: se aplica como filtro de mes del año.

Autor: Gestor de Fichas
Fecha: 18/09/2026
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Callable, Optional

from app.modules.fichas.enums import SeriesGranularity

from .errors import InvalidParameterError
from .filters import FilterSpec

# (MIN(created_at), MAX(created_at)) o None si no hay fichas
SpanProvider = Callable[[], Optional[tuple[datetime, datetime]]]


@dataclass(frozen=True)
class ResolvedPeriod:
    start: datetime
    end: datetime  # exclusivo
    granularity: SeriesGranularity
    source: str  # "anio" | "rango" | "datos" | "reserva"
    month_of_year: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return self.start >= self.end


def _first_of_month(year: int, month: int) -> datetime:
    return datetime(year, month, 1)


def _next_month(year: int, month: int) -> datetime:
    return datetime(year + 1, 1, 1) if month == 12 else datetime(year, month + 1, 1)


def _shift_day(moment: datetime, days: int) -> datetime:
    """Suma días saturando en los límites de datetime (p. ej. hasta=9999-12-31)."""
    try:
        return moment + timedelta(days=days)
    except OverflowError:
        return datetime.max if days > 0 else datetime.min


def resolve_period(
    spec: FilterSpec,
    observed_span: SpanProvider,
    fallback: tuple[date, date],
) -> ResolvedPeriod:
    """
    Calcula el periodo efectivo de `spec`.

    `observed_span` solo se invoca si hace falta (y el repositorio lo cachea).

    Raises:
        InvalidParameterError: si el rango resultante queda vacío o invertido.
    """
    granularity = spec.granularidad or (
        SeriesGranularity.ABSOLUTE_MONTH if spec.anio else SeriesGranularity.MONTH_OF_YEAR
    )

    if spec.anio:
        if spec.mes:
            start = _first_of_month(spec.anio, spec.mes)
            end = _next_month(spec.anio, spec.mes)
        else:
            start = datetime(spec.anio, 1, 1)
            end = datetime(spec.anio + 1, 1, 1)
        return ResolvedPeriod(start=start, end=end, granularity=granularity, source="anio")

    span_cache: dict[str, tuple[datetime, datetime, str]] = {}

    def span() -> tuple[datetime, datetime, str]:
        if "span" not in span_cache:
            observed = observed_span()
            if observed is None or observed[0] is None or observed[1] is None:
                span_cache["span"] = (
                    datetime.combine(fallback[0], time.min),
                    datetime.combine(fallback[1], time.min),
                    "reserva",
                )
            else:
                span_cache["span"] = (observed[0], _shift_day(observed[1], +1), "datos")
        return span_cache["span"]

    if spec.has_free_range:
        if spec.created_hasta is not None:
            # 23:59:59 inclusivo → medianoche del día siguiente exclusiva
            end = _shift_day(datetime.combine(spec.created_hasta.date(), time.min), +1)
        if spec.created_desde is not None:
            start = spec.created_desde
        else:
            # Extremo no informado: nunca invierte el rango del llamador
            start = min(span()[0], _shift_day(end, -1))
        if spec.created_hasta is None:
            end = max(span()[1], _shift_day(start, +1))
        source = "rango"
    else:
        start, end, source = span()

    period = ResolvedPeriod(
        start=start,
        end=end,
        granularity=granularity,
        source=source,
        month_of_year=spec.mes,
    )
    if period.is_empty:
        raise InvalidParameterError(
            f"Rango de fechas vacío o invertido: desde={start.isoformat()} hasta={end.isoformat()}",
            parameter="created_desde",
        )
    return period


__all__ = ["ResolvedPeriod", "SpanProvider", "resolve_period"]
# Fin del archivo app/modules/fichas/stats/period.py
