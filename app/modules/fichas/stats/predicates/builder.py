# -*- coding: utf-8 -*-
"""
app/modules/fichas/stats/predicates/builder.py

Traduce un FilterSpec + periodo resuelto al PredicateComposer de la consulta.

Orden estable de fragmentos: periodo, texto libre, campos simples,
ámbito geográfico, destaques, portales.

Autor: Gestor de Fichas
Fecha: 18/09/2026
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from app.modules.fichas.stats.filters import FilterSpec
from app.modules.fichas.stats.period import ResolvedPeriod

from .composer import Contains, Eq, ExistsLink, Fragment, MonthOfYear, PredicateComposer, Range
from .destaque import destaque_fragment
from .geo_scope import GeoScopeResolver

# Campos de texto sobre los que busca `q`
SEARCH_COLUMNS: tuple[str, ...] = ("nombre_ficha", "frase_publicitaria", "texto_divulgacion")


@dataclass(frozen=True)
class ComposedFilters:
    composer: PredicateComposer
    degraded: tuple[str, ...] = ()


def build_predicate(
    spec: FilterSpec,
    period: Optional[ResolvedPeriod],
    geo: GeoScopeResolver,
) -> ComposedFilters:
    """
    Compone el predicado completo. `degraded` lista los filtros que no se
    pudieron aplicar (p.ej. provincia inexistente).
    """
    fragments: list[Optional[Fragment]] = []
    degraded: list[str] = []

    if period is not None:
        fragments.append(Range("created_at", lower=period.start, upper=period.end))
        if period.month_of_year is not None:
            fragments.append(MonthOfYear("created_at", period.month_of_year))

    if spec.q:
        fragments.append(Contains(SEARCH_COLUMNS, spec.q))

    simple = (
        ("ambito_nivel", spec.ambito),
        ("tramite_tipo", spec.tramite_tipo),
        ("complejidad", spec.complejidad),
        ("existe_frase", spec.existe_frase),
        ("ambito_ccaa_id", spec.ccaa_id),
        ("trabajador_id", spec.trabajador_id),
        ("trabajador_subida_id", spec.trabajador_subida_id),
    )
    fragments.extend(Eq(col, value) for col, value in simple if value is not None)

    if spec.provincia_id is not None:
        geo_fragment = geo.resolve(spec.provincia_id)
        if geo_fragment is None:
            degraded.append("provincia_id")
        fragments.append(geo_fragment)

    fragments.append(destaque_fragment(spec.destaque))

    if spec.portales:
        fragments.append(ExistsLink("ficha_portal", "ficha_id", "portal_id", spec.portales))

    return ComposedFilters(composer=PredicateComposer(fragments), degraded=tuple(degraded))


__all__ = ["SEARCH_COLUMNS", "ComposedFilters", "build_predicate"]
# Fin del archivo app/modules/fichas/stats/predicates/builder.py
