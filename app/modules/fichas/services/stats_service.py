# -*- coding: utf-8 -*-
"""
app/modules/fichas/services/stats_service.py

Capa de aplicación de los informes de estadísticas de fichas.

Orquesta el pipeline completo, una dimensión por método:

    parámetros → FilterSpec → periodo → predicado (geo + destaques)
              → [buckets] → AggregationEngine → ResultAssembler → respuesta

No hay resultados parciales: cualquier error de una etapa aborta la
petición completa. Cada llamada deja una línea INFO `[stats:<dimension>]`
y sus métricas Prometheus.

Autor: Gestor de Fichas
Fecha: 21/09/2026
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from app.modules.fichas.enums import AMBITO_ORDER, TRAMITE_ORDER, StatsDimension
from app.modules.fichas.repositories import SqlProvinciaLookup, StatsRepository
from app.modules.fichas.schemas import (
    DistributionItem,
    DistributionMetadata,
    DistributionResponse,
    SeriesItem,
    SeriesKey,
    SeriesResponse,
    StatsRange,
)
from app.modules.fichas.stats.aggregators import LINK_PORTAL, LINK_TEMATICA, AggregationEngine
from app.modules.fichas.stats.assembler import (
    Distribution,
    ReferenceEntry,
    Series,
    assemble_distribution,
    assemble_series,
    order_portales,
)
from app.modules.fichas.stats.errors import InvalidParameterError, MissingRequiredParameterError
from app.modules.fichas.stats.filters import FilterSpec
from app.modules.fichas.stats.metrics import instrument_stats
from app.modules.fichas.stats.period import ResolvedPeriod, resolve_period
from app.modules.fichas.stats.predicates import GeoScopeResolver, PredicateComposer, build_predicate
from app.modules.fichas.stats.time_buckets import Bucket, generate_buckets

logger = logging.getLogger(__name__)

EXTRA_VARIOS = "varios_portales"
EXTRA_SIN_PORTAL = "sin_portal"


@dataclass(frozen=True)
class _Prepared:
    spec: FilterSpec
    period: Optional[ResolvedPeriod]
    composer: PredicateComposer
    degraded: Tuple[str, ...]


class StatsService:
    """Informes de estadísticas. Una instancia por petición (sesión propia)."""

    def __init__(self, db: Session, settings: Any):
        self.db = db
        self.settings = settings
        self.repo = StatsRepository(db)
        self.engine = AggregationEngine(self.repo)
        self.geo = GeoScopeResolver(SqlProvinciaLookup(db))

    # ------------------------------------------------------------------
    # Preparación común
    # ------------------------------------------------------------------
    @property
    def _fallback(self):
        return (self.settings.stats_fallback_from, self.settings.stats_fallback_to)

    @property
    def _portal_priority(self) -> Sequence[str]:
        return list(self.settings.stats_portal_priority or ())

    def _prepare(
        self,
        dimension: StatsDimension,
        params: Mapping[str, Optional[str]],
        *,
        require_anio: bool = False,
    ) -> _Prepared:
        spec = FilterSpec.from_params(params)
        if spec.ignored:
            logger.warning("[stats:%s] Parámetros ignorados por valor no válido: %s", dimension, list(spec.ignored))

        if require_anio and spec.anio is None:
            raise MissingRequiredParameterError(
                f"El informe '{dimension}' requiere el parámetro 'anio'",
                parameter="anio",
            )

        # Sin periodo pedido, una distribución no necesita acotar created_at
        needs_period = dimension.is_time_series or spec.anio is not None or spec.has_free_range or spec.mes is not None
        period = resolve_period(spec, self.repo.observed_span, self._fallback) if needs_period else None

        composed = build_predicate(spec, period, self.geo)
        return _Prepared(spec=spec, period=period, composer=composed.composer, degraded=composed.degraded)

    def _buckets(self, prepared: _Prepared) -> List[Bucket]:
        period = prepared.period
        buckets = generate_buckets(
            period.start,
            period.end,
            period.granularity,
            max_months=self.settings.stats_max_months,
            month_filter=period.month_of_year,
        )
        if not buckets:
            raise InvalidParameterError("El periodo solicitado no contiene ningún mes", parameter="created_desde")
        return buckets

    # ------------------------------------------------------------------
    # Referencias
    # ------------------------------------------------------------------
    def _portal_reference(self, spec: FilterSpec) -> List[ReferenceEntry]:
        entries = [
            ReferenceEntry(key=p.id, label=p.nombre, id=p.id, slug=p.slug, code=p.slug)
            for p in self.repo.list_portales(only_ids=spec.portales)
        ]
        return order_portales(entries, self._portal_priority)

    def _tematica_reference(self) -> List[ReferenceEntry]:
        return [
            ReferenceEntry(key=t.id, label=t.nombre, id=t.id, slug=t.slug)
            for t in self.repo.list_tematicas()
        ]

    @staticmethod
    def _ambito_reference() -> List[ReferenceEntry]:
        return [ReferenceEntry(key=a.value, label=a.label) for a in AMBITO_ORDER]

    @staticmethod
    def _tramite_reference() -> List[ReferenceEntry]:
        return [ReferenceEntry(key=t.value, label=t.label) for t in TRAMITE_ORDER]

    # ------------------------------------------------------------------
    # Construcción de respuestas
    # ------------------------------------------------------------------
    @staticmethod
    def _range(period: Optional[ResolvedPeriod]) -> Optional[StatsRange]:
        if period is None:
            return None
        return StatsRange(desde=period.start, hasta=period.end, origen=period.source)

    def _distribution_response(
        self, dimension: StatsDimension, prepared: _Prepared, dist: Distribution
    ) -> DistributionResponse:
        logger.info(
            "[stats:%s] grupos=%d fichas=%d asignaciones=%d",
            dimension,
            dist.total_entries,
            dist.total_unique_records,
            dist.total_assignments,
        )
        return DistributionResponse(
            data=[
                DistributionItem(
                    group_key=row.entry.group_key,
                    label=row.entry.label,
                    total=row.total,
                    id=row.entry.id,
                    slug=row.entry.slug,
                    counts=row.counts,
                )
                for row in dist.rows
            ],
            metadata=DistributionMetadata(
                dimension=dimension.value,
                total_unique_records=dist.total_unique_records,
                total_assignments=dist.total_assignments,
                total_entries=dist.total_entries,
                range=self._range(prepared.period),
                ignored_params=list(prepared.spec.ignored) or None,
                degraded_filters=list(prepared.degraded) or None,
            ),
        )

    def _series_response(
        self, dimension: StatsDimension, prepared: _Prepared, series: Series
    ) -> SeriesResponse:
        period = prepared.period
        logger.info(
            "[stats:%s] buckets=%d granularidad=%s fichas=%d asignaciones=%d",
            dimension,
            len(series.items),
            period.granularity,
            series.total_global,
            series.total_assignments,
        )
        items = []
        for bucket in series.items:
            items.append(
                SeriesItem(
                    bucket=bucket.key,
                    month=bucket.month,
                    year=bucket.year,
                    counts=bucket.counts,
                    total_for_bucket=bucket.total,
                    assignments_for_bucket=bucket.assignments,
                    varios_portales=bucket.extras.get(EXTRA_VARIOS),
                    sin_portal=bucket.extras.get(EXTRA_SIN_PORTAL),
                )
            )
        return SeriesResponse(
            dimension=dimension.value,
            granularity=period.granularity,
            range=self._range(period),
            series=[SeriesKey(key=e.group_key, label=e.label, id=e.id) for e in series.reference],
            items=items,
            totals=series.totals,
            total_global=series.total_global,
            total_assignments=series.total_assignments,
            varios_portales=series.extras_totals.get(EXTRA_VARIOS),
            sin_portal=series.extras_totals.get(EXTRA_SIN_PORTAL),
            ignored_params=list(prepared.spec.ignored) or None,
            degraded_filters=list(prepared.degraded) or None,
        )

    # ------------------------------------------------------------------
    # Dimensiones sin tiempo
    # ------------------------------------------------------------------
    @instrument_stats(StatsDimension.BY_PORTAL.value)
    def portales(self, params: Mapping[str, Optional[str]]) -> DistributionResponse:
        dimension = StatsDimension.BY_PORTAL
        prepared = self._prepare(dimension, params)
        restrict = prepared.spec.portales

        groups = self.engine.by_link(prepared.composer, LINK_PORTAL, restrict)
        dist = assemble_distribution(
            self._portal_reference(prepared.spec),
            {k: g.distinct for k, g in groups.items()},
            assignments={k: g.assignments for k, g in groups.items()},
            dimension=dimension,
            total_unique_records=self.engine.distinct_total_linked(prepared.composer, LINK_PORTAL, restrict),
        )
        return self._distribution_response(dimension, prepared, dist)

    @instrument_stats(StatsDimension.BY_TEMATICA.value)
    def tematicas(self, params: Mapping[str, Optional[str]]) -> DistributionResponse:
        dimension = StatsDimension.BY_TEMATICA
        prepared = self._prepare(dimension, params)

        groups = self.engine.by_link(prepared.composer, LINK_TEMATICA)
        dist = assemble_distribution(
            self._tematica_reference(),
            {k: g.distinct for k, g in groups.items()},
            assignments={k: g.assignments for k, g in groups.items()},
            dimension=dimension,
            total_unique_records=self.engine.distinct_total_linked(prepared.composer, LINK_TEMATICA),
            order_by_total=True,
        )
        return self._distribution_response(dimension, prepared, dist)

    @instrument_stats(StatsDimension.BY_AMBITO.value)
    def ambitos(self, params: Mapping[str, Optional[str]]) -> DistributionResponse:
        dimension = StatsDimension.BY_AMBITO
        prepared = self._prepare(dimension, params)

        dist = assemble_distribution(
            self._ambito_reference(),
            self.engine.by_ambito(prepared.composer),
            dimension=dimension,
            total_unique_records=self.engine.distinct_total(prepared.composer),
        )
        return self._distribution_response(dimension, prepared, dist)

    @instrument_stats(StatsDimension.BY_TRAMITE.value)
    def tramite(self, params: Mapping[str, Optional[str]]) -> DistributionResponse:
        dimension = StatsDimension.BY_TRAMITE
        prepared = self._prepare(dimension, params)

        dist = assemble_distribution(
            self._tramite_reference(),
            self.engine.by_tramite(prepared.composer),
            dimension=dimension,
            total_unique_records=self.engine.distinct_total(prepared.composer),
        )
        return self._distribution_response(dimension, prepared, dist)

    @instrument_stats(StatsDimension.BY_PORTAL_AMBITO.value)
    def ambitos_por_portal(self, params: Mapping[str, Optional[str]]) -> DistributionResponse:
        dimension = StatsDimension.BY_PORTAL_AMBITO
        prepared = self._prepare(dimension, params)
        restrict = prepared.spec.portales

        groups = self.engine.by_link(prepared.composer, LINK_PORTAL, restrict)
        sub_counts: Dict[int, Dict[str, int]] = {}
        for (portal_id, ambito), n in self.engine.by_link_and_ambito(prepared.composer, LINK_PORTAL, restrict).items():
            sub_counts.setdefault(portal_id, {})[ambito] = n

        dist = assemble_distribution(
            self._portal_reference(prepared.spec),
            {k: g.distinct for k, g in groups.items()},
            assignments={k: g.assignments for k, g in groups.items()},
            sub_counts=sub_counts,
            sub_keys=[a.value for a in AMBITO_ORDER],
            dimension=dimension,
            total_unique_records=self.engine.distinct_total_linked(prepared.composer, LINK_PORTAL, restrict),
        )
        return self._distribution_response(dimension, prepared, dist)

    # ------------------------------------------------------------------
    # Series temporales
    # ------------------------------------------------------------------
    @instrument_stats(StatsDimension.BY_MONTH_PORTAL.value)
    def portales_por_mes(self, params: Mapping[str, Optional[str]]) -> SeriesResponse:
        dimension = StatsDimension.BY_MONTH_PORTAL
        prepared = self._prepare(dimension, params)
        buckets = self._buckets(prepared)

        raw = self.engine.series_by_link(
            prepared.composer, LINK_PORTAL, prepared.period.granularity, prepared.spec.portales
        )
        series = assemble_series(
            buckets,
            self._portal_reference(prepared.spec),
            raw.cells,
            raw.bucket_distinct,
            dimension=dimension,
        )
        return self._series_response(dimension, prepared, series)

    @instrument_stats(StatsDimension.BY_MONTH_TEMATICA.value)
    def tematicas_por_mes(self, params: Mapping[str, Optional[str]]) -> SeriesResponse:
        dimension = StatsDimension.BY_MONTH_TEMATICA
        prepared = self._prepare(dimension, params, require_anio=True)
        buckets = self._buckets(prepared)

        raw = self.engine.series_by_link(prepared.composer, LINK_TEMATICA, prepared.period.granularity)
        series = assemble_series(
            buckets,
            self._tematica_reference(),
            raw.cells,
            raw.bucket_distinct,
            dimension=dimension,
            order_by_total=True,
        )
        return self._series_response(dimension, prepared, series)

    @instrument_stats(StatsDimension.BY_MONTH.value)
    def fichas_por_mes(self, params: Mapping[str, Optional[str]]) -> SeriesResponse:
        """
        Fichas por mes. Cada ficha cuenta una vez en su mes y además en
        una sola categoría: exclusiva de un portal (columna del portal),
        `varios_portales` (2 o más) o `sin_portal` (ninguno).
        """
        dimension = StatsDimension.BY_MONTH
        prepared = self._prepare(dimension, params)
        buckets = self._buckets(prepared)

        rows = self.engine.series_exclusivity(
            prepared.composer, prepared.period.granularity, prepared.spec.portales
        )

        cells: Dict[Tuple[Any, Any], int] = {}
        totals: Dict[Any, int] = {}
        assignments: Dict[Any, int] = {}
        extras: Dict[Any, Dict[str, int]] = {b.key: {EXTRA_VARIOS: 0, EXTRA_SIN_PORTAL: 0} for b in buckets}
        for row in rows:
            totals[row.bucket] = totals.get(row.bucket, 0) + row.fichas
            assignments[row.bucket] = assignments.get(row.bucket, 0) + row.n_portales * row.fichas
            extra = extras.setdefault(row.bucket, {EXTRA_VARIOS: 0, EXTRA_SIN_PORTAL: 0})
            if row.n_portales == 0:
                extra[EXTRA_SIN_PORTAL] += row.fichas
            elif row.n_portales == 1:
                key = (row.bucket, row.portal_id)
                cells[key] = cells.get(key, 0) + row.fichas
            else:
                extra[EXTRA_VARIOS] += row.fichas

        series = assemble_series(
            buckets,
            self._portal_reference(prepared.spec),
            cells,
            totals,
            dimension=dimension,
            bucket_assignments=assignments,
            bucket_extras=extras,
        )
        return self._series_response(dimension, prepared, series)


__all__ = ["StatsService"]
# Fin del archivo app/modules/fichas/services/stats_service.py
