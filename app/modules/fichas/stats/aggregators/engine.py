# -*- coding: utf-8 -*-
"""
app/modules/fichas/stats/aggregators/engine.py

AggregationEngine: conteos agrupados sobre el predicado compuesto.

Todas las cuentas por grupo son de fichas distintas (COUNT(DISTINCT f.id)),
nunca de filas, porque los JOIN con ficha_portal / ficha_tematica
multiplican filas. Cuando la dimensión es una de esas relaciones se
calcula además el número de asignaciones (filas ficha × entidad).

Cada consulta usa un único SqlRenderContext: los parámetros del JOIN y
del WHERE comparten la misma numeración.

Autor: Gestor de Fichas
Fecha: 19/09/2026
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

from sqlalchemy import distinct, func, select

from app.modules.fichas.enums import SeriesGranularity
from app.modules.fichas.models import Ficha
from app.modules.fichas.repositories import StatsRepository
from app.modules.fichas.stats.predicates import In, PredicateComposer, SqlRenderContext, table_resolver
from app.modules.fichas.stats.sql_dialect import bucket_expr


@dataclass(frozen=True)
class LinkSpec:
    """Tabla puente many-to-many entre fichas y una entidad de referencia."""

    table: str
    alias: str
    fk: str
    column: str

    @property
    def qualified(self) -> str:
        return f"{self.alias}.{self.column}"

    def join_sql(self) -> str:
        return f"JOIN {self.table} {self.alias} ON {self.alias}.{self.fk} = f.id"


LINK_PORTAL = LinkSpec(table="ficha_portal", alias="fp", fk="ficha_id", column="portal_id")
LINK_TEMATICA = LinkSpec(table="ficha_tematica", alias="ft", fk="ficha_id", column="tematica_id")


@dataclass(frozen=True)
class GroupCount:
    distinct: int
    assignments: int


@dataclass(frozen=True)
class SeriesCells:
    """(bucket, clave) → fichas distintas, y fichas distintas por bucket."""

    cells: Dict[Tuple[Any, Any], int]
    bucket_distinct: Dict[Any, int]


@dataclass(frozen=True)
class ExclusivityRow:
    bucket: Any
    n_portales: int
    portal_id: Any
    fichas: int


def normalize_bucket(raw: Any, granularity: SeriesGranularity) -> Any:
    if granularity is SeriesGranularity.MONTH_OF_YEAR:
        return int(raw)
    return str(raw)


class AggregationEngine:
    """
    Ejecuta cada dimensión contra el repositorio y devuelve pares dispersos
    (clave, cuenta). El relleno con ceros y el orden los pone ResultAssembler.
    """

    def __init__(self, repo: StatsRepository):
        self.repo = repo
        self.dialect = repo.dialect_name

    def _ctx(self) -> SqlRenderContext:
        return SqlRenderContext(self.dialect)

    @staticmethod
    def _restricted(composer: PredicateComposer, link: LinkSpec, restrict_ids: Sequence[int]) -> PredicateComposer:
        if not restrict_ids:
            return composer
        return composer.extended(In(link.qualified, tuple(restrict_ids)))

    # ---------------------------------------------------------------------
    # Totales
    # ---------------------------------------------------------------------
    def distinct_total(self, composer: PredicateComposer) -> int:
        ctx = self._ctx()
        where = ctx.render(composer)
        sql = f"SELECT COUNT(DISTINCT f.id) FROM fichas f WHERE {where}"
        return int(self.repo.fetch_scalar(sql, ctx.bindparams()) or 0)

    def distinct_total_linked(
        self, composer: PredicateComposer, link: LinkSpec, restrict_ids: Sequence[int] = ()
    ) -> int:
        """Fichas distintas con al menos una asignación (opcionalmente restringida)."""
        ctx = self._ctx()
        where = ctx.render(self._restricted(composer, link, restrict_ids))
        sql = f"SELECT COUNT(DISTINCT f.id) FROM fichas f {link.join_sql()} WHERE {where}"
        return int(self.repo.fetch_scalar(sql, ctx.bindparams()) or 0)

    # ---------------------------------------------------------------------
    # Dimensiones sin tiempo
    # ---------------------------------------------------------------------
    def by_link(
        self, composer: PredicateComposer, link: LinkSpec, restrict_ids: Sequence[int] = ()
    ) -> Dict[int, GroupCount]:
        """Por portal o temática: fichas distintas y asignaciones por entidad."""
        ctx = self._ctx()
        where = ctx.render(self._restricted(composer, link, restrict_ids))
        sql = (
            f"SELECT {link.qualified} AS group_key, "
            f"COUNT(DISTINCT f.id) AS n_distinct, COUNT(*) AS n_rows "
            f"FROM fichas f {link.join_sql()} "
            f"WHERE {where} "
            f"GROUP BY {link.qualified}"
        )
        rows = self.repo.fetch_all(sql, ctx.bindparams())
        return {int(r[0]): GroupCount(distinct=int(r[1] or 0), assignments=int(r[2] or 0)) for r in rows}

    def by_ambito(self, composer: PredicateComposer) -> Dict[str, int]:
        ctx = self._ctx()
        where = ctx.render(composer)
        sql = (
            "SELECT f.ambito_nivel AS group_key, COUNT(DISTINCT f.id) AS n "
            f"FROM fichas f WHERE {where} "
            "GROUP BY f.ambito_nivel"
        )
        rows = self.repo.fetch_all(sql, ctx.bindparams())
        return {str(r[0]): int(r[1] or 0) for r in rows}

    def by_tramite(self, composer: PredicateComposer) -> Dict[str, int]:
        """Por tipo de trámite, construida con SQLAlchemy Core en lugar de texto."""
        fichas = Ficha.__table__
        clause = composer.to_clause(table_resolver(fichas))
        stmt = (
            select(fichas.c.tramite_tipo, func.count(distinct(fichas.c.id)))
            .where(clause, fichas.c.tramite_tipo.is_not(None))
            .group_by(fichas.c.tramite_tipo)
        )
        rows = self.repo.execute_core(stmt)
        return {str(r[0]): int(r[1] or 0) for r in rows}

    def by_link_and_ambito(
        self, composer: PredicateComposer, link: LinkSpec, restrict_ids: Sequence[int] = ()
    ) -> Dict[Tuple[int, str], int]:
        ctx = self._ctx()
        where = ctx.render(self._restricted(composer, link, restrict_ids))
        sql = (
            f"SELECT {link.qualified} AS group_key, f.ambito_nivel AS ambito, COUNT(DISTINCT f.id) AS n "
            f"FROM fichas f {link.join_sql()} "
            f"WHERE {where} "
            f"GROUP BY {link.qualified}, f.ambito_nivel"
        )
        rows = self.repo.fetch_all(sql, ctx.bindparams())
        return {(int(r[0]), str(r[1])): int(r[2] or 0) for r in rows}

    # ---------------------------------------------------------------------
    # Series temporales
    # ---------------------------------------------------------------------
    def series_by_link(
        self,
        composer: PredicateComposer,
        link: LinkSpec,
        granularity: SeriesGranularity,
        restrict_ids: Sequence[int] = (),
    ) -> SeriesCells:
        """Mes × portal (o temática)."""
        bucket = bucket_expr(self.dialect, "f.created_at", granularity)
        predicate = self._restricted(composer, link, restrict_ids)

        ctx = self._ctx()
        where = ctx.render(predicate)
        cells_sql = (
            f"SELECT {bucket} AS bucket, {link.qualified} AS group_key, COUNT(DISTINCT f.id) AS n "
            f"FROM fichas f {link.join_sql()} "
            f"WHERE {where} "
            f"GROUP BY {bucket}, {link.qualified}"
        )
        cell_rows = self.repo.fetch_all(cells_sql, ctx.bindparams())

        ctx = self._ctx()
        where = ctx.render(predicate)
        totals_sql = (
            f"SELECT {bucket} AS bucket, COUNT(DISTINCT f.id) AS n "
            f"FROM fichas f {link.join_sql()} "
            f"WHERE {where} "
            f"GROUP BY {bucket}"
        )
        total_rows = self.repo.fetch_all(totals_sql, ctx.bindparams())

        return SeriesCells(
            cells={(normalize_bucket(r[0], granularity), int(r[1])): int(r[2] or 0) for r in cell_rows},
            bucket_distinct={normalize_bucket(r[0], granularity): int(r[1] or 0) for r in total_rows},
        )

    def series_exclusivity(
        self,
        composer: PredicateComposer,
        granularity: SeriesGranularity,
        restrict_ids: Sequence[int] = (),
    ) -> List[ExclusivityRow]:
        """
        Por mes, cuántas fichas tienen 0, 1 (y cuál) o varios portales.
        Cada ficha aparece una sola vez (subconsulta agrupada por f.id).
        """
        bucket = bucket_expr(self.dialect, "f.created_at", granularity)
        ctx = self._ctx()

        on = f"{LINK_PORTAL.alias}.{LINK_PORTAL.fk} = f.id"
        if restrict_ids:
            on += " AND " + ctx.render(In(LINK_PORTAL.qualified, tuple(restrict_ids)))
        where = ctx.render(composer)

        inner = (
            f"SELECT {bucket} AS bucket, f.id AS ficha_id, "
            f"COUNT({LINK_PORTAL.qualified}) AS n_portales, MIN({LINK_PORTAL.qualified}) AS portal_id "
            f"FROM fichas f LEFT JOIN {LINK_PORTAL.table} {LINK_PORTAL.alias} ON {on} "
            f"WHERE {where} "
            f"GROUP BY f.id, {bucket}"
        )
        sql = (
            "SELECT x.bucket, x.n_portales, x.portal_id, COUNT(*) AS n "
            f"FROM ({inner}) x "
            "GROUP BY x.bucket, x.n_portales, x.portal_id"
        )
        rows = self.repo.fetch_all(sql, ctx.bindparams())
        return [
            ExclusivityRow(
                bucket=normalize_bucket(r[0], granularity),
                n_portales=int(r[1] or 0),
                portal_id=int(r[2]) if r[2] is not None else None,
                fichas=int(r[3] or 0),
            )
            for r in rows
        ]


__all__ = [
    "LinkSpec",
    "LINK_PORTAL",
    "LINK_TEMATICA",
    "GroupCount",
    "SeriesCells",
    "ExclusivityRow",
    "normalize_bucket",
    "AggregationEngine",
]
# Fin del archivo app/modules/fichas/stats/aggregators/engine.py
