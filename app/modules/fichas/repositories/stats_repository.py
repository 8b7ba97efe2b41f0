# -*- coding: utf-8 -*-
"""
app/modules/fichas/repositories/stats_repository.py

Acceso de solo lectura a la base de datos para el motor de estadísticas.

- StatsRepository: ejecuta consultas parametrizadas (texto + bindparams o
  Core), expone el periodo observado (cacheado por instancia, es decir,
  por petición) y las listas de referencia de portales y temáticas.
- SqlProvinciaLookup: provincia → comunidad autónoma.

Cualquier SQLAlchemyError se envuelve en UpstreamStoreError; no hay
reintentos.

Autor: Gestor de Fichas
Fecha: 19/09/2026
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, List, Optional, Sequence, Tuple

from sqlalchemy import func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import BindParameter

from app.modules.fichas.models import Ficha, Portal, Provincia, Tematica
from app.modules.fichas.stats.errors import UpstreamStoreError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PortalRef:
    id: int
    slug: str
    nombre: str


@dataclass(frozen=True)
class TematicaRef:
    id: int
    nombre: str
    slug: Optional[str] = None


def _naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class StatsRepository:
    """
    Lecturas para las agregaciones. Una instancia por petición.
    """

    def __init__(self, db: Session):
        self.db = db
        self._span_loaded = False
        self._span: Optional[Tuple[datetime, datetime]] = None

    @property
    def dialect_name(self) -> str:
        return self.db.get_bind().dialect.name

    # ---------------------------------------------------------------------
    # Ejecución
    # ---------------------------------------------------------------------
    def fetch_all(self, sql: str, params: Sequence[BindParameter] = ()) -> List[Any]:
        stmt = text(sql).bindparams(*params) if params else text(sql)
        try:
            return list(self.db.execute(stmt).all())
        except SQLAlchemyError as e:
            logger.error("[stats:repo] Falló la consulta de agregación: %s", e)
            raise UpstreamStoreError("Error leyendo estadísticas de la base de datos") from e

    def fetch_scalar(self, sql: str, params: Sequence[BindParameter] = ()) -> Any:
        stmt = text(sql).bindparams(*params) if params else text(sql)
        try:
            return self.db.execute(stmt).scalar()
        except SQLAlchemyError as e:
            logger.error("[stats:repo] Falló la consulta escalar: %s", e)
            raise UpstreamStoreError("Error leyendo estadísticas de la base de datos") from e

    def execute_core(self, stmt: Any) -> List[Any]:
        try:
            return list(self.db.execute(stmt).all())
        except SQLAlchemyError as e:
            logger.error("[stats:repo] Falló la consulta Core: %s", e)
            raise UpstreamStoreError("Error leyendo estadísticas de la base de datos") from e

    # ---------------------------------------------------------------------
    # Periodo observado
    # ---------------------------------------------------------------------
    def observed_span(self) -> Optional[Tuple[datetime, datetime]]:
        """
        (MIN(created_at), MAX(created_at)) de todas las fichas, o None si no hay.
        Se consulta una sola vez por instancia.
        """
        if not self._span_loaded:
            rows = self.execute_core(select(func.min(Ficha.created_at), func.max(Ficha.created_at)))
            lo, hi = (rows[0] if rows else (None, None))
            lo, hi = _naive_utc(lo), _naive_utc(hi)
            self._span = (lo, hi) if lo is not None and hi is not None else None
            self._span_loaded = True
        return self._span

    # ---------------------------------------------------------------------
    # Referencias
    # ---------------------------------------------------------------------
    def list_portales(self, only_ids: Sequence[int] = ()) -> List[PortalRef]:
        stmt = select(Portal.id, Portal.slug, Portal.nombre)
        if only_ids:
            stmt = stmt.where(Portal.id.in_(list(only_ids)))
        rows = self.execute_core(stmt)
        return [PortalRef(id=int(r[0]), slug=str(r[1]), nombre=str(r[2])) for r in rows]

    def list_tematicas(self) -> List[TematicaRef]:
        rows = self.execute_core(select(Tematica.id, Tematica.nombre, Tematica.slug))
        return [TematicaRef(id=int(r[0]), nombre=str(r[1]), slug=r[2]) for r in rows]


class SqlProvinciaLookup:
    """Implementación SQL de ProvinciaLookup (lectura de una fila por id)."""

    def __init__(self, db: Session):
        self.db = db

    def parent_region(self, provincia_id: int) -> Optional[int]:
        try:
            value = self.db.execute(
                select(Provincia.ccaa_id).where(Provincia.id == provincia_id)
            ).scalar()
        except SQLAlchemyError as e:
            logger.error("[stats:repo] Falló la búsqueda de provincia %s: %s", provincia_id, e)
            raise UpstreamStoreError("Error leyendo provincias de la base de datos") from e
        return int(value) if value is not None else None


__all__ = ["PortalRef", "TematicaRef", "StatsRepository", "SqlProvinciaLookup"]
# Fin del archivo app/modules/fichas/repositories/stats_repository.py
