# -*- coding: utf-8 -*-
"""
app/modules/fichas/stats/predicates/geo_scope.py

GeoScopeResolver: filtro inclusivo por provincia.

Un informe de provincia también debe mostrar lo publicado "para toda la
comunidad" o "para todo el país", porque lo cubre implícitamente. Para
una provincia P con comunidad padre R, el fragmento es:

    f.ambito_provincia_id = P
    OR (f.ambito_nivel = 'CCAA' AND f.ambito_ccaa_id = R)
    OR f.ambito_nivel IN ('ESTADO', 'UE')

La inclusión es en un solo sentido: filtrar por comunidad (ccaa_id) es
igualdad simple y no arrastra las provincias que contiene.

Autor: Gestor de Fichas
Fecha: 18/09/2026
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from app.modules.fichas.enums import AmbitoNivel, NATIONAL_AMBITOS

from .composer import Eq, Fragment, In, all_of, any_of

logger = logging.getLogger(__name__)


class ProvinciaLookup(Protocol):
    def parent_region(self, provincia_id: int) -> Optional[int]:
        """Comunidad autónoma de la provincia, o None si no existe."""
        ...


class GeoScopeResolver:
    def __init__(self, lookup: ProvinciaLookup):
        self._lookup = lookup
        self._cache: dict[int, Optional[int]] = {}

    def parent_region(self, provincia_id: int) -> Optional[int]:
        if provincia_id not in self._cache:
            self._cache[provincia_id] = self._lookup.parent_region(provincia_id)
        return self._cache[provincia_id]

    def resolve(self, provincia_id: int) -> Optional[Fragment]:
        """
        Fragmento inclusivo para `provincia_id`, o None si la provincia no
        existe (el llamante ignora entonces el filtro).
        """
        region_id = self.parent_region(provincia_id)
        if region_id is None:
            logger.warning("[stats:geo] Provincia desconocida id=%s; filtro ignorado", provincia_id)
            return None

        return any_of(
            Eq("ambito_provincia_id", provincia_id),
            all_of(
                Eq("ambito_nivel", AmbitoNivel.CCAA),
                Eq("ambito_ccaa_id", region_id),
            ),
            In("ambito_nivel", tuple(NATIONAL_AMBITOS)),
        )


__all__ = ["ProvinciaLookup", "GeoScopeResolver"]
# Fin del archivo app/modules/fichas/stats/predicates/geo_scope.py
