# -*- coding: utf-8 -*-
"""
app/modules/fichas/stats/filters.py

FilterSpec: normalización de los parámetros de consulta (texto libre,
laxamente tipados) a un objeto inmutable y ya validado.

Reglas:
- Los numéricos se convierten a int; vacíos, no finitos o no enteros
  quedan sin fijar (nunca 0, nunca error).
- Los enumerados se validan contra su conjunto cerrado; un valor
  desconocido deja el filtro sin aplicar.
- Las fechas aceptan YYYY-MM-DD y se normalizan a límites de día UTC
  (00:00:00 para "desde", 23:59:59 para "hasta").
- Todo parámetro descartado se anota en `ignored` para poder registrarlo.

Autor: Gestor de Fichas
Fecha: 17/09/2026
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import StrEnum
from typing import Mapping, Optional, Type, TypeVar

from app.modules.fichas.enums import (
    AmbitoNivel,
    Complejidad,
    DestaqueModo,
    SeriesGranularity,
    TramiteTipo,
)

E = TypeVar("E", bound=StrEnum)

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Alias aceptados para la granularidad de las series
_GRANULARITY_ALIASES = {
    "mes": SeriesGranularity.ABSOLUTE_MONTH,
    "absoluta": SeriesGranularity.ABSOLUTE_MONTH,
    "absolute_month": SeriesGranularity.ABSOLUTE_MONTH,
    "mes_del_anio": SeriesGranularity.MONTH_OF_YEAR,
    "month_of_year": SeriesGranularity.MONTH_OF_YEAR,
}


@dataclass(frozen=True)
class FilterSpec:
    """Criterios de filtrado normalizados. Se crea una vez por petición."""

    q: Optional[str] = None
    ambito: Optional[AmbitoNivel] = None
    ccaa_id: Optional[int] = None
    provincia_id: Optional[int] = None
    trabajador_id: Optional[int] = None
    trabajador_subida_id: Optional[int] = None
    tramite_tipo: Optional[TramiteTipo] = None
    complejidad: Optional[Complejidad] = None
    destaque: Optional[DestaqueModo] = None
    existe_frase: Optional[bool] = None
    anio: Optional[int] = None
    mes: Optional[int] = None
    created_desde: Optional[datetime] = None
    created_hasta: Optional[datetime] = None
    portales: tuple[int, ...] = ()
    granularidad: Optional[SeriesGranularity] = None
    ignored: tuple[str, ...] = field(default=(), compare=False)

    @property
    def has_free_range(self) -> bool:
        return self.created_desde is not None or self.created_hasta is not None

    @classmethod
    def from_params(cls, params: Mapping[str, Optional[str]]) -> "FilterSpec":
        """
        Construye el FilterSpec a partir de un mapeo clave → texto.

        Las claves ausentes o vacías se consideran no informadas; las que
        traen un valor no interpretable se anotan en `ignored`.
        """
        ignored: list[str] = []

        def raw(*names: str) -> Optional[str]:
            for name in names:
                value = params.get(name)
                if value is not None and str(value).strip() != "":
                    return str(value).strip()
            return None

        def positive_int(name: str) -> Optional[int]:
            value = raw(name)
            if value is None:
                return None
            parsed = _parse_int(value)
            if parsed is None or parsed <= 0:
                ignored.append(name)
                return None
            return parsed

        def enum_value(enum_cls: Type[E], *names: str) -> Optional[E]:
            value = raw(*names)
            if value is None:
                return None
            parsed = _parse_enum(enum_cls, value)
            if parsed is None:
                ignored.append(names[0])
            return parsed

        q = raw("q")

        mes = positive_int("mes")
        if mes is not None and mes > 12:
            ignored.append("mes")
            mes = None

        anio = positive_int("anio")
        if anio is not None and anio > 9998:
            ignored.append("anio")
            anio = None

        desde_raw = raw("created_desde", "from")
        created_desde = _parse_day(desde_raw, end_of_day=False)
        if desde_raw is not None and created_desde is None:
            ignored.append("created_desde")

        hasta_raw = raw("created_hasta", "to")
        created_hasta = _parse_day(hasta_raw, end_of_day=True)
        if hasta_raw is not None and created_hasta is None:
            ignored.append("created_hasta")

        existe_frase_raw = raw("existe_frase")
        existe_frase = _parse_bool(existe_frase_raw)
        if existe_frase_raw is not None and existe_frase is None:
            ignored.append("existe_frase")

        portales_raw = raw("portales")
        portales: list[int] = []
        if portales_raw is not None:
            for token in portales_raw.split(","):
                token = token.strip()
                if not token:
                    continue
                pid = _parse_int(token)
                if pid is None or pid <= 0:
                    ignored.append("portales")
                    continue
                if pid not in portales:
                    portales.append(pid)

        granularidad_raw = raw("granularidad")
        granularidad = None
        if granularidad_raw is not None:
            granularidad = _GRANULARITY_ALIASES.get(granularidad_raw.lower())
            if granularidad is None:
                ignored.append("granularidad")

        return cls(
            q=q,
            ambito=enum_value(AmbitoNivel, "ambito"),
            ccaa_id=positive_int("ccaa_id"),
            provincia_id=positive_int("provincia_id"),
            trabajador_id=positive_int("trabajador_id"),
            trabajador_subida_id=positive_int("trabajador_subida_id"),
            tramite_tipo=enum_value(TramiteTipo, "tramite_tipo"),
            complejidad=enum_value(Complejidad, "complejidad"),
            destaque=enum_value(DestaqueModo, "destaque", "destaque_principal"),
            existe_frase=existe_frase,
            anio=anio,
            mes=mes,
            created_desde=created_desde,
            created_hasta=created_hasta,
            portales=tuple(portales),
            granularidad=granularidad,
            ignored=tuple(dict.fromkeys(ignored)),
        )


# ---------------------------------------------------------------------------
# Helpers de parseo
# ---------------------------------------------------------------------------
def _parse_int(value: str) -> Optional[int]:
    try:
        return int(value)
    except ValueError:
        pass
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number) or not number.is_integer():
        return None
    return int(number)


def _parse_enum(enum_cls: Type[E], value: str) -> Optional[E]:
    try:
        return enum_cls(value)
    except ValueError:
        pass
    # Tolerancia de mayúsculas: "Estado" → ESTADO, "SI" → si
    for member in enum_cls:
        if member.value.lower() == value.lower():
            return member
    return None


def _parse_bool(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def _parse_day(value: Optional[str], *, end_of_day: bool) -> Optional[datetime]:
    if value is None or not _DATE_RE.match(value):
        return None
    try:
        day = date.fromisoformat(value)
    except ValueError:
        return None
    return datetime.combine(day, time(23, 59, 59) if end_of_day else time(0, 0, 0))


__all__ = ["FilterSpec"]
# Fin del archivo app/modules/fichas/stats/filters.py
