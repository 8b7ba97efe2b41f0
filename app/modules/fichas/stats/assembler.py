# -*- coding: utf-8 -*-
"""
app/modules/fichas/stats/assembler.py

ResultAssembler: completa los conteos dispersos del AggregationEngine.

- Dimensiones sin tiempo: left-merge sobre la lista completa de referencia
  (todos los portales, temáticas, ámbitos o tipos de trámite), con 0 donde
  no hubo coincidencias.
- Series: left-merge sobre la secuencia completa de buckets; ningún mes
  se omite.

Una clave agregada sin entrada de referencia o sin bucket indica un fallo
de integridad aguas arriba: se lanza ReferentialIntegrityError, nunca se
descarta en silencio.

Reglas de orden:
- portales: lista de prioridad de negocio, el resto al final, empate por nombre
- temáticas: total descendente, empate por nombre
- ámbitos y trámites: orden fijo de la lista de referencia

Autor: Gestor de Fichas
Fecha: 20/09/2026
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .errors import ReferentialIntegrityError
from .time_buckets import Bucket

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceEntry:
    """
    Entrada de la lista de referencia de una dimensión.

    `key` es la clave que devuelve el AggregationEngine (id o valor del
    enum); `code`, si se indica, es la clave pública en la respuesta.
    """

    key: Any
    label: str
    id: Optional[int] = None
    slug: Optional[str] = None
    code: Optional[str] = None

    @property
    def group_key(self) -> str:
        return self.code if self.code else str(self.key)


@dataclass(frozen=True)
class DistributionRow:
    entry: ReferenceEntry
    total: int
    assignments: int = 0
    counts: Optional[Dict[str, int]] = None


@dataclass(frozen=True)
class Distribution:
    rows: List[DistributionRow]
    total_unique_records: int
    total_assignments: int

    @property
    def total_entries(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class Series:
    reference: List[ReferenceEntry]
    items: List[Bucket]
    totals: Dict[str, int]
    total_global: int
    total_assignments: int
    extras_totals: Dict[str, int] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Orden
# ---------------------------------------------------------------------------
def portal_sort_key(priority: Sequence[str]) -> Callable[[ReferenceEntry], Tuple[int, str]]:
    rank = {slug: i for i, slug in enumerate(priority)}

    def _key(entry: ReferenceEntry) -> Tuple[int, str]:
        return (rank.get(entry.slug or "", len(rank)), entry.label.lower())

    return _key


def order_portales(entries: Iterable[ReferenceEntry], priority: Sequence[str]) -> List[ReferenceEntry]:
    return sorted(entries, key=portal_sort_key(priority))


def _by_total_then_label(totals: Mapping[Any, int]) -> Callable[[ReferenceEntry], Tuple[int, str]]:
    return lambda e: (-int(totals.get(e.key, 0)), e.label.lower())


# ---------------------------------------------------------------------------
# Comprobación de integridad
# ---------------------------------------------------------------------------
def _check_keys(keys: Iterable[Any], known: set, *, what: str, dimension: str) -> None:
    unknown = sorted({k for k in keys if k not in known}, key=str)
    if unknown:
        logger.error("[stats:%s] Claves sin %s: %s", dimension, what, unknown)
        raise ReferentialIntegrityError(
            f"La agregación '{dimension}' devolvió claves sin {what}: {unknown}"
        )


# ---------------------------------------------------------------------------
# Distribuciones
# ---------------------------------------------------------------------------
def assemble_distribution(
    reference: Sequence[ReferenceEntry],
    counts: Mapping[Any, int],
    *,
    dimension: str,
    total_unique_records: int,
    assignments: Optional[Mapping[Any, int]] = None,
    sub_counts: Optional[Mapping[Any, Mapping[str, int]]] = None,
    sub_keys: Sequence[str] = (),
    order_by_total: bool = False,
) -> Distribution:
    """
    Left-merge de `counts` sobre `reference` (en el orden recibido, o por
    total descendente si `order_by_total`).

    `assignments` (filas ficha × entidad) solo existe para dimensiones de
    relación many-to-many; en el resto cada ficha cuenta una vez.
    """
    known = {e.key for e in reference}
    _check_keys(counts.keys(), known, what="referencia", dimension=dimension)
    if sub_counts:
        _check_keys(sub_counts.keys(), known, what="referencia", dimension=dimension)

    entries = list(reference)
    if order_by_total:
        entries.sort(key=_by_total_then_label(counts))

    rows: List[DistributionRow] = []
    for entry in entries:
        total = int(counts.get(entry.key, 0))
        row_assignments = int(assignments.get(entry.key, 0)) if assignments is not None else total
        row_counts = None
        if sub_keys:
            found = (sub_counts or {}).get(entry.key, {})
            _check_keys(found.keys(), set(sub_keys), what="subclave conocida", dimension=dimension)
            row_counts = {k: int(found.get(k, 0)) for k in sub_keys}
        rows.append(DistributionRow(entry=entry, total=total, assignments=row_assignments, counts=row_counts))

    return Distribution(
        rows=rows,
        total_unique_records=int(total_unique_records),
        total_assignments=sum(r.assignments for r in rows),
    )


# ---------------------------------------------------------------------------
# Series
# ---------------------------------------------------------------------------
def assemble_series(
    buckets: Sequence[Bucket],
    reference: Sequence[ReferenceEntry],
    cells: Mapping[Tuple[Any, Any], int],
    bucket_totals: Mapping[Any, int],
    *,
    dimension: str,
    bucket_assignments: Optional[Mapping[Any, int]] = None,
    bucket_extras: Optional[Mapping[Any, Mapping[str, int]]] = None,
    order_by_total: bool = False,
) -> Series:
    """
    Rellena cada bucket con las cuentas por clave de referencia (0 si faltan).

    `bucket_totals` son fichas distintas por bucket; `total_global` es su suma,
    ya que cada ficha cae en un único mes.
    """
    bucket_keys = {b.key for b in buckets}
    ref_keys = {e.key for e in reference}

    _check_keys((b for b, _ in cells.keys()), bucket_keys, what="bucket", dimension=dimension)
    _check_keys((k for _, k in cells.keys()), ref_keys, what="referencia", dimension=dimension)
    _check_keys(bucket_totals.keys(), bucket_keys, what="bucket", dimension=dimension)
    if bucket_extras:
        _check_keys(bucket_extras.keys(), bucket_keys, what="bucket", dimension=dimension)

    totals_by_key: Dict[Any, int] = {e.key: 0 for e in reference}
    for (_, ref_key), n in cells.items():
        totals_by_key[ref_key] += int(n)

    entries = list(reference)
    if order_by_total:
        entries.sort(key=_by_total_then_label(totals_by_key))

    extra_names: List[str] = []
    for extra in (bucket_extras or {}).values():
        for name in extra:
            if name not in extra_names:
                extra_names.append(name)

    items: List[Bucket] = []
    for bucket in buckets:
        counts = {e.group_key: int(cells.get((bucket.key, e.key), 0)) for e in entries}
        if bucket_assignments is not None:
            assigned = int(bucket_assignments.get(bucket.key, 0))
        else:
            assigned = sum(counts.values())
        extras = {name: int((bucket_extras or {}).get(bucket.key, {}).get(name, 0)) for name in extra_names}
        items.append(
            replace(
                bucket,
                counts=counts,
                total=int(bucket_totals.get(bucket.key, 0)),
                assignments=assigned,
                extras=extras,
            )
        )

    return Series(
        reference=entries,
        items=items,
        totals={e.group_key: int(totals_by_key[e.key]) for e in entries},
        total_global=sum(b.total for b in items),
        total_assignments=sum(b.assignments for b in items),
        extras_totals={name: sum(b.extras.get(name, 0) for b in items) for name in extra_names},
    )


__all__ = [
    "ReferenceEntry",
    "DistributionRow",
    "Distribution",
    "Series",
    "portal_sort_key",
    "order_portales",
    "assemble_distribution",
    "assemble_series",
]
# Fin del archivo app/modules/fichas/stats/assembler.py
