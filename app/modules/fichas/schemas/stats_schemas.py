# -*- coding: utf-8 -*-
"""
app/modules/fichas/schemas/stats_schemas.py

Schemas Pydantic de respuesta de los informes de estadísticas.

Dos formas:
- Distribución (sin tiempo): { data: [...], metadata: {...} }
- Serie temporal: { items: [...], series: [...], totals, total_global, ... }

Autor: Gestor de Fichas
Fecha: 21/09/2026
"""

from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import ConfigDict, Field

from app.shared.utils.base_models import UTF8SafeModel
from app.modules.fichas.enums import SeriesGranularity


# ========== COMUNES ==========

class StatsRange(UTF8SafeModel):
    """Periodo efectivo de la consulta, semiabierto [desde, hasta)."""
    desde: datetime = Field(..., description="Inicio del periodo (inclusive)")
    hasta: datetime = Field(..., description="Fin del periodo (exclusivo)")
    origen: str = Field(
        ...,
        description="De dónde sale el periodo: anio | rango | datos | reserva",
    )


# ========== DISTRIBUCIONES ==========

class DistributionItem(UTF8SafeModel):
    group_key: str = Field(..., description="Clave del grupo (slug de portal, id de temática, ámbito...)")
    label: str = Field(..., description="Nombre legible del grupo")
    total: int = Field(..., ge=0, description="Fichas distintas del grupo")
    id: Optional[int] = Field(None, description="Id de la entidad de referencia, si la hay")
    slug: Optional[str] = Field(None, description="Slug de la entidad de referencia, si lo hay")
    counts: Optional[Dict[str, int]] = Field(
        None,
        description="Subconteos por ámbito (solo ambitos-por-portal)",
    )


class DistributionMetadata(UTF8SafeModel):
    dimension: str = Field(..., description="Dimensión agregada")
    total_unique_records: int = Field(..., ge=0, description="Fichas distintas que cumplen el filtro")
    total_assignments: int = Field(..., ge=0, description="Filas ficha × entidad (o suma de grupos)")
    total_entries: int = Field(..., ge=0, description="Número de grupos devueltos")
    range: Optional[StatsRange] = None
    ignored_params: Optional[List[str]] = Field(None, description="Parámetros con valor no interpretable")
    degraded_filters: Optional[List[str]] = Field(None, description="Filtros que no se pudieron aplicar")


class DistributionResponse(UTF8SafeModel):
    data: List[DistributionItem]
    metadata: DistributionMetadata

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "data": [
                    {"group_key": "familia", "label": "Familia", "total": 12, "id": 1, "slug": "familia"},
                    {"group_key": "salud", "label": "Salud", "total": 0, "id": 2, "slug": "salud"},
                ],
                "metadata": {
                    "dimension": "portales",
                    "total_unique_records": 10,
                    "total_assignments": 12,
                    "total_entries": 2,
                },
            }
        }
    )


# ========== SERIES ==========

class SeriesKey(UTF8SafeModel):
    key: str = Field(..., description="Clave usada en `counts` de cada bucket")
    label: str
    id: Optional[int] = None


class SeriesItem(UTF8SafeModel):
    bucket: Union[int, str] = Field(..., description="'YYYY-MM' o mes 1..12")
    month: int = Field(..., ge=1, le=12)
    year: Optional[int] = None
    counts: Dict[str, int] = Field(default_factory=dict)
    total_for_bucket: int = Field(..., ge=0, description="Fichas distintas del mes")
    assignments_for_bucket: int = Field(..., ge=0, description="Asignaciones del mes")
    varios_portales: Optional[int] = Field(None, description="Fichas con dos o más portales")
    sin_portal: Optional[int] = Field(None, description="Fichas sin portal")


class SeriesResponse(UTF8SafeModel):
    dimension: str
    granularity: SeriesGranularity
    range: StatsRange
    series: List[SeriesKey]
    items: List[SeriesItem]
    totals: Dict[str, int]
    total_global: int = Field(..., ge=0, description="Suma de fichas distintas por mes")
    total_assignments: int = Field(..., ge=0)
    varios_portales: Optional[int] = None
    sin_portal: Optional[int] = None
    ignored_params: Optional[List[str]] = None
    degraded_filters: Optional[List[str]] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "dimension": "portales_por_mes",
                "granularity": "absolute_month",
                "range": {"desde": "2024-01-01T00:00:00", "hasta": "2025-01-01T00:00:00", "origen": "anio"},
                "series": [{"key": "familia", "label": "Familia", "id": 1}],
                "items": [
                    {
                        "bucket": "2024-01",
                        "month": 1,
                        "year": 2024,
                        "counts": {"familia": 3},
                        "total_for_bucket": 3,
                        "assignments_for_bucket": 3,
                    }
                ],
                "totals": {"familia": 3},
                "total_global": 3,
                "total_assignments": 3,
            }
        }
    )


__all__ = [
    "StatsRange",
    "DistributionItem",
    "DistributionMetadata",
    "DistributionResponse",
    "SeriesKey",
    "SeriesItem",
    "SeriesResponse",
]
# Fin del archivo app/modules/fichas/schemas/stats_schemas.py
