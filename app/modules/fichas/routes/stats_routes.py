# -*- coding: utf-8 -*-
"""
app/modules/fichas/routes/stats_routes.py

Rutas de solo lectura de los informes de estadísticas (/api/stats/*).

Todas exigen el permiso `fichas:read`; si la matriz deniega, el motor no
llega a ejecutarse. Los parámetros se leen crudos de la query string y los
normaliza FilterSpec (un valor no interpretable se ignora, nunca da 422).

Mapeo de errores:
- InvalidParameterError / MissingRequiredParameterError → 400
- UpstreamStoreError / ReferentialIntegrityError        → 500

| ruta                     | anio        |
|--------------------------|-------------|
| /portales                | opcional    |
| /tematicas-distribucion  | opcional    |
| /ambitos                 | opcional    |
| /tramite-online          | opcional    |
| /ambitos-por-portal      | opcional    |
| /portales-por-mes        | opcional    |
| /fichas-por-mes          | opcional    |
| /tematicas-por-mes       | obligatorio |

Autor: Gestor de Fichas
Fecha: 21/09/2026
"""
from __future__ import annotations

import logging
from typing import Callable, TypeVar

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.core.settings import get_settings
from app.modules.auth import require_permission
from app.modules.fichas.schemas import DistributionResponse, SeriesResponse
from app.modules.fichas.services.stats_service import StatsService
from app.modules.fichas.stats.errors import (
    InvalidParameterError,
    MissingRequiredParameterError,
    ReferentialIntegrityError,
    UpstreamStoreError,
)
from app.shared.utils.http_exceptions import BadRequestException, InternalServerException

logger = logging.getLogger(__name__)

T = TypeVar("T")

router = APIRouter(
    prefix="/api/stats",
    tags=["stats"],
    dependencies=[Depends(require_permission("fichas", "read"))],
)


def get_stats_service(db: Session = Depends(get_db)) -> StatsService:
    """Servicio real; los tests pueden overridear `get_db` o esta dependencia."""
    return StatsService(db, get_settings())


def _run(request: Request, report: Callable[[dict], T]) -> T:
    params = dict(request.query_params)
    try:
        return report(params)
    except (InvalidParameterError, MissingRequiredParameterError) as e:
        logger.info("[stats:routes] %s %s → 400 (%s)", request.url.path, params, e.message)
        raise BadRequestException(e.message, error_code=e.error_code) from e
    except UpstreamStoreError as e:
        logger.error("[stats:routes] %s → 500 (%s)", request.url.path, e.message)
        raise InternalServerException(
            "No se pudieron leer las estadísticas", error_code=e.error_code
        ) from e
    except ReferentialIntegrityError as e:
        logger.exception("[stats:routes] %s → 500 integridad referencial", request.url.path)
        raise InternalServerException(
            "Inconsistencia interna al componer el informe", error_code=e.error_code
        ) from e


# ---------------------------------------------------------------------------
# Distribuciones
# ---------------------------------------------------------------------------
@router.get(
    "/portales",
    response_model=DistributionResponse,
    response_model_exclude_none=True,
    summary="Fichas por portal (distintas y asignaciones)",
)
def stats_portales(request: Request, svc: StatsService = Depends(get_stats_service)):
    return _run(request, svc.portales)


@router.get(
    "/tematicas-distribucion",
    response_model=DistributionResponse,
    response_model_exclude_none=True,
    summary="Fichas por temática",
)
def stats_tematicas(request: Request, svc: StatsService = Depends(get_stats_service)):
    return _run(request, svc.tematicas)


@router.get(
    "/ambitos",
    response_model=DistributionResponse,
    response_model_exclude_none=True,
    summary="Fichas por ámbito geográfico",
)
def stats_ambitos(request: Request, svc: StatsService = Depends(get_stats_service)):
    return _run(request, svc.ambitos)


@router.get(
    "/tramite-online",
    response_model=DistributionResponse,
    response_model_exclude_none=True,
    summary="Fichas por tipo de trámite online",
)
def stats_tramite(request: Request, svc: StatsService = Depends(get_stats_service)):
    return _run(request, svc.tramite)


@router.get(
    "/ambitos-por-portal",
    response_model=DistributionResponse,
    response_model_exclude_none=True,
    summary="Fichas por portal con desglose por ámbito",
)
def stats_ambitos_por_portal(request: Request, svc: StatsService = Depends(get_stats_service)):
    return _run(request, svc.ambitos_por_portal)


# ---------------------------------------------------------------------------
# Series temporales
# ---------------------------------------------------------------------------
@router.get(
    "/portales-por-mes",
    response_model=SeriesResponse,
    response_model_exclude_none=True,
    summary="Serie mensual de fichas por portal",
)
def stats_portales_por_mes(request: Request, svc: StatsService = Depends(get_stats_service)):
    return _run(request, svc.portales_por_mes)


@router.get(
    "/fichas-por-mes",
    response_model=SeriesResponse,
    response_model_exclude_none=True,
    summary="Serie mensual de fichas (exclusivas por portal, varios portales, sin portal)",
)
def stats_fichas_por_mes(request: Request, svc: StatsService = Depends(get_stats_service)):
    return _run(request, svc.fichas_por_mes)


@router.get(
    "/tematicas-por-mes",
    response_model=SeriesResponse,
    response_model_exclude_none=True,
    summary="Serie mensual de fichas por temática (requiere anio)",
)
def stats_tematicas_por_mes(request: Request, svc: StatsService = Depends(get_stats_service)):
    return _run(request, svc.tematicas_por_mes)


# Fin del archivo app/modules/fichas/routes/stats_routes.py
