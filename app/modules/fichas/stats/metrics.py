# -*- coding: utf-8 -*-
"""
app/modules/fichas/stats/metrics.py

Collectors Prometheus del motor de estadísticas.

Métricas expuestas:
- stats_queries_total{dimension,outcome}  - Contador de agregaciones
- stats_query_seconds{dimension}          - Histograma de latencia

Labels:
- dimension: valor de StatsDimension (portales, fichas_por_mes, ...)
- outcome: success | client_error | error

Prohibido: ids de ficha, portal o usuario (alta cardinalidad)

Autor: Gestor de Fichas
Fecha: 20/09/2026
"""
from __future__ import annotations

import functools
import logging
import time
from typing import Callable, Literal

from prometheus_client import REGISTRY, Counter, Histogram

from .errors import InvalidParameterError, MissingRequiredParameterError

_logger = logging.getLogger("fichas.stats.metrics")

Outcome = Literal["success", "client_error", "error"]

QUERIES_TOTAL_NAME = "stats_queries_total"
LATENCY_NAME = "stats_query_seconds"

LATENCY_BUCKETS = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, float("inf"))


def _get_existing_metric(name: str):
    # prometheus_client indexa por nombre base y por nombre con sufijo (_total)
    names_to_collectors = getattr(REGISTRY, "_names_to_collectors", {})
    return names_to_collectors.get(name)


def _get_or_create_counter(name: str, description: str, labelnames: tuple) -> Counter:
    existing = _get_existing_metric(name)
    if existing is not None:
        return existing
    try:
        return Counter(name, description, labelnames=labelnames)
    except ValueError:
        # Ya registrado (recarga del módulo en tests)
        return _get_existing_metric(name)


def _get_or_create_histogram(name: str, description: str, labelnames: tuple, buckets: tuple) -> Histogram:
    existing = _get_existing_metric(name)
    if existing is not None:
        return existing
    try:
        return Histogram(name, description, labelnames=labelnames, buckets=buckets)
    except ValueError:
        return _get_existing_metric(name)


STATS_QUERIES = _get_or_create_counter(
    QUERIES_TOTAL_NAME,
    "Total de agregaciones de estadísticas por dimensión y resultado",
    ("dimension", "outcome"),
)
STATS_LATENCY = _get_or_create_histogram(
    LATENCY_NAME,
    "Latencia de las agregaciones de estadísticas en segundos",
    ("dimension",),
    LATENCY_BUCKETS,
)


def record_stats_query(dimension: str, outcome: Outcome, duration_seconds: float) -> None:
    """Registra una agregación completa (contador + latencia). No lanza."""
    try:
        STATS_QUERIES.labels(dimension=dimension, outcome=outcome).inc()
        STATS_LATENCY.labels(dimension=dimension).observe(duration_seconds)
    except ValueError as e:
        _logger.debug("stats_metrics_record_error: %s", e)


def _outcome_for(exc: BaseException) -> Outcome:
    if isinstance(exc, (InvalidParameterError, MissingRequiredParameterError)):
        return "client_error"
    return "error"


def instrument_stats(dimension: str):
    """
    Decorador para métodos del servicio de estadísticas.

    Ejemplo:
        @instrument_stats("portales")
        def portales(self, params):
            ...
    """

    def decorator(func: Callable):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            t0 = time.perf_counter()
            outcome: Outcome = "success"
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                outcome = _outcome_for(exc)
                raise
            finally:
                record_stats_query(dimension, outcome, time.perf_counter() - t0)

        return wrapper

    return decorator


__all__ = [
    "STATS_QUERIES",
    "STATS_LATENCY",
    "record_stats_query",
    "instrument_stats",
]
# Fin del archivo app/modules/fichas/stats/metrics.py
