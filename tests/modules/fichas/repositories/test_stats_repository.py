# -*- coding: utf-8 -*-
"""
Tests del StatsRepository y SqlProvinciaLookup.
"""
from datetime import datetime

import pytest

from app.modules.fichas.repositories import SqlProvinciaLookup, StatsRepository
from app.modules.fichas.stats.errors import UpstreamStoreError


def test_periodo_observado_sin_fichas(db):
    assert StatsRepository(db).observed_span() is None


def test_periodo_observado_min_max(db, seed):
    seed.ficha(created_at=datetime(2023, 4, 2, 9, 30))
    seed.ficha(created_at=datetime(2024, 1, 15, 18, 0))

    assert StatsRepository(db).observed_span() == (datetime(2023, 4, 2, 9, 30), datetime(2024, 1, 15, 18, 0))


def test_periodo_observado_se_cachea_por_instancia(db, seed):
    repo = StatsRepository(db)
    seed.ficha(created_at=datetime(2024, 1, 1))
    first = repo.observed_span()
    seed.ficha(created_at=datetime(2025, 1, 1))
    assert repo.observed_span() == first


def test_error_sql_se_envuelve(db):
    repo = StatsRepository(db)
    with pytest.raises(UpstreamStoreError):
        repo.fetch_all("SELECT * FROM tabla_que_no_existe")
    db.rollback()


def test_listas_de_referencia(db, seed):
    seed.portal(1, "familia", "Familia")
    seed.portal(2, "salud", "Salud")
    seed.tematica(5, "Empleo", "empleo")

    repo = StatsRepository(db)
    assert {p.slug for p in repo.list_portales()} == {"familia", "salud"}
    assert [p.id for p in repo.list_portales(only_ids=[2])] == [2]
    assert [(t.id, t.nombre, t.slug) for t in repo.list_tematicas()] == [(5, "Empleo", "empleo")]


def test_provincia_a_comunidad(db, seed):
    seed.geografia()
    lookup = SqlProvinciaLookup(db)
    assert lookup.parent_region(11) == 3
    assert lookup.parent_region(20) == 4
    assert lookup.parent_region(999) is None
# Fin del archivo tests/modules/fichas/repositories/test_stats_repository.py
