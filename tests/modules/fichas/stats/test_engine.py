# -*- coding: utf-8 -*-
"""
Tests del AggregationEngine contra SQLite en memoria.
"""
from datetime import datetime

from app.modules.fichas.enums import SeriesGranularity
from app.modules.fichas.repositories import StatsRepository
from app.modules.fichas.stats.aggregators import LINK_PORTAL, LINK_TEMATICA, AggregationEngine
from app.modules.fichas.stats.predicates import Eq, PredicateComposer, Range


def _engine(db):
    return AggregationEngine(StatsRepository(db))


def test_ficha_con_tres_portales_cuenta_una_vez(db, seed):
    for pid, slug in ((1, "familia"), (2, "salud"), (3, "mayores")):
        seed.portal(pid, slug)
    seed.ficha(portales=(1, 2, 3))

    engine = _engine(db)
    groups = engine.by_link(PredicateComposer(), LINK_PORTAL)

    assert engine.distinct_total_linked(PredicateComposer(), LINK_PORTAL) == 1
    assert sum(g.assignments for g in groups.values()) == 3
    assert len(groups) == 3
    assert all(g.distinct == 1 for g in groups.values())


def test_restriccion_de_portales(db, seed):
    seed.portal(1, "familia")
    seed.portal(2, "salud")
    seed.ficha(portales=(1, 2))
    seed.ficha(portales=(2,))

    engine = _engine(db)
    groups = engine.by_link(PredicateComposer(), LINK_PORTAL, restrict_ids=[1])
    assert list(groups) == [1]
    assert engine.distinct_total_linked(PredicateComposer(), LINK_PORTAL, [1]) == 1


def test_por_ambito_y_total(db, seed):
    seed.geografia()
    seed.ficha(ambito="ESTADO")
    seed.ficha(ambito="ESTADO")
    seed.ficha(ambito="CCAA", ccaa_id=3)

    engine = _engine(db)
    assert engine.by_ambito(PredicateComposer()) == {"ESTADO": 2, "CCAA": 1}
    assert engine.distinct_total(PredicateComposer([Eq("ambito_nivel", "CCAA")])) == 1


def test_por_tramite_excluye_nulos(db, seed):
    seed.ficha(tramite_tipo="si")
    seed.ficha(tramite_tipo="si")
    seed.ficha(tramite_tipo="directo")
    seed.ficha(tramite_tipo=None)

    assert _engine(db).by_tramite(PredicateComposer()) == {"si": 2, "directo": 1}


def test_portal_por_ambito(db, seed):
    seed.geografia()
    seed.portal(1, "familia")
    seed.ficha(ambito="ESTADO", portales=(1,))
    seed.ficha(ambito="CCAA", ccaa_id=3, portales=(1,))
    seed.ficha(ambito="CCAA", ccaa_id=4, portales=(1,))

    result = _engine(db).by_link_and_ambito(PredicateComposer(), LINK_PORTAL)
    assert result == {(1, "ESTADO"): 1, (1, "CCAA"): 2}


def test_serie_por_tematica_mes_absoluto(db, seed):
    seed.tematica(1, "Empleo")
    seed.tematica(2, "Vivienda")
    seed.ficha(created_at=datetime(2024, 1, 10), tematicas=(1, 2))
    seed.ficha(created_at=datetime(2024, 3, 5), tematicas=(1,))
    seed.ficha(created_at=datetime(2025, 1, 5), tematicas=(1,))

    composer = PredicateComposer([Range("created_at", datetime(2024, 1, 1), datetime(2025, 1, 1))])
    raw = _engine(db).series_by_link(composer, LINK_TEMATICA, SeriesGranularity.ABSOLUTE_MONTH)

    assert raw.cells == {("2024-01", 1): 1, ("2024-01", 2): 1, ("2024-03", 1): 1}
    assert raw.bucket_distinct == {"2024-01": 1, "2024-03": 1}


def test_serie_mes_del_anio(db, seed):
    seed.portal(1, "familia")
    seed.ficha(created_at=datetime(2023, 5, 1), portales=(1,))
    seed.ficha(created_at=datetime(2024, 5, 20), portales=(1,))

    raw = _engine(db).series_by_link(PredicateComposer(), LINK_PORTAL, SeriesGranularity.MONTH_OF_YEAR)
    assert raw.cells == {(5, 1): 2}
    assert raw.bucket_distinct == {5: 2}


def test_exclusividad_por_mes(db, seed):
    seed.portal(1, "familia")
    seed.portal(2, "salud")
    seed.ficha(created_at=datetime(2024, 2, 1), portales=(1,))
    seed.ficha(created_at=datetime(2024, 2, 2), portales=(1, 2))
    seed.ficha(created_at=datetime(2024, 2, 3))

    rows = _engine(db).series_exclusivity(PredicateComposer(), SeriesGranularity.ABSOLUTE_MONTH)
    by_n = {r.n_portales: r for r in rows}

    assert {r.bucket for r in rows} == {"2024-02"}
    assert by_n[0].fichas == 1 and by_n[0].portal_id is None
    assert by_n[1].fichas == 1 and by_n[1].portal_id == 1
    assert by_n[2].fichas == 1


def test_exclusividad_restringida_cuenta_solo_portales_pedidos(db, seed):
    seed.portal(1, "familia")
    seed.portal(2, "salud")
    seed.ficha(created_at=datetime(2024, 2, 2), portales=(1, 2))

    rows = _engine(db).series_exclusivity(PredicateComposer(), SeriesGranularity.ABSOLUTE_MONTH, [2])
    assert [(r.n_portales, r.portal_id, r.fichas) for r in rows] == [(1, 2, 1)]
# Fin del archivo tests/modules/fichas/stats/test_engine.py
