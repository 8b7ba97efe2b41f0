# -*- coding: utf-8 -*-
"""
Tests del filtro por etiquetas de destaque (dos huecos).
"""
import pytest
from sqlalchemy import text

from app.modules.fichas.enums import DestaqueModo
from app.modules.fichas.stats.predicates import PredicateComposer, destaque_fragment

CASOS = [
    ("nueva", None),
    (None, "nueva"),
    ("nueva", "para_publicitar"),
    ("para_publicitar", "nueva"),
    ("nueva", "nueva"),
    (None, None),
    (None, "para_publicitar"),
]


def _matches_in_db(db, modo):
    rendered = PredicateComposer([destaque_fragment(modo)]).render("sqlite")
    rows = db.execute(
        text(f"SELECT f.id FROM fichas f WHERE {rendered.sql} ORDER BY f.id").bindparams(*rendered.bindparams())
    ).all()
    return [r[0] for r in rows]


def test_sin_modo_no_restringe():
    assert destaque_fragment(None) is None


@pytest.mark.parametrize(
    "modo,expected_idx",
    [
        (DestaqueModo.NUEVA, [0, 1, 2, 3, 4]),
        (DestaqueModo.PARA_PUBLICITAR, [2, 3, 6]),
        (DestaqueModo.AMBAS, [2, 3]),
        (DestaqueModo.SIN_ETIQUETAS, [5]),
    ],
)
def test_modos_sobre_combinaciones_de_huecos(db, seed, modo, expected_idx):
    ids = [seed.ficha(destaque_principal=p, destaque_secundario=s) for p, s in CASOS]
    assert _matches_in_db(db, modo) == [ids[i] for i in expected_idx]


def test_ambas_exige_las_dos_etiquetas_distintas(db, seed):
    seed.ficha(destaque_principal="nueva", destaque_secundario="nueva")
    seed.ficha(destaque_principal="nueva")
    assert _matches_in_db(db, DestaqueModo.AMBAS) == []


def test_nueva_en_cualquier_hueco(db, seed):
    a = seed.ficha(destaque_principal="nueva")
    b = seed.ficha(destaque_secundario="nueva")
    seed.ficha()
    assert _matches_in_db(db, DestaqueModo.NUEVA) == [a, b]
# Fin del archivo tests/modules/fichas/stats/test_destaque.py
