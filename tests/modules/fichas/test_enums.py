# -*- coding: utf-8 -*-
from app.modules.fichas.enums import (
    AMBITO_ORDER,
    NATIONAL_AMBITOS,
    TRAMITE_ORDER,
    AmbitoNivel,
    StatsDimension,
    TramiteTipo,
)


def test_orden_de_ambitos():
    assert [a.value for a in AMBITO_ORDER] == ["UE", "ESTADO", "CCAA", "PROVINCIA"]
    assert set(NATIONAL_AMBITOS) == {AmbitoNivel.UE, AmbitoNivel.ESTADO}


def test_etiquetas():
    assert AmbitoNivel.CCAA.label == "Autonómico"
    assert TramiteTipo.NO.label == "Sin trámite online"
    assert [t.value for t in TRAMITE_ORDER] == ["directo", "si", "no"]


def test_dimensiones_temporales():
    temporales = {d for d in StatsDimension if d.is_time_series}
    assert temporales == {
        StatsDimension.BY_MONTH,
        StatsDimension.BY_MONTH_PORTAL,
        StatsDimension.BY_MONTH_TEMATICA,
    }
# Fin del archivo tests/modules/fichas/test_enums.py
