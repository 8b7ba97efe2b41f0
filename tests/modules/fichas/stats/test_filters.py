# -*- coding: utf-8 -*-
"""
Tests de FilterSpec.from_params: normalización de parámetros de consulta.
"""
from datetime import datetime

import pytest

from app.modules.fichas.enums import (
    AmbitoNivel,
    DestaqueModo,
    SeriesGranularity,
    TramiteTipo,
)
from app.modules.fichas.stats.filters import FilterSpec


def test_sin_parametros_todo_sin_fijar():
    spec = FilterSpec.from_params({})
    assert spec == FilterSpec()
    assert spec.ignored == ()
    assert spec.has_free_range is False


@pytest.mark.parametrize("raw", ["", "   ", "abc", "1.5", "nan", "inf", "-3", "0"])
def test_numericos_no_validos_quedan_sin_fijar(raw):
    spec = FilterSpec.from_params({"ccaa_id": raw})
    assert spec.ccaa_id is None


def test_numericos_no_validos_se_anotan_como_ignorados():
    spec = FilterSpec.from_params({"ccaa_id": "abc", "provincia_id": ""})
    assert spec.ignored == ("ccaa_id",)


def test_numerico_entero_en_formato_decimal():
    spec = FilterSpec.from_params({"anio": "2024.0", "trabajador_id": " 7 "})
    assert spec.anio == 2024
    assert spec.trabajador_id == 7


def test_mes_fuera_de_rango_se_ignora():
    spec = FilterSpec.from_params({"mes": "13"})
    assert spec.mes is None
    assert "mes" in spec.ignored


def test_enums_tolerantes_a_mayusculas():
    spec = FilterSpec.from_params({"ambito": "estado", "tramite_tipo": "SI", "destaque": "Ambas"})
    assert spec.ambito is AmbitoNivel.ESTADO
    assert spec.tramite_tipo is TramiteTipo.SI
    assert spec.destaque is DestaqueModo.AMBAS


def test_enum_desconocido_no_filtra():
    spec = FilterSpec.from_params({"ambito": "MUNICIPIO", "complejidad": "extrema"})
    assert spec.ambito is None
    assert spec.complejidad is None
    assert set(spec.ignored) == {"ambito", "complejidad"}


def test_alias_destaque_principal():
    spec = FilterSpec.from_params({"destaque_principal": "nueva"})
    assert spec.destaque is DestaqueModo.NUEVA


def test_fechas_se_normalizan_a_limites_de_dia():
    spec = FilterSpec.from_params({"created_desde": "2024-02-01", "created_hasta": "2024-02-29"})
    assert spec.created_desde == datetime(2024, 2, 1, 0, 0, 0)
    assert spec.created_hasta == datetime(2024, 2, 29, 23, 59, 59)
    assert spec.has_free_range is True


def test_alias_from_to():
    spec = FilterSpec.from_params({"from": "2023-01-01", "to": "2023-12-31"})
    assert spec.created_desde == datetime(2023, 1, 1)
    assert spec.created_hasta == datetime(2023, 12, 31, 23, 59, 59)


@pytest.mark.parametrize("raw", ["2024-13-01", "2024-02-30", "01/02/2024", "2024-2-1"])
def test_fechas_no_validas_se_ignoran(raw):
    spec = FilterSpec.from_params({"created_desde": raw})
    assert spec.created_desde is None
    assert spec.ignored == ("created_desde",)


def test_existe_frase_solo_true_false():
    assert FilterSpec.from_params({"existe_frase": "TRUE"}).existe_frase is True
    assert FilterSpec.from_params({"existe_frase": "false"}).existe_frase is False
    spec = FilterSpec.from_params({"existe_frase": "1"})
    assert spec.existe_frase is None
    assert spec.ignored == ("existe_frase",)


def test_portales_csv_deduplicados():
    spec = FilterSpec.from_params({"portales": "3, 1,3,,x"})
    assert spec.portales == (3, 1)
    assert spec.ignored == ("portales",)


def test_granularidad_alias():
    assert FilterSpec.from_params({"granularidad": "mes"}).granularidad is SeriesGranularity.ABSOLUTE_MONTH
    assert FilterSpec.from_params({"granularidad": "MES_DEL_ANIO"}).granularidad is SeriesGranularity.MONTH_OF_YEAR
    spec = FilterSpec.from_params({"granularidad": "semana"})
    assert spec.granularidad is None
    assert spec.ignored == ("granularidad",)


def test_q_se_recorta():
    assert FilterSpec.from_params({"q": "  ayuda  "}).q == "ayuda"
    assert FilterSpec.from_params({"q": "   "}).q is None
# Fin del archivo tests/modules/fichas/stats/test_filters.py
