# -*- coding: utf-8 -*-
import pytest

from app.modules.fichas.enums import SeriesGranularity
from app.modules.fichas.stats.sql_dialect import bucket_expr, month_key_expr, month_of_year_expr


def test_month_key_por_dialecto():
    assert month_key_expr("sqlite", "f.created_at") == "strftime('%Y-%m', f.created_at)"
    assert month_key_expr("postgresql", "f.created_at") == "to_char(f.created_at, 'YYYY-MM')"


def test_month_of_year_por_dialecto():
    assert month_of_year_expr("mysql", "f.created_at") == "MONTH(f.created_at)"
    assert "EXTRACT(MONTH FROM f.created_at)" in month_of_year_expr("postgresql", "f.created_at")


def test_bucket_expr_segun_granularidad():
    assert bucket_expr("sqlite", "c", SeriesGranularity.ABSOLUTE_MONTH) == month_key_expr("sqlite", "c")
    assert bucket_expr("sqlite", "c", SeriesGranularity.MONTH_OF_YEAR) == month_of_year_expr("sqlite", "c")


def test_dialecto_no_soportado():
    with pytest.raises(ValueError, match="oracle"):
        month_key_expr("oracle", "f.created_at")
# Fin del archivo tests/modules/fichas/stats/test_sql_dialect.py
