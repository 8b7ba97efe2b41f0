# -*- coding: utf-8 -*-
"""
app/modules/fichas/stats/sql_dialect.py

Expresiones SQL dependientes del motor para agrupar por mes.

Solo se interpolan identificadores de columna ya validados por el
PredicateComposer; nunca valores de usuario.

Autor: Gestor de Fichas
Fecha: 17/09/2026
"""

from __future__ import annotations

from app.modules.fichas.enums import SeriesGranularity

_MONTH_KEY = {
    "sqlite": "strftime('%Y-%m', {col})",
    "postgresql": "to_char({col}, 'YYYY-MM')",
    "mysql": "DATE_FORMAT({col}, '%Y-%m')",
    "mariadb": "DATE_FORMAT({col}, '%Y-%m')",
}

_MONTH_OF_YEAR = {
    "sqlite": "CAST(strftime('%m', {col}) AS INTEGER)",
    "postgresql": "CAST(EXTRACT(MONTH FROM {col}) AS INTEGER)",
    "mysql": "MONTH({col})",
    "mariadb": "MONTH({col})",
}


def _template(table: dict[str, str], dialect: str) -> str:
    try:
        return table[dialect]
    except KeyError:
        raise ValueError(f"Dialecto SQL no soportado para series mensuales: {dialect!r}") from None


def month_key_expr(dialect: str, column: str) -> str:
    """Expresión que produce la clave 'YYYY-MM' de `column`."""
    return _template(_MONTH_KEY, dialect).format(col=column)


def month_of_year_expr(dialect: str, column: str) -> str:
    """Expresión que produce el mes 1..12 (entero) de `column`."""
    return _template(_MONTH_OF_YEAR, dialect).format(col=column)


def bucket_expr(dialect: str, column: str, granularity: SeriesGranularity) -> str:
    if granularity is SeriesGranularity.MONTH_OF_YEAR:
        return month_of_year_expr(dialect, column)
    return month_key_expr(dialect, column)


__all__ = ["month_key_expr", "month_of_year_expr", "bucket_expr"]
# Fin del archivo app/modules/fichas/stats/sql_dialect.py
