# -*- coding: utf-8 -*-
"""
app/modules/fichas/stats/predicates/__init__.py

Composición segura de predicados (parámetros enlazados, sin interpolar valores).

Autor: Gestor de Fichas
Fecha: 18/09/2026
"""

from .composer import (
    And,
    Contains,
    Eq,
    ExistsLink,
    Fragment,
    In,
    IsNull,
    MonthOfYear,
    Or,
    PredicateComposer,
    Range,
    RenderedPredicate,
    SqlRenderContext,
    all_of,
    any_of,
    escape_like,
    table_resolver,
)
from .geo_scope import GeoScopeResolver, ProvinciaLookup
from .destaque import destaque_fragment
from .builder import ComposedFilters, SEARCH_COLUMNS, build_predicate

__all__ = [
    "And",
    "Contains",
    "Eq",
    "ExistsLink",
    "Fragment",
    "In",
    "IsNull",
    "MonthOfYear",
    "Or",
    "PredicateComposer",
    "Range",
    "RenderedPredicate",
    "SqlRenderContext",
    "all_of",
    "any_of",
    "escape_like",
    "table_resolver",
    "GeoScopeResolver",
    "ProvinciaLookup",
    "destaque_fragment",
    "ComposedFilters",
    "SEARCH_COLUMNS",
    "build_predicate",
]
# Fin del archivo app/modules/fichas/stats/predicates/__init__.py
