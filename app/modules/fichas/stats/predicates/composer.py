# -*- coding: utf-8 -*-
"""
app/modules/fichas/stats/predicates/composer.py

PredicateComposer: árbol de fragmentos de predicado con una única pasada
de enlace de parámetros.

Cada fragmento sabe renderizarse de dos formas equivalentes:
- SQL parametrizado (texto con :p0, :p1, ... para `sqlalchemy.text`)
- Cláusula SQLAlchemy Core (para consultas construidas con `select()`)

Los valores nunca se interpolan en el texto: los nombres de parámetro se
asignan en orden durante el render, de modo que marcadores y valores no
pueden desalinearse aunque se omitan fragmentos opcionales. Los nombres
de columna son identificadores de código, validados contra un patrón.

Una lista vacía de fragmentos equivale a "todo coincide" (1 = 1).

Autor: Gestor de Fichas
Fecha: 18/09/2026
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, Optional

from sqlalchemy import and_, bindparam, column, extract, false, or_, select, table, true
from sqlalchemy.sql.elements import BindParameter, ColumnElement

from app.modules.fichas.stats.sql_dialect import month_of_year_expr

_IDENT_RE = re.compile(r"^(?:[a-z_][a-z0-9_]*\.)?[a-z_][a-z0-9_]*$")

# Carácter de escape para LIKE (evita depender de la barra invertida por motor)
LIKE_ESCAPE = "!"

# Resuelve "ambito_nivel" o "fp.portal_id" a una columna Core
ColumnResolver = Callable[[str], ColumnElement]


def _check_ident(name: str) -> str:
    if not _IDENT_RE.match(name):
        raise ValueError(f"Identificador SQL no válido: {name!r}")
    return name


def _plain(value: Any) -> Any:
    # Los StrEnum se enlazan por valor, nunca por nombre de miembro
    return value.value if isinstance(value, Enum) else value


def escape_like(value: str) -> str:
    """Escapa comodines de LIKE para búsqueda por subcadena literal."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


# ---------------------------------------------------------------------------
# Contexto de render (una pasada, nombres secuenciales)
# ---------------------------------------------------------------------------
class SqlRenderContext:
    """
    Pasada de enlace compartida por todos los fragmentos de una consulta.
    Una consulta con varias cláusulas (WHERE, ON de un JOIN) usa un único
    contexto para que los nombres :pN no colisionen.
    """

    def __init__(self, dialect: str, alias: str = "f"):
        self.dialect = dialect
        self.alias = alias
        self.params: dict[str, Any] = {}

    def render(self, item: "Fragment | PredicateComposer") -> str:
        if isinstance(item, PredicateComposer):
            return item.render_into(self)
        return item.render(self)

    def bindparams(self) -> list[BindParameter]:
        # Sin tipo explícito: SQLAlchemy lo infiere del valor (datetime, int, str)
        return [bindparam(name, value) for name, value in self.params.items()]

    def bind(self, value: Any) -> str:
        name = f"p{len(self.params)}"
        self.params[name] = _plain(value)
        return f":{name}"

    def col(self, name: str) -> str:
        _check_ident(name)
        return name if "." in name else f"{self.alias}.{name}"


# ---------------------------------------------------------------------------
# Fragmentos
# ---------------------------------------------------------------------------
class Fragment:
    """Fragmento de predicado. Subclases inmutables."""

    def render(self, ctx: SqlRenderContext) -> str:
        raise NotImplementedError

    def to_clause(self, resolve: ColumnResolver) -> ColumnElement:
        raise NotImplementedError


@dataclass(frozen=True)
class Eq(Fragment):
    column: str
    value: Any

    def render(self, ctx):
        return f"{ctx.col(self.column)} = {ctx.bind(self.value)}"

    def to_clause(self, resolve):
        return resolve(_check_ident(self.column)) == _plain(self.value)


@dataclass(frozen=True)
class IsNull(Fragment):
    column: str

    def render(self, ctx):
        return f"{ctx.col(self.column)} IS NULL"

    def to_clause(self, resolve):
        return resolve(_check_ident(self.column)).is_(None)


@dataclass(frozen=True)
class In(Fragment):
    column: str
    values: tuple

    def render(self, ctx):
        if not self.values:
            return "1 = 0"
        marks = ", ".join(ctx.bind(v) for v in self.values)
        return f"{ctx.col(self.column)} IN ({marks})"

    def to_clause(self, resolve):
        if not self.values:
            return false()
        return resolve(_check_ident(self.column)).in_([_plain(v) for v in self.values])


@dataclass(frozen=True)
class Range(Fragment):
    """Rango [lower, upper) por defecto; `upper_inclusive` lo cierra."""

    column: str
    lower: Any = None
    upper: Any = None
    upper_inclusive: bool = False

    def render(self, ctx):
        parts = []
        col = ctx.col(self.column)
        if self.lower is not None:
            parts.append(f"{col} >= {ctx.bind(self.lower)}")
        if self.upper is not None:
            op = "<=" if self.upper_inclusive else "<"
            parts.append(f"{col} {op} {ctx.bind(self.upper)}")
        return " AND ".join(parts) if parts else "1 = 1"

    def to_clause(self, resolve):
        col = resolve(_check_ident(self.column))
        parts = []
        if self.lower is not None:
            parts.append(col >= self.lower)
        if self.upper is not None:
            parts.append(col <= self.upper if self.upper_inclusive else col < self.upper)
        return and_(*parts) if parts else true()


@dataclass(frozen=True)
class Contains(Fragment):
    """
    Subcadena sin distinguir mayúsculas en cualquiera de `columns`.

    En PostgreSQL se usa ILIKE, que pliega también letras acentuadas. En el
    resto de dialectos se cae a LOWER(col) LIKE; en SQLite LOWER solo pliega
    ASCII, así que "ÁFRICA" no coincide con "África".
    """

    columns: tuple[str, ...]
    text: str

    def render(self, ctx):
        mark = ctx.bind(f"%{escape_like(self.text.lower())}%")
        if ctx.dialect == "postgresql":
            arms = [f"{ctx.col(c)} ILIKE {mark} ESCAPE '{LIKE_ESCAPE}'" for c in self.columns]
        else:
            arms = [f"LOWER({ctx.col(c)}) LIKE {mark} ESCAPE '{LIKE_ESCAPE}'" for c in self.columns]
        return "(" + " OR ".join(arms) + ")"

    def to_clause(self, resolve):
        # ilike compila a ILIKE en PostgreSQL y a lower() LIKE lower() en el resto
        pattern = f"%{escape_like(self.text.lower())}%"
        return or_(*(resolve(_check_ident(c)).ilike(pattern, escape=LIKE_ESCAPE) for c in self.columns))


@dataclass(frozen=True)
class MonthOfYear(Fragment):
    column: str
    month: int

    def render(self, ctx):
        return f"{month_of_year_expr(ctx.dialect, ctx.col(self.column))} = {ctx.bind(int(self.month))}"

    def to_clause(self, resolve):
        return extract("month", resolve(_check_ident(self.column))) == int(self.month)


@dataclass(frozen=True)
class ExistsLink(Fragment):
    """
    EXISTS sobre una tabla puente: la ficha tiene al menos un vínculo con
    alguno de `values`. No es un JOIN, así que no multiplica filas.
    """

    link_table: str
    link_fk: str
    link_column: str
    values: tuple
    owner_column: str = "id"

    def render(self, ctx):
        if not self.values:
            return "1 = 0"
        lt = _check_ident(self.link_table)
        marks = ", ".join(ctx.bind(v) for v in self.values)
        return (
            f"EXISTS (SELECT 1 FROM {lt} _lk "
            f"WHERE _lk.{_check_ident(self.link_fk)} = {ctx.col(self.owner_column)} "
            f"AND _lk.{_check_ident(self.link_column)} IN ({marks}))"
        )

    def to_clause(self, resolve):
        if not self.values:
            return false()
        link = table(
            _check_ident(self.link_table),
            column(_check_ident(self.link_fk)),
            column(_check_ident(self.link_column)),
        )
        return (
            select(1)
            .select_from(link)
            .where(
                link.c[self.link_fk] == resolve(_check_ident(self.owner_column)),
                link.c[self.link_column].in_([_plain(v) for v in self.values]),
            )
            .exists()
        )


@dataclass(frozen=True)
class And(Fragment):
    children: tuple[Fragment, ...] = field(default=())

    def render(self, ctx):
        if not self.children:
            return "1 = 1"
        return "(" + " AND ".join(c.render(ctx) for c in self.children) + ")"

    def to_clause(self, resolve):
        if not self.children:
            return true()
        return and_(*(c.to_clause(resolve) for c in self.children))


@dataclass(frozen=True)
class Or(Fragment):
    children: tuple[Fragment, ...] = field(default=())

    def render(self, ctx):
        if not self.children:
            return "1 = 0"
        return "(" + " OR ".join(c.render(ctx) for c in self.children) + ")"

    def to_clause(self, resolve):
        if not self.children:
            return false()
        return or_(*(c.to_clause(resolve) for c in self.children))


def all_of(*children: Fragment) -> And:
    return And(tuple(children))


def any_of(*children: Fragment) -> Or:
    return Or(tuple(children))


# ---------------------------------------------------------------------------
# Resultado del render
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class RenderedPredicate:
    sql: str
    params: dict[str, Any]

    def bindparams(self) -> list[BindParameter]:
        # Sin tipo explícito: SQLAlchemy lo infiere del valor (datetime, int, str)
        return [bindparam(name, value) for name, value in self.params.items()]


# ---------------------------------------------------------------------------
# Composer
# ---------------------------------------------------------------------------
class PredicateComposer:
    """
    Conjunción de fragmentos. Inmutable: `extended()` devuelve otro composer.

    Ejemplo:
        composer = PredicateComposer([Eq("ambito_nivel", "CCAA"), IsNull("destaque_principal")])
        rendered = composer.render("sqlite")
        rendered.sql     -> "(f.ambito_nivel = :p0 AND f.destaque_principal IS NULL)"
        rendered.params  -> {"p0": "CCAA"}
    """

    def __init__(self, fragments: Optional[Iterable[Optional[Fragment]]] = None, alias: str = "f"):
        self._fragments: tuple[Fragment, ...] = tuple(f for f in (fragments or ()) if f is not None)
        self._alias = _check_ident(alias)

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        return self._fragments

    @property
    def alias(self) -> str:
        return self._alias

    def is_empty(self) -> bool:
        return not self._fragments

    def extended(self, *fragments: Optional[Fragment]) -> "PredicateComposer":
        return PredicateComposer(self._fragments + tuple(f for f in fragments if f is not None), self._alias)

    def render_into(self, ctx: SqlRenderContext) -> str:
        if not self._fragments:
            return "1 = 1"
        return " AND ".join(f.render(ctx) for f in self._fragments)

    def render(self, dialect: str) -> RenderedPredicate:
        ctx = SqlRenderContext(dialect=dialect, alias=self._alias)
        sql = self.render_into(ctx)
        return RenderedPredicate(sql=sql, params=dict(ctx.params))

    def to_clause(self, resolve: ColumnResolver) -> ColumnElement:
        if not self._fragments:
            return true()
        return and_(*(f.to_clause(resolve) for f in self._fragments))


def table_resolver(sa_table: Any, extra: Optional[dict[str, Any]] = None) -> ColumnResolver:
    """Resolver para `to_clause`: columnas sin prefijo contra `sa_table`, con prefijo contra `extra`."""

    def _resolve(name: str) -> ColumnElement:
        if "." in name:
            prefix, col = name.split(".", 1)
            if not extra or prefix not in extra:
                raise ValueError(f"Alias de tabla desconocido: {prefix!r}")
            return extra[prefix].c[col]
        return sa_table.c[name]

    return _resolve


__all__ = [
    "Fragment",
    "Eq",
    "IsNull",
    "In",
    "Range",
    "Contains",
    "MonthOfYear",
    "ExistsLink",
    "And",
    "Or",
    "all_of",
    "any_of",
    "escape_like",
    "RenderedPredicate",
    "SqlRenderContext",
    "PredicateComposer",
    "table_resolver",
    "ColumnResolver",
]
# Fin del archivo app/modules/fichas/stats/predicates/composer.py
