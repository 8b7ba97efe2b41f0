# -*- coding: utf-8 -*-
"""
app/modules/fichas/stats/predicates/destaque.py

TagSetFilter: filtro por las dos etiquetas de destaque de cada ficha
(destaque_principal, destaque_secundario).

- nueva / para_publicitar : la etiqueta en cualquiera de los dos huecos
- ambas                   : (p=A y s=B) o (p=B y s=A), con {A, B} las dos etiquetas
- sin_etiquetas           : ambos huecos vacíos
- sin modo                : sin restricción

Una ficha con la misma etiqueta en los dos huecos no cumple "ambas".

Autor: Gestor de Fichas
Fecha: 18/09/2026
"""

from __future__ import annotations

from typing import Optional

from app.modules.fichas.enums import DestaqueEtiqueta, DestaqueModo

from .composer import Eq, Fragment, IsNull, all_of, any_of

SLOT_PRINCIPAL = "destaque_principal"
SLOT_SECUNDARIO = "destaque_secundario"


def _either_slot(label: DestaqueEtiqueta) -> Fragment:
    return any_of(Eq(SLOT_PRINCIPAL, label), Eq(SLOT_SECUNDARIO, label))


def destaque_fragment(modo: Optional[DestaqueModo]) -> Optional[Fragment]:
    if modo is None:
        return None

    if modo is DestaqueModo.NUEVA:
        return _either_slot(DestaqueEtiqueta.NUEVA)
    if modo is DestaqueModo.PARA_PUBLICITAR:
        return _either_slot(DestaqueEtiqueta.PARA_PUBLICITAR)
    if modo is DestaqueModo.AMBAS:
        a, b = DestaqueEtiqueta.NUEVA, DestaqueEtiqueta.PARA_PUBLICITAR
        return any_of(
            all_of(Eq(SLOT_PRINCIPAL, a), Eq(SLOT_SECUNDARIO, b)),
            all_of(Eq(SLOT_PRINCIPAL, b), Eq(SLOT_SECUNDARIO, a)),
        )
    if modo is DestaqueModo.SIN_ETIQUETAS:
        return all_of(IsNull(SLOT_PRINCIPAL), IsNull(SLOT_SECUNDARIO))

    raise ValueError(f"Modo de destaque no contemplado: {modo!r}")


__all__ = ["destaque_fragment", "SLOT_PRINCIPAL", "SLOT_SECUNDARIO"]
# Fin del archivo app/modules/fichas/stats/predicates/destaque.py
