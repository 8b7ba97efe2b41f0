# -*- coding: utf-8 -*-
"""
app/modules/fichas/enums/ambito_nivel_enum.py

Enum del ámbito geográfico de una ficha.

Autor: Gestor de Fichas
Fecha: 16/09/2026
"""

from enum import StrEnum


class AmbitoNivel(StrEnum):
    """
    Nivel geográfico de aplicación de una ficha.

    Valores:
    - UE        : toda la Unión Europea
    - ESTADO    : todo el Estado
    - CCAA      : una comunidad autónoma (ambito_ccaa_id informado)
    - PROVINCIA : una provincia (ambito_provincia_id informado)
    """
    UE = "UE"
    ESTADO = "ESTADO"
    CCAA = "CCAA"
    PROVINCIA = "PROVINCIA"

    @property
    def label(self) -> str:
        return _AMBITO_LABELS[self]


_AMBITO_LABELS = {
    AmbitoNivel.UE: "Unión Europea",
    AmbitoNivel.ESTADO: "Estatal",
    AmbitoNivel.CCAA: "Autonómico",
    AmbitoNivel.PROVINCIA: "Provincial",
}


# Orden fijo en los informes: nacional, región, provincia
AMBITO_ORDER: tuple[AmbitoNivel, ...] = (
    AmbitoNivel.UE,
    AmbitoNivel.ESTADO,
    AmbitoNivel.CCAA,
    AmbitoNivel.PROVINCIA,
)

NATIONAL_AMBITOS: tuple[AmbitoNivel, ...] = (AmbitoNivel.ESTADO, AmbitoNivel.UE)


__all__ = ["AmbitoNivel", "AMBITO_ORDER", "NATIONAL_AMBITOS"]
# Fin del archivo app/modules/fichas/enums/ambito_nivel_enum.py
