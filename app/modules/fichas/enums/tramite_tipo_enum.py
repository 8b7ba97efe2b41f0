# -*- coding: utf-8 -*-
"""
app/modules/fichas/enums/tramite_tipo_enum.py

Enums de tramitación online y complejidad de una ficha.

Autor: Gestor de Fichas
Fecha: 16/09/2026
"""

from enum import StrEnum


class TramiteTipo(StrEnum):
    """
    Valores:
    - directo : trámite online directo
    - si      : tramitable online
    - no      : sin trámite online
    """
    DIRECTO = "directo"
    SI = "si"
    NO = "no"

    @property
    def label(self) -> str:
        return {"directo": "Trámite online directo", "si": "Tramitable online", "no": "Sin trámite online"}[self.value]


class Complejidad(StrEnum):
    BAJA = "baja"
    MEDIA = "media"
    ALTA = "alta"


TRAMITE_ORDER: tuple[TramiteTipo, ...] = (TramiteTipo.DIRECTO, TramiteTipo.SI, TramiteTipo.NO)


__all__ = ["TramiteTipo", "Complejidad", "TRAMITE_ORDER"]
# Fin del archivo app/modules/fichas/enums/tramite_tipo_enum.py
