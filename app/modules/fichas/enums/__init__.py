# -*- coding: utf-8 -*-
"""
app/modules/fichas/enums/__init__.py

Export central de enums del módulo de fichas.

Autor: Gestor de Fichas
Fecha: 16/09/2026
"""

from .ambito_nivel_enum import AmbitoNivel, AMBITO_ORDER, NATIONAL_AMBITOS
from .tramite_tipo_enum import TramiteTipo, Complejidad, TRAMITE_ORDER
from .destaque_enum import DestaqueEtiqueta, DestaqueModo
from .stats_enums import StatsDimension, SeriesGranularity

__all__ = [
    "AmbitoNivel",
    "AMBITO_ORDER",
    "NATIONAL_AMBITOS",
    "TramiteTipo",
    "Complejidad",
    "TRAMITE_ORDER",
    "DestaqueEtiqueta",
    "DestaqueModo",
    "StatsDimension",
    "SeriesGranularity",
]
# Fin del archivo app/modules/fichas/enums/__init__.py
