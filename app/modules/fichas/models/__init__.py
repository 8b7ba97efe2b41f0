# -*- coding: utf-8 -*-
"""
app/modules/fichas/models/__init__.py

Barrel de modelos del módulo Fichas.

Modelos:
- Ficha          : registro central de las estadísticas.
- Portal         : canal de publicación (many-to-many vía FichaPortal).
- Tematica       : temática (many-to-many vía FichaTematica).
- Ccaa/Provincia : jerarquía geográfica (provincia → comunidad).

Autor: Gestor de Fichas
Fecha: 16/09/2026
"""

from .ficha_models import Ficha
from .reference_models import Portal, Tematica, FichaPortal, FichaTematica, Ccaa, Provincia

__all__ = [
    "Ficha",
    "Portal",
    "Tematica",
    "FichaPortal",
    "FichaTematica",
    "Ccaa",
    "Provincia",
]

# Fin del archivo app/modules/fichas/models/__init__.py
