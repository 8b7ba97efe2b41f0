# -*- coding: utf-8 -*-
"""
app/modules/fichas/enums/destaque_enum.py

Etiquetas de destaque (dos huecos independientes por ficha:
destaque_principal y destaque_secundario) y modos de filtrado.

Autor: Gestor de Fichas
Fecha: 16/09/2026
"""

from enum import StrEnum


class DestaqueEtiqueta(StrEnum):
    """Etiquetas que puede contener cada hueco de destaque."""
    NUEVA = "nueva"
    PARA_PUBLICITAR = "para_publicitar"


class DestaqueModo(StrEnum):
    """
    Modo de filtrado por destaques.

    Valores:
    - nueva           : la etiqueta "nueva" en cualquiera de los dos huecos
    - para_publicitar : la etiqueta "para_publicitar" en cualquiera de los dos huecos
    - ambas           : exactamente las dos etiquetas, en cualquier orden
    - sin_etiquetas   : ambos huecos vacíos
    """
    NUEVA = "nueva"
    PARA_PUBLICITAR = "para_publicitar"
    AMBAS = "ambas"
    SIN_ETIQUETAS = "sin_etiquetas"


__all__ = ["DestaqueEtiqueta", "DestaqueModo"]
# Fin del archivo app/modules/fichas/enums/destaque_enum.py
