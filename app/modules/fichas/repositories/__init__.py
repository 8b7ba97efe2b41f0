# -*- coding: utf-8 -*-
"""
app/modules/fichas/repositories/__init__.py

Autor: Gestor de Fichas
Fecha: 19/09/2026
"""

from .stats_repository import PortalRef, TematicaRef, StatsRepository, SqlProvinciaLookup

__all__ = ["PortalRef", "TematicaRef", "StatsRepository", "SqlProvinciaLookup"]
# Fin del archivo app/modules/fichas/repositories/__init__.py
