# -*- coding: utf-8 -*-
"""
app/modules/fichas/services/__init__.py

Autor: Gestor de Fichas
Fecha: 21/09/2026
"""

from .stats_service import StatsService

__all__ = ["StatsService"]
# Fin del archivo app/modules/fichas/services/__init__.py
