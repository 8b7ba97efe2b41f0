# -*- coding: utf-8 -*-
"""
app/modules/fichas/__init__.py

Módulo de fichas: modelos, estadísticas y rutas de informes.

Autor: Gestor de Fichas
Fecha: 16/09/2026
"""
# Fin del archivo app/modules/fichas/__init__.py
