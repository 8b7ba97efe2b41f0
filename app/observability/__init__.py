# -*- coding: utf-8 -*-
"""
app/observability/__init__.py

Autor: Gestor de Fichas
Fecha: 16/09/2026
"""
# Fin del archivo app/observability/__init__.py
