# -*- coding: utf-8 -*-
"""
app/modules/__init__.py

Módulos de negocio: auth (identidad y permisos) y fichas (estadísticas).

Autor: Gestor de Fichas
Fecha: 16/09/2026
"""
# Fin del archivo app/modules/__init__.py
