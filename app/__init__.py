# -*- coding: utf-8 -*-
"""
app/__init__.py

Paquete principal del backend de estadísticas del Gestor de Fichas.

Subpaquetes:
- core          : fachadas de configuración, logging y base de datos
- shared        : configuración, base de datos y utilidades HTTP
- observability : métricas Prometheus de la capa HTTP
- modules       : auth (identidad y permisos) y fichas (estadísticas)
- routes        : ensamblado de routers

Autor: Gestor de Fichas
Fecha: 14/09/2026
"""

# Fin del archivo app/__init__.py
