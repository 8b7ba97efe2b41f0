# -*- coding: utf-8 -*-
"""
app/shared/__init__.py

Infraestructura compartida: configuración, base de datos y utilidades HTTP.

No inicializa settings en import-time para evitar efectos colaterales
durante la recolección de tests.

Autor: Gestor de Fichas
Fecha: 14/09/2026
"""

from app.shared.config.config_loader import get_settings

__all__ = ["get_settings"]
# Fin del archivo app/shared/__init__.py
