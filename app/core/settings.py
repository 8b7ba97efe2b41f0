# -*- coding: utf-8 -*-
"""
app/core/settings.py

Fachada de configuración. Reexpone la carga de settings basada en
Pydantic v2 definida en `app.shared.config`.

Autor: Gestor de Fichas
Fecha: 15/09/2026
"""

from app.shared.config.config_loader import get_settings
from app.shared.config.settings_base import BaseAppSettings

__all__ = ["get_settings", "BaseAppSettings"]

# Fin del archivo app/core/settings.py
