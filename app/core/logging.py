# -*- coding: utf-8 -*-
"""
app/core/logging.py

Fachada del módulo `app.shared.config.logging_config`, para
mantener un punto de entrada único bajo `app.core`.

Autor: Gestor de Fichas
Fecha: 15/09/2026
"""

from app.shared.config.logging_config import setup_logging

__all__ = ["setup_logging"]

# Fin del archivo app/core/logging.py
