# -*- coding: utf-8 -*-
"""
app/shared/utils/base_models.py

Modelo base Pydantic v2 para los esquemas de respuesta de la API.

- `from_attributes=True` para validar directamente desde dataclasses u ORM
- `populate_by_name=True` para que funcionen los alias
- `str_strip_whitespace=True` para limpiar textos de entrada

Autor: Gestor de Fichas
Fecha: 15/09/2026
"""

from pydantic import BaseModel, ConfigDict, Field


class UTF8SafeModel(BaseModel):
    """Base de todos los esquemas compartidos por la API (JSON en UTF-8 nativo)."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


__all__ = ["UTF8SafeModel", "Field"]
# Fin del archivo app/shared/utils/base_models.py
