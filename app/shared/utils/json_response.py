# -*- coding: utf-8 -*-
"""
app/shared/utils/json_response.py

Respuestas JSON con charset UTF-8 explícito.

Se usa como default_response_class de la aplicación y en los handlers de
excepciones: los nombres de portales y temáticas llevan tildes y eñes, y
algunos proxies no asumen UTF-8 por defecto.

    app = FastAPI(default_response_class=UTF8JSONResponse)

Autor: Gestor de Fichas
Fecha: 15/09/2026
"""

from typing import Any, Mapping, Optional

from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """JSONResponse con Content-Type: application/json; charset=utf-8."""
    media_type = "application/json; charset=utf-8"


def json_response_utf8(
    content: Any,
    status_code: int = 200,
    headers: Optional[Mapping[str, str]] = None,
) -> UTF8JSONResponse:
    """Atajo para handlers que construyen la respuesta a mano."""
    return UTF8JSONResponse(content=content, status_code=status_code, headers=dict(headers) if headers else None)


__all__ = ["UTF8JSONResponse", "json_response_utf8"]
# Fin del archivo app/shared/utils/json_response.py
