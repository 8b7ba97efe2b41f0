# -*- coding: utf-8 -*-
"""
app/main.py

Punto de entrada del backend de estadísticas del Gestor de Fichas.

Ajustes clave:
- Uso de app.core.settings como fachada de configuración.
- Logging centralizado (plain/pretty/json) según LOG_LEVEL / LOG_FORMAT.
- Montaje de observabilidad Prometheus (/metrics) vía app.observability.prom
- Health principal /health delegado al paquete app.routes (health_routes.py)
- Informes de estadísticas en /api/stats (módulo fichas)

Autor: Gestor de Fichas
Fecha: 15/09/2026
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de cualquier import que lea la configuración
# En PROD: override=False para respetar variables del entorno
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_PYTHON_ENV = os.getenv("PYTHON_ENV", "development").strip().strip('"').strip("'").lower()
_override_env = _PYTHON_ENV == "development"
load_dotenv(dotenv_path=_ENV_PATH, override=_override_env)

from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.core.settings import get_settings
from app.core.logging import setup_logging
from app.core.db import get_engine
from app.observability.prom import setup_observability
from app.shared.utils.json_response import UTF8JSONResponse, json_response_utf8

settings = get_settings()
setup_logging(settings.log_level, settings.log_format)
logger = logging.getLogger(__name__)

logger.info(f"[dotenv] Loaded {_ENV_PATH} (override={_override_env}, PYTHON_ENV={_PYTHON_ENV})")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    logger.info(
        "🟢 %s %s iniciado (env=%s, max_meses=%s)",
        settings.app_name,
        settings.app_version,
        settings.python_env,
        settings.stats_max_months,
    )
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        # Solo se libera el pool si el motor llegó a crearse
        if get_engine.cache_info().currsize:
            get_engine().dispose()
            logger.info("🔌 Pool de conexiones liberado")
        logger.info("🔴 %s apagado.", settings.app_name)


openapi_tags = [
    {"name": "stats", "description": "Informes de estadísticas de fichas (portales, temáticas, ámbitos, series)"},
]

app = FastAPI(
    title=settings.app_name,
    description="API de estadísticas y agregaciones de fichas",
    version=settings.app_version,
    lifespan=lifespan,
    openapi_tags=openapi_tags,
    default_response_class=UTF8JSONResponse,  # Fuerza charset=utf-8 en todas las respuestas JSON
)


# ═══════════════════════════════════════════════════════════════════════════════
# CORS
# ═══════════════════════════════════════════════════════════════════════════════
def _configure_cors(app_instance: FastAPI) -> dict:
    """
    Configura CORS a partir de CORS_ORIGINS.

    En producción sin orígenes explícitos no se registra el middleware
    (fail-closed: se bloquea todo origen cruzado).
    """
    origins_list = settings.get_cors_origins()

    if not origins_list:
        if settings.is_prod:
            logger.error("❌ CORS DISABLED: CORS_ORIGINS vacío en producción")
            return {"cors_disabled": True, "allow_origins": []}
        logger.warning("⚠️ CORS: sin orígenes configurados en desarrollo; usando localhost")
        origins_list = ["http://localhost:5173", "http://localhost:3000"]

    allow_credentials = True
    if origins_list == ["*"]:
        # "*" con credenciales es inválido en navegadores
        allow_credentials = False

    cors_config = {
        "allow_origins": origins_list,
        "allow_credentials": allow_credentials,
        "allow_methods": ["GET", "OPTIONS"],
        "allow_headers": ["*"],
        "max_age": 600,
    }
    logger.info(f"🌐 CORS: origins={origins_list} credentials={allow_credentials}")
    app_instance.add_middleware(CORSMiddleware, **cors_config)
    return cors_config


# Observabilidad Prometheus (/metrics)
# El orden real de ejecución de middlewares en Starlette es inverso al registro:
# CORS se registra al final para ejecutarse primero (outermost).
if settings.metrics_enabled:
    setup_observability(app)

_cors_config = _configure_cors(app)


# ═══════════════════════════════════════════════════════════════════════════════
# EXCEPTION HANDLERS CON UTF-8
# ═══════════════════════════════════════════════════════════════════════════════
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Garantiza charset UTF-8 en los errores (mensajes con acentos)."""
    return json_response_utf8(
        content={"detail": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


# Incluye router maestro
from app.routes import router as main_router

app.include_router(main_router)


@app.get("/")
def root():
    return {"service": settings.app_name, "status": "active"}


if __name__ == "__main__":
    enable_reload = settings.is_dev and os.getenv("DISABLE_RELOAD", "").lower() not in ("true", "1", "yes")
    logger.info(f"🔧 Starting server with reload={enable_reload} (env={settings.python_env})")

    uvicorn.run(
        "app.main:app",
        host=settings.app_host,
        port=int(settings.app_port),
        reload=enable_reload,
    )

# Fin del archivo app/main.py
