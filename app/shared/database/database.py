# -*- coding: utf-8 -*-
"""
app/shared/database/database.py

SQLAlchemy síncrono (psycopg) para las consultas de estadísticas.
El motor se construye perezosamente a partir de settings.database_url,
de modo que importar este módulo no abre conexiones.

Provee:
- get_engine() (create_engine cacheado)
- SessionLocal (sessionmaker sin bind; se enlaza al motor al abrir)
- Dependencia FastAPI: get_db
- check_database_health()

Notas:
- En PostgreSQL se aplica SET statement_timeout al abrir cada sesión.
- En SQLite (tests) no se pasan parámetros de pool.

Autor: Gestor de Fichas
Fecha: 15/09/2026
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.shared.config import settings
from app.shared.database.base import Base  # reutilizamos la Base única

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Crea (una sola vez) el motor SQLAlchemy según la configuración activa."""
    url = settings.database_url
    kwargs: dict = {"echo": bool(settings.db_echo_sql), "future": True}

    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_timeout=settings.db_pool_timeout,
            pool_recycle=settings.db_pool_recycle,
            pool_pre_ping=settings.db_pool_pre_ping,
        )

    engine = create_engine(url, **kwargs)
    logger.info(
        "[DB] Motor creado dialect=%s echo=%s",
        engine.dialect.name,
        kwargs["echo"],
    )
    return engine


# ── Session factory (bind en cada apertura)
SessionLocal = sessionmaker(autoflush=False, expire_on_commit=False, class_=Session)


def _open_session() -> Session:
    session = SessionLocal(bind=get_engine())
    if session.get_bind().dialect.name == "postgresql":
        # Límite por sentencia para las agregaciones
        session.execute(text(f"SET statement_timeout = {int(settings.db_statement_timeout_ms)}"))
    return session


# ── Dependencia FastAPI
def get_db() -> Generator[Session, None, None]:
    session = _open_session()
    try:
        yield session
    except SQLAlchemyError:
        session.rollback()
        raise
    finally:
        session.close()


# ── Health check
def check_database_health(sql: str = "SELECT 1") -> bool:
    """
    Verifica conectividad a la base de datos.

    Returns:
        True si la conexión es exitosa, False en caso contrario
    """
    try:
        with get_engine().connect() as conn:
            conn.execute(text(sql))
        return True
    except SQLAlchemyError as e:
        logger.warning("[DB] Health check falló: %s", e)
        return False


__all__ = [
    "get_engine",
    "SessionLocal",
    "Base",
    "get_db",
    "check_database_health",
]
# Fin del archivo app/shared/database/database.py
