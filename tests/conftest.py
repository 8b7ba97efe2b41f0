# tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests del Gestor de Fichas.

- Fuerza PYTHON_ENV=test ANTES de importar la app (EnvTestingSettings:
  SQLite en memoria, métricas desactivadas, logging moderado).
- Motor SQLite en memoria con StaticPool: todas las sesiones comparten
  la misma conexión, así que los datos sembrados son visibles desde las
  rutas (get_db overrideado).
- FichaSeeder: helper para sembrar geografía, portales, temáticas y fichas.
"""

import os

os.environ["PYTHON_ENV"] = "test"
os.environ.setdefault("METRICS_ENABLED", "false")

from datetime import datetime
from typing import Iterable, Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.shared.database.base import Base
from app.modules.fichas.models import (
    Ccaa,
    Ficha,
    FichaPortal,
    FichaTematica,
    Portal,
    Provincia,
    Tematica,
)


# -----------------------------------------------------------------------------
# Base de datos
# -----------------------------------------------------------------------------
@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


# -----------------------------------------------------------------------------
# Siembra de datos
# -----------------------------------------------------------------------------
class FichaSeeder:
    """
    Inserta datos de prueba con ids explícitos y hace commit en cada alta.

    Geografía estándar (`geografia()`):
        CCAA 3 (Andalucía)  → provincias 10 (Sevilla), 11 (Cádiz)
        CCAA 4 (Aragón)     → provincia 20 (Zaragoza)
    """

    def __init__(self, session):
        self.session = session
        self._next_ficha_id = 1

    def _commit(self, *objs):
        self.session.add_all(objs)
        self.session.commit()

    def geografia(self) -> None:
        self._commit(
            Ccaa(id=3, nombre="Andalucía"),
            Ccaa(id=4, nombre="Aragón"),
        )
        self._commit(
            Provincia(id=10, nombre="Sevilla", ccaa_id=3),
            Provincia(id=11, nombre="Cádiz", ccaa_id=3),
            Provincia(id=20, nombre="Zaragoza", ccaa_id=4),
        )

    def portal(self, id: int, slug: str, nombre: Optional[str] = None) -> int:
        self._commit(Portal(id=id, slug=slug, nombre=nombre or slug.capitalize()))
        return id

    def tematica(self, id: int, nombre: str, slug: Optional[str] = None) -> int:
        self._commit(Tematica(id=id, nombre=nombre, slug=slug))
        return id

    def ficha(
        self,
        *,
        created_at: datetime = datetime(2024, 3, 15, 10, 0, 0),
        ambito: str = "ESTADO",
        ccaa_id: Optional[int] = None,
        provincia_id: Optional[int] = None,
        portales: Iterable[int] = (),
        tematicas: Iterable[int] = (),
        **fields,
    ) -> int:
        ficha_id = self._next_ficha_id
        self._next_ficha_id += 1
        fields.setdefault("nombre_ficha", f"Ficha {ficha_id}")
        self._commit(
            Ficha(
                id=ficha_id,
                ambito_nivel=ambito,
                ambito_ccaa_id=ccaa_id,
                ambito_provincia_id=provincia_id,
                created_at=created_at,
                **fields,
            )
        )
        links = [FichaPortal(ficha_id=ficha_id, portal_id=p) for p in portales]
        links += [FichaTematica(ficha_id=ficha_id, tematica_id=t) for t in tematicas]
        if links:
            self._commit(*links)
        return ficha_id


@pytest.fixture
def seed(db):
    return FichaSeeder(db)


# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------
@pytest.fixture
def settings():
    from app.shared.config.settings_testing import EnvTestingSettings

    return EnvTestingSettings()
# Fin del archivo tests/conftest.py
