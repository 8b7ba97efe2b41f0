# -*- coding: utf-8 -*-
"""
app/modules/fichas/models/ficha_models.py

Ficha: registro central sobre el que se calculan las estadísticas.

El esquema lo mantiene la capa CRUD; aquí solo se mapea lo que leen las
agregaciones. Los valores enumerados se guardan como texto y se validan
con los StrEnum de app.modules.fichas.enums.

Autor: Gestor de Fichas
Fecha: 16/09/2026
"""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.shared.database import Base


class Ficha(Base):
    __tablename__ = "fichas"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Textos sobre los que se aplica la búsqueda libre (q)
    nombre_ficha = Column(String(500), nullable=False)
    frase_publicitaria = Column(Text, nullable=True)
    texto_divulgacion = Column(Text, nullable=True)

    # Ámbito geográfico: UE | ESTADO | CCAA | PROVINCIA
    ambito_nivel = Column(String(16), nullable=False, index=True)
    ambito_ccaa_id = Column(Integer, ForeignKey("ccaa.id"), nullable=True, index=True)
    ambito_provincia_id = Column(Integer, ForeignKey("provincias.id"), nullable=True, index=True)

    tramite_tipo = Column(String(16), nullable=True)   # directo | si | no
    complejidad = Column(String(16), nullable=True)    # baja | media | alta

    # Dos huecos de destaque independientes
    destaque_principal = Column(String(32), nullable=True)
    destaque_secundario = Column(String(32), nullable=True)

    trabajador_id = Column(Integer, nullable=True, index=True)
    trabajador_subida_id = Column(Integer, nullable=True, index=True)
    existe_frase = Column(Boolean, nullable=False, default=False)

    # UTC sin zona; todo el filtrado temporal se hace sobre esta columna
    created_at = Column(DateTime, nullable=False, server_default=func.now(), index=True)

    portales = relationship("Portal", secondary="ficha_portal", back_populates="fichas")
    tematicas = relationship("Tematica", secondary="ficha_tematica", back_populates="fichas")

    __table_args__ = (
        Index("idx_fichas_ambito_created_at", ambito_nivel, created_at),
    )

    def __repr__(self):
        return f"<Ficha(id={self.id}, ambito={self.ambito_nivel}, created_at={self.created_at})>"


__all__ = ["Ficha"]
# Fin del archivo app/modules/fichas/models/ficha_models.py
