# -*- coding: utf-8 -*-
"""
app/modules/fichas/models/reference_models.py

Entidades de referencia: portales, temáticas y sus tablas puente
(many-to-many con fichas), comunidades autónomas y provincias.

Autor: Gestor de Fichas
Fecha: 16/09/2026
"""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.shared.database import Base


class Portal(Base):
    __tablename__ = "portales"

    id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(64), nullable=False, unique=True)
    nombre = Column(String(255), nullable=False)

    fichas = relationship("Ficha", secondary="ficha_portal", back_populates="portales")

    def __repr__(self):
        return f"<Portal(id={self.id}, slug={self.slug})>"


class Tematica(Base):
    __tablename__ = "tematicas"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(255), nullable=False)
    slug = Column(String(128), nullable=True)

    fichas = relationship("Ficha", secondary="ficha_tematica", back_populates="tematicas")

    def __repr__(self):
        return f"<Tematica(id={self.id}, nombre={self.nombre})>"


class FichaPortal(Base):
    __tablename__ = "ficha_portal"

    ficha_id = Column(Integer, ForeignKey("fichas.id", ondelete="CASCADE"), primary_key=True)
    portal_id = Column(Integer, ForeignKey("portales.id", ondelete="CASCADE"), primary_key=True, index=True)


class FichaTematica(Base):
    __tablename__ = "ficha_tematica"

    ficha_id = Column(Integer, ForeignKey("fichas.id", ondelete="CASCADE"), primary_key=True)
    tematica_id = Column(Integer, ForeignKey("tematicas.id", ondelete="CASCADE"), primary_key=True, index=True)


class Ccaa(Base):
    __tablename__ = "ccaa"

    id = Column(Integer, primary_key=True)
    nombre = Column(String(255), nullable=False)

    provincias = relationship("Provincia", back_populates="ccaa")


class Provincia(Base):
    __tablename__ = "provincias"

    id = Column(Integer, primary_key=True)
    nombre = Column(String(255), nullable=False)
    ccaa_id = Column(Integer, ForeignKey("ccaa.id"), nullable=False, index=True)

    ccaa = relationship("Ccaa", back_populates="provincias")

    def __repr__(self):
        return f"<Provincia(id={self.id}, ccaa_id={self.ccaa_id})>"


__all__ = ["Portal", "Tematica", "FichaPortal", "FichaTematica", "Ccaa", "Provincia"]
# Fin del archivo app/modules/fichas/models/reference_models.py
