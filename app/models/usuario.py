"""
Modelo de Usuario (operadores, maquinistas, ingenieros y administradores).
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.sql import func
from app.db.base import Base


class Usuario(Base):
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    area = Column(String(50), nullable=True)
    rol = Column(String(50), nullable=False, default="Operador")  # Operador, Maquinista, Ingeniero, Admin, Master
    activo = Column(Boolean, default=True, nullable=False)
    creado_en = Column(DateTime(timezone=True), server_default=func.now())
