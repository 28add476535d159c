# app/models/maquina.py
from sqlalchemy import Column, Integer, String
from app.db.base import Base


class MaquinaMS(Base):
    """Catálogo de máquinas del Machine Shop (solo alimenta listas desplegables)."""
    __tablename__ = "maquinas_ms"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(100), nullable=False)
