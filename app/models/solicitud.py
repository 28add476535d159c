"""
Modelo de Solicitud: petición de reparación, mejora o fabricación
sobre una pieza o molde.

Relaciones:
- Solicitud (N) → (1) Usuario solicitante
- Solicitud (N) → (1) Pieza
- Solicitud (1) → (0..1) Revision
- Solicitud (1) → (N) EstadoTrabajo (historial completo de segmentos)
"""
from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.db.base import Base


class Solicitud(Base):
    __tablename__ = "solicitudes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    solicitante_id = Column(Integer, ForeignKey("usuarios.id", ondelete="RESTRICT"), nullable=False, index=True)
    id_pieza = Column(Integer, ForeignKey("piezas.id"), nullable=False, index=True)

    fecha_y_hora = Column(DateTime, nullable=False, default=datetime.now)
    turno = Column(String(10), nullable=False)   # Ej: A, B, C
    tipo = Column(String(50), nullable=False)    # Ej: Daño Físico, Mejora, Fabricación
    detalles = Column(Text, nullable=False)
    dibujo = Column(String(255), nullable=True)  # Referencia al plano/dibujo

    # Relaciones
    solicitante = relationship("Usuario", lazy="joined")
    pieza = relationship("Pieza", back_populates="solicitudes", lazy="joined")
    revision = relationship(
        "Revision",
        back_populates="solicitud",
        uselist=False,
        lazy="selectin",
        cascade="all, delete-orphan",
    )
    operaciones = relationship(
        "EstadoTrabajo",
        back_populates="solicitud",
        lazy="selectin",
        order_by="EstadoTrabajo.fecha_y_hora_de_inicio",
        cascade="all, delete-orphan",
    )
