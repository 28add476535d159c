"""
Modelo de Revisión de ingeniería (prioridad + asignación).

El campo `prioridad` concentra tanto la urgencia (Baja/Media/Alta/Urgente)
como la fase terminal del ciclo de vida (Completado/RECHAZADA).
"""
import enum
from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.db.base import Base


class NivelPrioridad(str, enum.Enum):
    """Valores admitidos en Revision.prioridad."""
    BAJA = "Baja"
    MEDIA = "Media"
    ALTA = "Alta"
    URGENTE = "Urgente"
    COMPLETADO = "Completado"
    RECHAZADA = "RECHAZADA"


PRIORIDAD_SIN_REVISION = "Pendiente de Revisión"
PRIORIDADES_TERMINALES = {NivelPrioridad.COMPLETADO.value, NivelPrioridad.RECHAZADA.value}


class Revision(Base):
    __tablename__ = "revisiones"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # unique=True: una solicitud tiene como máximo una revisión
    id_solicitud = Column(Integer, ForeignKey("solicitudes.id"), nullable=False, unique=True, index=True)
    id_revisor = Column(Integer, ForeignKey("usuarios.id"), nullable=False)

    prioridad = Column(String(20), nullable=False, default=NivelPrioridad.MEDIA.value)
    comentarios = Column(Text, nullable=True)
    fecha_hora_revision = Column(DateTime, nullable=False, default=datetime.now)

    # Control de concurrencia optimista
    version_id = Column(Integer, nullable=False)

    # Relaciones
    solicitud = relationship("Solicitud", back_populates="revision")
    revisor = relationship("Usuario", lazy="joined")

    __mapper_args__ = {"version_id_col": version_id}

    @property
    def revisor_nombre(self):
        return self.revisor.nombre if self.revisor else None
