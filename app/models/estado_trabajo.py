"""
Modelo de EstadoTrabajo: un segmento registrado de trabajo sobre una solicitud.

Los registros se agregan (no se editan) durante el ciclo de vida del trabajo.
El registro abierto (fecha_y_hora_de_fin IS NULL) representa el estado actual;
como máximo debe existir uno por solicitud.
"""
import enum
from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, DateTime, Numeric, ForeignKey, Index
from sqlalchemy.orm import relationship
from app.db.base import Base


class EstadoOperacion(str, enum.Enum):
    """Descripciones de operación usadas por el flujo de trabajo."""
    EN_REVISION = "En Revisión"
    ASIGNADA = "Asignada"
    EN_PROGRESO = "En progreso"
    PAUSADA = "Pausada"
    COMPLETADO = "Completado"
    RECHAZADA = "RECHAZADA"


class EstadoTrabajo(Base):
    __tablename__ = "estado_trabajo"

    id = Column(Integer, primary_key=True, autoincrement=True)
    id_solicitud = Column(Integer, ForeignKey("solicitudes.id"), nullable=False)
    # Puede ser nulo mientras la solicitud espera asignación
    id_maquinista = Column(Integer, ForeignKey("usuarios.id", ondelete="RESTRICT"), nullable=True)

    descripcion_operacion = Column(String(150), nullable=False)
    maquina_asignada = Column(String(100), nullable=False, default="")
    fecha_y_hora_de_inicio = Column(DateTime, nullable=False, default=datetime.now)
    fecha_y_hora_de_fin = Column(DateTime, nullable=True)
    # Horas de máquina (decimal(10,2))
    tiempo_maquina = Column(Numeric(10, 2, asdecimal=False), nullable=False, default=0)
    observaciones = Column(Text, nullable=True)

    # Relaciones
    solicitud = relationship("Solicitud", back_populates="operaciones")
    maquinista = relationship("Usuario", lazy="joined")

    __table_args__ = (
        Index("ix_estado_trabajo_solicitud_inicio", "id_solicitud", "fecha_y_hora_de_inicio"),
    )

    @property
    def abierto(self) -> bool:
        return self.fecha_y_hora_de_fin is None

    @property
    def maquinista_nombre(self):
        return self.maquinista.nombre if self.maquinista else None
