from pydantic import BaseModel, Field
from typing import Dict, Optional
from datetime import datetime


class AccionTrabajo(BaseModel):
    """Cuerpo de iniciar/reanudar y pausar."""
    id_maquinista: int
    maquina_asignada: Optional[str] = Field(None, max_length=100)
    observaciones: Optional[str] = None


class FinalizarTrabajo(BaseModel):
    id_maquinista: int
    # Horas por máquina, ej. {"Torno CNC": 2.5, "Fresadora": 1.0}
    tiempos_por_maquina: Dict[str, float] = Field(default_factory=dict)
    observaciones: Optional[str] = None


class EstadoTrabajoLegacy(BaseModel):
    """
    Cuerpo plano heredado del primer cliente.
    `prioridad` indica la acción: Completado finaliza, Pausada pausa,
    cualquier otro valor inicia o reanuda.
    """
    id_solicitud: int
    id_maquinista: int
    prioridad: str
    maquina_asignada: Optional[str] = None
    tiempo_maquina: float = 0
    observaciones: Optional[str] = None


class EstadoTrabajoRead(BaseModel):
    id: int
    id_solicitud: int
    id_maquinista: Optional[int] = None
    maquinista_nombre: Optional[str] = None
    descripcion_operacion: str
    maquina_asignada: str
    fecha_y_hora_de_inicio: datetime
    fecha_y_hora_de_fin: Optional[datetime] = None
    tiempo_maquina: float
    observaciones: Optional[str] = None

    class Config:
        from_attributes = True


class AsignacionResumen(BaseModel):
    id_solicitud: int
    maquinista_asignado_nombre: str
