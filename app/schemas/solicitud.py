from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class SolicitudCreate(BaseModel):
    solicitante_id: int
    id_pieza: int
    turno: str = Field(..., min_length=1, max_length=10, example="A")
    tipo: str = Field(..., min_length=1, max_length=50, example="Daño Físico")
    detalles: str = Field(..., min_length=1, example="Fractura en el botador principal")
    dibujo: Optional[str] = Field(None, max_length=255)


class SolicitudDashboard(BaseModel):
    """Fila aplanada de la solicitud con sus campos derivados."""
    id: int
    pieza_nombre: Optional[str] = None
    maquina: str
    solicitante_nombre: Optional[str] = None
    fecha_y_hora: datetime
    turno: str
    tipo: str
    detalles: str
    dibujo: Optional[str] = None
    prioridad_actual: str
    estado_operacional: str
    maquinista_asignado_nombre: Optional[str] = None
    total_tiempo_maquina: float = 0.0
