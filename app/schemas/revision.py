from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional
from datetime import datetime

from app.models.revision import NivelPrioridad

# Prioridades que un revisor puede fijar; Completado solo se alcanza al finalizar el trabajo
PRIORIDADES_REVISION = (
    NivelPrioridad.BAJA.value,
    NivelPrioridad.MEDIA.value,
    NivelPrioridad.ALTA.value,
    NivelPrioridad.URGENTE.value,
    NivelPrioridad.RECHAZADA.value,
)


def _validar_prioridad(value: str) -> str:
    if value not in PRIORIDADES_REVISION:
        raise ValueError(f"Prioridad inválida. Valores permitidos: {', '.join(PRIORIDADES_REVISION)}")
    return value


class RevisionCreate(BaseModel):
    id_solicitud: int
    id_revisor: int
    prioridad: str = Field(..., example=NivelPrioridad.ALTA.value)
    comentarios: Optional[str] = None
    id_maquinista_asignado: Optional[int] = None

    @field_validator("prioridad")
    @classmethod
    def prioridad_valida(cls, v):
        return _validar_prioridad(v)

    @model_validator(mode="after")
    def maquinista_requerido(self):
        if self.prioridad != NivelPrioridad.RECHAZADA.value and self.id_maquinista_asignado is None:
            raise ValueError("Debe asignar un maquinista salvo que la solicitud sea rechazada")
        return self


class PrioridadUpdate(BaseModel):
    nueva_prioridad: str = Field(..., example=NivelPrioridad.URGENTE.value)
    # Usuario que realiza el cambio (queda en la bitácora)
    id_usuario: Optional[int] = None

    @field_validator("nueva_prioridad")
    @classmethod
    def prioridad_valida(cls, v):
        return _validar_prioridad(v)


class RevisionRead(BaseModel):
    id: int
    id_solicitud: int
    id_revisor: int
    revisor_nombre: Optional[str] = None
    prioridad: str
    comentarios: Optional[str] = None
    fecha_hora_revision: datetime

    class Config:
        from_attributes = True
