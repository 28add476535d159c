"""
Router de EstadoTrabajo: transiciones de la ejecución (iniciar, pausar,
finalizar) y consultas del historial.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.common import ErrorResponse
from app.schemas.estado_trabajo import (
    AccionTrabajo,
    AsignacionResumen,
    EstadoTrabajoLegacy,
    EstadoTrabajoRead,
    FinalizarTrabajo,
)
from app.services.trabajo_service import TrabajoService

router = APIRouter(tags=["Estado de Trabajo"])

ERRORES_TRANSICION = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}


# ==================== TRANSICIONES ====================

@router.post(
    "/{id_solicitud}/iniciar",
    response_model=EstadoTrabajoRead,
    status_code=status.HTTP_201_CREATED,
    responses=ERRORES_TRANSICION,
    summary="Iniciar o reanudar trabajo",
)
def iniciar_trabajo(id_solicitud: int, payload: AccionTrabajo, db: Session = Depends(get_db)):
    return TrabajoService(db).iniciar(id_solicitud, payload)


@router.post(
    "/{id_solicitud}/pausar",
    response_model=EstadoTrabajoRead,
    status_code=status.HTTP_201_CREATED,
    responses=ERRORES_TRANSICION,
    summary="Pausar trabajo",
    description="Solo válido cuando el trabajo está 'En progreso'.",
)
def pausar_trabajo(id_solicitud: int, payload: AccionTrabajo, db: Session = Depends(get_db)):
    return TrabajoService(db).pausar(id_solicitud, payload)


@router.post(
    "/{id_solicitud}/finalizar",
    response_model=List[EstadoTrabajoRead],
    status_code=status.HTTP_201_CREATED,
    responses=ERRORES_TRANSICION,
    summary="Finalizar trabajo",
    description=(
        "Marca la solicitud como Completado y registra un segmento por cada "
        "máquina con horas mayores a cero."
    ),
)
def finalizar_trabajo(id_solicitud: int, payload: FinalizarTrabajo, db: Session = Depends(get_db)):
    return TrabajoService(db).finalizar(id_solicitud, payload)


@router.post(
    "/",
    response_model=List[EstadoTrabajoRead],
    status_code=status.HTTP_201_CREATED,
    responses=ERRORES_TRANSICION,
    summary="Registrar estado (formato plano)",
    description="Compatibilidad con el cliente anterior: 'prioridad' indica la acción a ejecutar.",
)
def registrar_estado(payload: EstadoTrabajoLegacy, db: Session = Depends(get_db)):
    return TrabajoService(db).registrar(payload)


# ==================== CONSULTAS ====================

@router.get("/", response_model=List[EstadoTrabajoRead], summary="Listar registros de trabajo")
def list_estados(db: Session = Depends(get_db)):
    return TrabajoService(db).listar()


@router.get(
    "/asignaciones",
    response_model=List[AsignacionResumen],
    summary="Maquinista asignado por solicitud",
)
def list_asignaciones(db: Session = Depends(get_db)):
    return TrabajoService(db).asignaciones()


@router.get(
    "/solicitud/{id_solicitud}",
    response_model=List[EstadoTrabajoRead],
    responses={404: {"model": ErrorResponse}},
    summary="Historial de una solicitud",
)
def historial_solicitud(id_solicitud: int, db: Session = Depends(get_db)):
    return TrabajoService(db).historial(id_solicitud)
