"""
Router de Solicitudes de trabajo.

Las lecturas devuelven la fila aplanada del tablero con los campos derivados
(prioridad actual, estado operacional, maquinista asignado, tiempo total).
"""
from typing import List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.common import ErrorResponse
from app.schemas.solicitud import SolicitudCreate, SolicitudDashboard
from app.services.dashboard_service import a_fila_dashboard
from app.services.solicitud_service import SolicitudService

router = APIRouter(tags=["Solicitudes"])


# ==================== ALTA ====================

@router.post(
    "/",
    response_model=SolicitudDashboard,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Crear solicitud",
    description="Registra la solicitud y su primer estado 'En Revisión' en una sola transacción.",
)
def create_solicitud(payload: SolicitudCreate, db: Session = Depends(get_db)):
    solicitud = SolicitudService(db).crear(payload)
    return a_fila_dashboard(solicitud)


# ==================== CONSULTAS ====================

@router.get(
    "/",
    response_model=List[SolicitudDashboard],
    summary="Listar solicitudes",
    description="Todas las solicitudes, más recientes primero.",
)
def list_solicitudes(db: Session = Depends(get_db)):
    return SolicitudService(db).listar()


@router.get(
    "/pendientes",
    response_model=List[SolicitudDashboard],
    summary="Solicitudes pendientes",
    description="Solicitudes que no están completadas ni rechazadas.",
)
def list_pendientes(db: Session = Depends(get_db)):
    return SolicitudService(db).pendientes()


@router.get(
    "/asignaciones-por-maquinista",
    response_model=List[SolicitudDashboard],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Asignaciones de un maquinista",
)
def list_asignaciones_por_maquinista(
    id: int = Query(..., description="ID del maquinista"),
    estado_filtro: str = Query("activo", description="activo | completado | historial"),
    db: Session = Depends(get_db),
):
    return SolicitudService(db).asignaciones_por_maquinista(id, estado_filtro)


@router.get(
    "/{id_solicitud}",
    response_model=SolicitudDashboard,
    responses={404: {"model": ErrorResponse}},
    summary="Obtener solicitud",
)
def get_solicitud(id_solicitud: int, db: Session = Depends(get_db)):
    return a_fila_dashboard(SolicitudService(db).obtener(id_solicitud))
