"""
Router de revisiones de ingeniería.

Flujo del cliente: intenta PATCH de prioridad; si responde 404 (sin revisión),
crea la revisión con POST.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.common import ErrorResponse
from app.schemas.revision import RevisionCreate, RevisionRead, PrioridadUpdate
from app.services.revision_service import RevisionService

router = APIRouter(tags=["Revisiones"])


@router.post(
    "/",
    response_model=RevisionRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Crear revisión",
    description=(
        "Aprueba la solicitud con una prioridad y asigna maquinista, o la rechaza "
        "(prioridad RECHAZADA). Solo se admite una revisión por solicitud."
    ),
)
def create_revision(payload: RevisionCreate, db: Session = Depends(get_db)):
    return RevisionService(db).crear(payload)


@router.get("/", response_model=List[RevisionRead], summary="Listar revisiones")
def list_revisiones(db: Session = Depends(get_db)):
    return RevisionService(db).listar()


@router.get(
    "/solicitud/{id_solicitud}",
    response_model=RevisionRead,
    responses={404: {"model": ErrorResponse}},
    summary="Revisión de una solicitud",
)
def get_revision_por_solicitud(id_solicitud: int, db: Session = Depends(get_db)):
    return RevisionService(db).obtener_por_solicitud(id_solicitud)


@router.patch(
    "/solicitud/{id_solicitud}/prioridad",
    response_model=RevisionRead,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Actualizar prioridad",
    description="Cambia solo la prioridad y deja constancia del cambio en el historial de trabajo.",
)
def update_prioridad(id_solicitud: int, payload: PrioridadUpdate, db: Session = Depends(get_db)):
    return RevisionService(db).actualizar_prioridad(id_solicitud, payload)
