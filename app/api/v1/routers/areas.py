from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.area import AreaCreate, AreaRead, AreaUpdate
from app.schemas.common import ErrorResponse
from app.crud.area import get_area, list_areas, create_area, update_area, delete_area
from app.crud.usuario import get_usuario
from app.utils.logger import logger

router = APIRouter(tags=["Áreas"])


def _validar_responsable(db: Session, responsable_area_id):
    if responsable_area_id is not None and not get_usuario(db, responsable_area_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="El responsable de área indicado no existe.",
        )


@router.get("/", response_model=List[AreaRead], summary="Listar áreas")
def list_areas_endpoint(db: Session = Depends(get_db)):
    return list_areas(db)


@router.get(
    "/{area_id}",
    response_model=AreaRead,
    responses={404: {"model": ErrorResponse}},
    summary="Obtener área",
)
def get_area_endpoint(area_id: int, db: Session = Depends(get_db)):
    area = get_area(db, area_id)
    if not area:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Área no encontrada")
    return area


@router.post(
    "/",
    response_model=AreaRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Crear área",
)
def create_area_endpoint(payload: AreaCreate, db: Session = Depends(get_db)):
    _validar_responsable(db, payload.responsable_area_id)
    area = create_area(db, payload)
    logger.info("Área creada id=%s", area.id)
    return area


@router.put(
    "/{area_id}",
    response_model=AreaRead,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Actualizar área",
)
def update_area_endpoint(area_id: int, payload: AreaUpdate, db: Session = Depends(get_db)):
    _validar_responsable(db, payload.responsable_area_id)
    area = update_area(db, area_id, payload)
    if not area:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Área no encontrada")
    return area


@router.delete(
    "/{area_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Eliminar área",
    description="Falla con 409 si el área todavía tiene piezas.",
)
def delete_area_endpoint(area_id: int, db: Session = Depends(get_db)):
    if not delete_area(db, area_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Área no encontrada")
