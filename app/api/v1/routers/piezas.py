from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.pieza import PiezaCreate, PiezaRead, PiezaUpdate
from app.schemas.common import ErrorResponse
from app.crud.pieza import get_pieza, list_piezas, create_pieza, update_pieza, delete_pieza
from app.crud.area import get_area
from app.utils.logger import logger

router = APIRouter(tags=["Piezas"])


def _validar_area(db: Session, id_area):
    if id_area is not None and not get_area(db, id_area):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="El área indicada no existe.",
        )


@router.get(
    "/",
    response_model=List[PiezaRead],
    summary="Listar piezas",
    description="Lista las piezas con su área; se puede filtrar por área.",
)
def list_piezas_endpoint(
    id_area: Optional[int] = Query(None, description="Filtrar por área"),
    db: Session = Depends(get_db),
):
    return list_piezas(db, id_area)


@router.get(
    "/{pieza_id}",
    response_model=PiezaRead,
    responses={404: {"model": ErrorResponse}},
    summary="Obtener pieza",
)
def get_pieza_endpoint(pieza_id: int, db: Session = Depends(get_db)):
    pieza = get_pieza(db, pieza_id)
    if not pieza:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pieza no encontrada")
    return pieza


@router.post(
    "/",
    response_model=PiezaRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Crear pieza",
)
def create_pieza_endpoint(payload: PiezaCreate, db: Session = Depends(get_db)):
    _validar_area(db, payload.id_area)
    pieza = create_pieza(db, payload)
    logger.info("Pieza creada id=%s area=%s", pieza.id, pieza.id_area)
    return pieza


@router.put(
    "/{pieza_id}",
    response_model=PiezaRead,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Actualizar pieza",
)
def update_pieza_endpoint(pieza_id: int, payload: PiezaUpdate, db: Session = Depends(get_db)):
    _validar_area(db, payload.id_area)
    pieza = update_pieza(db, pieza_id, payload)
    if not pieza:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pieza no encontrada")
    return pieza


@router.delete(
    "/{pieza_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Eliminar pieza",
    description="Falla con 409 si la pieza tiene solicitudes registradas.",
)
def delete_pieza_endpoint(pieza_id: int, db: Session = Depends(get_db)):
    if not delete_pieza(db, pieza_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pieza no encontrada")
