"""
Catálogo de máquinas del taller (MaquinaMS), usado al registrar tiempos.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.maquina import MaquinaCreate, MaquinaRead, MaquinaUpdate
from app.schemas.common import ErrorResponse
from app.crud.maquina import get_maquina, list_maquinas, create_maquina, update_maquina, delete_maquina
from app.utils.logger import logger

router = APIRouter(tags=["Máquinas"])

NOMBRE_OBLIGATORIO = "El nombre de la máquina es obligatorio."


@router.get("/", response_model=List[MaquinaRead], summary="Listar máquinas")
def list_maquinas_endpoint(db: Session = Depends(get_db)):
    return list_maquinas(db)


@router.get(
    "/{maquina_id}",
    response_model=MaquinaRead,
    responses={404: {"model": ErrorResponse}},
    summary="Obtener máquina",
)
def get_maquina_endpoint(maquina_id: int, db: Session = Depends(get_db)):
    maquina = get_maquina(db, maquina_id)
    if not maquina:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Máquina no encontrada")
    return maquina


@router.post(
    "/",
    response_model=MaquinaRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Crear máquina",
)
def create_maquina_endpoint(payload: MaquinaCreate, db: Session = Depends(get_db)):
    if not payload.nombre.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=NOMBRE_OBLIGATORIO)
    maquina = create_maquina(db, payload.nombre)
    logger.info("Máquina creada id=%s", maquina.id)
    return maquina


@router.put(
    "/{maquina_id}",
    response_model=MaquinaRead,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Actualizar máquina",
)
def update_maquina_endpoint(maquina_id: int, payload: MaquinaUpdate, db: Session = Depends(get_db)):
    if payload.id != maquina_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="El ID de la URL no coincide con el del cuerpo de la petición.",
        )
    if not payload.nombre.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=NOMBRE_OBLIGATORIO)

    maquina = update_maquina(db, maquina_id, payload.nombre)
    if not maquina:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Máquina no encontrada")
    return maquina


@router.delete(
    "/{maquina_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
    summary="Eliminar máquina",
)
def delete_maquina_endpoint(maquina_id: int, db: Session = Depends(get_db)):
    if not delete_maquina(db, maquina_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Máquina no encontrada")
