#app/api/v1/routers/usuarios.py
"""
Router para gestión de Usuarios (operadores, maquinistas, ingenieros).
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.session import get_db
from app.schemas.usuario import UsuarioCreate, UsuarioRead, UsuarioUpdate
from app.schemas.common import ErrorResponse
from app.crud.usuario import (
    get_usuario,
    get_usuario_by_email,
    list_usuarios,
    list_maquinistas,
    create_usuario,
    update_usuario,
    delete_usuario,
)
from app.utils.logger import logger

router = APIRouter(tags=["Usuarios"])

USUARIO_SISTEMA_PROTEGIDO = "El usuario de sistema no puede eliminarse ni desactivarse."


# ==================== ENDPOINTS DE USUARIOS ====================

@router.post(
    "/",
    response_model=UsuarioRead,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
    summary="Crear usuario",
    description="Crea un nuevo usuario; la contraseña se guarda con hash bcrypt.",
)
def create_usuario_endpoint(payload: UsuarioCreate, db: Session = Depends(get_db)):
    if get_usuario_by_email(db, payload.email):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Ya existe un usuario con ese correo.",
        )

    u = create_usuario(db, payload)
    logger.info("Usuario creado id=%s rol=%s", u.id, u.rol)
    return u


@router.get(
    "/",
    response_model=List[UsuarioRead],
    summary="Listar usuarios",
    description="Obtiene todos los usuarios ordenados por nombre.",
)
def list_usuarios_endpoint(db: Session = Depends(get_db)):
    return list_usuarios(db)


@router.get(
    "/maquinistas",
    response_model=List[UsuarioRead],
    responses={404: {"model": ErrorResponse}},
    summary="Listar maquinistas",
    description="Usuarios activos con rol Maquinista, para asignar trabajos.",
)
def list_maquinistas_endpoint(db: Session = Depends(get_db)):
    maquinistas = list_maquinistas(db)
    if not maquinistas:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No se encontraron maquinistas registrados.",
        )
    return maquinistas


@router.get(
    "/{usuario_id}",
    response_model=UsuarioRead,
    responses={404: {"model": ErrorResponse}},
    summary="Obtener usuario",
)
def get_usuario_endpoint(usuario_id: int, db: Session = Depends(get_db)):
    u = get_usuario(db, usuario_id)
    if not u:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Usuario no encontrado")
    return u


@router.put(
    "/{usuario_id}",
    response_model=UsuarioRead,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Actualizar usuario",
    description="Actualiza los datos del usuario. La contraseña solo cambia si se envía.",
)
def update_usuario_endpoint(usuario_id: int, payload: UsuarioUpdate, db: Session = Depends(get_db)):
    if payload.id != usuario_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="El ID de la URL no coincide con el del cuerpo de la petición.",
        )

    if usuario_id == settings.system_user_id and payload.activo is False:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=USUARIO_SISTEMA_PROTEGIDO)

    if payload.email:
        existente = get_usuario_by_email(db, payload.email)
        if existente and existente.id != usuario_id:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Ya existe un usuario con ese correo.",
            )

    u = update_usuario(db, usuario_id, payload)
    if not u:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Usuario no encontrado")

    logger.info("Usuario actualizado id=%s", u.id)
    return u


@router.delete(
    "/{usuario_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Eliminar usuario",
)
def delete_usuario_endpoint(usuario_id: int, db: Session = Depends(get_db)):
    # Los registros de arranque y rechazo se firman con este usuario
    if usuario_id == settings.system_user_id:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=USUARIO_SISTEMA_PROTEGIDO)
    if not delete_usuario(db, usuario_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Usuario no encontrado")
    logger.info("Usuario eliminado id=%s", usuario_id)
