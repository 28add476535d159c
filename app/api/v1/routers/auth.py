# app/api/v1/routers/auth.py
"""
Router de autenticación.

El login valida email/contraseña y emite un JWT cuyo `sub` es el id del
usuario. El cliente guarda el token y lo envía como Bearer en /auth/me.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.core.security import create_access_token, get_current_usuario
from app.crud.usuario import authenticate
from app.models.usuario import Usuario
from app.schemas.auth import LoginRequest, LoginResponse, UsuarioSesion
from app.schemas.common import ErrorResponse
from app.utils.logger import logger

router = APIRouter(tags=["Auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Login con email y contraseña",
)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    usuario = authenticate(db, credentials.email, credentials.password)
    if not usuario:
        logger.warning("Login fallido email=%s", credentials.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Credenciales inválidas.",
        )

    token = create_access_token(
        subject=str(usuario.id),
        extra_claims={"rol": usuario.rol, "nombre": usuario.nombre},
    )
    logger.info("Login exitoso usuario_id=%s", usuario.id)

    return LoginResponse(token=token, user=UsuarioSesion.model_validate(usuario))


@router.get(
    "/me",
    response_model=UsuarioSesion,
    summary="Usuario de la sesión actual",
    description="Decodifica el token Bearer y devuelve los datos del usuario.",
)
def me(current_user: Usuario = Depends(get_current_usuario)):
    return current_user
