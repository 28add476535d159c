# app/schemas/auth.py
from pydantic import BaseModel
from typing import Optional


class LoginRequest(BaseModel):
    email: str
    password: str


class UsuarioSesion(BaseModel):
    id: int
    nombre: str
    email: str
    rol: str
    area: Optional[str] = None
    activo: bool

    class Config:
        from_attributes = True


class LoginResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    user: UsuarioSesion
