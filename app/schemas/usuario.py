from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime

from app.core.config import Roles


def _validar_rol(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in Roles.TODOS:
        raise ValueError(f"Rol inválido. Valores permitidos: {', '.join(Roles.TODOS)}")
    return value


class UsuarioBase(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=100, example="Carlos Ramírez")
    email: EmailStr
    area: Optional[str] = Field(None, max_length=50, example="Moldeo")
    rol: str = Field(Roles.OPERADOR, example=Roles.MAQUINISTA)
    activo: bool = True

    @field_validator("rol")
    @classmethod
    def rol_valido(cls, v):
        return _validar_rol(v)


class UsuarioCreate(UsuarioBase):
    password: str = Field(..., min_length=6)


class UsuarioUpdate(BaseModel):
    id: int
    nombre: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    area: Optional[str] = None
    rol: Optional[str] = None
    activo: Optional[bool] = None
    # Si se omite, la contraseña actual se conserva
    password: Optional[str] = Field(None, min_length=6)

    @field_validator("rol")
    @classmethod
    def rol_valido(cls, v):
        return _validar_rol(v)


class UsuarioRead(BaseModel):
    id: int
    nombre: str
    email: str
    area: Optional[str] = None
    rol: str
    activo: bool
    creado_en: Optional[datetime] = None

    class Config:
        from_attributes = True
