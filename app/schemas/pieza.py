from pydantic import BaseModel, Field
from typing import Optional


class PiezaBase(BaseModel):
    nombre_pieza: str = Field(..., min_length=1, max_length=150, example="Molde cavidad 4")
    maquina: str = Field(..., min_length=1, max_length=100, example="Inyectora 12")
    id_area: int


class PiezaCreate(PiezaBase):
    pass


class PiezaUpdate(BaseModel):
    nombre_pieza: Optional[str] = Field(None, min_length=1, max_length=150)
    maquina: Optional[str] = Field(None, min_length=1, max_length=100)
    id_area: Optional[int] = None


class PiezaRead(PiezaBase):
    id: int
    nombre_area: Optional[str] = None

    class Config:
        from_attributes = True
