from pydantic import BaseModel, Field
from typing import Optional


class AreaBase(BaseModel):
    nombre_area: str = Field(..., min_length=1, max_length=100, example="Moldeo")
    responsable_area_id: Optional[int] = None


class AreaCreate(AreaBase):
    pass


class AreaUpdate(BaseModel):
    nombre_area: Optional[str] = Field(None, min_length=1, max_length=100)
    responsable_area_id: Optional[int] = None


class AreaRead(AreaBase):
    id: int
    responsable_area_nombre: Optional[str] = None

    class Config:
        from_attributes = True
