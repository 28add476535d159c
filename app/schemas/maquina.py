from pydantic import BaseModel, Field


class MaquinaCreate(BaseModel):
    nombre: str = Field(..., max_length=100, example="Torno CNC")


class MaquinaUpdate(MaquinaCreate):
    id: int


class MaquinaRead(BaseModel):
    id: int
    nombre: str

    class Config:
        from_attributes = True
