# app/models/pieza.py
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.db.base import Base


class Pieza(Base):
    __tablename__ = "piezas"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre_pieza = Column(String(150), nullable=False)
    maquina = Column(String(100), nullable=False)  # Etiqueta de la máquina donde se monta
    id_area = Column(Integer, ForeignKey("areas.id"), nullable=False)

    # Relaciones
    area = relationship("Area", back_populates="piezas", lazy="joined")
    solicitudes = relationship("Solicitud", back_populates="pieza")

    @property
    def nombre_area(self):
        return self.area.nombre_area if self.area else None
