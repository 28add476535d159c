# app/models/area.py
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.db.base import Base


class Area(Base):
    __tablename__ = "areas"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre_area = Column(String(100), nullable=False)
    # Referencia débil: el área puede no tener responsable
    responsable_area_id = Column(
        Integer, ForeignKey("usuarios.id", ondelete="SET NULL"), nullable=True
    )

    # Relaciones
    responsable_area = relationship("Usuario", lazy="joined")
    piezas = relationship("Pieza", back_populates="area", lazy="selectin")

    @property
    def responsable_area_nombre(self):
        return self.responsable_area.nombre if self.responsable_area else None
