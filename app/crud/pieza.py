from sqlalchemy.orm import Session
from typing import List, Optional

from app.models.pieza import Pieza
from app.schemas.pieza import PiezaCreate, PiezaUpdate


def get_pieza(db: Session, pieza_id: int) -> Optional[Pieza]:
    return db.query(Pieza).filter(Pieza.id == pieza_id).first()


def list_piezas(db: Session, id_area: Optional[int] = None) -> List[Pieza]:
    query = db.query(Pieza)
    if id_area is not None:
        query = query.filter(Pieza.id_area == id_area)
    return query.order_by(Pieza.nombre_pieza).all()


def create_pieza(db: Session, data: PiezaCreate) -> Pieza:
    obj = Pieza(**data.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


def update_pieza(db: Session, pieza_id: int, data: PiezaUpdate) -> Optional[Pieza]:
    pieza = get_pieza(db, pieza_id)
    if not pieza:
        return None

    for field, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(pieza, field, value)

    db.commit()
    db.refresh(pieza)
    return pieza


def delete_pieza(db: Session, pieza_id: int) -> bool:
    pieza = get_pieza(db, pieza_id)
    if not pieza:
        return False
    db.delete(pieza)
    db.commit()
    return True
