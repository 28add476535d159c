from sqlalchemy.orm import Session
from typing import List, Optional

from app.models.maquina import MaquinaMS


def get_maquina(db: Session, maquina_id: int) -> Optional[MaquinaMS]:
    return db.query(MaquinaMS).filter(MaquinaMS.id == maquina_id).first()


def list_maquinas(db: Session) -> List[MaquinaMS]:
    return db.query(MaquinaMS).order_by(MaquinaMS.nombre).all()


def create_maquina(db: Session, nombre: str) -> MaquinaMS:
    obj = MaquinaMS(nombre=nombre.strip())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


def update_maquina(db: Session, maquina_id: int, nombre: str) -> Optional[MaquinaMS]:
    maquina = get_maquina(db, maquina_id)
    if not maquina:
        return None
    maquina.nombre = nombre.strip()
    db.commit()
    db.refresh(maquina)
    return maquina


def delete_maquina(db: Session, maquina_id: int) -> bool:
    maquina = get_maquina(db, maquina_id)
    if not maquina:
        return False
    db.delete(maquina)
    db.commit()
    return True
