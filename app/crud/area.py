from sqlalchemy.orm import Session
from typing import List, Optional

from app.models.area import Area
from app.schemas.area import AreaCreate, AreaUpdate


def get_area(db: Session, area_id: int) -> Optional[Area]:
    return db.query(Area).filter(Area.id == area_id).first()


def list_areas(db: Session) -> List[Area]:
    return db.query(Area).order_by(Area.nombre_area).all()


def create_area(db: Session, data: AreaCreate) -> Area:
    obj = Area(**data.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


def update_area(db: Session, area_id: int, data: AreaUpdate) -> Optional[Area]:
    area = get_area(db, area_id)
    if not area:
        return None

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(area, field, value)

    db.commit()
    db.refresh(area)
    return area


def delete_area(db: Session, area_id: int) -> bool:
    area = get_area(db, area_id)
    if not area:
        return False
    db.delete(area)
    db.commit()
    return True
