from sqlalchemy.orm import Session
from typing import List, Optional

from app.core.config import Roles
from app.core.security import hash_password, verify_password
from app.models.usuario import Usuario
from app.schemas.usuario import UsuarioCreate, UsuarioUpdate


# -----------------------------------------------------
# Obtener usuario por ID
# -----------------------------------------------------
def get_usuario(db: Session, usuario_id: int) -> Optional[Usuario]:
    return db.query(Usuario).filter(Usuario.id == usuario_id).first()


# -----------------------------------------------------
# Obtener usuario por email
# -----------------------------------------------------
def get_usuario_by_email(db: Session, email: str) -> Optional[Usuario]:
    return db.query(Usuario).filter(Usuario.email == email).first()


def list_usuarios(db: Session) -> List[Usuario]:
    return db.query(Usuario).order_by(Usuario.nombre).all()


def list_maquinistas(db: Session) -> List[Usuario]:
    return (
        db.query(Usuario)
        .filter(Usuario.rol == Roles.MAQUINISTA, Usuario.activo.is_(True))
        .order_by(Usuario.nombre)
        .all()
    )


# -----------------------------------------------------
# Autenticar usuario
# -----------------------------------------------------
def authenticate(db: Session, email: str, password: str) -> Optional[Usuario]:
    usuario = get_usuario_by_email(db, email)
    if not usuario or not usuario.activo:
        return None
    if not verify_password(password, usuario.password_hash):
        return None
    return usuario


# -----------------------------------------------------
# Crear usuario
# -----------------------------------------------------
def create_usuario(db: Session, data: UsuarioCreate) -> Usuario:
    create_data = data.model_dump()
    create_data["password_hash"] = hash_password(create_data.pop("password"))

    obj = Usuario(**create_data)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


def update_usuario(db: Session, usuario_id: int, data: UsuarioUpdate) -> Optional[Usuario]:
    usuario = get_usuario(db, usuario_id)
    if not usuario:
        return None

    update_data = data.model_dump(exclude_unset=True, exclude={"id"})
    password = update_data.pop("password", None)
    if password:
        usuario.password_hash = hash_password(password)

    for field, value in update_data.items():
        if value is not None:
            setattr(usuario, field, value)

    db.commit()
    db.refresh(usuario)
    return usuario


def delete_usuario(db: Session, usuario_id: int) -> bool:
    usuario = get_usuario(db, usuario_id)
    if not usuario:
        return False
    db.delete(usuario)
    db.commit()
    return True
