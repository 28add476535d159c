from sqlalchemy.orm import Session

from app.core.config import settings, Roles
from app.core.security import hash_password
from app.models.usuario import Usuario
from app.utils.logger import logger


def create_system_user(db: Session) -> Usuario:
	"""Crea el usuario de sistema (actor de los registros automáticos) si no existe."""
	usuario = db.query(Usuario).filter(Usuario.id == settings.system_user_id).first()
	if usuario:
		return usuario

	usuario = Usuario(
		id=settings.system_user_id,
		nombre=settings.system_user_nombre,
		email=settings.system_user_email,
		password_hash=hash_password(settings.system_user_password),
		area="Ingeniería",
		rol=Roles.MASTER,
		activo=True,
	)
	db.add(usuario)
	db.commit()
	db.refresh(usuario)
	logger.info("Usuario de sistema creado: %s", usuario.email)
	return usuario
