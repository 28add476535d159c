"""
Script para resetear la contraseña de un usuario.
Uso: python scripts/reset_password.py <email> <nueva_password>
"""
import sys

from app.core.security import hash_password, verify_password
from app.db.session import SessionLocal
from app.models.usuario import Usuario


def main(argv) -> int:
    if len(argv) < 3:
        print(__doc__)
        return 1

    email, nueva_password = argv[1], argv[2]
    db = SessionLocal()
    try:
        usuario = db.query(Usuario).filter(Usuario.email == email).first()
        if not usuario:
            print(f"Usuario '{email}' no encontrado")
            return 1

        usuario.password_hash = hash_password(nueva_password)
        db.commit()

        es_valida = verify_password(nueva_password, usuario.password_hash)
        print(f"Contraseña actualizada para {usuario.nombre} ({usuario.email})")
        print(f"Verificación: {'VÁLIDA' if es_valida else 'INVÁLIDA'}")
        return 0
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main(sys.argv))
