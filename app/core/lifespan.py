from contextlib import asynccontextmanager
from fastapi import FastAPI
from sqlalchemy.orm import Session

from app.db.base import Base
from app.db.session import engine
from app.db.init_db import create_system_user
import app.models  # noqa: F401  registra las tablas en Base.metadata
from app.utils.logger import logger
from app.core.config import settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Maneja startup/shutdown de la app.
    En desarrollo crea las tablas; siempre asegura el usuario de sistema.
    """
    logger.info("Iniciando aplicación Machine Shop Backend (entorno=%s)", settings.environment)

    if settings.environment == "development":
        Base.metadata.create_all(bind=engine)

    session = Session(bind=engine)
    try:
        create_system_user(session)
    finally:
        session.close()

    logger.info("Startup completado correctamente")

    # La app se levanta aquí
    yield

    logger.info("Aplicación apagándose...")
    engine.dispose()
