"""
Fixtures compartidas: base SQLite en memoria por prueba, cliente HTTP con
`get_db` sobrescrito y datos mínimos (usuario de sistema, maquinista,
ingeniero, área y pieza).
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.core.config import settings, Roles
from app.core.security import hash_password
from app.db.base import Base
from app.db.init_db import create_system_user
from app.db.session import get_db
from app.main import app
from app.models.area import Area
from app.models.pieza import Pieza
from app.models.usuario import Usuario

PASSWORD_PRUEBA = "Secreta123"


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    create_system_user(session)
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db: Session):
    def override_get_db():
        try:
            yield db
        except Exception:
            db.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db
    test_client = TestClient(app)
    try:
        yield test_client
    finally:
        app.dependency_overrides.clear()


def _crear_usuario(db: Session, nombre: str, email: str, rol: str, area: str = None) -> Usuario:
    usuario = Usuario(
        nombre=nombre,
        email=email,
        password_hash=hash_password(PASSWORD_PRUEBA),
        rol=rol,
        area=area,
        activo=True,
    )
    db.add(usuario)
    db.commit()
    db.refresh(usuario)
    return usuario


@pytest.fixture
def system_user(db: Session):
    return db.query(Usuario).filter(Usuario.id == settings.system_user_id).first()


@pytest.fixture
def maquinista(db: Session):
    return _crear_usuario(db, "Luis Herrera", "luis.herrera@molex.com", Roles.MAQUINISTA, "Taller")


@pytest.fixture
def ingeniero(db: Session):
    return _crear_usuario(db, "Ana Torres", "ana.torres@molex.com", Roles.INGENIERO, "Ingeniería")


@pytest.fixture
def operador(db: Session):
    return _crear_usuario(db, "Pedro Gómez", "pedro.gomez@molex.com", Roles.OPERADOR, "Moldeo")


@pytest.fixture
def area(db: Session):
    area = Area(nombre_area="Moldeo")
    db.add(area)
    db.commit()
    db.refresh(area)
    return area


@pytest.fixture
def pieza(db: Session, area: Area):
    pieza = Pieza(nombre_pieza="Molde cavidad 4", maquina="Inyectora 12", id_area=area.id)
    db.add(pieza)
    db.commit()
    db.refresh(pieza)
    return pieza


@pytest.fixture
def solicitud(client: TestClient, system_user: Usuario, pieza: Pieza):
    """Solicitud recién creada por el API (estado inicial 'En Revisión')."""
    response = client.post(
        "/api/v1/solicitudes/",
        json={
            "solicitante_id": system_user.id,
            "id_pieza": pieza.id,
            "turno": "A",
            "tipo": "Daño Físico",
            "detalles": "Botador principal fracturado",
        },
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def solicitud_asignada(client: TestClient, solicitud: dict, ingeniero: Usuario, maquinista: Usuario):
    """Solicitud revisada con prioridad Alta y maquinista asignado."""
    response = client.post(
        "/api/v1/revisiones/",
        json={
            "id_solicitud": solicitud["id"],
            "id_revisor": ingeniero.id,
            "prioridad": "Alta",
            "comentarios": "Atender antes del cambio de turno",
            "id_maquinista_asignado": maquinista.id,
        },
    )
    assert response.status_code == 201
    return solicitud
