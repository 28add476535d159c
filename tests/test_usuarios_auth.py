"""
Pruebas de usuarios y autenticación.
"""
from sqlalchemy.orm import Session
from fastapi.testclient import TestClient

from app.core.security import verify_password
from app.models.usuario import Usuario


PASSWORD_PRUEBA = "Secreta123"
BASE = "/api/v1/usuarios"


class TestUsuarios:
    def test_crear_con_hash(self, client: TestClient, db: Session):
        response = client.post(
            f"{BASE}/",
            json={
                "nombre": "Marta Ruiz",
                "email": "marta.ruiz@molex.com",
                "password": "Taller2025",
                "rol": "Maquinista",
                "area": "Taller",
            },
        )

        assert response.status_code == 201
        assert "password" not in response.json()
        usuario = db.query(Usuario).filter(Usuario.email == "marta.ruiz@molex.com").first()
        assert usuario.password_hash != "Taller2025"
        assert verify_password("Taller2025", usuario.password_hash)

    def test_email_duplicado(self, client: TestClient, maquinista):
        response = client.post(
            f"{BASE}/",
            json={"nombre": "Otro", "email": maquinista.email, "password": "Taller2025"},
        )

        assert response.status_code == 409
        assert response.json()["detail"] == "Ya existe un usuario con ese correo."

    def test_rol_invalido(self, client: TestClient):
        response = client.post(
            f"{BASE}/",
            json={"nombre": "X", "email": "x@molex.com", "password": "Taller2025", "rol": "Gerente"},
        )

        assert response.status_code == 422

    def test_listar_ordenado_por_nombre(self, client: TestClient, maquinista, ingeniero):
        nombres = [u["nombre"] for u in client.get(f"{BASE}/").json()]

        assert nombres == sorted(nombres)

    def test_maquinistas(self, client: TestClient, maquinista, ingeniero):
        response = client.get(f"{BASE}/maquinistas")

        assert response.status_code == 200
        assert [u["id"] for u in response.json()] == [maquinista.id]

    def test_maquinistas_vacio(self, client: TestClient, ingeniero):
        assert client.get(f"{BASE}/maquinistas").status_code == 404

    def test_actualizar_sin_password_conserva_hash(self, client: TestClient, db: Session, maquinista):
        hash_anterior = maquinista.password_hash

        response = client.put(
            f"{BASE}/{maquinista.id}",
            json={"id": maquinista.id, "nombre": "Luis A. Herrera"},
        )

        assert response.status_code == 200
        assert response.json()["nombre"] == "Luis A. Herrera"
        db.refresh(maquinista)
        assert maquinista.password_hash == hash_anterior

    def test_actualizar_id_distinto(self, client: TestClient, maquinista):
        response = client.put(f"{BASE}/{maquinista.id}", json={"id": maquinista.id + 1, "nombre": "X"})

        assert response.status_code == 400

    def test_actualizar_inexistente(self, client: TestClient):
        response = client.put(f"{BASE}/888", json={"id": 888, "nombre": "X"})

        assert response.status_code == 404

    def test_eliminar(self, client: TestClient, operador):
        assert client.delete(f"{BASE}/{operador.id}").status_code == 204
        assert client.get(f"{BASE}/{operador.id}").status_code == 404

    def test_eliminar_en_uso(self, client: TestClient, db: Session, solicitud_asignada: dict, maquinista):
        """
        GIVEN: maquinista con registros de trabajo
        WHEN: se intenta eliminar
        THEN: 409 por clave foránea
        """
        response = client.delete(f"{BASE}/{maquinista.id}")

        assert response.status_code == 409

    def test_usuario_sistema_no_se_elimina(self, client: TestClient, system_user, operador, pieza):
        """
        GIVEN: usuario de sistema sin registros que lo referencien
        WHEN: se intenta eliminar
        THEN: 409 y el alta de solicitudes sigue funcionando
        """
        response = client.delete(f"{BASE}/{system_user.id}")

        assert response.status_code == 409
        assert response.json()["detail"] == "El usuario de sistema no puede eliminarse ni desactivarse."

        creada = client.post(
            "/api/v1/solicitudes/",
            json={
                "solicitante_id": operador.id,
                "id_pieza": pieza.id,
                "turno": "B",
                "tipo": "Ajuste",
                "detalles": "Ajustar guías del molde",
            },
        )
        assert creada.status_code == 201

    def test_usuario_sistema_no_se_desactiva(self, client: TestClient, system_user):
        response = client.put(
            f"{BASE}/{system_user.id}",
            json={"id": system_user.id, "activo": False},
        )

        assert response.status_code == 409

    def test_usuario_sistema_admite_otros_cambios(self, client: TestClient, system_user):
        response = client.put(
            f"{BASE}/{system_user.id}",
            json={"id": system_user.id, "area": "Mantenimiento"},
        )

        assert response.status_code == 200
        assert response.json()["area"] == "Mantenimiento"


class TestAuth:
    def test_login_exitoso(self, client: TestClient, maquinista):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": maquinista.email, "password": PASSWORD_PRUEBA},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["token"]
        assert data["user"] == {
            "id": maquinista.id,
            "nombre": "Luis Herrera",
            "email": "luis.herrera@molex.com",
            "rol": "Maquinista",
            "area": "Taller",
            "activo": True,
        }

    def test_password_incorrecto(self, client: TestClient, maquinista):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": maquinista.email, "password": "otra-clave"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Credenciales inválidas."

    def test_usuario_inactivo(self, client: TestClient, db: Session, maquinista):
        maquinista.activo = False
        db.commit()

        response = client.post(
            "/api/v1/auth/login",
            json={"email": "luis.herrera@molex.com", "password": PASSWORD_PRUEBA},
        )

        assert response.status_code == 401

    def test_me_con_token(self, client: TestClient, maquinista):
        token = client.post(
            "/api/v1/auth/login",
            json={"email": maquinista.email, "password": PASSWORD_PRUEBA},
        ).json()["token"]

        response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json()["id"] == maquinista.id

    def test_me_token_invalido(self, client: TestClient):
        response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer no-es-un-jwt"})

        assert response.status_code == 401
