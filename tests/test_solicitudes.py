"""
Pruebas del alta y consulta de solicitudes.

CASOS:
    1. Alta crea la solicitud y exactamente un registro abierto 'En Revisión'
    2. FK inválida (solicitante o pieza) → 400
    3. Prioridad derivada sin revisión = 'Pendiente de Revisión'
    4. Pendientes excluye completadas y rechazadas
    5. Asignaciones por maquinista según filtro
"""
from sqlalchemy.orm import Session
from fastapi.testclient import TestClient

from app.core.config import settings
from app.models.estado_trabajo import EstadoTrabajo


BASE = "/api/v1/solicitudes"


class TestAltaSolicitud:
    def test_crea_registro_inicial_abierto(self, client: TestClient, db: Session, solicitud: dict):
        """
        GIVEN: usuario y pieza existentes
        WHEN: se crea una solicitud
        THEN: existe un único registro de trabajo, abierto, a nombre del usuario de sistema
        """
        registros = db.query(EstadoTrabajo).filter(EstadoTrabajo.id_solicitud == solicitud["id"]).all()

        assert len(registros) == 1
        assert registros[0].fecha_y_hora_de_fin is None
        assert registros[0].descripcion_operacion == "En Revisión"
        assert registros[0].id_maquinista == settings.system_user_id
        assert registros[0].maquina_asignada == settings.maquina_placeholder

    def test_respuesta_con_campos_derivados(self, solicitud: dict):
        assert solicitud["prioridad_actual"] == "Pendiente de Revisión"
        assert solicitud["estado_operacional"] == "En Revisión"
        assert solicitud["maquinista_asignado_nombre"] is None
        assert solicitud["total_tiempo_maquina"] == 0
        assert solicitud["pieza_nombre"] == "Molde cavidad 4"
        assert solicitud["maquina"] == "Inyectora 12"
        assert solicitud["solicitante_nombre"] == "Equipo Tigrex"

    def test_pieza_inexistente(self, client: TestClient, system_user, pieza):
        response = client.post(
            f"{BASE}/",
            json={
                "solicitante_id": system_user.id,
                "id_pieza": 9999,
                "turno": "B",
                "tipo": "Mejora",
                "detalles": "Cambiar insertos",
            },
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "El ID del Solicitante o de la Pieza proporcionado no es válido."

    def test_solicitante_inexistente(self, client: TestClient, pieza):
        response = client.post(
            f"{BASE}/",
            json={
                "solicitante_id": 9999,
                "id_pieza": pieza.id,
                "turno": "B",
                "tipo": "Mejora",
                "detalles": "Cambiar insertos",
            },
        )

        assert response.status_code == 400

    def test_duplicados_permitidos(self, client: TestClient, system_user, pieza):
        payload = {
            "solicitante_id": system_user.id,
            "id_pieza": pieza.id,
            "turno": "C",
            "tipo": "Fabricación",
            "detalles": "Repuesto de guía",
        }

        assert client.post(f"{BASE}/", json=payload).status_code == 201
        assert client.post(f"{BASE}/", json=payload).status_code == 201
        assert len(client.get(f"{BASE}/").json()) == 2


class TestConsultaSolicitudes:
    def test_obtener_por_id(self, client: TestClient, solicitud: dict):
        response = client.get(f"{BASE}/{solicitud['id']}")

        assert response.status_code == 200
        assert response.json()["id"] == solicitud["id"]

    def test_obtener_inexistente(self, client: TestClient):
        response = client.get(f"{BASE}/12345")

        assert response.status_code == 404

    def test_pendientes_excluye_rechazadas(self, client: TestClient, solicitud: dict, ingeniero):
        client.post(
            "/api/v1/revisiones/",
            json={"id_solicitud": solicitud["id"], "id_revisor": ingeniero.id, "prioridad": "RECHAZADA"},
        )

        pendientes = client.get(f"{BASE}/pendientes").json()

        assert all(p["id"] != solicitud["id"] for p in pendientes)

    def test_pendientes_incluye_sin_revision(self, client: TestClient, solicitud: dict):
        pendientes = client.get(f"{BASE}/pendientes").json()

        assert [p["id"] for p in pendientes] == [solicitud["id"]]


class TestAsignacionesPorMaquinista:
    def test_activo(self, client: TestClient, solicitud_asignada: dict, maquinista):
        response = client.get(
            f"{BASE}/asignaciones-por-maquinista",
            params={"id": maquinista.id, "estado_filtro": "activo"},
        )

        assert response.status_code == 200
        filas = response.json()
        assert len(filas) == 1
        assert filas[0]["maquinista_asignado_nombre"] == "Luis Herrera"

    def test_completado_vacio_mientras_activo(self, client: TestClient, solicitud_asignada: dict, maquinista):
        response = client.get(
            f"{BASE}/asignaciones-por-maquinista",
            params={"id": maquinista.id, "estado_filtro": "completado"},
        )

        assert response.json() == []

    def test_filtro_invalido(self, client: TestClient, maquinista):
        response = client.get(
            f"{BASE}/asignaciones-por-maquinista",
            params={"id": maquinista.id, "estado_filtro": "todos"},
        )

        assert response.status_code == 400

    def test_maquinista_inexistente(self, client: TestClient):
        response = client.get(f"{BASE}/asignaciones-por-maquinista", params={"id": 777})

        assert response.status_code == 404
