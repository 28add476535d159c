"""
Pruebas de las vistas derivadas del tablero.
"""
from fastapi.testclient import TestClient


class TestDetalle:
    def test_detalle_completo(self, client: TestClient, solicitud_asignada: dict, maquinista):
        """
        GIVEN: solicitud asignada, iniciada y finalizada
        WHEN: se consulta el detalle
        THEN: incluye área, revisión, historial (más reciente primero) y tiempos
        """
        id_solicitud = solicitud_asignada["id"]
        client.post(f"/api/v1/estado-trabajo/{id_solicitud}/iniciar", json={"id_maquinista": maquinista.id})
        client.post(
            f"/api/v1/estado-trabajo/{id_solicitud}/finalizar",
            json={"id_maquinista": maquinista.id, "tiempos_por_maquina": {"Torno CNC": 2.0}},
        )

        response = client.get(f"/api/v1/dashboard/detalle/{id_solicitud}")

        assert response.status_code == 200
        detalle = response.json()
        assert detalle["area_nombre"] == "Moldeo"
        assert detalle["revision"]["prioridad"] == "Completado"
        assert detalle["ultimo_estado"]["descripcion_operacion"] == "Completado"
        assert detalle["historial"][0]["descripcion_operacion"] == "Completado"
        assert detalle["historial"][-1]["descripcion_operacion"] == "En Revisión"
        assert detalle["total_tiempo_maquina"] == 2.0
        assert detalle["tiempo_trabajado_horas"] >= 0

    def test_detalle_sin_revision(self, client: TestClient, solicitud: dict):
        detalle = client.get(f"/api/v1/dashboard/detalle/{solicitud['id']}").json()

        assert detalle["revision"] is None
        assert detalle["prioridad_actual"] == "Pendiente de Revisión"

    def test_detalle_inexistente(self, client: TestClient):
        assert client.get("/api/v1/dashboard/detalle/31337").status_code == 404


class TestResumen:
    def test_conteos(self, client: TestClient, solicitud_asignada: dict, system_user, pieza):
        client.post(
            "/api/v1/solicitudes/",
            json={
                "solicitante_id": system_user.id,
                "id_pieza": pieza.id,
                "turno": "B",
                "tipo": "Mejora",
                "detalles": "Pulir cavidad",
            },
        )

        resumen = client.get("/api/v1/dashboard/resumen").json()

        assert resumen["total_solicitudes"] == 2
        assert resumen["por_prioridad"] == {"Alta": 1, "Pendiente de Revisión": 1}
        assert resumen["por_estado"] == {"Asignada": 1, "En Revisión": 1}
