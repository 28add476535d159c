"""
Pruebas de catálogos: áreas, piezas y máquinas.
"""
from fastapi.testclient import TestClient


class TestAreas:
    def test_crud(self, client: TestClient, ingeniero):
        creada = client.post(
            "/api/v1/areas/",
            json={"nombre_area": "Ensamble", "responsable_area_id": ingeniero.id},
        )
        assert creada.status_code == 201
        area_id = creada.json()["id"]
        assert creada.json()["responsable_area_nombre"] == "Ana Torres"

        actualizada = client.put(f"/api/v1/areas/{area_id}", json={"nombre_area": "Ensamble Final"})
        assert actualizada.json()["nombre_area"] == "Ensamble Final"

        assert client.delete(f"/api/v1/areas/{area_id}").status_code == 204
        assert client.get(f"/api/v1/areas/{area_id}").status_code == 404

    def test_responsable_inexistente(self, client: TestClient):
        response = client.post("/api/v1/areas/", json={"nombre_area": "Pintura", "responsable_area_id": 999})

        assert response.status_code == 400


class TestPiezas:
    def test_crear_con_area(self, client: TestClient, area):
        response = client.post(
            "/api/v1/piezas/",
            json={"nombre_pieza": "Placa expulsora", "maquina": "Inyectora 3", "id_area": area.id},
        )

        assert response.status_code == 201
        assert response.json()["nombre_area"] == "Moldeo"

    def test_area_inexistente(self, client: TestClient):
        response = client.post(
            "/api/v1/piezas/",
            json={"nombre_pieza": "Placa expulsora", "maquina": "Inyectora 3", "id_area": 404},
        )

        assert response.status_code == 400

    def test_filtrar_por_area(self, client: TestClient, pieza, area):
        response = client.get("/api/v1/piezas/", params={"id_area": area.id})

        assert [p["id"] for p in response.json()] == [pieza.id]

    def test_eliminar_con_solicitudes(self, client: TestClient, solicitud: dict, pieza):
        """
        GIVEN: pieza con una solicitud registrada
        WHEN: se elimina la pieza
        THEN: 409
        """
        assert client.delete(f"/api/v1/piezas/{pieza.id}").status_code == 409


class TestMaquinas:
    def test_crud(self, client: TestClient):
        creada = client.post("/api/v1/maquinas/", json={"nombre": "  Torno CNC  "})
        assert creada.status_code == 201
        maquina = creada.json()
        assert maquina["nombre"] == "Torno CNC"

        actualizada = client.put(
            f"/api/v1/maquinas/{maquina['id']}",
            json={"id": maquina["id"], "nombre": "Torno CNC 2"},
        )
        assert actualizada.status_code == 200

        assert [m["nombre"] for m in client.get("/api/v1/maquinas/").json()] == ["Torno CNC 2"]
        assert client.delete(f"/api/v1/maquinas/{maquina['id']}").status_code == 204

    def test_nombre_vacio(self, client: TestClient):
        response = client.post("/api/v1/maquinas/", json={"nombre": "   "})

        assert response.status_code == 400
        assert response.json()["detail"] == "El nombre de la máquina es obligatorio."

    def test_id_distinto(self, client: TestClient):
        maquina = client.post("/api/v1/maquinas/", json={"nombre": "Fresadora"}).json()

        response = client.put(
            f"/api/v1/maquinas/{maquina['id']}",
            json={"id": maquina["id"] + 1, "nombre": "Fresadora"},
        )

        assert response.status_code == 400
