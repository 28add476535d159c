from fastapi import APIRouter

# Importa cada módulo de rutas
from app.api.v1.routers import (
    auth,
    usuarios,
    areas,
    piezas,
    maquinas,
    solicitudes,
    revisiones,
    estado_trabajo,
    dashboard,
)

# Router principal con prefijo global
api_router = APIRouter(prefix="/api/v1")

# Endpoint raíz para verificar que la API funciona
@api_router.get("/", tags=["Root"])
def read_root():
    return {"message": "Bienvenido a la API v1 de Machine Shop"}

# Registro de módulos de rutas
api_router.include_router(auth.router, prefix="/auth")
api_router.include_router(usuarios.router, prefix="/usuarios")
api_router.include_router(areas.router, prefix="/areas")
api_router.include_router(piezas.router, prefix="/piezas")
api_router.include_router(maquinas.router, prefix="/maquinas")
api_router.include_router(solicitudes.router, prefix="/solicitudes")
api_router.include_router(revisiones.router, prefix="/revisiones")
api_router.include_router(estado_trabajo.router, prefix="/estado-trabajo")
api_router.include_router(dashboard.router, prefix="/dashboard")
