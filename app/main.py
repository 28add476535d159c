from fastapi import FastAPI
from app.api.v1 import api_router
from app.core.error_handlers import register_error_handlers
from app.core.lifespan import lifespan
from app.core.logging_middleware import log_requests
from app.utils.cors import setup_cors


def create_app() -> FastAPI:
    app = FastAPI(
        title="Machine Shop Backend",
        version="1.0.0",
        description="Backend para solicitudes de trabajo del taller de maquinado y moldes",
        lifespan=lifespan,
        contact={
            "name": "Equipo Tigrex",
            "email": "tigrexteam@molex.com",
        },
    )

    # --- Configuración CORS ---
    setup_cors(app)

    # --- Logging de peticiones ---
    app.middleware("http")(log_requests)

    # --- Manejo de errores ---
    register_error_handlers(app)

    # --- Rutas centralizadas ---
    app.include_router(api_router)

    return app


app = create_app()
