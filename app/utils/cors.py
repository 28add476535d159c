from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings


def setup_cors(app: FastAPI) -> None:
    origins = [o.strip() for o in settings.backend_cors_origins.split(",") if o.strip()]
    allow_all = not origins or "*" in origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else origins,
        # El navegador no acepta credenciales con origen comodín
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )
