# app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


# Roles del sistema
class Roles:
    """Constantes para roles de usuario."""
    OPERADOR = "Operador"
    MAQUINISTA = "Maquinista"
    INGENIERO = "Ingeniero"
    ADMIN = "Admin"
    MASTER = "Master"

    TODOS = (OPERADOR, MAQUINISTA, INGENIERO, ADMIN, MASTER)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Core ---
    environment: str = Field("development", alias="ENVIRONMENT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # --- Seguridad / JWT ---
    secret_key: str = Field("cambiar-esta-clave-en-produccion", alias="SECRET_KEY")
    algorithm: str = Field("HS256", alias="ALGORITHM")
    access_token_expire_minutes: int = Field(480, alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    # --- Base de datos ---
    database_url: str = Field("sqlite:///./machineshop.db", alias="DATABASE_URL")

    # --- CORS ---
    # Lista separada por comas; "*" permite cualquier origen
    backend_cors_origins: str = Field("*", alias="BACKEND_CORS_ORIGINS")

    # --- Usuario de sistema (autor de los registros automáticos) ---
    system_user_id: int = Field(1, alias="SYSTEM_USER_ID")
    system_user_nombre: str = Field("Equipo Tigrex", alias="SYSTEM_USER_NOMBRE")
    system_user_email: str = Field("tigrexteam@molex.com", alias="SYSTEM_USER_EMAIL")
    system_user_password: str = Field("Tigrex123!", alias="SYSTEM_USER_PASSWORD")

    # Etiqueta de máquina del registro inicial de cada solicitud
    maquina_placeholder: str = Field("Por Asignar", alias="MAQUINA_PLACEHOLDER")


settings = Settings()
