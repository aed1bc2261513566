"""Configuración central de la aplicación (Pydantic Settings).

- Carga variables desde .env en la raíz del proyecto.
- Agrupa ajustes por área: App, Mongo, Sesión, Tema.
"""
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resuelve el .env ubicado en la raíz del proyecto (independiente del CWD)
ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    """Conjunto de variables de configuración con valores por defecto razonables.

    Nota: los valores pueden sobreescribirse vía variables de entorno (.env).
    """
    # App
    app_name: str = "Notes"
    log_level: str = "INFO"

    # Mongo
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db: str = "notes_db"
    mongo_tls: bool = False
    # TLS relax options (dev only)
    mongo_tls_insecure: bool = False
    mongo_tls_allow_invalid_hostnames: bool = False

    # Sesión (JWT firmado dentro de una cookie HttpOnly)
    session_secret: str | None = None
    session_algorithm: str = "HS256"
    session_cookie_name: str = "__session"
    session_max_age_days: int = 7
    session_cookie_secure: bool = False

    # Auth
    password_min_length: int = 8

    # Tema (modo claro / oscuro)
    color_mode_cookie_name: str = "color_mode"
    default_color_mode: Literal["light", "dark"] = "light"

    # --- Utilidades derivadas / helpers ---
    @property
    def session_max_age_seconds(self) -> int:
        return self.session_max_age_days * 24 * 60 * 60

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # no fallar si hay variables no usadas
    )


settings = Settings()
