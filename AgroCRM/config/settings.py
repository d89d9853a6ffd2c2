# config/settings.py
"""
Configuración centralizada de la aplicación usando Pydantic Settings.
Las variables se cargan desde el archivo .env (todas tienen default).
"""

from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Configuración de la aplicación"""

    APP_NAME: str = "AgroCRM API"

    # CORS
    CORS_ALLOW_ORIGINS: List[str] = ["http://localhost:5173"]

    # Zona horaria de referencia para "hoy" (recordatorios, cosechas próximas)
    TIMEZONE: str = "UTC"

    # Datos mock en memoria
    LOAD_SEED_DATA: bool = True
    SEED_DATA_DIR: Path | None = None  # Si es None, usa seed/ del proyecto
    SIMULATED_LATENCY_MS: int = 0  # Retraso cosmético por request

    # Ventanas de planificación
    UPCOMING_REMINDER_DAYS: int = 7
    UPCOMING_HARVEST_DAYS: int = 30
    RECENT_ACTIVITY_LIMIT: int = 10

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Si SEED_DATA_DIR no está configurado, usar el directorio seed/ incluido
        if self.SEED_DATA_DIR is None:
            self.SEED_DATA_DIR = BASE_DIR / "seed"


settings = Settings()
