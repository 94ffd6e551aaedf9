# scriptbridge/shared/config.py
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from scriptbridge.core.domain.models import LatinPairPolicy

BUNDLED_PHRASES_PATH = str(Path(__file__).resolve().parent.parent / "data" / "phrases.json")


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class StorageBackend(str, Enum):
    MEMORY = "memory"
    FILESYSTEM = "filesystem"
    REST = "rest"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Values come from the environment or a local .env file.
    """

    # --- Application Meta ---
    APP_NAME: str = "ScriptBridge"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = True

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # json | console

    # --- Caches ---
    RESULT_CACHE_SIZE: int = 5000
    DETECTION_CACHE_SIZE: int = 2000
    CACHE_EVICTION: str = "fifo"  # fifo | lru

    # --- Translation Policy ---
    LATIN_PAIR_POLICY: LatinPairPolicy = LatinPairPolicy.NORMALIZE

    # --- Persistence ---
    STORAGE_BACKEND: StorageBackend = StorageBackend.FILESYSTEM
    PHRASES_PATH: str = BUNDLED_PHRASES_PATH

    # Hosted phrase store (STORAGE_BACKEND=rest)
    PHRASE_STORE_URL: Optional[str] = None
    PHRASE_STORE_KEY: Optional[str] = None
    PHRASE_STORE_TABLES: str = "common_phrases,dictionary"
    PHRASE_STORE_TIMEOUT: float = 5.0

    # Upper bound for a single store lookup from the translator (seconds).
    # None leaves the adapter's own timeout in charge.
    STORE_LOOKUP_TIMEOUT: Optional[float] = None

    # --- Background Translation ---
    BACKGROUND_WORKERS: int = 4

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def phrase_store_tables(self):
        return tuple(t.strip() for t in self.PHRASE_STORE_TABLES.split(",") if t.strip())


settings = Settings()
