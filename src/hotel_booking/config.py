"""
Настройки приложения, читаемые из переменных окружения.
"""

import os
from enum import Enum

from pydantic import BaseModel


class StorageType(str, Enum):
    """Тип хранилища репозиториев."""

    MEMORY = "memory"
    JSON = "json"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    """Настройки сервиса бронирования."""

    storage: StorageType = StorageType.MEMORY
    data_dir: str = "data"
    seed_sample_data: bool = True
    debug: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """Создает настройки из переменных окружения HOTEL_BOOKING_*."""
        return cls(
            storage=os.getenv("HOTEL_BOOKING_STORAGE", StorageType.MEMORY.value),
            data_dir=os.getenv("HOTEL_BOOKING_DATA_DIR", "data"),
            seed_sample_data=_env_flag("HOTEL_BOOKING_SEED_SAMPLE_DATA", "true"),
            debug=_env_flag("HOTEL_BOOKING_DEBUG", "false"),
        )
