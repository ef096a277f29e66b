"""
Конфигурация тестов для pytest.
Добавляет каталог src в PYTHONPATH и предоставляет общие фикстуры.
"""
import sys
from datetime import date, timedelta
from pathlib import Path

import pytest

# Добавляем каталог с исходниками в PYTHONPATH
src_dir = str(Path(__file__).parent.parent / "src")
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

from hotel_booking.booking.domain import Booking, BookingManager, Room  # noqa: E402
from hotel_booking.booking.infrastructure import InMemoryRepository  # noqa: E402


class FakeRepository(InMemoryRepository):
    """Репозиторий в памяти, запоминающий добавленные сущности."""

    def __init__(self, model_class, items=None):
        super().__init__(model_class, items)
        self.added = []

    async def add(self, entity) -> None:
        await super().add(entity)
        self.added.append(entity)


class RecordingLogger:
    """Логгер, сохраняющий сообщения для проверок."""

    def __init__(self):
        self.records = []

    def info(self, message, **kwargs):
        self.records.append(("INFO", message, kwargs))

    def error(self, message, **kwargs):
        self.records.append(("ERROR", message, kwargs))

    def warning(self, message, **kwargs):
        self.records.append(("WARNING", message, kwargs))

    def debug(self, message, **kwargs):
        self.records.append(("DEBUG", message, kwargs))

    def messages(self, level):
        return [message for lvl, message, _ in self.records if lvl == level]


# Фиксированная "текущая" дата: тесты не зависят от системных часов
FIXED_TODAY = date(2031, 3, 14)


@pytest.fixture
def today() -> date:
    return FIXED_TODAY


@pytest.fixture
def clock(today):
    return lambda: today


@pytest.fixture
def tomorrow(today) -> date:
    return today + timedelta(days=1)


@pytest.fixture
def room_repo() -> FakeRepository:
    return FakeRepository(Room)


@pytest.fixture
def booking_repo() -> FakeRepository:
    return FakeRepository(Booking)


@pytest.fixture
def manager(booking_repo, room_repo, clock) -> BookingManager:
    return BookingManager(booking_repo, room_repo, clock=clock)


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()
