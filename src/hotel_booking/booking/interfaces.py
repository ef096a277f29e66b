"""
Интерфейсы (порты) для контекста бронирования.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any, List, Protocol, TypeVar

from ..shared_kernel import EntityId

if TYPE_CHECKING:
    from .domain import Booking

T = TypeVar("T")


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class IRepository(Protocol[T]):
    """
    Обобщенный интерфейс репозитория.

    Одна реализация на каждый тип сущности (Room, Booking, Customer).
    """

    async def get_all(self) -> List[T]: ...
    async def get(self, entity_id: EntityId) -> T: ...
    async def add(self, entity: T) -> None: ...
    async def edit(self, entity: T) -> None: ...
    async def remove(self, entity_id: EntityId) -> None: ...


class IBookingManager(Protocol):
    """Интерфейс сервиса проверки доступности номеров."""

    async def create_booking(self, booking: Booking) -> bool: ...
    async def find_available_room(self, start_date: date, end_date: date) -> int: ...
    async def get_fully_occupied_dates(
        self, start_date: date, end_date: date
    ) -> List[date]: ...
