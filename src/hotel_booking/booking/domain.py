"""
Доменная модель контекста бронирования.

Содержит сущности (номер, клиент, бронирование), политики проверки
периодов и доменный сервис проверки доступности номеров.
"""

from datetime import date
from typing import Callable, Dict, List, Optional, Set

from pydantic import BaseModel

from ..shared_kernel import DateRange, EntityId, InvalidRangeException, today
from . import interfaces as ports

# Результат поиска, когда свободного номера нет
NO_ROOM_AVAILABLE = -1


class Room(BaseModel):
    """Номер в отеле."""

    id: Optional[EntityId] = None
    description: str = ""


class Customer(BaseModel):
    """Клиент отеля."""

    id: Optional[EntityId] = None
    name: str
    email: str


class Booking(BaseModel):
    """Бронирование номера."""

    id: Optional[EntityId] = None
    room_id: Optional[EntityId] = None
    customer_id: Optional[EntityId] = None
    start_date: date
    end_date: date
    is_active: bool = False

    @property
    def period(self) -> DateRange:
        return DateRange(start_date=self.start_date, end_date=self.end_date)

    def occupies(self, room_id: EntityId, period: DateRange) -> bool:
        """Проверяет, блокирует ли бронирование номер на указанный период."""
        return self.is_active and self.room_id == room_id and self.period.overlaps(period)


class BookingPolicy:
    """Правила проверки периодов бронирования."""

    @classmethod
    def validate_booking_period(cls, period: DateRange, current_date: date) -> None:
        """Дата заезда должна быть в будущем и не позже даты выезда."""
        if period.start_date <= current_date or not period.is_ordered:
            raise InvalidRangeException()

    @classmethod
    def validate_query_period(cls, period: DateRange) -> None:
        """Для запросов по занятости достаточно упорядоченности дат."""
        if not period.is_ordered:
            raise InvalidRangeException()


class BookingManager:
    """
    Доменный сервис проверки доступности номеров.

    Не хранит состояния между вызовами: при каждом вызове заново
    читает все номера и все бронирования из репозиториев.
    """

    def __init__(
        self,
        booking_repository: "ports.IRepository[Booking]",
        room_repository: "ports.IRepository[Room]",
        clock: Callable[[], date] = today,
    ):
        self.booking_repository = booking_repository
        self.room_repository = room_repository
        self._clock = clock

    async def create_booking(self, booking: Booking) -> bool:
        """
        Создает бронирование в первом свободном номере.

        Returns:
            True, если номер найден и бронирование сохранено,
            False, если все номера заняты.

        Raises:
            InvalidRangeException: если период бронирования некорректен.
        """
        room_id = await self.find_available_room(booking.start_date, booking.end_date)
        if room_id == NO_ROOM_AVAILABLE:
            return False

        booking.room_id = room_id
        booking.is_active = True
        await self.booking_repository.add(booking)
        return True

    async def find_available_room(self, start_date: date, end_date: date) -> int:
        """Возвращает id первого свободного номера или NO_ROOM_AVAILABLE."""
        period = DateRange(start_date=start_date, end_date=end_date)
        BookingPolicy.validate_booking_period(period, self._clock())

        rooms = await self.room_repository.get_all()
        active_bookings = await self._active_bookings()

        for room in rooms:
            if not any(b.occupies(room.id, period) for b in active_bookings):
                return room.id
        return NO_ROOM_AVAILABLE

    async def get_fully_occupied_dates(
        self, start_date: date, end_date: date
    ) -> List[date]:
        """Возвращает даты периода, на которые заняты все номера."""
        period = DateRange(start_date=start_date, end_date=end_date)
        BookingPolicy.validate_query_period(period)

        active_bookings = await self._active_bookings()
        if not active_bookings:
            return []

        room_ids = {room.id for room in await self.room_repository.get_all()}
        if not room_ids:
            return []

        # Перебираются только дни бронирований внутри периода, а не весь период
        covered_days: Dict[EntityId, Set[date]] = {room_id: set() for room_id in room_ids}
        for booking in active_bookings:
            if booking.room_id not in covered_days:
                continue
            overlap = period.intersection(booking.period)
            if overlap is not None:
                covered_days[booking.room_id].update(overlap.days())

        return sorted(set.intersection(*covered_days.values()))

    async def _active_bookings(self) -> List[Booking]:
        bookings = await self.booking_repository.get_all()
        return [b for b in bookings if b.is_active]
