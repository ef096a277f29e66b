"""
Прикладной слой контекста бронирования.

Содержит сервисы приложения, которые координируют
взаимодействие между внешними интерфейсами и доменной моделью.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel

from ..shared_kernel import EntityId, InvalidRangeException
from . import interfaces as ports
from .domain import Booking, Customer, Room

# DTO (Data Transfer Objects) для входящих данных


class CreateBookingRequest(BaseModel):
    """Запрос на создание бронирования."""

    start_date: date
    end_date: date
    customer_id: Optional[EntityId] = None


class CreateRoomRequest(BaseModel):
    """Запрос на добавление номера."""

    description: str


# DTO для исходящих данных


class BookingDTO(BaseModel):
    """DTO для представления бронирования."""

    id: EntityId
    room_id: EntityId
    customer_id: Optional[EntityId]
    start_date: date
    end_date: date
    is_active: bool

    @classmethod
    def from_domain(cls, booking: Booking) -> "BookingDTO":
        """Создает DTO из доменной модели."""
        return cls(
            id=booking.id,
            room_id=booking.room_id,
            customer_id=booking.customer_id,
            start_date=booking.start_date,
            end_date=booking.end_date,
            is_active=booking.is_active,
        )


class RoomDTO(BaseModel):
    """DTO для представления номера."""

    id: EntityId
    description: str

    @classmethod
    def from_domain(cls, room: Room) -> "RoomDTO":
        return cls(id=room.id, description=room.description)


class CustomerDTO(BaseModel):
    """DTO для представления клиента."""

    id: EntityId
    name: str
    email: str

    @classmethod
    def from_domain(cls, customer: Customer) -> "CustomerDTO":
        return cls(id=customer.id, name=customer.name, email=customer.email)


# Сервисы приложения


class BookingApplicationService:
    """Сервис приложения для работы с бронированиями."""

    def __init__(
        self,
        booking_manager: ports.IBookingManager,
        booking_repository: "ports.IRepository[Booking]",
        logger: ports.ILogger,
    ):
        """Инициализирует сервис."""
        self._booking_manager = booking_manager
        self._bookings = booking_repository
        self._logger = logger

    async def create_booking(self, request: CreateBookingRequest) -> Optional[BookingDTO]:
        """
        Создает бронирование.

        Returns:
            DTO созданного бронирования или None, если все номера заняты.

        Raises:
            InvalidRangeException: если период бронирования некорректен.
        """
        booking = Booking(
            start_date=request.start_date,
            end_date=request.end_date,
            customer_id=request.customer_id,
        )
        try:
            created = await self._booking_manager.create_booking(booking)
        except InvalidRangeException:
            self._logger.warning(
                "Booking rejected: invalid date range",
                start_date=request.start_date,
                end_date=request.end_date,
            )
            raise

        if not created:
            self._logger.info(
                "Booking rejected: all rooms are occupied",
                start_date=request.start_date,
                end_date=request.end_date,
            )
            return None

        self._logger.info(
            "Booking created",
            booking_id=booking.id,
            room_id=booking.room_id,
            start_date=booking.start_date,
            end_date=booking.end_date,
        )
        return BookingDTO.from_domain(booking)

    async def get_booking(self, booking_id: EntityId) -> BookingDTO:
        """Возвращает информацию о бронировании."""
        booking = await self._bookings.get(booking_id)
        return BookingDTO.from_domain(booking)

    async def list_bookings(self) -> List[BookingDTO]:
        bookings = await self._bookings.get_all()
        return [BookingDTO.from_domain(booking) for booking in bookings]

    async def get_fully_occupied_dates(
        self, start_date: date, end_date: date
    ) -> List[date]:
        """Возвращает даты, на которые заняты все номера."""
        dates = await self._booking_manager.get_fully_occupied_dates(start_date, end_date)
        self._logger.debug(
            "Fully occupied dates computed",
            start_date=start_date,
            end_date=end_date,
            count=len(dates),
        )
        return dates


class RoomApplicationService:
    """Сервис приложения для работы с номерами."""

    def __init__(self, room_repository: "ports.IRepository[Room]", logger: ports.ILogger):
        self._rooms = room_repository
        self._logger = logger

    async def list_rooms(self) -> List[RoomDTO]:
        rooms = await self._rooms.get_all()
        return [RoomDTO.from_domain(room) for room in rooms]

    async def get_room(self, room_id: EntityId) -> RoomDTO:
        room = await self._rooms.get(room_id)
        return RoomDTO.from_domain(room)

    async def create_room(self, request: CreateRoomRequest) -> RoomDTO:
        """Добавляет номер в каталог."""
        room = Room(description=request.description)
        await self._rooms.add(room)
        self._logger.info("Room created", room_id=room.id)
        return RoomDTO.from_domain(room)

    async def delete_room(self, room_id: EntityId) -> None:
        await self._rooms.remove(room_id)
        self._logger.info("Room deleted", room_id=room_id)


class CustomerApplicationService:
    """Сервис приложения для работы с клиентами."""

    def __init__(self, customer_repository: "ports.IRepository[Customer]"):
        self._customers = customer_repository

    async def list_customers(self) -> List[CustomerDTO]:
        customers = await self._customers.get_all()
        return [CustomerDTO.from_domain(customer) for customer in customers]
