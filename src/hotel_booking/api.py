# ============================================================
# api.py — HTTP-маршруты сервиса бронирования
# ------------------------------------------------------------
# Бронирования, номера и клиенты. Сервисы приложения берутся
# из компонентов, собранных bootstrap_app и сохраненных в app.state.
# ============================================================

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse

from .booking.application import (
    BookingApplicationService,
    BookingDTO,
    CreateBookingRequest,
    CreateRoomRequest,
    CustomerApplicationService,
    CustomerDTO,
    RoomApplicationService,
    RoomDTO,
)
from .shared_kernel import EntityNotFoundException, InvalidRangeException

NO_ROOMS_MESSAGE = "The booking could not be created. All rooms are occupied."

router = APIRouter()


def get_booking_service(request: Request) -> BookingApplicationService:
    return request.app.state.components["booking_service"]


def get_room_service(request: Request) -> RoomApplicationService:
    return request.app.state.components["room_service"]


def get_customer_service(request: Request) -> CustomerApplicationService:
    return request.app.state.components["customer_service"]


# ------------------------------------------------------------
# Бронирования
# ------------------------------------------------------------
@router.get("/bookings", response_model=List[BookingDTO])
async def list_bookings(service: BookingApplicationService = Depends(get_booking_service)):
    return await service.list_bookings()


# Объявлен до /bookings/{booking_id}, иначе путь перехватит целочисленный параметр
@router.get("/bookings/occupied-dates", response_model=List[date])
async def get_fully_occupied_dates(
    start_date: date,
    end_date: date,
    service: BookingApplicationService = Depends(get_booking_service),
):
    return await service.get_fully_occupied_dates(start_date, end_date)


@router.get("/bookings/{booking_id}", response_model=BookingDTO)
async def get_booking(
    booking_id: int, service: BookingApplicationService = Depends(get_booking_service)
):
    return await service.get_booking(booking_id)


@router.post("/bookings", status_code=201)
async def create_booking(
    request: CreateBookingRequest,
    service: BookingApplicationService = Depends(get_booking_service),
):
    created = await service.create_booking(request)
    if created is None:
        raise HTTPException(409, NO_ROOMS_MESSAGE)
    return Response(status_code=201)


# ------------------------------------------------------------
# Номера
# ------------------------------------------------------------
@router.get("/rooms", response_model=List[RoomDTO])
async def list_rooms(service: RoomApplicationService = Depends(get_room_service)):
    return await service.list_rooms()


@router.get("/rooms/{room_id}", response_model=RoomDTO)
async def get_room(room_id: int, service: RoomApplicationService = Depends(get_room_service)):
    return await service.get_room(room_id)


@router.post("/rooms", response_model=RoomDTO, status_code=201)
async def create_room(
    request: CreateRoomRequest,
    service: RoomApplicationService = Depends(get_room_service),
):
    return await service.create_room(request)


@router.delete("/rooms/{room_id}", status_code=204)
async def delete_room(room_id: int, service: RoomApplicationService = Depends(get_room_service)):
    await service.delete_room(room_id)
    return Response(status_code=204)


# ------------------------------------------------------------
# Клиенты
# ------------------------------------------------------------
@router.get("/customers", response_model=List[CustomerDTO])
async def list_customers(
    service: CustomerApplicationService = Depends(get_customer_service),
):
    return await service.list_customers()


# ------------------------------------------------------------
# Обработчики доменных исключений
# ------------------------------------------------------------
def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(InvalidRangeException)
    async def invalid_range_handler(request: Request, exc: InvalidRangeException):
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.exception_handler(EntityNotFoundException)
    async def not_found_handler(request: Request, exc: EntityNotFoundException):
        return JSONResponse(status_code=404, content={"detail": str(exc)})
