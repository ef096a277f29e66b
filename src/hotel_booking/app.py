# ============================================================
# app.py — Точка входа сервиса бронирования
# ------------------------------------------------------------
# Собирает компоненты через bootstrap_app, подключает маршруты
# и обработчики доменных исключений.
# Запуск: uvicorn --factory hotel_booking.app:create_app
# ============================================================
from datetime import date
from typing import Callable, Optional

from fastapi import FastAPI

from .api import register_exception_handlers, router
from .booking.domain import Booking, Customer, Room
from .booking.interfaces import ILogger, IRepository
from .bootstrap import bootstrap_app
from .config import Settings


def create_app(
    settings: Optional[Settings] = None,
    booking_repo: Optional["IRepository[Booking]"] = None,
    room_repo: Optional["IRepository[Room]"] = None,
    customer_repo: Optional["IRepository[Customer]"] = None,
    logger: Optional[ILogger] = None,
    clock: Optional[Callable[[], date]] = None,
) -> FastAPI:
    """Создает FastAPI-приложение; репозитории и часы можно подменить (например, в тестах)."""
    components = bootstrap_app(
        settings=settings,
        booking_repo=booking_repo,
        room_repo=room_repo,
        customer_repo=customer_repo,
        logger=logger,
        clock=clock,
    )

    app = FastAPI(title="Hotel Booking Service")
    app.state.components = components
    register_exception_handlers(app)
    app.include_router(router)
    return app
