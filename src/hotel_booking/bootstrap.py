from datetime import date
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from .booking.application import (
    BookingApplicationService,
    CustomerApplicationService,
    RoomApplicationService,
)
from .booking.domain import Booking, BookingManager, Customer, Room
from .booking.infrastructure import (
    ConsoleLogger,
    InMemoryRepository,
    JsonFileRepository,
    sample_customers,
    sample_rooms,
)
from .booking.interfaces import ILogger, IRepository
from .config import Settings, StorageType
from .shared_kernel import today


def _create_repository(settings: Settings, model_class, name: str):
    if settings.storage == StorageType.JSON:
        return JsonFileRepository(str(Path(settings.data_dir) / f"{name}.json"), model_class)
    return InMemoryRepository(model_class)


def bootstrap_app(
    settings: Optional[Settings] = None,
    booking_repo: Optional["IRepository[Booking]"] = None,
    room_repo: Optional["IRepository[Room]"] = None,
    customer_repo: Optional["IRepository[Customer]"] = None,
    logger: Optional[ILogger] = None,
    clock: Optional[Callable[[], date]] = None,
) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or Settings.from_env()
    logger = logger or ConsoleLogger(verbose=settings.debug)

    # 1. Репозитории: переданные снаружи используются как есть
    if room_repo is None:
        room_repo = _create_repository(settings, Room, "rooms")
        if settings.seed_sample_data and len(room_repo) == 0:
            room_repo.seed(sample_rooms())
    if customer_repo is None:
        customer_repo = _create_repository(settings, Customer, "customers")
        if settings.seed_sample_data and len(customer_repo) == 0:
            customer_repo.seed(sample_customers())
    if booking_repo is None:
        booking_repo = _create_repository(settings, Booking, "bookings")

    # 2. Доменный сервис и сервисы приложения
    booking_manager = BookingManager(booking_repo, room_repo, clock=clock or today)

    logger.debug("Application bootstrapped", storage=settings.storage.value)

    return {
        "settings": settings,
        "logger": logger,
        "booking_manager": booking_manager,
        "booking_service": BookingApplicationService(booking_manager, booking_repo, logger),
        "room_service": RoomApplicationService(room_repo, logger),
        "customer_service": CustomerApplicationService(customer_repo),
    }
