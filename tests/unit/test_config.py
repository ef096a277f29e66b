"""
Тесты для настроек приложения и сборки компонентов.
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from hotel_booking.booking.domain import Room
from hotel_booking.bootstrap import bootstrap_app
from hotel_booking.config import Settings, StorageType
from hotel_booking.shared_kernel import InvalidRangeException


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in (
            "HOTEL_BOOKING_STORAGE",
            "HOTEL_BOOKING_DATA_DIR",
            "HOTEL_BOOKING_SEED_SAMPLE_DATA",
            "HOTEL_BOOKING_DEBUG",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings.from_env()

        assert settings.storage == StorageType.MEMORY
        assert settings.data_dir == "data"
        assert settings.seed_sample_data is True
        assert settings.debug is False

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOTEL_BOOKING_STORAGE", "json")
        monkeypatch.setenv("HOTEL_BOOKING_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("HOTEL_BOOKING_SEED_SAMPLE_DATA", "no")
        monkeypatch.setenv("HOTEL_BOOKING_DEBUG", "1")

        settings = Settings.from_env()

        assert settings.storage == StorageType.JSON
        assert settings.data_dir == str(tmp_path)
        assert settings.seed_sample_data is False
        assert settings.debug is True

    def test_unknown_storage_is_rejected(self, monkeypatch):
        monkeypatch.setenv("HOTEL_BOOKING_STORAGE", "redis")

        with pytest.raises(ValidationError):
            Settings.from_env()


class TestBootstrap:
    async def test_memory_storage_is_seeded(self, logger):
        components = bootstrap_app(Settings(), logger=logger)

        rooms = await components["room_service"].list_rooms()
        customers = await components["customer_service"].list_customers()

        assert [room.id for room in rooms] == [1, 2, 3]
        assert len(customers) == 2

    async def test_seeding_can_be_disabled(self, logger):
        components = bootstrap_app(Settings(seed_sample_data=False), logger=logger)

        assert await components["room_service"].list_rooms() == []
        assert await components["customer_service"].list_customers() == []

    def test_json_storage_writes_files(self, tmp_path, logger):
        bootstrap_app(Settings(storage="json", data_dir=str(tmp_path)), logger=logger)

        assert (tmp_path / "rooms.json").exists()
        assert (tmp_path / "customers.json").exists()

    async def test_json_storage_is_not_reseeded(self, tmp_path, logger):
        settings = Settings(storage="json", data_dir=str(tmp_path))
        bootstrap_app(settings, logger=logger)

        components = bootstrap_app(settings, logger=logger)

        assert len(await components["room_service"].list_rooms()) == 3

    def test_injected_repositories_are_used(self, booking_repo, room_repo, logger):
        components = bootstrap_app(
            Settings(), booking_repo=booking_repo, room_repo=room_repo, logger=logger
        )

        manager = components["booking_manager"]
        assert manager.booking_repository is booking_repo
        assert manager.room_repository is room_repo

    async def test_clock_is_passed_to_booking_manager(self, room_repo, logger, today):
        components = bootstrap_app(
            Settings(), room_repo=room_repo, logger=logger, clock=lambda: today
        )
        room_repo.seed([Room(id=1)])

        manager = components["booking_manager"]
        with pytest.raises(InvalidRangeException):
            await manager.find_available_room(today, today)
        tomorrow = today + timedelta(days=1)
        assert await manager.find_available_room(tomorrow, tomorrow) == 1
