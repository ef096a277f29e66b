"""
Инфраструктурный слой контекста бронирования.

Содержит реализации репозиториев и логгера,
зависимые от конкретных технологий (память процесса, JSON-файлы, консоль).
"""
import json
import sys
from pathlib import Path
from typing import Dict, Generic, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel

from ..shared_kernel import DuplicateEntityException, EntityId, EntityNotFoundException
from . import interfaces as ports
from .domain import Customer, Room

T = TypeVar("T", bound=BaseModel)


class InMemoryRepository(Generic[T]):
    """
    Реализация обобщенного репозитория в памяти.

    Сохраняет порядок добавления; сущностям без id
    присваивается следующий свободный целочисленный id.
    """

    def __init__(self, model_class: Type[T], items: Optional[Iterable[T]] = None):
        self._model_class = model_class
        self._items: Dict[EntityId, T] = {}
        self._next_id = 1
        for item in items or []:
            self._store_new(item)

    @property
    def entity_name(self) -> str:
        return self._model_class.__name__

    def __len__(self) -> int:
        return len(self._items)

    def seed(self, items: Iterable[T]) -> None:
        """Синхронно заполняет репозиторий начальными данными."""
        for item in items:
            self._store_new(item)

    async def get_all(self) -> List[T]:
        return list(self._items.values())

    async def get(self, entity_id: EntityId) -> T:
        if entity_id not in self._items:
            raise EntityNotFoundException(
                f"{self.entity_name} with id {entity_id} not found"
            )
        return self._items[entity_id]

    async def add(self, entity: T) -> None:
        self._store_new(entity)

    async def edit(self, entity: T) -> None:
        if entity.id not in self._items:
            raise EntityNotFoundException(
                f"{self.entity_name} with id {entity.id} not found"
            )
        self._items[entity.id] = entity

    async def remove(self, entity_id: EntityId) -> None:
        if entity_id not in self._items:
            raise EntityNotFoundException(
                f"{self.entity_name} with id {entity_id} not found"
            )
        del self._items[entity_id]

    def _store_new(self, entity: T) -> None:
        if entity.id is None:
            entity.id = self._next_id
        elif entity.id in self._items:
            raise DuplicateEntityException(
                f"{self.entity_name} with id {entity.id} already exists"
            )
        self._items[entity.id] = entity
        self._next_id = max(self._next_id, entity.id + 1)


class JsonFileRepository(InMemoryRepository[T]):
    """Репозиторий, сохраняющий данные в JSON-файл после каждого изменения."""

    def __init__(self, file_path: str, model_class: Type[T]):
        """
        Инициализирует репозиторий.

        Args:
            file_path: Путь к JSON-файлу с данными
            model_class: Класс модели данных
        """
        super().__init__(model_class)
        self._file_path = Path(file_path)
        self._load_data()

    def _load_data(self) -> None:
        """Загружает данные из JSON-файла."""
        if not self._file_path.exists():
            return

        with open(self._file_path, "r", encoding="utf-8") as f:
            raw_data = f.read()

        if not raw_data.strip():
            return

        for item in json.loads(raw_data):
            self._store_new(self._model_class.model_validate(item))

    def _save_data(self) -> None:
        """Сохраняет данные в JSON-файл."""
        self._file_path.parent.mkdir(parents=True, exist_ok=True)

        data = [item.model_dump(mode="json") for item in self._items.values()]

        with open(self._file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def seed(self, items: Iterable[T]) -> None:
        super().seed(items)
        self._save_data()

    async def add(self, entity: T) -> None:
        await super().add(entity)
        self._save_data()

    async def edit(self, entity: T) -> None:
        await super().edit(entity)
        self._save_data()

    async def remove(self, entity_id: EntityId) -> None:
        await super().remove(entity_id)
        self._save_data()


class ConsoleLogger(ports.ILogger):
    """Простая реализация логгера, выводящая сообщения в консоль."""

    def __init__(self, verbose: bool = False):
        self._verbose = verbose

    def info(self, message: str, **kwargs) -> None:
        self._write("INFO", message, kwargs, sys.stdout)

    def error(self, message: str, **kwargs) -> None:
        self._write("ERROR", message, kwargs, sys.stderr)

    def warning(self, message: str, **kwargs) -> None:
        self._write("WARNING", message, kwargs, sys.stderr)

    def debug(self, message: str, **kwargs) -> None:
        if self._verbose:
            self._write("DEBUG", message, kwargs, sys.stdout)

    def _write(self, level: str, message: str, context: dict, stream) -> None:
        print(f"[{level}] {message}", file=stream, flush=True)
        if context:
            print(
                "  Context:",
                json.dumps(context, default=str, indent=2),
                file=stream,
                flush=True,
            )


def sample_rooms() -> List[Room]:
    """Начальный набор номеров."""
    return [
        Room(description="A"),
        Room(description="B"),
        Room(description="C"),
    ]


def sample_customers() -> List[Customer]:
    """Начальный набор клиентов."""
    return [
        Customer(name="John Smith", email="js@gmail.com"),
        Customer(name="Jane Doe", email="jd@gmail.com"),
    ]
