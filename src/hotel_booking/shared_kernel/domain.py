"""
Основные доменные типы и утилиты общего ядра.
"""

from datetime import date, timedelta
from typing import Iterator, Optional

from pydantic import BaseModel

# Общие типы идентификаторов
EntityId = int


class DateRange(BaseModel):
    """Диапазон дат, обе границы включительно."""

    start_date: date
    end_date: date

    def overlaps(self, other: "DateRange") -> bool:
        """Проверяет пересечение двух диапазонов (границы включаются)."""
        return self.start_date <= other.end_date and other.start_date <= self.end_date

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def intersection(self, other: "DateRange") -> Optional["DateRange"]:
        """Общая часть двух диапазонов или None, если они не пересекаются."""
        if not self.overlaps(other):
            return None
        return DateRange(
            start_date=max(self.start_date, other.start_date),
            end_date=min(self.end_date, other.end_date),
        )

    def days(self) -> Iterator[date]:
        """Перебирает все даты диапазона по возрастанию."""
        # Без шага за end_date: иначе на date.max будет OverflowError
        for offset in range((self.end_date - self.start_date).days + 1):
            yield self.start_date + timedelta(days=offset)

    @property
    def is_ordered(self) -> bool:
        return self.start_date <= self.end_date


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class InvalidRangeException(DomainException):
    """Исключение при некорректном диапазоне дат."""

    MESSAGE = "The start date cannot be in the past or later than the end date."

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)


class EntityNotFoundException(DomainException):
    """Исключение, когда сущность не найдена в хранилище."""

    pass


class DuplicateEntityException(DomainException):
    """Исключение при повторном добавлении сущности с тем же идентификатором."""

    pass


# Общие утилиты
def today() -> date:
    """Возвращает текущую дату."""
    return date.today()
