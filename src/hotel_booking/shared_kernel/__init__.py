"""
Общее ядро (Shared Kernel) системы бронирования отеля.

Содержит общие типы данных и утилиты, используемые во всех слоях.
"""

from .domain import (
    DateRange,
    # Исключения
    DomainException,
    DuplicateEntityException,
    # Базовые типы
    EntityId,
    EntityNotFoundException,
    InvalidRangeException,
    # Утилиты
    today,
)

__all__ = [
    # Базовые типы
    "EntityId",
    "DateRange",
    # Исключения
    "DomainException",
    "InvalidRangeException",
    "EntityNotFoundException",
    "DuplicateEntityException",
    # Утилиты
    "today",
]
