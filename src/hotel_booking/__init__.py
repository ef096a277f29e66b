"""
Система бронирования номеров отеля.

Ядро — сервис проверки доступности (BookingManager): поиск свободного
номера, создание бронирования и расчет полностью занятых дат.
"""

__version__ = "0.1.0"
