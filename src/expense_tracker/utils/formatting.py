"""
Форматирование дат и сумм для отображения.
"""

from datetime import date, datetime, tzinfo
from decimal import Decimal
from typing import Optional

INVALID_DATE = "Invalid Date"


def timestamp_to_date(timestamp_ms: int, tz: Optional[tzinfo] = None) -> Optional[date]:
    """
    Преобразует время в миллисекундах Unix в календарную дату.

    Args:
        timestamp_ms: Время в миллисекундах
        tz: Часовой пояс (по умолчанию локальный)

    Returns:
        Дата или None, если значение вне допустимого диапазона
    """
    try:
        return datetime.fromtimestamp(timestamp_ms / 1000, tz=tz).date()
    except (OverflowError, OSError, ValueError, TypeError):
        return None


def format_timestamp(timestamp_ms: int, date_format: str = "%b %d, %Y", tz: Optional[tzinfo] = None) -> str:
    """Дата записи для подписи в списке, либо "Invalid Date"."""
    day = timestamp_to_date(timestamp_ms, tz)
    if day is None:
        return INVALID_DATE
    return day.strftime(date_format)


def format_amount(amount: Decimal, currency_symbol: str = "$") -> str:
    """Сумма с символом валюты и двумя знаками после точки: $3.50"""
    return f"{currency_symbol}{amount:.2f}"
