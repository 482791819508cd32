"""
Модуль объединённого списка транзакций.

Содержит:
- merge_transactions: расходы и доходы одним списком, новые первыми
- format_signed_amount: сумма со знаком ("-" расход, "+" доход)
- group_by_day: группировка подряд идущих записей по календарному дню

Объединённый список не хранится, он пересчитывается при каждом чтении.
"""

from datetime import date, tzinfo
from typing import List, Optional, Sequence, Tuple
import logging

from sqlalchemy.orm import Session

from expense_tracker.models import Collection, Record, Transaction, TransactionType
from expense_tracker.services.record_service import list_records
from expense_tracker.utils.formatting import timestamp_to_date

logger = logging.getLogger(__name__)


def merge_transactions(session: Session) -> List[Transaction]:
    """
    Возвращает записи обеих коллекций с признаком происхождения.

    Сортировка по времени создания по убыванию. Сортировка устойчивая:
    при равном времени расходы идут раньше доходов, внутри коллекции
    сохраняется порядок добавления.

    Args:
        session: Активная сессия БД

    Returns:
        Список транзакций (может быть пустым)
    """
    transactions: List[Transaction] = []
    for collection in (Collection.EXPENSES, Collection.INCOMES):
        transaction_type = collection.transaction_type
        transactions.extend(
            Transaction(**record.model_dump(), type=transaction_type)
            for record in list_records(session, collection)
        )

    transactions.sort(key=lambda t: t.created_time, reverse=True)
    logger.info(f"Объединённый список: {len(transactions)} транзакций")
    return transactions


def format_signed_amount(transaction: Transaction) -> str:
    """Сумма со знаком: "-3.50" для расхода, "+1000" для дохода."""
    sign = "-" if transaction.type == TransactionType.EXPENSE else "+"
    return f"{sign}{transaction.amount:f}"


def group_by_day(
    records: Sequence[Record],
    tz: Optional[tzinfo] = None
) -> List[Tuple[Optional[date], List[Record]]]:
    """
    Разбивает список на группы подряд идущих записей одного дня.

    Порядок записей не меняется. Записи с некорректным временем попадают
    в группу с датой None.

    Args:
        records: Записи (обычно уже отсортированные)
        tz: Часовой пояс (по умолчанию локальный)

    Returns:
        Список пар (дата, записи этого дня)
    """
    groups: List[Tuple[Optional[date], List[Record]]] = []
    for record in records:
        day = timestamp_to_date(record.created_time, tz)
        if groups and groups[-1][0] == day:
            groups[-1][1].append(record)
        else:
            groups.append((day, [record]))
    return groups
