"""
Модуль хранилища записей (расходы и доходы).

Каждая коллекция хранится целиком как JSON массив под своим ключом
("expenses", "incomes"). Все изменения выполняются по схеме
"прочитать - изменить - записать целиком":
- append_record: добавление записи в конец коллекции
- list_records: чтение коллекции в порядке добавления
- list_records_sorted: чтение коллекции, новые записи первыми
- delete_record: удаление записи по id
- get_total / get_balance: суммы по коллекциям

Ошибки хранилища (повреждённый JSON, ошибки БД) логируются и не
пробрасываются: операция возвращает пустой результат или ничего не меняет.
"""

import json
import time
import uuid
from decimal import Decimal
from typing import List, Optional
import logging

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from expense_tracker.models import Collection, Record, RecordCreate
from expense_tracker.services import storage_service
from expense_tracker.utils.exceptions import StorageError, ValidationError

logger = logging.getLogger(__name__)


def current_timestamp_ms() -> int:
    """Текущее время в миллисекундах Unix."""
    return time.time_ns() // 1_000_000


# Последнее выданное время создания, мс
_last_created_time = 0


def next_created_time() -> int:
    """
    Время создания новой записи в мс.

    Не меньше текущего времени и строго больше выданного ранее, поэтому
    записи, добавленные в одну миллисекунду, сохраняют порядок добавления.
    """
    global _last_created_time
    _last_created_time = max(current_timestamp_ms(), _last_created_time + 1)
    return _last_created_time


def build_record_create(name: str, amount: str) -> RecordCreate:
    """
    Проверяет ввод формы и возвращает данные для создания записи.

    Args:
        name: Название из поля формы
        amount: Сумма из поля формы (строка)

    Raises:
        ValidationError: Если название пустое или сумма не положительное число
    """
    try:
        return RecordCreate(name=name, amount=amount)
    except PydanticValidationError as e:
        first_error = e.errors()[0]
        field = str(first_error["loc"][0]) if first_error["loc"] else None
        logger.warning(f"Некорректный ввод в поле '{field}': {first_error['msg']}")
        raise ValidationError(f"Некорректное значение поля {field}", field=field) from e


def _load_raw(session: Session, collection: Collection) -> Optional[list]:
    """
    Читает коллекцию как список словарей.

    Returns:
        Пустой список если ключа нет, None если данные повреждены

    Raises:
        StorageError: При ошибках чтения из БД
    """
    raw = storage_service.get_item(session, collection.value)
    if raw is None:
        return []

    try:
        items = json.loads(raw)
    except ValueError as e:
        logger.error(f"Повреждённые данные коллекции '{collection.value}': {e}")
        return None

    if not isinstance(items, list):
        logger.error(f"Коллекция '{collection.value}' не является массивом: {type(items).__name__}")
        return None
    return items


def _save_raw(session: Session, collection: Collection, items: list) -> None:
    storage_service.set_item(session, collection.value, json.dumps(items, ensure_ascii=False))


def append_record(
    session: Session,
    collection: Collection,
    data: RecordCreate,
    created_time: Optional[int] = None
) -> Optional[Record]:
    """
    Добавляет новую запись в конец коллекции.

    Args:
        session: Активная сессия БД
        collection: Коллекция (расходы или доходы)
        data: Проверенные данные формы
        created_time: Время создания в мс (по умолчанию next_created_time())

    Returns:
        Созданная запись или None, если сохранить не удалось
    """
    record = Record(
        id=str(uuid.uuid4()),
        name=data.name,
        amount=data.amount,
        created_time=created_time if created_time is not None else next_created_time(),
    )

    try:
        items = _load_raw(session, collection)
        if items is None:
            logger.error(f"Запись не добавлена: коллекция '{collection.value}' повреждена")
            return None

        items.append(record.to_storage())
        _save_raw(session, collection, items)

        logger.info(
            f"Запись {record.id} добавлена в '{collection.value}'",
            extra={"collection": collection.value, "amount": record.amount}
        )
        return record

    except StorageError as e:
        logger.error(f"Ошибка при сохранении записи в '{collection.value}': {e}")
        return None


def list_records(session: Session, collection: Collection) -> List[Record]:
    """
    Возвращает записи коллекции в порядке добавления.

    Отсутствующая или повреждённая коллекция даёт пустой список.
    Отдельные записи, не прошедшие проверку, пропускаются.
    """
    try:
        items = _load_raw(session, collection)
    except StorageError as e:
        logger.error(f"Ошибка при чтении коллекции '{collection.value}': {e}")
        return []

    if not items:
        return []

    records: List[Record] = []
    for item in items:
        try:
            records.append(Record.model_validate(item))
        except PydanticValidationError as e:
            logger.warning(f"Пропущена некорректная запись в '{collection.value}': {e.error_count()} ошибок")

    logger.debug(f"Прочитано {len(records)} записей из '{collection.value}'")
    return records


def list_records_sorted(session: Session, collection: Collection) -> List[Record]:
    """Возвращает записи коллекции, новые первыми."""
    return sorted(list_records(session, collection), key=lambda r: r.created_time, reverse=True)


def delete_record(session: Session, collection: Collection, record_id: str) -> bool:
    """
    Удаляет запись по id.

    Если записи с таким id нет, коллекция не перезаписывается.

    Returns:
        True если запись удалена, False если не найдена или произошла ошибка
    """
    try:
        items = _load_raw(session, collection)
        if not items:
            logger.warning(f"Запись {record_id} не найдена: коллекция '{collection.value}' пуста или повреждена")
            return False

        remaining = [
            item for item in items
            if not (isinstance(item, dict) and str(item.get("id")) == str(record_id))
        ]
        if len(remaining) == len(items):
            logger.warning(f"Запись {record_id} не найдена в '{collection.value}'")
            return False

        _save_raw(session, collection, remaining)
        logger.info(f"Запись {record_id} удалена из '{collection.value}'")
        return True

    except StorageError as e:
        logger.error(f"Ошибка при удалении записи {record_id} из '{collection.value}': {e}")
        return False


def get_total(session: Session, collection: Collection) -> Decimal:
    """Сумма всех записей коллекции."""
    total = sum((r.amount for r in list_records(session, collection)), Decimal('0'))
    logger.debug(f"Итог по '{collection.value}': {total}")
    return total


def get_balance(session: Session) -> Decimal:
    """Баланс: доходы минус расходы."""
    balance = get_total(session, Collection.INCOMES) - get_total(session, Collection.EXPENSES)
    logger.info(f"Текущий баланс: {balance}")
    return balance
