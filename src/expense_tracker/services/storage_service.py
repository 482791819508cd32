"""
Модуль локального хранилища "ключ -> текст".

Минимальный интерфейс в духе AsyncStorage мобильных приложений:
- get_item: получение текста по ключу (None, если ключа нет)
- set_item: запись текста по ключу (вставка или замена)
- remove_item: удаление ключа

Все функции принимают сессию БД как параметр (Dependency Injection).
Ошибки SQLAlchemy логируются, транзакция откатывается, наружу
пробрасывается StorageError.
"""

from typing import Optional
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from expense_tracker.models import KeyValueDB
from expense_tracker.utils.exceptions import StorageError

logger = logging.getLogger(__name__)


def get_item(session: Session, key: str) -> Optional[str]:
    """
    Получает сохранённый текст по ключу.

    Args:
        session: Активная сессия БД
        key: Логический ключ

    Returns:
        Сохранённый текст или None, если ключ отсутствует

    Raises:
        StorageError: При ошибках чтения из базы данных
    """
    try:
        row = session.get(KeyValueDB, key)
        if row is None:
            logger.debug(f"Ключ '{key}' отсутствует в хранилище")
            return None
        return row.value

    except SQLAlchemyError as e:
        logger.error(f"Ошибка при чтении ключа '{key}': {e}")
        session.rollback()
        raise StorageError(f"Ошибка при чтении ключа '{key}': {e}") from e


def set_item(session: Session, key: str, value: str) -> None:
    """
    Записывает текст по ключу, заменяя прежнее значение.

    Args:
        session: Активная сессия БД
        key: Логический ключ
        value: Текст для сохранения

    Raises:
        StorageError: При ошибках записи в базу данных
    """
    try:
        row = session.get(KeyValueDB, key)
        if row is None:
            session.add(KeyValueDB(key=key, value=value))
        else:
            row.value = value
        session.commit()
        logger.debug(f"Ключ '{key}' сохранён ({len(value)} символов)")

    except SQLAlchemyError as e:
        logger.error(f"Ошибка при записи ключа '{key}': {e}")
        session.rollback()
        raise StorageError(f"Ошибка при записи ключа '{key}': {e}") from e


def remove_item(session: Session, key: str) -> bool:
    """
    Удаляет ключ из хранилища.

    Returns:
        True если ключ был удалён, False если его не было

    Raises:
        StorageError: При ошибках работы с базой данных
    """
    try:
        row = session.get(KeyValueDB, key)
        if row is None:
            return False
        session.delete(row)
        session.commit()
        logger.info(f"Ключ '{key}' удалён из хранилища")
        return True

    except SQLAlchemyError as e:
        logger.error(f"Ошибка при удалении ключа '{key}': {e}")
        session.rollback()
        raise StorageError(f"Ошибка при удалении ключа '{key}': {e}") from e
