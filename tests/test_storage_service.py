"""
Тесты для локального хранилища "ключ -> текст".
"""
import pytest
from sqlalchemy.exc import SQLAlchemyError

from expense_tracker.models import KeyValueDB
from expense_tracker.services.storage_service import get_item, set_item, remove_item
from expense_tracker.utils.exceptions import StorageError


def test_get_missing_key_returns_none(db_session):
    assert get_item(db_session, "expenses") is None


def test_set_then_get(db_session):
    set_item(db_session, "expenses", "[]")
    assert get_item(db_session, "expenses") == "[]"


def test_set_replaces_existing_value(db_session):
    set_item(db_session, "incomes", "[1]")
    set_item(db_session, "incomes", "[1, 2]")

    assert get_item(db_session, "incomes") == "[1, 2]"
    assert db_session.query(KeyValueDB).count() == 1


def test_keys_are_independent(db_session):
    set_item(db_session, "expenses", "a")
    set_item(db_session, "incomes", "b")

    assert get_item(db_session, "expenses") == "a"
    assert get_item(db_session, "incomes") == "b"


def test_unicode_value(db_session):
    set_item(db_session, "expenses", '[{"name": "চা"}]')
    assert get_item(db_session, "expenses") == '[{"name": "চা"}]'


def test_remove_item(db_session):
    set_item(db_session, "expenses", "[]")

    assert remove_item(db_session, "expenses") is True
    assert get_item(db_session, "expenses") is None
    assert remove_item(db_session, "expenses") is False


def test_read_error_raises_storage_error(mock_session):
    mock_session.get.side_effect = SQLAlchemyError("disk I/O error")

    with pytest.raises(StorageError):
        get_item(mock_session, "expenses")
    mock_session.rollback.assert_called_once()


def test_write_error_raises_storage_error_and_rolls_back(mock_session):
    mock_session.get.return_value = None
    mock_session.commit.side_effect = SQLAlchemyError("database is locked")

    with pytest.raises(StorageError):
        set_item(mock_session, "expenses", "[]")
    mock_session.rollback.assert_called_once()
