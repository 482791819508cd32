import pytest
from sqlalchemy import inspect

from expense_tracker import database
from expense_tracker.database import init_db, get_db_session, close_db
from expense_tracker.models import Collection, RecordCreate
from expense_tracker.services.record_service import append_record, list_records


@pytest.fixture
def memory_db():
    engine = init_db("sqlite:///:memory:")
    yield engine
    close_db()


def test_init_creates_key_value_table(memory_db):
    inspector = inspect(memory_db)
    assert inspector.has_table("key_value_store")
    columns = {c["name"] for c in inspector.get_columns("key_value_store")}
    assert {"key", "value", "updated_at"} <= columns


def test_session_roundtrip(memory_db):
    with get_db_session() as session:
        append_record(session, Collection.EXPENSES, RecordCreate(name="Coffee", amount="3.50"))

    with get_db_session() as session:
        assert [r.name for r in list_records(session, Collection.EXPENSES)] == ["Coffee"]


def test_session_rolls_back_and_reraises(memory_db):
    with pytest.raises(RuntimeError):
        with get_db_session():
            raise RuntimeError("boom")


def test_session_before_init_raises():
    close_db()
    assert database._SessionLocal is None

    with pytest.raises(RuntimeError):
        with get_db_session():
            pass


def test_close_db_is_idempotent(memory_db):
    close_db()
    close_db()
    assert database._engine is None
