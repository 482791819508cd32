"""
Конфигурация pytest для тестов expense_tracker.
"""
import pytest
from unittest.mock import Mock, MagicMock
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
import flet as ft

from expense_tracker.models import Base, Collection, RecordCreate
from expense_tracker.services.record_service import append_record
from expense_tracker.utils.localization import Localizer


@pytest.fixture
def db_session():
    """
    Централизованная фикстура для создания временной БД и сессии.
    Автоматически закрывает соединение после теста.
    """
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    Session = sessionmaker(bind=engine)
    session = Session()

    yield session

    session.close()
    engine.dispose()


@pytest.fixture
def mock_page():
    """
    Фикстура для создания мока Flet Page.

    Использует современный Flet API: page.open(control) для SnackBar и диалогов.
    """
    page = MagicMock(spec=ft.Page)
    page.overlay = []
    page.update = MagicMock()
    page.open = MagicMock()
    page.close = MagicMock()
    page.width = 400
    page.height = 800
    page.theme_mode = "light"
    return page


@pytest.fixture
def mock_session():
    """
    Фикстура для создания мока SQLAlchemy Session.
    """
    session = Mock()
    session.commit = Mock()
    session.rollback = Mock()
    session.close = Mock()
    session.get = Mock()
    session.add = Mock()
    session.delete = Mock()
    return session


@pytest.fixture
def localizer():
    """Переводчик с английским языком."""
    return Localizer("en")


@pytest.fixture
def sample_records(db_session):
    """
    Фикстура с образцами записей в тестовой БД.

    Returns:
        dict: Записи по коллекциям:
            - Collection.EXPENSES: Coffee (1000), Lunch (3000)
            - Collection.INCOMES: Salary (2000)
    """
    expenses = [
        append_record(db_session, Collection.EXPENSES, RecordCreate(name="Coffee", amount="3.50"), created_time=1000),
        append_record(db_session, Collection.EXPENSES, RecordCreate(name="Lunch", amount="12.00"), created_time=3000),
    ]
    incomes = [
        append_record(db_session, Collection.INCOMES, RecordCreate(name="Salary", amount="1000"), created_time=2000),
    ]
    return {
        Collection.EXPENSES: expenses,
        Collection.INCOMES: incomes,
    }
