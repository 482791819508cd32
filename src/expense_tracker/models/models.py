"""
Модуль моделей данных для Expense Tracker.

Содержит:
- KeyValueDB: SQLAlchemy модель локального хранилища "ключ -> текст"
- RecordCreate: Pydantic модель для создания записи с валидацией
- Record: Pydantic модель сохранённой записи (расход или доход)
- Transaction: запись с признаком происхождения для объединённого списка
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import DeclarativeBase
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import TransactionType


# Декларативная база для SQLAlchemy моделей
class Base(DeclarativeBase):
    """Базовый класс для всех SQLAlchemy моделей."""
    pass


class KeyValueDB(Base):
    """
    Строка локального хранилища "ключ -> текст".

    Коллекции записей хранятся здесь целиком, как JSON массив под своим ключом
    ("expenses", "incomes").

    Attributes:
        key: Логический ключ
        value: Сериализованное значение
        updated_at: Дата последней записи
    """
    __tablename__ = "key_value_store"

    key = Column(String(64), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)


# =============================================================================
# Pydantic модели для валидации
# =============================================================================

class RecordCreate(BaseModel):
    """
    Pydantic модель для создания записи из формы.

    Attributes:
        name: Название (не может быть пустым)
        amount: Сумма (больше 0, не более 12 цифр, из них 2 после точки)
    """
    name: str = Field(min_length=1)
    amount: Decimal = Field(gt=Decimal('0'), max_digits=12, decimal_places=2)

    @field_validator('name', mode='before')
    @classmethod
    def strip_name(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('amount', mode='before')
    @classmethod
    def strip_amount(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('amount')
    @classmethod
    def to_fixed_point(cls, v: Decimal) -> Decimal:
        """1e3 хранится как 1000, а не 1E+3."""
        return Decimal(format(v, "f"))


class Record(BaseModel):
    """
    Сохранённая запись расхода или дохода.

    В хранилище поле created_time записывается под именем createdTime.

    Attributes:
        id: Уникальный ключ записи (UUID, у старых записей число в виде строки)
        name: Название
        amount: Сумма
        created_time: Время создания в миллисекундах Unix
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    name: str
    amount: Decimal = Field(max_digits=12)
    created_time: int = Field(alias="createdTime")

    @field_validator('id', mode='before')
    @classmethod
    def normalize_id(cls, v):
        """Старые записи используют числовой id (время создания)."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def to_storage(self) -> dict:
        """Словарь в формате хранилища: {id, name, amount, createdTime}."""
        return self.model_dump(mode="json", by_alias=True)


class Transaction(Record):
    """
    Запись в объединённом списке с признаком коллекции-источника.

    Не сохраняется, вычисляется при каждом чтении.
    """
    type: TransactionType
