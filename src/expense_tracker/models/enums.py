"""
Модуль перечислений (enums) для Expense Tracker.
"""

from enum import Enum


class Collection(str, Enum):
    """
    Именованная коллекция записей в локальном хранилище.

    Значение совпадает с ключом, под которым коллекция сохраняется.

    Attributes:
        EXPENSES: Расходы
        INCOMES: Доходы
    """
    EXPENSES = "expenses"
    INCOMES = "incomes"

    @property
    def transaction_type(self) -> "TransactionType":
        """Тип транзакции, которым помечаются записи этой коллекции."""
        if self is Collection.EXPENSES:
            return TransactionType.EXPENSE
        return TransactionType.INCOME


class TransactionType(str, Enum):
    """
    Тип транзакции в объединённом списке.

    Attributes:
        EXPENSE: Расход
        INCOME: Доход
    """
    EXPENSE = "expense"
    INCOME = "income"
