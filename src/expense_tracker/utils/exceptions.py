"""
Модуль пользовательских исключений приложения.
"""

from typing import Optional


class ExpenseTrackerError(Exception):
    """Базовый класс для всех исключений приложения."""
    pass

class ValidationError(ExpenseTrackerError):
    """
    Исключение при ошибке валидации данных (пользовательский ввод).

    Attributes:
        field: Имя поля формы, не прошедшего проверку (name, amount)
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field

class StorageError(ExpenseTrackerError):
    """Исключение при ошибках чтения или записи локального хранилища."""
    pass
