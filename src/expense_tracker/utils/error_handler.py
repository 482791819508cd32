"""
Модуль централизованной обработки ошибок.
Предоставляет инструменты для перехвата, логирования и отображения ошибок в UI.
"""

import functools
import logging
import traceback
from typing import Callable, Optional
import flet as ft

from expense_tracker.utils.exceptions import ValidationError, StorageError
from expense_tracker.utils.localization import Localizer

logger = logging.getLogger(__name__)

# Ключи сообщений для полей формы
_FIELD_MESSAGE_KEYS = {
    "name": "invalidName",
    "amount": "invalidAmount",
}


class ErrorHandler:
    """
    Класс для централизованной обработки ошибок.
    """

    def __init__(self, page: Optional[ft.Page] = None, localizer: Optional[Localizer] = None):
        self.page = page
        self.localizer = localizer or Localizer()

    def handle(self, exception: Exception, context_message: str = ""):
        """
        Обрабатывает исключение: логирует и показывает уведомление пользователю.

        Args:
            exception: Исключение, которое нужно обработать.
            context_message: Дополнительное сообщение о контексте ошибки.
        """
        log_message = f"{context_message}: {str(exception)}" if context_message else str(exception)

        if isinstance(exception, ValidationError):
            logger.warning(f"User error: {log_message}")
        else:
            logger.error(f"System error: {log_message}\n{traceback.format_exc()}")

        if self.page:
            self.show_error(self.get_user_message(exception))

    def get_user_message(self, exception: Exception) -> str:
        """Возвращает понятное пользователю сообщение на текущем языке."""
        if isinstance(exception, ValidationError):
            key = _FIELD_MESSAGE_KEYS.get(exception.field, "invalidAmount")
        elif isinstance(exception, StorageError):
            key = "saveFailed"
        else:
            key = "unexpectedError"
        return self.localizer.t(key)

    def show_error(self, message: str):
        """Показывает SnackBar с ошибкой."""
        self.page.open(ft.SnackBar(
            content=ft.Text(message, color=ft.Colors.WHITE),
            bgcolor=ft.Colors.ERROR,
            action="OK",
        ))


def safe_handler(page_getter: Callable[[], Optional[ft.Page]] = None):
    """
    Декоратор для обработчиков событий UI.
    Перехватывает ошибки и передаёт их в ErrorHandler.

    Args:
        page_getter: Опциональная функция, возвращающая текущий объект ft.Page.
                     Если не указана, page и localizer берутся из self.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                owner = args[0] if args else None
                page = getattr(owner, 'page', None)
                if page is None and callable(page_getter):
                    page = page_getter()
                localizer = getattr(owner, 'localizer', None)

                handler = ErrorHandler(page, localizer)
                handler.handle(e, context_message=f"Error in {func.__name__}")
        return wrapper
    return decorator
