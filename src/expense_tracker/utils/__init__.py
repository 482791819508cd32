"""Утилиты приложения."""

from expense_tracker.utils.logger import setup_logging, get_logger
from expense_tracker.utils.error_handler import ErrorHandler, safe_handler
from expense_tracker.utils.localization import Localizer
from expense_tracker.utils.exceptions import (
    ExpenseTrackerError,
    ValidationError,
    StorageError,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "ErrorHandler",
    "safe_handler",
    "Localizer",
    "ExpenseTrackerError",
    "ValidationError",
    "StorageError",
]
