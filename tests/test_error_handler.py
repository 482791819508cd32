"""
Тесты для централизованной обработки ошибок.
"""
import flet as ft

from expense_tracker.utils.error_handler import ErrorHandler, safe_handler
from expense_tracker.utils.exceptions import StorageError, ValidationError
from expense_tracker.utils.localization import Localizer


def test_user_messages_are_localized():
    handler = ErrorHandler(localizer=Localizer("en"))

    assert handler.get_user_message(ValidationError("bad", field="name")) == "Please enter a name"
    assert handler.get_user_message(ValidationError("bad", field="amount")) == "Please enter a valid amount"
    assert handler.get_user_message(StorageError("boom")) == "Could not save the entry"
    assert handler.get_user_message(RuntimeError("boom")) == "An unexpected error occurred"


def test_user_messages_in_bengali():
    handler = ErrorHandler(localizer=Localizer("bn"))
    assert handler.get_user_message(ValidationError("bad", field="name")) == "নাম লিখুন"


def test_handle_shows_snack_bar(mock_page):
    handler = ErrorHandler(mock_page, Localizer("en"))

    handler.handle(StorageError("boom"), context_message="save")

    mock_page.open.assert_called_once()
    snack_bar = mock_page.open.call_args.args[0]
    assert isinstance(snack_bar, ft.SnackBar)
    assert snack_bar.content.value == "Could not save the entry"


def test_handle_without_page_only_logs(caplog):
    ErrorHandler().handle(RuntimeError("boom"), context_message="load")
    assert "load: boom" in caplog.text


class _Screen:
    def __init__(self, page, localizer=None):
        self.page = page
        self.localizer = localizer
        self.calls = 0

    @safe_handler()
    def ok(self, e):
        self.calls += 1
        return "done"

    @safe_handler()
    def broken(self, e):
        raise ValidationError("empty", field="name")


def test_safe_handler_passes_through_result(mock_page):
    screen = _Screen(mock_page)

    assert screen.ok(None) == "done"
    assert screen.calls == 1
    mock_page.open.assert_not_called()


def test_safe_handler_catches_and_reports(mock_page):
    screen = _Screen(mock_page, Localizer("bn"))

    assert screen.broken(None) is None

    snack_bar = mock_page.open.call_args.args[0]
    assert snack_bar.content.value == "নাম লিখুন"


def test_safe_handler_uses_page_getter(mock_page):
    @safe_handler(page_getter=lambda: mock_page)
    def handler(e):
        raise RuntimeError("boom")

    handler(None)

    mock_page.open.assert_called_once()


def test_safe_handler_keeps_function_name():
    assert _Screen.ok.__name__ == "ok"
