"""
Форма добавления записи (расхода или дохода).
"""

from typing import Callable, Optional

import flet as ft

from expense_tracker.database import get_db_session
from expense_tracker.models import Collection
from expense_tracker.services.record_service import build_record_create, append_record
from expense_tracker.utils.error_handler import safe_handler
from expense_tracker.utils.exceptions import StorageError
from expense_tracker.utils.localization import Localizer
from expense_tracker.utils.logger import get_logger

logger = get_logger(__name__)

# Ключи строк интерфейса для каждой коллекции
FORM_KEYS = {
    Collection.EXPENSES: {
        "title": "addExpense",
        "name": "expenseName",
        "amount": "expenseAmount",
        "added": "expenseAdded",
    },
    Collection.INCOMES: {
        "title": "addIncome",
        "name": "incomeName",
        "amount": "incomeAmount",
        "added": "incomeAdded",
    },
}

# Время показа сообщения об успехе, мс
SUCCESS_MESSAGE_DURATION = {
    Collection.EXPENSES: 2000,
    Collection.INCOMES: 3000,
}


class RecordFormView(ft.Column):
    """
    Форма с полями "название" и "сумма" и кнопкой добавления.

    После успешного сохранения поля очищаются и на короткое время
    показывается сообщение об успехе, затем вызывается on_change.
    """

    def __init__(
        self,
        page: ft.Page,
        localizer: Localizer,
        collection: Collection,
        on_change: Optional[Callable[[], None]] = None
    ):
        super().__init__(expand=True, spacing=8)
        self.page = page
        self.localizer = localizer
        self.collection = collection
        self.keys = FORM_KEYS[collection]
        self.on_change = on_change

        self._init_controls()

    def _init_controls(self):
        t = self.localizer.t

        self.header = ft.Text(t(self.keys["title"]), size=24, weight=ft.FontWeight.BOLD)
        self.name_field = ft.TextField(hint_text=t(self.keys["name"]), dense=True)
        self.amount_field = ft.TextField(
            hint_text=t(self.keys["amount"]),
            keyboard_type=ft.KeyboardType.NUMBER,
            dense=True,
        )
        self.submit_button = ft.ElevatedButton(
            text=t(self.keys["title"]),
            icon=ft.Icons.ADD,
            on_click=self._on_submit,
        )

        self.controls = [
            self.header,
            self.name_field,
            self.amount_field,
            self.submit_button,
        ]

    @safe_handler()
    def _on_submit(self, e):
        self.submit()

    def submit(self):
        """
        Проверяет ввод и сохраняет запись.

        Raises:
            ValidationError: Если название пустое или сумма некорректна
            StorageError: Если запись не удалось сохранить
        """
        data = build_record_create(self.name_field.value or "", self.amount_field.value or "")

        with get_db_session() as session:
            record = append_record(session, self.collection, data)

        if record is None:
            raise StorageError(f"Запись не сохранена в '{self.collection.value}'")

        self.name_field.value = ""
        self.amount_field.value = ""
        self.page.open(ft.SnackBar(
            content=ft.Text(self.localizer.t(self.keys["added"])),
            bgcolor=ft.Colors.GREEN,
            duration=SUCCESS_MESSAGE_DURATION[self.collection],
        ))
        if self.on_change:
            self.on_change()
        self.page.update()
        logger.info(f"Добавлена запись {record.id} в '{self.collection.value}'")
