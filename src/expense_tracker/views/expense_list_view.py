"""
Список расходов - экран с итоговой суммой, переключением языка и удалением записей.

Записи отсортированы по времени создания (новые первыми) и разделены
на секции по календарным дням.
"""

from decimal import Decimal
from typing import Callable, List, Optional

import flet as ft

from expense_tracker.config import settings
from expense_tracker.database import get_db_session
from expense_tracker.models import Collection, Record
from expense_tracker.services.record_service import list_records_sorted, delete_record
from expense_tracker.services.transaction_service import group_by_day
from expense_tracker.utils.error_handler import safe_handler
from expense_tracker.utils.formatting import format_amount, format_timestamp
from expense_tracker.utils.localization import Localizer
from expense_tracker.utils.logger import get_logger

logger = get_logger(__name__)


class ExpenseListView(ft.Column):
    """
    Экран списка расходов.

    Args:
        page: Страница Flet
        localizer: Переводчик строк интерфейса
        on_language_change: Вызывается с кодом языка при нажатии кнопки языка
        on_change: Вызывается после удаления записи
    """

    def __init__(
        self,
        page: ft.Page,
        localizer: Localizer,
        on_language_change: Optional[Callable[[str], None]] = None,
        on_change: Optional[Callable[[], None]] = None
    ):
        super().__init__(expand=True, spacing=10)
        self.page = page
        self.localizer = localizer
        self.on_language_change = on_language_change
        self.on_change = on_change
        self.expenses: List[Record] = []

        self._init_controls()
        self.load_expenses()

    def _init_controls(self):
        t = self.localizer.t

        self.header = ft.Text(t("expenseList"), size=24, weight=ft.FontWeight.BOLD)

        self.language_buttons = [
            ft.TextButton(
                text=name,
                data=code,
                on_click=self._on_language_click,
            )
            for code, name in Localizer.available_languages().items()
        ]

        self.total_text = ft.Text(size=18)

        self.expenses_column = ft.Column(
            controls=[],
            scroll=ft.ScrollMode.AUTO,
            spacing=0,
            expand=True
        )

        self.controls = [
            self.header,
            ft.Row(self.language_buttons, spacing=10),
            self.total_text,
            self.expenses_column,
        ]

    def load_expenses(self):
        """Перечитывает расходы из хранилища и перерисовывает список."""
        try:
            with get_db_session() as session:
                self.expenses = list_records_sorted(session, Collection.EXPENSES)
        except Exception as e:
            logger.error(f"Ошибка при загрузке расходов: {e}")
            self.expenses = []

        self._render()

    @property
    def total_expense(self) -> Decimal:
        return sum((r.amount for r in self.expenses), Decimal('0'))

    def _render(self):
        t = self.localizer.t
        self.total_text.value = f"{t('totalExpense')}: {format_amount(self.total_expense, settings.currency_symbol)}"

        if not self.expenses:
            self.expenses_column.controls = [
                ft.Text(t("noEntry"), text_align=ft.TextAlign.CENTER, expand=True)
            ]
            return

        controls: List[ft.Control] = []
        for index, (_, records) in enumerate(group_by_day(self.expenses)):
            if index > 0:
                # Разделитель между днями
                controls.append(ft.Container(height=8, bgcolor="#f5f5f5"))
            for position, record in enumerate(records):
                if position > 0:
                    controls.append(ft.Divider(height=1, color=ft.Colors.GREY))
                controls.append(self._build_expense_item(record))

        self.expenses_column.controls = controls

    def _build_expense_item(self, record: Record) -> ft.Control:
        return ft.Container(
            content=ft.Row(
                controls=[
                    ft.Column(
                        controls=[
                            ft.Text(record.name, size=16),
                            ft.Text(
                                format_timestamp(record.created_time, settings.date_format),
                                size=12,
                                color=ft.Colors.GREY,
                            ),
                        ],
                        spacing=2,
                        expand=True,
                    ),
                    ft.Text(
                        format_amount(record.amount, settings.currency_symbol),
                        size=16,
                        weight=ft.FontWeight.BOLD,
                    ),
                    ft.TextButton(
                        text=self.localizer.t("delete"),
                        data=record.id,
                        style=ft.ButtonStyle(color=ft.Colors.RED),
                        on_click=self._on_delete_click,
                    ),
                ],
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                vertical_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            padding=ft.padding.symmetric(vertical=8),
        )

    @safe_handler()
    def _on_delete_click(self, e):
        self.delete_expense(e.control.data)

    def delete_expense(self, record_id: str):
        """Удаляет расход и обновляет список."""
        with get_db_session() as session:
            deleted = delete_record(session, Collection.EXPENSES, record_id)
        if deleted:
            logger.info(f"Расход {record_id} удалён пользователем")
        self.load_expenses()
        if deleted and self.on_change:
            self.on_change()
        self.page.update()

    @safe_handler()
    def _on_language_click(self, e):
        code = e.control.data
        if self.on_language_change:
            self.on_language_change(code)
