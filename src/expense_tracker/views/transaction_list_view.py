"""
Список транзакций - расходы и доходы одним списком, новые первыми.
"""

from typing import List

import flet as ft

from expense_tracker.database import get_db_session
from expense_tracker.models import Transaction, TransactionType
from expense_tracker.services.transaction_service import merge_transactions, format_signed_amount
from expense_tracker.utils.error_handler import safe_handler
from expense_tracker.utils.localization import Localizer
from expense_tracker.utils.logger import get_logger

logger = get_logger(__name__)


class TransactionListView(ft.Column):
    """Экран объединённого списка транзакций с кнопкой обновления."""

    def __init__(self, page: ft.Page, localizer: Localizer):
        super().__init__(expand=True, spacing=10)
        self.page = page
        self.localizer = localizer
        self.transactions: List[Transaction] = []

        self.header = ft.Text(localizer.t("transactionList"), size=24, weight=ft.FontWeight.BOLD)
        self.refresh_button = ft.IconButton(
            icon=ft.Icons.REFRESH,
            on_click=self._on_refresh,
        )
        self.transactions_column = ft.Column(
            controls=[],
            scroll=ft.ScrollMode.AUTO,
            spacing=0,
            expand=True
        )
        self.controls = [
            ft.Row([self.header, self.refresh_button], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
            self.transactions_column,
        ]

        self.fetch_transactions()

    def fetch_transactions(self):
        """Перечитывает обе коллекции и перерисовывает список."""
        try:
            with get_db_session() as session:
                self.transactions = merge_transactions(session)
        except Exception as e:
            logger.error(f"Ошибка при загрузке транзакций: {e}")
            self.transactions = []

        if not self.transactions:
            self.transactions_column.controls = [
                ft.Text(self.localizer.t("noEntry"), text_align=ft.TextAlign.CENTER, expand=True)
            ]
            return

        controls: List[ft.Control] = []
        for index, transaction in enumerate(self.transactions):
            if index > 0:
                controls.append(ft.Divider(height=1, color=ft.Colors.GREY))
            controls.append(self._build_transaction_item(transaction))
        self.transactions_column.controls = controls

    def _build_transaction_item(self, transaction: Transaction) -> ft.Control:
        color = ft.Colors.RED if transaction.type == TransactionType.EXPENSE else ft.Colors.GREEN
        return ft.Container(
            content=ft.Row(
                controls=[
                    ft.Text(transaction.name, size=16, expand=True),
                    ft.Text(format_signed_amount(transaction), size=16, color=color),
                ],
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            ),
            padding=ft.padding.symmetric(vertical=8),
        )

    @safe_handler()
    def _on_refresh(self, e):
        self.fetch_transactions()
        self.page.update()
