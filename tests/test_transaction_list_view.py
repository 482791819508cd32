"""
Тесты для TransactionListView.
"""
import unittest
from decimal import Decimal

import flet as ft

from expense_tracker.models import Transaction, TransactionType
from expense_tracker.views.transaction_list_view import TransactionListView
from test_view_base import ViewTestBase

MODULE = 'expense_tracker.views.transaction_list_view'


class TestTransactionListView(ViewTestBase):
    """Тесты для TransactionListView."""

    def setUp(self):
        super().setUp()
        self.add_patcher(f'{MODULE}.get_db_session', return_value=self.create_mock_db_context())
        self.mock_merge = self.add_patcher(f'{MODULE}.merge_transactions', return_value=[])

        self.transactions = [
            Transaction(id="2", name="Salary", amount=Decimal("1000"), created_time=2, type=TransactionType.INCOME),
            Transaction(id="1", name="Coffee", amount=Decimal("3.50"), created_time=1, type=TransactionType.EXPENSE),
        ]

    def _row_texts(self, view):
        rows = [c for c in view.transactions_column.controls if isinstance(c, ft.Container)]
        return [(row.content.controls[0].value, row.content.controls[1].value) for row in rows]

    def test_shows_signed_amounts(self):
        self.mock_merge.return_value = self.transactions

        view = TransactionListView(self.page, self.localizer)

        self.mock_merge.assert_called_once_with(self.mock_session)
        self.assertEqual(view.header.value, "Transaction List")
        self.assertEqual(self._row_texts(view), [("Salary", "+1000"), ("Coffee", "-3.50")])

    def test_amount_colors(self):
        self.mock_merge.return_value = self.transactions

        view = TransactionListView(self.page, self.localizer)

        rows = [c for c in view.transactions_column.controls if isinstance(c, ft.Container)]
        self.assertEqual(rows[0].content.controls[1].color, ft.Colors.GREEN)
        self.assertEqual(rows[1].content.controls[1].color, ft.Colors.RED)

    def test_empty_list_shows_no_entry(self):
        view = TransactionListView(self.page, self.localizer)

        self.assertEqual(view.transactions_column.controls[0].value, "No Entry")

    def test_refresh_reloads(self):
        view = TransactionListView(self.page, self.localizer)
        self.mock_merge.return_value = self.transactions

        view._on_refresh(None)

        self.assertEqual(self.mock_merge.call_count, 2)
        self.assertEqual(len(self._row_texts(view)), 2)
        self.page.update.assert_called()

    def test_load_error_keeps_empty_state(self):
        self.mock_merge.side_effect = RuntimeError("db is gone")

        view = TransactionListView(self.page, self.localizer)

        self.assertEqual(view.transactions, [])
        self.assertEqual(view.transactions_column.controls[0].value, "No Entry")


if __name__ == '__main__':
    unittest.main()
