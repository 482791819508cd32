__all__ = [
    "MainWindow",
    "ExpenseListView",
    "RecordFormView",
    "TransactionListView",
]

from expense_tracker.views.main_window import MainWindow
from expense_tracker.views.expense_list_view import ExpenseListView
from expense_tracker.views.record_form_view import RecordFormView
from expense_tracker.views.transaction_list_view import TransactionListView
