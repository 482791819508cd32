import flet as ft
from expense_tracker.utils.logger import get_logger
from expense_tracker.config import settings
from expense_tracker.database import get_db_session
from expense_tracker.models import Collection
from expense_tracker.services.record_service import get_balance
from expense_tracker.utils.formatting import format_amount
from expense_tracker.utils.localization import Localizer

from expense_tracker.views.expense_list_view import ExpenseListView
from expense_tracker.views.record_form_view import RecordFormView
from expense_tracker.views.transaction_list_view import TransactionListView

logger = get_logger(__name__)

# Вкладки нижней навигации: (ключ подписи, иконка)
TABS = [
    ("expenseList", ft.Icons.LIST),
    ("addExpense", ft.Icons.ADD),
    ("addIncome", ft.Icons.ADD),
    ("transactionList", ft.Icons.LIST),
]


class MainWindow(ft.Column):
    def __init__(self, page: ft.Page):
        super().__init__()
        self.page = page
        self.expand = True
        self.localizer = Localizer(settings.language)
        self.setup_page()
        self.init_ui()

        logger.info("Инициализация главного окна")

    def setup_page(self):
        """Настройка основных параметров страницы"""
        self.page.title = settings.APP_NAME
        self.page.theme_mode = ft.ThemeMode.LIGHT if settings.theme_mode == "light" else ft.ThemeMode.DARK
        self.page.bgcolor = "#8F81C2FF"
        self.page.padding = 16

    def init_ui(self):
        selected_index = settings.last_selected_index
        if not 0 <= selected_index < len(TABS):
            selected_index = 0

        self.navigation_bar = ft.NavigationBar(
            selected_index=selected_index,
            destinations=self._build_destinations(),
            on_change=lambda e: self.navigate(e.control.selected_index),
        )
        self.page.navigation_bar = self.navigation_bar

        self.balance_text = ft.Text("", size=16, weight=ft.FontWeight.BOLD)
        self.page.appbar = ft.AppBar(
            leading=ft.Icon(ft.Icons.ACCOUNT_BALANCE_WALLET),
            leading_width=40,
            title=ft.Text(settings.APP_NAME),
            center_title=False,
            actions=[
                ft.Container(
                    content=self.balance_text,
                    padding=ft.padding.only(right=20)
                )
            ]
        )

        self.content_area = ft.Container(
            content=self.get_view(selected_index),
            expand=True,
        )
        self.controls = [self.content_area]
        self.update_balance()

    def _build_destinations(self):
        return [
            ft.NavigationBarDestination(icon=icon, label=self.localizer.t(key))
            for key, icon in TABS
        ]

    def update_balance(self):
        """Обновляет отображение текущего баланса"""
        try:
            with get_db_session() as session:
                balance = get_balance(session)
            self.balance_text.value = f"{self.localizer.t('balance')}: {format_amount(balance, settings.currency_symbol)}"
        except Exception as e:
            logger.error(f"Ошибка при обновлении баланса: {e}")

    def save_state(self):
        """Сохраняет текущее состояние приложения"""
        settings.last_selected_index = self.navigation_bar.selected_index
        settings.language = self.localizer.language
        settings.save()

    def navigate(self, index: int):
        """Переключение между вкладками. Данные вкладки перечитываются при каждом переходе."""
        self.navigation_bar.selected_index = index
        self.content_area.content = self.get_view(index)
        self.update_balance()
        self.save_state()
        self.page.update()
        logger.info(f"Переход на вкладку с индексом: {index}")

    def change_language(self, code: str):
        """Переключает язык интерфейса и перерисовывает навигацию и текущую вкладку."""
        self.localizer.set_language(code)
        self.navigation_bar.destinations = self._build_destinations()
        self.content_area.content = self.get_view(self.navigation_bar.selected_index)
        self.update_balance()
        self.save_state()
        self.page.update()

    def get_view(self, index: int) -> ft.Control:
        """Возвращает содержимое для выбранной вкладки"""
        if index == 0:
            return ExpenseListView(
                self.page,
                self.localizer,
                on_language_change=self.change_language,
                on_change=self.update_balance,
            )
        if index == 1:
            return RecordFormView(self.page, self.localizer, Collection.EXPENSES, on_change=self.update_balance)
        if index == 2:
            return RecordFormView(self.page, self.localizer, Collection.INCOMES, on_change=self.update_balance)
        if index == 3:
            return TransactionListView(self.page, self.localizer)
        raise ValueError(f"Неизвестный индекс вкладки: {index}")
