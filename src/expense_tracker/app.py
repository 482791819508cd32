import flet as ft
from expense_tracker.views.main_window import MainWindow
from expense_tracker.database import init_db
from expense_tracker.utils.logger import setup_logging, get_logger

logger = get_logger(__name__)

def main(page: ft.Page):
    # 1. Настройка логирования
    setup_logging()
    logger.info("Запуск приложения Expense Tracker")

    # 2. Инициализация БД
    try:
        init_db()
    except Exception as e:
        logger.error(f"Ошибка инициализации БД: {e}")
        page.add(ft.Text(f"Критическая ошибка: {e}", color=ft.Colors.ERROR))
        return

    # 3. Главное окно сам настроит appbar и нижнюю навигацию страницы
    app_window = MainWindow(page)
    page.add(app_window)
    page.update()
