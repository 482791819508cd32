"""
Модуль конфигурации приложения Expense Tracker.

Содержит настройки:
- Основные параметры приложения (название, версия)
- Настройки базы данных (путь)
- Настройки интерфейса (язык, тема)
- Настройки логирования
- Персистентность настроек (загрузка/сохранение)
- Управление пользовательской директорией данных
"""

import os
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

class Config:
    """
    Класс конфигурации приложения.
    Реализует паттерн Singleton для доступа к настройкам из любой части приложения.

    Все пользовательские данные (БД, логи, настройки) хранятся в
    директории ~/.expense_tracker_data/.
    """

    _instance = None

    # Константы приложения
    APP_NAME = "Expense Tracker"
    VERSION = "1.0.0"

    @staticmethod
    def get_user_data_dir() -> Path:
        """
        Возвращает путь к директории пользовательских данных.

        Создаёт директорию ~/.expense_tracker_data/ и поддиректорию logs/.

        Returns:
            Path: Путь к ~/.expense_tracker_data/
        """
        data_dir = Path.home() / ".expense_tracker_data"
        data_dir.mkdir(exist_ok=True)
        logger.info(f"Директория пользовательских данных: {data_dir}")

        logs_dir = data_dir / "logs"
        logs_dir.mkdir(exist_ok=True)
        logger.debug(f"Директория логов: {logs_dir}")

        return data_dir

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True

        self.user_data_dir = self.get_user_data_dir()

        # Путь к БД не настраивается, он всегда внутри директории данных
        self.db_path: str = str(self.user_data_dir / "expense_tracker.db")
        self.config_file: str = str(self.user_data_dir / "config.json")
        self.log_file: str = str(self.user_data_dir / "logs" / "expense_tracker.log")

        # Значения по умолчанию для UI
        self.language: str = "en"
        self.theme_mode: str = "light"  # light, dark

        # Настройки логирования
        self.log_level: str = "INFO"

        # Настройки форматов
        self.date_format: str = "%b %d, %Y"
        self.currency_symbol: str = "$"

        # Состояние приложения
        self.last_selected_index: int = 0

        self.load()

    def load(self) -> None:
        """
        Загружает настройки из файла конфигурации.

        Если файл не существует или повреждён, используются значения по умолчанию.
        """
        if not os.path.exists(self.config_file):
            logger.info(f"Файл конфигурации не найден, используются значения по умолчанию: {self.config_file}")
            return

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)

            self.language = data.get("language", "en")
            self.theme_mode = data.get("theme_mode", "light")
            self.log_level = data.get("log_level", "INFO")
            self.date_format = data.get("date_format", "%b %d, %Y")
            self.currency_symbol = data.get("currency_symbol", "$")
            self.last_selected_index = data.get("last_selected_index", 0)

            logger.info(f"Конфигурация загружена из {self.config_file}")

        except (OSError, ValueError, AttributeError) as e:
            logger.error(f"Ошибка при загрузке конфигурации: {e}")

    def save(self) -> None:
        """Сохраняет текущие настройки в файл конфигурации."""
        data = {
            "language": self.language,
            "theme_mode": self.theme_mode,
            "log_level": self.log_level,
            "date_format": self.date_format,
            "currency_symbol": self.currency_symbol,
            "last_selected_index": self.last_selected_index,
        }

        try:
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=4, ensure_ascii=False)
            logger.info(f"Конфигурация сохранена в {self.config_file}")
        except OSError as e:
            logger.error(f"Ошибка при сохранении конфигурации: {e}")

# Глобальный экземпляр конфигурации
settings = Config()
