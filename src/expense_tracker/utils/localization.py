"""
Модуль локализации интерфейса (английский и бенгальский).

Переводы хранятся статической таблицей "язык -> ключ -> строка".
Текущий язык принадлежит экземпляру Localizer, а не процессу; язык можно
также передать явно при каждом запросе перевода.
"""

import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"
# Английский вместо бенгальского: язык по умолчанию служит и запасным
FALLBACK_LANGUAGE = "en"

# Названия языков на самих этих языках (для кнопок переключения)
LANGUAGE_NAMES: Dict[str, str] = {
    "en": "English",
    "bn": "বাংলা",
}

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "expenseList": "Expense List",
        "addExpense": "Add Expense",
        "expenseName": "Expense Name",
        "expenseAmount": "Expense Amount",
        "delete": "Delete",
        "totalExpense": "Total Expense",
        "expenseAdded": "Expense added successfully!",
        "addIncome": "Add Income",
        "incomeName": "Income Name",
        "incomeAmount": "Income Amount",
        "incomeAdded": "Income added successfully!",
        "transactionList": "Transaction List",
        "noEntry": "No Entry",
        "balance": "Balance",
        "invalidName": "Please enter a name",
        "invalidAmount": "Please enter a valid amount",
        "saveFailed": "Could not save the entry",
        "unexpectedError": "An unexpected error occurred",
    },
    "bn": {
        "expenseList": "ব্যয় তালিকা",
        "addExpense": "ব্যয় যোগ করুন",
        "expenseName": "ব্যয়ের নাম",
        "expenseAmount": "ব্যয়ের পরিমাণ",
        "delete": "মুছে ফেলুন",
        "totalExpense": "মোট ব্যয়",
        "expenseAdded": "ব্যয় সফলভাবে যোগ করা হয়েছে!",
        "addIncome": "আয় যোগ করুন",
        "incomeName": "আয়ের নাম",
        "incomeAmount": "আয়ের পরিমাণ",
        "incomeAdded": "আয় সফলভাবে যোগ করা হয়েছে!",
        "transactionList": "লেনদেন তালিকা",
        "noEntry": "কোনো এন্ট্রি নেই",
        "balance": "ব্যালেন্স",
        "invalidName": "নাম লিখুন",
        "invalidAmount": "সঠিক পরিমাণ লিখুন",
        "saveFailed": "এন্ট্রি সংরক্ষণ করা যায়নি",
        "unexpectedError": "একটি অপ্রত্যাশিত ত্রুটি ঘটেছে",
    },
}


class Localizer:
    """
    Перевод ключей сообщений в строки интерфейса.

    Поиск идёт сначала в запрошенном языке, затем в одном резервном языке;
    если ключа нет и там, возвращается сам ключ.

    Attributes:
        language: Текущий язык
        fallback_language: Резервный язык
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE, fallback_language: str = FALLBACK_LANGUAGE):
        self.language = language
        self.fallback_language = fallback_language

    def set_language(self, code: str) -> None:
        """
        Переключает текущий язык.

        Неизвестный код принимается: его запросы разрешаются через резервный язык.
        """
        if code not in TRANSLATIONS:
            logger.warning(f"Язык '{code}' не поддерживается, будет использован резервный '{self.fallback_language}'")
        self.language = code
        logger.info(f"Язык интерфейса изменён на: {code}")

    def translate(self, key: str, language: Optional[str] = None) -> str:
        """
        Возвращает строку для ключа.

        Args:
            key: Ключ сообщения
            language: Язык запроса (по умолчанию текущий)
        """
        lang = language or self.language
        value = TRANSLATIONS.get(lang, {}).get(key)
        if value is not None:
            return value

        value = TRANSLATIONS.get(self.fallback_language, {}).get(key)
        if value is not None:
            return value

        logger.debug(f"Нет перевода для ключа '{key}' (язык {lang})")
        return key

    t = translate

    @staticmethod
    def available_languages() -> Dict[str, str]:
        """Поддерживаемые языки: код -> название."""
        return dict(LANGUAGE_NAMES)
