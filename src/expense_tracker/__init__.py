"""Expense Tracker: учёт личных расходов и доходов на Flet."""

__version__ = "1.0.0"
