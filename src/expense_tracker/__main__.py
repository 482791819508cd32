"""
Точка входа для запуска через python -m expense_tracker
"""
import flet as ft
from expense_tracker.app import main

if __name__ == "__main__":
    ft.app(target=main)
