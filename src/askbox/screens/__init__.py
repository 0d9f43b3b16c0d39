"""
Modal screens for the askbox application.
"""
from .confirm_clear_screen import ConfirmClearScreen

__all__ = ["ConfirmClearScreen"]
