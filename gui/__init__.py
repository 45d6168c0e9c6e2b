"""
gui - PySide6 interface for Johnny Decimal Renumber
"""

from .gui_entry import main

__all__ = ["main"]
