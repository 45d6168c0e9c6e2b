"""
sort_rules.py - Sorting Rules Module

Orders matched folders for sequential renumbering
"""

from typing import List
from .models_fs import JDFolder


def get_sort_key(folder: JDFolder) -> tuple:
    """Sort key: decimal value, then encounter order"""
    return (folder.decimal, folder.order)


def sort_by_decimal(folders: List[JDFolder]) -> List[JDFolder]:
    """
    Sort folders by their current decimal value

    Folders sharing a decimal value keep their encounter order.

    Args:
        folders: Folder list

    Returns:
        Sorted folder list (new list)
    """
    return sorted(folders, key=get_sort_key)
