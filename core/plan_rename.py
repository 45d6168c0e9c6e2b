"""
plan_rename.py - Rename Plan Generation Module

Responsibilities:
- Assign target decimals (keep existing or renumber sequentially)
- Build target names with the new prefix
- Output RenamePlan
"""

from typing import List

from .models_fs import JDFolder, RenamePlan, RenumberConfig
from .text_match import format_jd_name
from .sort_rules import sort_by_decimal


def target_decimals(folders: List[JDFolder], start: int) -> List[int]:
    """
    Compute the new decimal of each (already sorted) folder

    Args:
        folders: Folders sorted by decimal
        start: First number (0 keeps every folder's own decimal)

    Returns:
        Decimals, same order as folders
    """
    if start == 0:
        return [f.decimal for f in folders]
    return [start + i for i in range(len(folders))]


def plan_renumber(folders: List[JDFolder], config: RenumberConfig) -> RenamePlan:
    """
    Generate the rename plan

    Args:
        folders: Matched folders (any order)
        config: Renumbering options

    Returns:
        Rename plan, ops sorted by current decimal
    """
    plan = RenamePlan(config=config)

    sorted_folders = sort_by_decimal(folders)
    prefix = config.effective_target_prefix
    decimals = target_decimals(sorted_folders, config.start)

    for f, decimal in zip(sorted_folders, decimals):
        new_name = format_jd_name(prefix, decimal, config.digits, f.remainder)
        plan.add_op(f.path, f.path.parent / new_name, folder=f)

    return plan
