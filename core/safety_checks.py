"""
safety_checks.py - Safety Check Module

Checks run before any folder is renamed
"""

from pathlib import Path
from typing import Dict, List
from collections import defaultdict
import os

from .errors import ConfigError, RenumberOverflowError, CollisionError
from .models_fs import RenumberConfig, RenamePlan


def check_digits(digits: int) -> None:
    """
    Check the digit width

    Raises:
        ConfigError: digits is less than 1
    """
    if digits < 1:
        raise ConfigError("digit count must be at least 1")


def check_prefix(prefix: str) -> None:
    """
    Check that a new prefix yields names matchable as "PREFIX.DECIMAL Name"

    Raises:
        ConfigError: Prefix contains a path separator, a dot or a space
    """
    forbidden = {"/", ".", " ", os.sep}
    if os.altsep:
        forbidden.add(os.altsep)
    found = sorted(c for c in forbidden if c in prefix)
    if found:
        raise ConfigError(f"prefix {prefix!r} cannot contain {' '.join(repr(c) for c in found)}")


def check_config(config: RenumberConfig) -> None:
    """
    Check a configuration before touching the filesystem

    Raises:
        ConfigError: Invalid value
    """
    check_digits(config.digits)
    if not config.source_prefix:
        raise ConfigError("source prefix cannot be empty")
    if config.start < 0:
        raise ConfigError("start number cannot be negative")
    check_prefix(config.target_prefix)


def max_number(digits: int) -> int:
    """Largest decimal that fits in `digits` digits"""
    return 10 ** digits - 1


def check_overflow(start: int, count: int, digits: int) -> None:
    """
    Check that renumbering `count` folders from `start` fits in `digits`

    Does nothing when start is 0 (no renumbering).

    Args:
        start: First number
        count: Number of matched folders
        digits: Zero padding digits

    Raises:
        RenumberOverflowError: Last number would exceed the maximum
    """
    if start == 0:
        return

    last_number = start + count - 1
    if last_number > max_number(digits):
        raise RenumberOverflowError(digits, last_number)


def check_duplicate_targets(plan: RenamePlan) -> None:
    """
    Check that no two operations share a destination, and that no folder is
    renamed onto a folder the plan has not moved away yet

    Raises:
        CollisionError: Duplicate destination found
    """
    dst_map: Dict[Path, List[Path]] = defaultdict(list)
    for op in plan.ops:
        dst_map[op.dst].append(op.src)

    duplicates = [(dst, srcs) for dst, srcs in dst_map.items() if len(srcs) > 1]
    if duplicates:
        dst, srcs = duplicates[0]
        names = ", ".join(src.name for src in srcs)
        raise CollisionError(f"multiple folders would be renamed to {dst}: {names}")

    # Ops run in order, so a destination may only reuse the source of an earlier op
    src_index = {op.src: i for i, op in enumerate(plan.ops)}
    for i, op in enumerate(plan.ops):
        if op.is_same:
            continue
        j = src_index.get(op.dst)
        if j is not None and j > i:
            raise CollisionError(
                f"{op.src.name} would be renamed to {op.dst.name} before that folder is renamed"
            )
