"""
text_match.py - Johnny Decimal Name Matching

Parses and formats "PREFIX.DECIMAL REMAINDER" folder names
"""

from typing import Optional, Tuple


def parse_decimal(text: str) -> Optional[int]:
    """
    Parse a non-negative base-10 integer

    Args:
        text: Decimal part of the name (e.g., "01")

    Returns:
        Integer value, or None if text is not made of ASCII digits only
    """
    if not text or not (text.isascii() and text.isdigit()):
        return None
    return int(text, 10)


def parse_jd_name(name: str, source_prefix: str) -> Optional[Tuple[int, str]]:
    """
    Match a folder name against "<source_prefix>.<decimal> <remainder>"

    Args:
        name: Folder base name
        source_prefix: Prefix to match (exact, case-sensitive)

    Returns:
        (decimal, remainder) on match, otherwise None
    """
    parts = name.split(" ", 1)
    if len(parts) != 2:
        return None

    number_parts = parts[0].split(".")
    if len(number_parts) != 2 or number_parts[0] != source_prefix:
        return None

    decimal = parse_decimal(number_parts[1])
    if decimal is None:
        return None

    return decimal, parts[1]


def format_jd_name(prefix: str, decimal: int, digits: int, remainder: str) -> str:
    """
    Build a folder name, decimal zero-padded to `digits` (never truncated)

    Args:
        prefix: Prefix
        decimal: Decimal value
        digits: Zero padding digits
        remainder: Text after the space

    Returns:
        Folder name
    """
    return f"{prefix}.{str(decimal).zfill(digits)} {remainder}"
