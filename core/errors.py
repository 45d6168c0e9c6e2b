"""
errors.py - Whole-operation failures

Per-folder rename failures are never raised, they are reported as
FAILED records in the execution result.
"""


class RenumberError(Exception):
    """Base class for failures that abort the whole operation"""


class ConfigError(RenumberError, ValueError):
    """Invalid configuration (raised before any filesystem access)"""


class TraversalError(RenumberError):
    """Directory walk failed (unreadable directory, missing root...)"""


class RenumberOverflowError(RenumberError):
    """Renumbering would not fit in the configured digit width"""

    def __init__(self, digits: int, last_number: int):
        self.digits = digits
        self.last_number = last_number
        super().__init__(
            f"renumbering would exceed xx.{'9' * digits} "
            f"(last number would be {last_number})"
        )


class CollisionError(RenumberError):
    """Two folders would be renamed to the same target"""
