"""
core - Johnny Decimal Renumber Core Module

Provides folder discovery, rename plan generation, validation and execution.
"""

from .models_fs import (
    RenumberConfig,
    JDFolder,
    RenameOp,
    RenamePlan,
    ReportKind,
    ReportRecord,
)

from .errors import (
    RenumberError,
    ConfigError,
    TraversalError,
    RenumberOverflowError,
    CollisionError,
)

from .scan_files import (
    scan_jd_folders,
)

from .text_match import (
    parse_decimal,
    parse_jd_name,
    format_jd_name,
)

from .sort_rules import (
    sort_by_decimal,
    get_sort_key,
)

from .plan_rename import (
    plan_renumber,
    target_decimals,
)

from .exec_rename import (
    execute_rename,
    RenameResult,
    save_plan_log,
    save_result_log,
)

from .safety_checks import (
    check_config,
    check_digits,
    check_prefix,
    check_overflow,
    check_duplicate_targets,
    max_number,
)

from .renumber import (
    build_plan,
    renumber_directories,
)

__all__ = [
    # Data models
    "RenumberConfig",
    "JDFolder",
    "RenameOp",
    "RenamePlan",
    "ReportKind",
    "ReportRecord",
    "RenameResult",

    # Errors
    "RenumberError",
    "ConfigError",
    "TraversalError",
    "RenumberOverflowError",
    "CollisionError",

    # Scanning
    "scan_jd_folders",

    # Name matching
    "parse_decimal",
    "parse_jd_name",
    "format_jd_name",

    # Sorting
    "sort_by_decimal",
    "get_sort_key",

    # Planning
    "plan_renumber",
    "target_decimals",

    # Execution
    "execute_rename",
    "save_plan_log",
    "save_result_log",

    # Safety checks
    "check_config",
    "check_digits",
    "check_prefix",
    "check_overflow",
    "check_duplicate_targets",
    "max_number",

    # Engine
    "build_plan",
    "renumber_directories",
]
