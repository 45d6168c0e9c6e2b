"""
renumber.py - Renumbering Engine

Discovery -> validation -> apply, strictly in sequence
"""

from pathlib import Path
from typing import Optional, Callable

from .models_fs import RenumberConfig, RenamePlan
from .scan_files import scan_jd_folders
from .safety_checks import check_config, check_overflow, check_duplicate_targets
from .plan_rename import plan_renumber
from .exec_rename import execute_rename, RenameResult


def build_plan(
    config: RenumberConfig,
    scan_callback: Optional[Callable[[str], None]] = None
) -> RenamePlan:
    """
    Discover matching folders and build a validated rename plan

    A single walk provides both the folder count checked against the digit
    width and the folders that get renamed.

    Args:
        config: Renumbering options
        scan_callback: Called with each directory visited by the walk

    Returns:
        Rename plan

    Raises:
        ConfigError, TraversalError, RenumberOverflowError, CollisionError
    """
    check_config(config)

    folders = scan_jd_folders(config.root, config.source_prefix, progress_callback=scan_callback)
    check_overflow(config.start, len(folders), config.digits)

    plan = plan_renumber(folders, config)
    check_duplicate_targets(plan)
    return plan


def renumber_directories(
    config: RenumberConfig,
    progress_callback: Optional[Callable[[int, int, str], None]] = None,
    log_dir: Optional[Path] = None
) -> RenameResult:
    """
    Rename (or preview, with config.dry_run) the matching folders under config.root

    Whole-operation failures are raised before any folder is renamed.
    Per-folder rename failures are reported in the result and do not stop
    the batch.

    Args:
        config: Renumbering options
        progress_callback: Progress callback (current, total, message)
        log_dir: Log directory (for saving execution logs)

    Returns:
        Execution result
    """
    plan = build_plan(config)
    return execute_rename(
        plan,
        dry_run=config.dry_run,
        progress_callback=progress_callback,
        log_dir=log_dir,
    )
