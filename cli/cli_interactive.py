"""
cli_interactive.py - Interactive CLI

Provides a menu-style interactive interface
"""

import sys
from pathlib import Path
from typing import Optional

from core import (
    scan_jd_folders, sort_by_decimal, build_plan, execute_rename,
    RenumberConfig, RenumberError,
)


def clear_screen():
    """Clear screen"""
    import os
    os.system('cls' if os.name == 'nt' else 'clear')


def print_header(title: str):
    """Print header"""
    print()
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)
    print()


def input_directory(prompt: str = "Please enter directory path") -> Optional[Path]:
    """Input and validate directory"""
    while True:
        path_str = input(f"{prompt} (q to return) [.]: ").strip() or "."
        if path_str.lower() == 'q':
            return None

        path = Path(path_str).expanduser().resolve()
        if path.is_dir():
            return path
        else:
            print(f"Error: Directory does not exist: {path}")


def input_prefix(prompt: str, allow_empty: bool = False) -> Optional[str]:
    """Input a prefix token (q to return)"""
    while True:
        value = input(f"{prompt} (q to return): ").strip()
        if value.lower() == 'q':
            return None
        if value or allow_empty:
            return value
        print("Prefix cannot be empty")


def input_bool(prompt: str, default: bool = False) -> bool:
    """Input boolean value"""
    default_str = "Y/n" if default else "y/N"
    value = input(f"{prompt} ({default_str}): ").strip().lower()
    if not value:
        return default
    return value == 'y'


def input_int(prompt: str, default: int = 0, min_val: int = 0) -> int:
    """Input integer"""
    while True:
        value = input(f"{prompt} [{default}]: ").strip()
        if not value:
            return default
        try:
            num = int(value)
            if num < min_val:
                print(f"Value cannot be less than {min_val}")
                continue
            return num
        except ValueError:
            print("Please enter a valid integer")


def run_with_preview(config: RenumberConfig) -> None:
    """Show a dry-run preview, confirm, then execute"""
    print("\nGenerating rename plan...")
    try:
        plan = build_plan(config)
    except RenumberError as e:
        print(f"\nError: {e}")
        input("Press Enter to return...")
        return

    if not plan.ops:
        print(f"No folders with prefix {config.source_prefix} found")
        input("Press Enter to return...")
        return

    if not plan.valid_ops:
        print("All folders already have the correct name")
        input("Press Enter to return...")
        return

    # Display plan
    print(f"\nWill perform {plan.total_count} rename operations:")
    print("-" * 70)
    for op in plan.valid_ops[:15]:
        print(f"  {op.src.name:<30} -> {op.dst.name}")
    if len(plan.valid_ops) > 15:
        print(f"  ... and {len(plan.valid_ops) - 15} more operations")
    print("-" * 70)
    if plan.skip_count:
        print(f"{plan.skip_count} folders already have the correct name")

    # Confirm execution
    print()
    if not input_bool("Confirm execution", default=False):
        print("Cancelled")
        input("Press Enter to return...")
        return

    print("\nExecuting...")
    result = execute_rename(plan, dry_run=False)
    for record in result.failed:
        print(record.format())
    print()
    print(result.summary())

    input("\nPress Enter to return...")


def menu_list_folders():
    """List matching folders menu"""
    print_header("List Folders")

    directory = input_directory("Please enter root directory")
    if directory is None:
        return

    prefix = input_prefix("Prefix")
    if prefix is None:
        return

    try:
        folders = sort_by_decimal(scan_jd_folders(directory, prefix))
    except RenumberError as e:
        print(f"Error: {e}")
        input("Press Enter to return...")
        return

    if not folders:
        print(f"No folders with prefix {prefix} found")
        input("Press Enter to return...")
        return

    print(f"\nFound {len(folders)} folders:")
    print("-" * 80)
    for i, f in enumerate(folders):
        if i >= 50:
            print(f"... and {len(folders) - 50} more folders")
            break
        print(f"  {f.decimal:>6}  {f.relative_to(directory)}")
    print("-" * 80)

    input("\nPress Enter to return...")


def menu_change_prefix():
    """Change prefix menu"""
    print_header("Change Prefix")

    directory = input_directory("Please enter root directory")
    if directory is None:
        return

    source = input_prefix("Current prefix")
    if source is None:
        return
    target = input_prefix("New prefix")
    if target is None:
        return
    digits = input_int("Digits after the decimal point", default=2, min_val=1)

    run_with_preview(RenumberConfig(
        source_prefix=source,
        target_prefix=target,
        root=directory,
        digits=digits,
    ))


def menu_renumber():
    """Sequential renumber menu"""
    print_header("Renumber")

    directory = input_directory("Please enter root directory")
    if directory is None:
        return

    source = input_prefix("Current prefix")
    if source is None:
        return
    target = input_prefix("New prefix (leave empty to keep it)", allow_empty=True)
    if target is None:
        return
    start = input_int("Starting number", default=1, min_val=1)
    digits = input_int("Digits after the decimal point", default=2, min_val=1)

    run_with_preview(RenumberConfig(
        source_prefix=source,
        target_prefix=target,
        start=start,
        root=directory,
        digits=digits,
    ))


def interactive_mode() -> int:
    """Interactive mode main loop"""
    while True:
        clear_screen()
        print_header("Johnny Decimal Renumber")

        print("Please select function:")
        print()
        print("  1. List folders")
        print("  2. Change prefix")
        print("  3. Renumber")
        print()
        print("  q. Exit")
        print()

        choice = input("Please select (1/2/3/q): ").strip().lower()

        if choice == 'q':
            print("Goodbye!")
            return 0
        elif choice == '1':
            menu_list_folders()
        elif choice == '2':
            menu_change_prefix()
        elif choice == '3':
            menu_renumber()
        else:
            print("Invalid choice")
            input("Press Enter to continue...")


if __name__ == "__main__":
    sys.exit(interactive_mode())
