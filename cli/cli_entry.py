"""
cli_entry.py - CLI Entry Point

Supports:
- Command-line argument mode
- Interactive mode (no arguments, or --interactive)
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .cli_interactive import interactive_mode


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="jd-renumber",
        description="Rename or renumber Johnny Decimal folders (PREFIX.DECIMAL Name)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  jd-renumber

  # Change prefix 10 -> 20, keep decimals
  jd-renumber --from 10 --to 20 --dir ./Documents

  # Renumber 20.xx folders starting at 20.14
  jd-renumber --from 20 --start 14 --dry-run

  # Four-digit decimals, new prefix and renumbering
  jd-renumber --from 20 --to 90 --start 1 --digits 4
"""
    )

    parser.add_argument("--from", dest="source_prefix", type=str, default="",
                        help="Original prefix (e.g., '10')")
    parser.add_argument("--to", dest="target_prefix", type=str, default="",
                        help="New prefix (e.g., '20')")
    parser.add_argument("--start", type=int, default=0,
                        help="Start renumbering from this number (0 = keep decimals)")
    parser.add_argument("--dir", dest="directory", type=str, default=".",
                        help="Directory to process")
    parser.add_argument("--dry-run", "-d", action="store_true",
                        help="Preview changes without making them")
    parser.add_argument("--digits", type=int, default=2,
                        help="Number of digits after the decimal point (default: 2)")
    parser.add_argument("--log-dir", type=str, default=None,
                        help="Save JSON plan/result logs to this directory")
    parser.add_argument("--interactive", "-i", action="store_true",
                        help="Menu-driven interactive mode")

    return parser


def cmd_renumber(args, parser: argparse.ArgumentParser) -> int:
    """Handle argument mode"""
    from core import RenumberConfig, RenumberError, renumber_directories

    if not args.source_prefix:
        print("Please provide the --from prefix")
        parser.print_usage()
        return 1

    if args.start == 0 and not args.target_prefix:
        print("Please provide the --to prefix when not using --start")
        parser.print_usage()
        return 1

    if args.start < 0:
        print("The --start number cannot be negative")
        parser.print_usage()
        return 1

    config = RenumberConfig(
        source_prefix=args.source_prefix,
        target_prefix=args.target_prefix,
        start=args.start,
        root=Path(args.directory),
        dry_run=args.dry_run,
        digits=args.digits,
    )

    def progress_callback(current: int, total: int, msg: str):
        print(msg)

    log_dir = Path(args.log_dir) if args.log_dir else None

    try:
        result = renumber_directories(config, progress_callback=progress_callback, log_dir=log_dir)
    except RenumberError as e:
        print(f"Error: {e}")
        return 1

    if not result.records:
        print(f"No folders with prefix {config.source_prefix} found")
        return 0

    print()
    print(result.summary())

    if args.dry_run:
        print("\n[Preview mode] Nothing was renamed")

    return 0 if result.ok else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()

    if not argv:
        # No arguments, enter interactive mode
        return interactive_mode()

    args = parser.parse_args(argv)

    if args.interactive:
        return interactive_mode()

    return cmd_renumber(args, parser)


if __name__ == "__main__":
    sys.exit(main())
