#!/usr/bin/env python3
"""
Johnny Decimal Renumber - Main Entry

Supports:
- CLI mode (default)
- GUI mode (--gui parameter)

Usage:
    python main.py                                  # CLI interactive mode
    python main.py --from 10 --to 20                # Change prefix
    python main.py --from 20 --start 14 --dry-run   # Preview renumbering
    python main.py --gui [DIR] [--from PREFIX]      # GUI mode
"""

import sys
from pathlib import Path

# Ensure the current directory is in the Python path
sys.path.insert(0, str(Path(__file__).parent))


def main():
    """Main entry point"""
    # Check if GUI should be started
    if "--gui" in sys.argv:
        try:
            from gui import main as gui_main
        except ImportError as e:
            print(f"Error: Unable to start GUI, please ensure PySide6 is installed")
            print(f"Detailed error: {e}")
            print("\nInstall command: pip install PySide6")
            print("\nTo use CLI mode, run without --gui")
            return 1
        return gui_main([arg for arg in sys.argv[1:] if arg != "--gui"])

    from cli import main as cli_main
    return cli_main(sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
