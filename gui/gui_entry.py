"""
gui_entry.py - GUI Entry

Launch the PySide6 window, optionally prefilled:

    jd-renumber-gui [DIRECTORY] [--from PREFIX]
"""

import argparse
import sys
from typing import List, Optional

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt

from .gui_mainwindow import MainWindow


def create_parser() -> argparse.ArgumentParser:
    """Create GUI argument parser"""
    parser = argparse.ArgumentParser(
        prog="jd-renumber-gui",
        description="Johnny Decimal Renumber (window)",
    )
    parser.add_argument("directory", nargs="?", default="",
                        help="Root directory shown in the form")
    parser.add_argument("--from", dest="source_prefix", default="",
                        help="Current prefix shown in the form")
    return parser


def create_window(directory: str = "", source_prefix: str = "") -> MainWindow:
    """Build the main window with the form prefilled"""
    window = MainWindow()
    if directory:
        window.panel.dir_edit.setText(directory)
    if source_prefix:
        window.panel.source_edit.setText(source_prefix)
    return window


def main(argv: Optional[List[str]] = None):
    """GUI main entry"""
    if argv is None:
        argv = [arg for arg in sys.argv[1:] if arg != "--gui"]
    args = create_parser().parse_args(argv)

    # High DPI support
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setApplicationName("Johnny Decimal Renumber")
    app.setStyle("Fusion")

    window = create_window(args.directory, args.source_prefix)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
