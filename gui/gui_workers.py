"""
gui_workers.py - GUI Worker Threads

Provides background execution of long tasks to avoid blocking UI
"""

from typing import Optional

from PySide6.QtCore import QThread, Signal, QObject

from core import build_plan, execute_rename, RenumberConfig, RenamePlan


class PlanWorker(QThread):
    """Rename plan generation worker thread (preview)"""

    # Signals
    progress = Signal(str)              # Visited directory
    finished = Signal(object)           # RenamePlan
    error = Signal(str)                 # Error message

    def __init__(
        self,
        config: RenumberConfig,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.config = config

    def run(self):
        try:
            plan = build_plan(self.config, scan_callback=self.progress.emit)
            self.finished.emit(plan)
        except Exception as e:
            self.error.emit(str(e))


class RenameWorker(QThread):
    """Rename execution worker thread, runs the previewed plan"""

    # Signals
    progress = Signal(int, int, str)    # current, total, message
    finished = Signal(object)           # RenameResult
    error = Signal(str)                 # Error message

    def __init__(
        self,
        plan: RenamePlan,
        dry_run: bool = False,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.plan = plan
        self.dry_run = dry_run

    def run(self):
        try:
            def progress_callback(current: int, total: int, msg: str):
                self.progress.emit(current, total, msg)

            result = execute_rename(
                self.plan,
                dry_run=self.dry_run,
                progress_callback=progress_callback,
            )

            self.finished.emit(result)
        except Exception as e:
            self.error.emit(str(e))
