"""
gui_mainwindow.py - GUI Main Window

Single panel: folder/prefix settings, preview table, execution
"""

from pathlib import Path
from typing import Optional, Tuple

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QSpinBox, QTableWidget, QTableWidgetItem,
    QProgressBar, QFileDialog, QMessageBox, QHeaderView, QGroupBox
)
from PySide6.QtCore import Slot
from PySide6.QtGui import QColor

from core import RenumberConfig, RenamePlan, RenameResult, ReportKind
from .gui_workers import PlanWorker, RenameWorker


STATUS_TEXT = {
    ReportKind.SKIPPED: ("No Change", QColor(150, 150, 150)),
    ReportKind.WOULD_RENAME: ("Will Rename", QColor(0, 150, 0)),
    ReportKind.RENAMED: ("Renamed", QColor(0, 150, 0)),
    ReportKind.FAILED: ("Failed", QColor(200, 0, 0)),
}


class RenumberPanel(QWidget):
    """Prefix change / renumber panel"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.plan: Optional[RenamePlan] = None
        self.plan_worker: Optional[PlanWorker] = None
        self.rename_worker: Optional[RenameWorker] = None

        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        # Folder settings group
        dir_group = QGroupBox("Folder Settings")
        dir_layout = QGridLayout(dir_group)

        dir_layout.addWidget(QLabel("Directory:"), 0, 0)
        self.dir_edit = QLineEdit()
        self.dir_edit.setPlaceholderText("Select root directory...")
        dir_layout.addWidget(self.dir_edit, 0, 1)
        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.clicked.connect(self._browse_directory)
        dir_layout.addWidget(self.browse_btn, 0, 2)

        dir_layout.addWidget(QLabel("Current Prefix:"), 1, 0)
        self.source_edit = QLineEdit()
        self.source_edit.setPlaceholderText("e.g., 10")
        dir_layout.addWidget(self.source_edit, 1, 1, 1, 2)

        layout.addWidget(dir_group)

        # Naming settings group
        name_group = QGroupBox("Naming Settings")
        name_layout = QGridLayout(name_group)

        name_layout.addWidget(QLabel("New Prefix:"), 0, 0)
        self.target_edit = QLineEdit()
        self.target_edit.setPlaceholderText("Leave empty to keep the current prefix when renumbering")
        name_layout.addWidget(self.target_edit, 0, 1)

        name_layout.addWidget(QLabel("Start Number:"), 1, 0)
        self.start_spin = QSpinBox()
        self.start_spin.setRange(0, 99999)
        self.start_spin.setValue(0)
        self.start_spin.setSpecialValueText("Keep Decimals")
        name_layout.addWidget(self.start_spin, 1, 1)

        name_layout.addWidget(QLabel("Digits:"), 2, 0)
        self.digits_spin = QSpinBox()
        self.digits_spin.setRange(1, 10)
        self.digits_spin.setValue(2)
        name_layout.addWidget(self.digits_spin, 2, 1)

        self.preview_btn = QPushButton("Preview")
        self.preview_btn.clicked.connect(self._do_preview)
        name_layout.addWidget(self.preview_btn, 3, 0, 1, 2)

        layout.addWidget(name_group)

        # Results table
        self.table = QTableWidget()
        self.table.setColumnCount(4)
        self.table.setHorizontalHeaderLabels(["Original Name", "New Name", "Status", "Path"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        self.table.horizontalHeader().setSectionResizeMode(3, QHeaderView.ResizeMode.Stretch)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        layout.addWidget(self.table, 1)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.execute_btn = QPushButton("Execute Rename")
        self.execute_btn.clicked.connect(self._do_execute)
        self.execute_btn.setEnabled(False)
        self.execute_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.execute_btn)

        layout.addLayout(bottom_layout)

        # Status label
        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

    def _browse_directory(self):
        """Browse and select directory"""
        directory = QFileDialog.getExistingDirectory(self, "Select Directory")
        if directory:
            self.dir_edit.setText(directory)

    def read_config(self) -> Tuple[Optional[RenumberConfig], str]:
        """Build the configuration from the form, (config, error message)"""
        directory = self.dir_edit.text().strip()
        if not directory:
            return None, "Please select a directory first"
        if not Path(directory).is_dir():
            return None, f"Directory does not exist: {directory}"

        source = self.source_edit.text().strip()
        if not source:
            return None, "Please enter the current prefix"

        target = self.target_edit.text().strip()
        start = self.start_spin.value()
        if start == 0 and not target:
            return None, "Please enter a new prefix or a start number"

        config = RenumberConfig(
            source_prefix=source,
            target_prefix=target,
            start=start,
            root=Path(directory),
            digits=self.digits_spin.value(),
        )
        return config, ""

    def _do_preview(self):
        """Generate preview"""
        config, error = self.read_config()
        if config is None:
            QMessageBox.warning(self, "Warning", error)
            return

        self.preview_btn.setEnabled(False)
        self.preview_btn.setText("Generating...")
        self.execute_btn.setEnabled(False)

        self.plan_worker = PlanWorker(config)
        self.plan_worker.progress.connect(self._on_scan_progress)
        self.plan_worker.finished.connect(self._on_plan_finished)
        self.plan_worker.error.connect(self._on_plan_error)
        self.plan_worker.start()

    @Slot(str)
    def _on_scan_progress(self, msg: str):
        """Scan progress update"""
        self.status_label.setText(f"Scanning ...{msg[-77:]}" if len(msg) > 80 else f"Scanning {msg}")

    @Slot(object)
    def _on_plan_finished(self, plan: RenamePlan):
        """Plan generation complete"""
        self.plan = plan
        self.preview_btn.setEnabled(True)
        self.preview_btn.setText("Preview")

        self.show_plan(plan)

        if not plan.ops:
            self.status_label.setText(f"No folders with prefix {plan.config.source_prefix} found")
        elif plan.valid_ops:
            self.execute_btn.setEnabled(True)
            self.status_label.setText(f"Will perform {plan.total_count} rename operations ({plan.skip_count} already correct)")
        else:
            self.status_label.setText("All folders already have the correct name")

    @Slot(str)
    def _on_plan_error(self, error: str):
        """Plan generation error"""
        self.preview_btn.setEnabled(True)
        self.preview_btn.setText("Preview")
        self.table.setRowCount(0)
        QMessageBox.critical(self, "Error", f"Failed to generate preview: {error}")

    def _set_row(self, row: int, src: Path, dst: Path, kind: ReportKind):
        text, color = STATUS_TEXT[kind]
        status_item = QTableWidgetItem(text)
        status_item.setForeground(color)

        self.table.setItem(row, 0, QTableWidgetItem(src.name))
        self.table.setItem(row, 1, QTableWidgetItem(dst.name))
        self.table.setItem(row, 2, status_item)
        try:
            rel_path = str(src.parent.relative_to(Path(self.dir_edit.text()).resolve()))
        except ValueError:
            rel_path = str(src.parent)
        self.table.setItem(row, 3, QTableWidgetItem(rel_path))

    def show_plan(self, plan: RenamePlan):
        """Update table to display preview results"""
        self.table.setRowCount(len(plan.ops))
        for i, op in enumerate(plan.ops):
            kind = ReportKind.SKIPPED if op.is_same else ReportKind.WOULD_RENAME
            self._set_row(i, op.src, op.dst, kind)

    def show_result(self, result: RenameResult):
        """Update table to display execution results"""
        self.table.setRowCount(len(result.records))
        for i, record in enumerate(result.records):
            self._set_row(i, record.src, record.dst or record.src, record.kind)

    def _do_execute(self):
        """Execute rename"""
        if not self.plan or not self.plan.valid_ops:
            return

        reply = QMessageBox.question(
            self, "Confirm",
            f"Are you sure you want to execute {self.plan.total_count} rename operations?\n\nThis action cannot be undone!",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        self.execute_btn.setEnabled(False)
        self.execute_btn.setText("Executing...")
        self.preview_btn.setEnabled(False)
        self.progress_bar.setVisible(True)
        self.progress_bar.setRange(0, len(self.plan.ops))

        self.rename_worker = RenameWorker(self.plan)
        self.rename_worker.progress.connect(self._on_rename_progress)
        self.rename_worker.finished.connect(self._on_rename_finished)
        self.rename_worker.error.connect(self._on_rename_error)
        self.rename_worker.start()

    @Slot(int, int, str)
    def _on_rename_progress(self, current: int, total: int, msg: str):
        """Execution progress update"""
        self.progress_bar.setMaximum(total)
        self.progress_bar.setValue(current)
        self.status_label.setText(msg)

    @Slot(object)
    def _on_rename_finished(self, result: RenameResult):
        """Execution complete"""
        self.execute_btn.setText("Execute Rename")
        self.execute_btn.setEnabled(False)
        self.preview_btn.setEnabled(True)
        self.progress_bar.setVisible(False)

        self.show_result(result)

        msg = f"Rename complete!\n\nRenamed: {result.success_count}\nFailed: {result.failed_count}\nSkipped: {result.skipped_count}"
        if result.failed_count > 0:
            msg += "\n\nFailure Details:\n"
            for record in result.failed[:5]:
                msg += f"  {record.src.name}: {record.error}\n"
            if len(result.failed) > 5:
                msg += f"  ... and {len(result.failed) - 5} more failures"

        QMessageBox.information(self, "Complete", msg)

        self.plan = None
        self.status_label.setText("Complete" if result.ok else f"Completed with {result.failed_count} failures")

    @Slot(str)
    def _on_rename_error(self, error: str):
        """Execution error"""
        self.execute_btn.setEnabled(True)
        self.execute_btn.setText("Execute Rename")
        self.preview_btn.setEnabled(True)
        self.progress_bar.setVisible(False)
        QMessageBox.critical(self, "Error", f"Execution failed: {error}")


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Johnny Decimal Renumber")
        self.setMinimumSize(800, 600)

        self.panel = RenumberPanel()
        self.setCentralWidget(self.panel)

        # Status bar
        self.statusBar().showMessage("Ready")
