"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Apply the plan in sorted order, one os.rename per folder
- Per-folder failures are recorded and the batch continues
- dry_run support
- JSON execution logs
"""

from pathlib import Path
from typing import List, Tuple, Optional, Callable
from dataclasses import dataclass, field
from datetime import datetime
import json
import os

from .models_fs import RenamePlan, ReportKind, ReportRecord


@dataclass
class RenameResult:
    """Rename execution result"""
    records: List[ReportRecord] = field(default_factory=list)
    dry_run: bool = False

    def _of_kind(self, kind: ReportKind) -> List[ReportRecord]:
        return [r for r in self.records if r.kind == kind]

    @property
    def renamed(self) -> List[ReportRecord]:
        return self._of_kind(ReportKind.RENAMED)

    @property
    def would_rename(self) -> List[ReportRecord]:
        return self._of_kind(ReportKind.WOULD_RENAME)

    @property
    def skipped(self) -> List[ReportRecord]:
        return self._of_kind(ReportKind.SKIPPED)

    @property
    def failed(self) -> List[ReportRecord]:
        return self._of_kind(ReportKind.FAILED)

    @property
    def success_count(self) -> int:
        return len(self.renamed) + len(self.would_rename)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    @property
    def ok(self) -> bool:
        """Whether every folder was handled without error"""
        return self.failed_count == 0

    def summary(self) -> str:
        """Generate summary"""
        if self.ok:
            status = "completed"
        else:
            status = f"completed with {self.failed_count} failures"
        lines = [
            f"Execution Result ({'preview, ' if self.dry_run else ''}{status}):",
            f"  - {'Would rename' if self.dry_run else 'Renamed'}: {self.success_count}",
            f"  - Failed: {self.failed_count}",
            f"  - Skipped: {self.skipped_count}",
        ]
        if self.failed:
            lines.append("Failure Details:")
            for record in self.failed[:10]:  # Show at most 10
                lines.append(f"  - {record.src.name} -> {record.dst.name}: {record.error}")
            if len(self.failed) > 10:
                lines.append(f"  ... and {len(self.failed) - 10} more failures")
        return "\n".join(lines)


def _rebase(path: Path, moved: List[Tuple[Path, Path]]) -> Path:
    """Follow earlier renames of ancestor folders"""
    for old, new in moved:
        if path != old and path.is_relative_to(old):
            path = new / path.relative_to(old)
    return path


def execute_rename(
    plan: RenamePlan,
    dry_run: bool = False,
    progress_callback: Optional[Callable[[int, int, str], None]] = None,
    log_dir: Optional[Path] = None
) -> RenameResult:
    """
    Execute rename plan

    Args:
        plan: Rename plan
        dry_run: Whether to preview only
        progress_callback: Progress callback (current, total, message)
        log_dir: Log directory (for saving execution logs)

    Returns:
        Execution result
    """
    result = RenameResult(dry_run=dry_run)
    total = len(plan.ops)

    # Save execution plan log
    if log_dir and not dry_run:
        save_plan_log(plan, log_dir)

    # (old, new) of folders renamed so far, so nested matches follow their parent.
    # Dry-run records the renames it would do, so both runs report the same paths.
    moved: List[Tuple[Path, Path]] = []

    for i, op in enumerate(plan.ops):
        src = _rebase(op.src, moved)
        dst = src.parent / op.dst.name

        if op.is_same:
            record = ReportRecord(ReportKind.SKIPPED, src, dst)
        elif dry_run:
            moved.append((src, dst))
            record = ReportRecord(ReportKind.WOULD_RENAME, src, dst)
        else:
            try:
                os.rename(src, dst)
                moved.append((src, dst))
                record = ReportRecord(ReportKind.RENAMED, src, dst)
            except OSError as e:
                record = ReportRecord(ReportKind.FAILED, src, dst, error=str(e))

        result.records.append(record)
        if progress_callback:
            progress_callback(i + 1, total, record.format())

    # Save execution result log
    if log_dir and not dry_run:
        save_result_log(result, log_dir)

    return result


def save_plan_log(plan: RenamePlan, log_dir: Path) -> Path:
    """Save execution plan log"""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"rename_plan_{timestamp}.json"

    config = plan.config
    data = {
        "timestamp": timestamp,
        "source_prefix": config.source_prefix,
        "target_prefix": config.effective_target_prefix,
        "start": config.start,
        "digits": config.digits,
        "total_ops": plan.total_count,
        "operations": [
            {"src": str(op.src), "dst": str(op.dst)}
            for op in plan.valid_ops
        ],
    }

    with open(log_file, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return log_file


def save_result_log(result: RenameResult, log_dir: Path) -> Path:
    """Save execution result log"""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"rename_result_{timestamp}.json"

    data = {
        "timestamp": timestamp,
        "success_count": result.success_count,
        "failed_count": result.failed_count,
        "skipped_count": result.skipped_count,
        "records": [
            {
                "status": r.kind.value,
                "src": str(r.src),
                "dst": str(r.dst) if r.dst else None,
                "error": r.error,
            }
            for r in result.records
        ],
    }

    with open(log_file, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return log_file
