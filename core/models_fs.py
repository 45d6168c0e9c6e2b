"""
models_fs.py - Core Data Structure Definitions

Contains:
- RenumberConfig: Invocation configuration
- JDFolder: Johnny Decimal folder found during discovery
- RenameOp: Single rename operation
- RenamePlan: Batch rename plan
- ReportRecord: Per-folder status line
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List
from enum import Enum


class ReportKind(Enum):
    """Per-folder outcome"""
    SKIPPED = "skipped"              # Already has the correct name
    WOULD_RENAME = "would_rename"    # Dry-run
    RENAMED = "renamed"
    FAILED = "failed"


@dataclass(frozen=True)
class RenumberConfig:
    """Renumbering options, immutable per invocation"""
    source_prefix: str                  # Prefix to match (e.g., "10")
    target_prefix: str = ""             # New prefix ("" = keep source prefix when renumbering)
    start: int = 0                      # First number (0 = keep existing decimals)
    root: Path = Path(".")              # Directory to process
    dry_run: bool = False               # Preview only, do not actually execute
    digits: int = 2                     # Zero padding digits of the decimal part

    @property
    def renumbering(self) -> bool:
        """Whether sequential renumbering was requested"""
        return self.start != 0

    @property
    def effective_target_prefix(self) -> str:
        """Prefix written into the new names"""
        if self.renumbering and not self.target_prefix:
            return self.source_prefix
        return self.target_prefix


@dataclass
class JDFolder:
    """Matched folder"""
    path: Path                      # Full path
    decimal: int                    # Parsed decimal value
    remainder: str                  # Text after the first space, kept verbatim
    order: int = 0                  # Encounter index during the walk

    @property
    def name(self) -> str:
        return self.path.name

    def relative_to(self, base: Path) -> str:
        """Get relative path string"""
        try:
            return str(self.path.relative_to(base))
        except ValueError:
            return str(self.path)


@dataclass
class RenameOp:
    """Single rename operation"""
    src: Path                       # Source path
    dst: Path                       # Destination path
    folder: Optional[JDFolder] = None

    @property
    def is_same(self) -> bool:
        """Whether source and destination are the same"""
        return self.src == self.dst


@dataclass
class RenamePlan:
    """Batch rename plan, ops in sorted order"""
    config: RenumberConfig
    ops: List[RenameOp] = field(default_factory=list)

    @property
    def valid_ops(self) -> List[RenameOp]:
        """Get valid operations (excluding source=destination)"""
        return [op for op in self.ops if not op.is_same]

    @property
    def skip_count(self) -> int:
        return sum(1 for op in self.ops if op.is_same)

    @property
    def total_count(self) -> int:
        """Total number of operations"""
        return len(self.valid_ops)

    def add_op(self, src: Path, dst: Path, folder: Optional[JDFolder] = None) -> None:
        """Add operation"""
        self.ops.append(RenameOp(src=src, dst=dst, folder=folder))


@dataclass
class ReportRecord:
    """Status of one processed folder"""
    kind: ReportKind
    src: Path
    dst: Optional[Path] = None
    error: str = ""

    def format(self) -> str:
        """Render as a single status line"""
        if self.kind == ReportKind.SKIPPED:
            return f"Skipping {self.src} (already has correct name)"
        elif self.kind == ReportKind.WOULD_RENAME:
            return f"Would rename: {self.src} -> {self.dst}"
        elif self.kind == ReportKind.RENAMED:
            return f"Renaming: {self.src} -> {self.dst}"
        return f"Error renaming {self.src}: {self.error}"
