"""Worktree data models."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class WorktreePath:
    """Deterministic on-disk location for a (repository, branch) pair."""

    repository_name: str
    branch_name: str
    root: Path

    @property
    def path(self) -> Path:
        # Slashes in the branch name become nested directories
        return Path(self.root) / self.repository_name / self.branch_name

    def __str__(self) -> str:
        return str(self.path)


@dataclass
class WorktreeRecord:
    """One entry of `git worktree list --porcelain`."""

    path: str
    branch: Optional[str] = None  # None = detached HEAD or bare
    head_commit: Optional[str] = None
    is_bare: bool = False
    is_locked: bool = False
    is_prunable: bool = False
    is_main: bool = False  # First entry git reports
    last_modified: Optional[int] = None  # mtime of the worktree directory

    @property
    def is_detached(self) -> bool:
        return self.branch is None and not self.is_bare

    def __str__(self) -> str:
        """String representation of worktree."""
        name = self.branch or ("(bare)" if self.is_bare else "(detached HEAD)")
        flags = []
        if self.is_main:
            flags.append("main")
        if self.is_locked:
            flags.append("locked")
        if self.is_prunable:
            flags.append("prunable")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        return f"{name} @ {self.path}{suffix}"
