"""Branch models: refs from the inventory, picker candidates and resolved targets"""
from enum import Enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


class BranchSource(Enum):
    """Where a candidate branch lives."""
    WORKTREE = "worktree"
    LOCAL = "local"
    REMOTE = "remote"


@dataclass
class BranchRecord:
    """A local or remote-tracking ref with its last commit metadata."""
    name: str  # Local-style name, remote prefix stripped
    ref: str  # Short ref as git prints it, e.g. "origin/feature/x"
    remote: Optional[str] = None
    committed_at: Optional[int] = None  # Unix timestamp, None = unknown
    committed_label: str = ""
    author: str = ""
    subject: str = ""

    @property
    def is_remote(self) -> bool:
        return self.remote is not None


@dataclass
class BranchCandidate:
    """A unit offered to the fuzzy picker."""
    branch_name: str
    has_worktree: bool = False
    worktree_path: Optional[str] = None
    last_used_timestamp: Optional[int] = None
    is_local: bool = False
    remote_ref: Optional[str] = None  # Set only when no local branch exists
    remote_refs: List[str] = field(default_factory=list)  # Every remote ref merged in
    is_current: bool = False
    author: Optional[str] = None
    subject: Optional[str] = None
    committed_label: Optional[str] = None

    @property
    def source(self) -> BranchSource:
        if self.has_worktree:
            return BranchSource.WORKTREE
        if self.is_local:
            return BranchSource.LOCAL
        return BranchSource.REMOTE


@dataclass(frozen=True)
class ResolvedTarget:
    """Output of the selection engine; the only input to the orchestrators."""
    branch_name: str
    repository_name: str
    target_path: Path
    exists_as_worktree: bool
    exists_as_branch: bool
    start_point: Optional[str] = None  # Remote ref to base a new local branch on
