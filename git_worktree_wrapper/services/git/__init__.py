"""Git-related services for git-worktree-wrapper."""

from .inventory import WorktreeInventory
from .worktrees import WorktreeService

__all__ = [
    "WorktreeInventory",
    "WorktreeService",
]
