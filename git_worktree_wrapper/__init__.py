"""
git-worktree-wrapper - git worktrees under one root, with a fuzzy picker and auto-cd
"""

from .__version__ import __version__
from .core import WorktreeWrapper
from .cli.main import main

__all__ = ["WorktreeWrapper", "main", "__version__"]
