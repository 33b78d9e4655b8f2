"""Core functionality for git-worktree-wrapper"""

import sys
from pathlib import Path
from typing import List, Optional, TextIO, Union

from git_worktree_wrapper.config import Config
from git_worktree_wrapper.constants import CD_PREFIX, PROMPT_SELECT_BRANCH, PROMPT_SELECT_WORKTREE
from git_worktree_wrapper.exceptions import BranchNotFoundError, WorktreeNotFoundError
from git_worktree_wrapper.models.branch import BranchCandidate
from git_worktree_wrapper.services.checkout_service import CheckoutService
from git_worktree_wrapper.services.git.inventory import WorktreeInventory
from git_worktree_wrapper.services.git.worktrees import WorktreeService
from git_worktree_wrapper.services.ranking import rank
from git_worktree_wrapper.services.removal_service import RemovalService
from git_worktree_wrapper.services.selection import Picker, SelectionEngine
from git_worktree_wrapper.logging_config import get_logger

logger = get_logger(__name__)


def emit_cd(path: Union[str, Path], stream: Optional[TextIO] = None) -> None:
    """Print the auto-cd line read by the shell integration."""
    stream = stream if stream is not None else sys.stdout
    print(f"{CD_PREFIX}{path}", file=stream, flush=True)


class WorktreeWrapper:
    """Entry points used by the CLI.

    Each call builds a fresh inventory; git and the filesystem are the only
    source of truth.
    """

    def __init__(self, repo_path: str, config: Config, picker: Optional[Picker] = None):
        """Initialize WorktreeWrapper.

        Args:
            repo_path: Path inside the git repository
            config: Config built by the CLI
            picker: Interactive picker used when no branch name is given
        """
        self.repo_path = repo_path
        self.config = config
        self.picker = picker

        self.inventory = WorktreeInventory(repo_path)
        self.worktree_service = WorktreeService(repo_path)
        self.checkout_service = CheckoutService(self.worktree_service, self.config.init_submodules)
        self.removal_service = RemovalService(self.worktree_service)

    def build_candidates(self) -> List[BranchCandidate]:
        """Collect worktrees and branches and rank them by recency."""
        records = self.inventory.list()
        branches = self.inventory.list_branches()
        candidates = rank(
            records,
            branches,
            remotes=self.inventory.remotes(),
            current_branch=self.inventory.current_branch(),
        )
        logger.debug(f"Built {len(candidates)} candidates")
        return candidates

    def _selection_engine(self) -> SelectionEngine:
        return SelectionEngine(
            self.config.worktree_root,
            self.inventory.repository_name(),
            self.picker,
        )

    def resolve_and_checkout(self, explicit_name: Optional[str] = None, create: bool = False) -> Path:
        """Resolve a branch, make sure its worktree exists and emit the auto-cd line.

        Raises:
            BranchNotFoundError, InvalidInputError, ExternalToolError,
            ParseError, SelectionCancelled
        """
        candidates = self.build_candidates()
        target = self._selection_engine().select(
            candidates,
            explicit_name=explicit_name,
            create_flag=create,
            prompt=PROMPT_SELECT_BRANCH,
        )
        path = self.checkout_service.checkout(target)
        emit_cd(path)
        return path

    def resolve_and_remove(self, explicit_name: Optional[str] = None) -> None:
        """Resolve a worktree and remove it; the branch is kept.

        Raises:
            WorktreeNotFoundError, InvalidInputError, ExternalToolError,
            ParseError, SelectionCancelled
        """
        candidates = self.build_candidates()
        engine = self._selection_engine()

        if explicit_name is None:
            worktree_candidates = [c for c in candidates if c.has_worktree]
            if not worktree_candidates:
                raise WorktreeNotFoundError()
            target = engine.select(worktree_candidates, prompt=PROMPT_SELECT_WORKTREE)
        else:
            try:
                target = engine.select(candidates, explicit_name=explicit_name)
            except BranchNotFoundError:
                raise WorktreeNotFoundError(explicit_name) from None

        self.removal_service.remove(target)

    def raw_list(self) -> str:
        """`git worktree list` output, unmodified."""
        return self.inventory.raw_list()
