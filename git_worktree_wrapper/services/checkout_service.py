"""Checkout orchestration: make sure the branch and its worktree exist"""
from pathlib import Path

from git_worktree_wrapper.exceptions import ExternalToolError
from git_worktree_wrapper.models.branch import ResolvedTarget
from git_worktree_wrapper.services.git.worktrees import WorktreeService
from git_worktree_wrapper.logging_config import get_logger

logger = get_logger(__name__)


class CheckoutService:
    """Makes sure a resolved target has a branch and a worktree."""

    def __init__(self, worktree_service: WorktreeService, init_submodules: bool = False):
        """Initialize the checkout service.

        Args:
            worktree_service: Service that runs the git worktree commands
            init_submodules: Initialize submodules in newly created worktrees
        """
        self.worktree_service = worktree_service
        self.init_submodules = init_submodules

    def checkout(self, target: ResolvedTarget) -> Path:
        """Return the worktree path for target, creating branch/worktree as needed.

        An existing worktree is returned untouched. A submodule failure after
        creation is only a warning.

        Raises:
            ExternalToolError: If git refuses to create the worktree
        """
        if target.exists_as_worktree:
            logger.debug(f"Worktree for {target.branch_name} already at {target.target_path}")
            return target.target_path

        if target.exists_as_branch:
            self.worktree_service.add_worktree(target.target_path, target.branch_name)
        else:
            self.worktree_service.add_worktree(
                target.target_path,
                target.branch_name,
                create_branch=True,
                start_point=target.start_point,
            )

        if self.init_submodules:
            self._update_submodules(target.target_path)

        return target.target_path

    def _update_submodules(self, path: Path) -> None:
        try:
            self.worktree_service.update_submodules(path)
        except ExternalToolError as e:
            logger.warning(f"Submodule initialization failed in {path}: {e}")
