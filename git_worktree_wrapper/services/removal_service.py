"""Removal orchestration for worktrees"""
from git_worktree_wrapper.exceptions import WorktreeNotFoundError
from git_worktree_wrapper.models.branch import ResolvedTarget
from git_worktree_wrapper.services.git.worktrees import WorktreeService
from git_worktree_wrapper.logging_config import get_logger

logger = get_logger(__name__)


class RemovalService:
    """Removes the worktree of a resolved target and keeps its branch."""

    def __init__(self, worktree_service: WorktreeService):
        """Initialize the removal service.

        Args:
            worktree_service: Service that runs the git worktree commands
        """
        self.worktree_service = worktree_service

    def remove(self, target: ResolvedTarget) -> None:
        """Remove the worktree of target. The branch itself is kept.

        Raises:
            WorktreeNotFoundError: If target has no worktree (git is not called)
            ExternalToolError: If git refuses, e.g. uncommitted or untracked files
        """
        if not target.exists_as_worktree:
            raise WorktreeNotFoundError(target.branch_name)

        logger.debug(f"Removing worktree for {target.branch_name} at {target.target_path}")
        self.worktree_service.remove_worktree(target.target_path)
