"""Worktree mutation service for git-worktree-wrapper."""

from pathlib import Path
from typing import Optional, Union

import git

from git_worktree_wrapper.services.git.commands import command_error, open_repo
from git_worktree_wrapper.logging_config import get_logger

logger = get_logger(__name__)


class WorktreeService:
    """Service for creating and removing git worktrees.

    All failures surface as ExternalToolError carrying git's stderr; nothing
    is retried or forced.
    """

    def __init__(self, repo_path: str):
        """Initialize the worktree service.

        Args:
            repo_path: Path inside the git repository
        """
        self.repo_path = repo_path

    def _get_repo(self) -> git.Repo:
        return open_repo(self.repo_path)

    def add_worktree(
        self,
        path: Union[str, Path],
        branch_name: str,
        create_branch: bool = False,
        start_point: Optional[str] = None,
    ) -> None:
        """Create a worktree at path.

        Args:
            path: Directory for the new worktree; parents are created
            branch_name: Branch to check out (or create)
            create_branch: Create branch_name as part of the same git call
            start_point: Commit-ish the new branch starts from (e.g. "origin/feature")

        Raises:
            ExternalToolError: If git rejects the worktree, e.g. the branch is
                already checked out elsewhere or the ref name is invalid
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        if create_branch:
            args = ["add", "-b", branch_name, str(path)]
            if start_point:
                args.append(start_point)
        else:
            args = ["add", str(path), branch_name]

        repo = self._get_repo()
        try:
            repo.git.worktree(*args)
        except git.exc.CommandError as e:
            error = command_error("worktree add", e)
            logger.debug(f"Failed to add worktree at {path}: {error}")
            raise error from e

        logger.info(f"Created worktree for {branch_name} at {path}")

    def remove_worktree(self, path: Union[str, Path]) -> None:
        """Remove the worktree at path.

        Never passes --force: git refuses dirty or untracked-file worktrees and
        that refusal is returned to the caller as ExternalToolError.
        """
        repo = self._get_repo()
        try:
            repo.git.worktree("remove", str(path))
        except git.exc.CommandError as e:
            error = command_error("worktree remove", e)
            logger.debug(f"Failed to remove worktree at {path}: {error}")
            raise error from e

        logger.info(f"Removed worktree at {path}")

    def update_submodules(self, worktree_path: Union[str, Path]) -> None:
        """Recursively initialize and update submodules inside a worktree."""
        repo = self._get_repo()
        try:
            # Use git -C <path> to run command in that directory
            repo.git.execute(
                ["git", "-C", str(worktree_path), "submodule", "update", "--init", "--recursive"]
            )
        except git.exc.CommandError as e:
            raise command_error("submodule update", e) from e

        logger.info(f"Initialized submodules in {worktree_path}")
