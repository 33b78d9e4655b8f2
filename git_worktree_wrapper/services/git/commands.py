"""Shared helpers for running git through GitPython."""

from typing import Union

import git

from git_worktree_wrapper.exceptions import ExternalToolError

_STDERR_PREFIX = "stderr: '"


def open_repo(repo_path: str) -> git.Repo:
    """Open the repository containing repo_path.

    Creates a new repo instance for each call; GitPython repos are
    lightweight and nothing is cached between commands.

    Raises:
        ExternalToolError: If repo_path is not inside a git repository
    """
    try:
        return git.Repo(repo_path, search_parent_directories=True)
    except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
        raise ExternalToolError("rev-parse", f"Not a git repository: {repo_path}") from e


def command_error(operation: str, error: git.exc.CommandError) -> ExternalToolError:
    """Translate a GitPython command error, keeping git's stderr verbatim."""
    stderr = (error.stderr if hasattr(error, "stderr") else str(error)) or ""
    stderr = stderr.strip()
    # GitPython wraps the captured stream as "stderr: '<text>'"
    if stderr.startswith(_STDERR_PREFIX) and stderr.endswith("'"):
        stderr = stderr[len(_STDERR_PREFIX):-1].strip()

    status: Union[int, str, Exception, None] = getattr(error, "status", None)
    return ExternalToolError(
        operation,
        stderr or None,
        status if isinstance(status, int) else None,
    )
