"""Path resolution for worktrees under the configured root."""

from pathlib import Path
from typing import Optional, Union

from git_worktree_wrapper.exceptions import InvalidInputError
from git_worktree_wrapper.models.worktree import WorktreePath


def resolve(root: Union[str, Path], repository_name: str, branch_name: str) -> WorktreePath:
    """Compute where the worktree for a branch lives.

    Branch names containing "/" map to nested directories: "tmp/feature/x"
    becomes root/<repo>/tmp/feature/x.

    Raises:
        InvalidInputError: If the branch or repository name is empty, or the
            branch name would resolve outside the repository directory.
    """
    if not branch_name:
        raise InvalidInputError("Branch name cannot be empty")
    if not repository_name:
        raise InvalidInputError("Repository name cannot be empty")
    if branch_name.startswith("/"):
        raise InvalidInputError(f"Branch name '{branch_name}' cannot be an absolute path")
    if ".." in branch_name.split("/"):
        raise InvalidInputError(f"Branch name '{branch_name}' cannot contain '..' components")

    return WorktreePath(
        repository_name=repository_name,
        branch_name=branch_name,
        root=Path(root),
    )


def repository_name_from_url(url: str) -> Optional[str]:
    """Extract the repository name from a remote URL.

    Handles scp-style (git@host:org/repo.git), URL and plain path remotes.
    """
    cleaned = url.strip().rstrip("/")
    if not cleaned:
        return None
    name = cleaned.rsplit("/", 1)[-1]
    # scp-style remote without any slash, e.g. "host:repo.git"
    name = name.rsplit(":", 1)[-1]
    if name.endswith(".git"):
        name = name[: -len(".git")]
    return name or None
