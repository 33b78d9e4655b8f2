"""Worktree and branch inventory for git-worktree-wrapper."""

import os
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import git

from git_worktree_wrapper.constants import (
    BRANCH_LISTING_FORMAT,
    DEFAULT_REMOTE,
    FIELD_SEPARATOR,
    LOCAL_REF_PREFIX,
    REMOTE_REF_PREFIX,
)
from git_worktree_wrapper.exceptions import ParseError
from git_worktree_wrapper.models.branch import BranchRecord
from git_worktree_wrapper.models.worktree import WorktreeRecord
from git_worktree_wrapper.services.git.commands import command_error, open_repo
from git_worktree_wrapper.services.paths import repository_name_from_url
from git_worktree_wrapper.logging_config import get_logger

logger = get_logger(__name__)

PORCELAIN_SOURCE = "git worktree list --porcelain"
BRANCH_LISTING_SOURCE = "git for-each-ref"


def split_remote_ref(short_ref: str, remotes: Iterable[str]) -> Tuple[Optional[str], str]:
    """Split "<remote>/<branch>" into its parts.

    Known remote names are tried longest first so remotes containing "/" are
    handled. Returns (None, short_ref) when no remote prefix applies.
    """
    for remote in sorted(set(remotes), key=len, reverse=True):
        if short_ref == remote:
            return remote, ""
        if short_ref.startswith(remote + "/"):
            return remote, short_ref[len(remote) + 1:]
    return None, short_ref


def parse_worktree_porcelain(output: str) -> List[WorktreeRecord]:
    """Parse `git worktree list --porcelain` output.

    Format (blank line between worktrees):
        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name   (or "detached", or "bare")
        locked [reason]
        prunable [reason]

    Missing optional lines are fine and unknown lines are ignored.

    Raises:
        ParseError: If attributes appear before any "worktree" line or a
            worktree line has no path
    """
    records: List[WorktreeRecord] = []
    current: Optional[WorktreeRecord] = None

    for line_number, line in enumerate(output.splitlines(), start=1):
        line = line.rstrip("\r")

        if not line.strip():
            # Empty line marks end of worktree entry
            if current is not None:
                records.append(current)
                current = None
            continue

        key, _, value = line.partition(" ")

        if key == "worktree":
            if current is not None:
                records.append(current)
            if not value.strip():
                raise ParseError(PORCELAIN_SOURCE, f"line {line_number}: worktree entry without a path")
            # First worktree in list is always the main one
            current = WorktreeRecord(path=value, is_main=not records)
            continue

        if current is None:
            raise ParseError(
                PORCELAIN_SOURCE,
                f"line {line_number}: '{line}' appears before any worktree entry",
            )

        if key == "HEAD":
            current.head_commit = value.strip() or None
        elif key == "branch":
            ref = value.strip()
            if ref.startswith(LOCAL_REF_PREFIX):
                current.branch = ref[len(LOCAL_REF_PREFIX):]
            else:
                current.branch = None
        elif key == "detached":
            current.branch = None
        elif key == "bare":
            current.is_bare = True
        elif key == "locked":
            current.is_locked = True
        elif key == "prunable":
            current.is_prunable = True

    # Handle last entry if no trailing blank line
    if current is not None:
        records.append(current)

    return records


def parse_branch_listing(output: str, remotes: Iterable[str] = (DEFAULT_REMOTE,)) -> List[BranchRecord]:
    """Parse for-each-ref output produced with BRANCH_LISTING_FORMAT.

    Remote HEAD symrefs are skipped. An empty timestamp means the commit time
    is unknown.

    Raises:
        ParseError: If a line has too few fields or a malformed timestamp
    """
    remote_names = list(remotes)
    records: List[BranchRecord] = []

    for line_number, line in enumerate(output.splitlines(), start=1):
        if not line.strip():
            continue

        fields = line.split(FIELD_SEPARATOR)
        if len(fields) < 2:
            raise ParseError(BRANCH_LISTING_SOURCE, f"line {line_number}: expected ref and timestamp, got '{line}'")

        refname = fields[0].strip()
        timestamp_text = fields[1].strip()
        committed_label = fields[2].strip() if len(fields) > 2 else ""
        author = fields[3].strip() if len(fields) > 3 else ""
        subject = FIELD_SEPARATOR.join(fields[4:]).strip()

        committed_at: Optional[int] = None
        if timestamp_text:
            try:
                committed_at = int(timestamp_text)
            except ValueError:
                raise ParseError(
                    BRANCH_LISTING_SOURCE,
                    f"line {line_number}: invalid commit timestamp '{timestamp_text}'",
                ) from None

        if refname.startswith(LOCAL_REF_PREFIX):
            name = refname[len(LOCAL_REF_PREFIX):]
            remote = None
            short_ref = name
        elif refname.startswith(REMOTE_REF_PREFIX):
            short_ref = refname[len(REMOTE_REF_PREFIX):]
            remote, name = split_remote_ref(short_ref, remote_names)
            if remote is None and "/" in short_ref:
                # Remote not configured any more; assume "<remote>/<branch>"
                remote, name = short_ref.split("/", 1)
            if remote is None or not name or name == "HEAD":
                continue
        else:
            continue

        if not name:
            continue

        records.append(
            BranchRecord(
                name=name,
                ref=short_ref,
                remote=remote,
                committed_at=committed_at,
                committed_label=committed_label,
                author=author,
                subject=subject,
            )
        )

    return records


def _path_mtime(path: str) -> Optional[int]:
    """Modification time of a worktree directory, None if it is missing."""
    try:
        return int(os.stat(path).st_mtime)
    except OSError:
        return None


class WorktreeInventory:
    """Enumerates worktrees and branches of a repository.

    Every call queries git afresh; nothing is cached.
    """

    def __init__(self, repo_path: str):
        """Initialize the inventory.

        Args:
            repo_path: Path inside the git repository (any worktree works)
        """
        self.repo_path = repo_path

    def _get_repo(self) -> git.Repo:
        return open_repo(self.repo_path)

    def _run(self, operation: str, *args: str, **kwargs) -> str:
        repo = self._get_repo()
        try:
            return repo.git.execute(["git", *args], **kwargs)
        except git.exc.CommandError as e:
            error = command_error(operation, e)
            logger.debug(f"{error}")
            raise error from e

    def list(self) -> List[WorktreeRecord]:
        """Get structured information about all worktrees.

        Raises:
            ExternalToolError: If git cannot be run or fails
            ParseError: If the porcelain output is malformed
        """
        output = self._run("worktree list", "worktree", "list", "--porcelain")
        records = parse_worktree_porcelain(output)
        for record in records:
            record.last_modified = _path_mtime(record.path)

        logger.debug(f"Found {len(records)} worktrees")
        for record in records:
            logger.debug(f"  {record}")
        return records

    def raw_list(self) -> str:
        """Verbatim `git worktree list` output, trailing newline included."""
        return self._run("worktree list", "worktree", "list", strip_newline_in_stdout=False)

    def list_branches(self) -> List[BranchRecord]:
        """Get all local and remote-tracking branches with last commit metadata."""
        output = self._run(
            "for-each-ref",
            "for-each-ref",
            f"--format={BRANCH_LISTING_FORMAT}",
            LOCAL_REF_PREFIX.rstrip("/"),
            REMOTE_REF_PREFIX.rstrip("/"),
        )
        records = parse_branch_listing(output, self.remotes())
        logger.debug(f"Found {len(records)} branch refs")
        return records

    def remotes(self) -> List[str]:
        """Names of the configured remotes."""
        return [remote.name for remote in self._get_repo().remotes]

    def current_branch(self) -> Optional[str]:
        """Branch checked out where the command runs, None on detached HEAD."""
        repo = self._get_repo()
        try:
            return repo.active_branch.name
        except TypeError:
            # Detached HEAD
            return None

    def repository_name(self) -> str:
        """Name used as the per-repository directory under the worktree root.

        Taken from the origin URL; falls back to the directory holding the
        shared git dir so the name is the same from every linked worktree.
        """
        repo = self._get_repo()
        try:
            url = repo.remote(DEFAULT_REMOTE).url
        except (ValueError, AttributeError):
            url = None
        if url:
            name = repository_name_from_url(url)
            if name:
                return name

        common_dir = Path(repo.common_dir).resolve()
        if common_dir.name == ".git":
            return common_dir.parent.name
        # Bare repository, e.g. "project.git"
        return common_dir.name[: -len(".git")] if common_dir.name.endswith(".git") else common_dir.name
