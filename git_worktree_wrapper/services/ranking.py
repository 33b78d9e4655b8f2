"""Recency ranking of branch candidates for the picker."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from git_worktree_wrapper.constants import DEFAULT_REMOTE
from git_worktree_wrapper.models.branch import BranchCandidate, BranchRecord
from git_worktree_wrapper.models.worktree import WorktreeRecord
from git_worktree_wrapper.services.git.inventory import split_remote_ref


def normalize_branch_name(name: str, remotes: Iterable[str] = (DEFAULT_REMOTE,)) -> str:
    """Strip a known "<remote>/" prefix so local and remote names share a key."""
    remote, branch = split_remote_ref(name, remotes)
    if remote is None or not branch:
        return name
    return branch


def _newest(*timestamps: Optional[int]) -> Optional[int]:
    known = [ts for ts in timestamps if ts is not None]
    return max(known) if known else None


@dataclass
class _MergedBranch:
    """Accumulator for one normalized branch name."""

    name: str
    worktree_paths: List[str] = field(default_factory=list)
    worktree_timestamp: Optional[int] = None
    local: Optional[BranchRecord] = None
    remotes: List[BranchRecord] = field(default_factory=list)

    def newest_remote(self) -> Optional[BranchRecord]:
        if not self.remotes:
            return None
        # Newest commit first, then ref name for a stable choice
        return min(
            self.remotes,
            key=lambda r: (r.committed_at is None, -(r.committed_at or 0), r.ref),
        )

    def to_candidate(self, current_branch: Optional[str]) -> BranchCandidate:
        remote = self.newest_remote()
        summary = self.local or remote
        timestamp = _newest(
            self.worktree_timestamp,
            self.local.committed_at if self.local else None,
            *(r.committed_at for r in self.remotes),
        )
        return BranchCandidate(
            branch_name=self.name,
            has_worktree=bool(self.worktree_paths),
            worktree_path=min(self.worktree_paths) if self.worktree_paths else None,
            last_used_timestamp=timestamp,
            is_local=self.local is not None,
            remote_ref=remote.ref if (remote is not None and self.local is None) else None,
            remote_refs=sorted(r.ref for r in self.remotes),
            is_current=current_branch is not None and self.name == current_branch,
            author=summary.author if summary else None,
            subject=summary.subject if summary else None,
            committed_label=summary.committed_label if summary else None,
        )


def sort_key(candidate: BranchCandidate) -> Tuple[bool, int, str]:
    """Newest first; candidates without a timestamp last, by name."""
    ts = candidate.last_used_timestamp
    return (ts is None, -(ts or 0), candidate.branch_name)


def rank(
    records: Sequence[WorktreeRecord],
    branches: Sequence[BranchRecord],
    remotes: Iterable[str] = (DEFAULT_REMOTE,),
    current_branch: Optional[str] = None,
) -> List[BranchCandidate]:
    """Merge worktrees and branches into a deduplicated, recency-ordered list.

    Pure function of its inputs: the result does not depend on the order of
    records or branches.

    For each distinct (normalized) branch name the timestamp is the newest of
    the worktree's modification time and the local and remote commit times.
    A local and a remote-tracking ref for the same branch collapse into one
    candidate named after the local branch. A worktree keeps its branch name
    as is when a local branch has exactly that name ("origin/feat" can be a
    local branch); otherwise a known remote prefix is stripped.
    """
    remote_names = list(remotes)
    merged: Dict[str, _MergedBranch] = {}

    def entry(name: str) -> _MergedBranch:
        if name not in merged:
            merged[name] = _MergedBranch(name=name)
        return merged[name]

    for branch in branches:
        if branch.is_remote:
            entry(branch.name).remotes.append(branch)
        else:
            item = entry(branch.name)
            # Duplicate local refs cannot happen; keep the newest if they do
            if item.local is None or (branch.committed_at or 0) > (item.local.committed_at or 0):
                item.local = branch

    local_names = {name for name, item in merged.items() if item.local is not None}

    for record in records:
        if not record.branch:
            # Detached HEAD and bare entries are not selectable by name
            continue
        if record.branch in local_names:
            name = record.branch
        else:
            name = normalize_branch_name(record.branch, remote_names)
        item = entry(name)
        item.worktree_paths.append(record.path)
        item.worktree_timestamp = _newest(item.worktree_timestamp, record.last_modified)

    candidates = [item.to_candidate(current_branch) for item in merged.values()]
    candidates.sort(key=sort_key)
    return candidates
