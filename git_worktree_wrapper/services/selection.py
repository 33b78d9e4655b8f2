"""Selection engine: turn a ranked candidate list and an optional name into one target."""

from pathlib import Path
from typing import Optional, Protocol, Sequence, Union

from git_worktree_wrapper.constants import PROMPT_SELECT_BRANCH
from git_worktree_wrapper.exceptions import (
    BranchNotFoundError,
    InvalidInputError,
    SelectionCancelled,
)
from git_worktree_wrapper.models.branch import BranchCandidate, ResolvedTarget
from git_worktree_wrapper.services.paths import resolve
from git_worktree_wrapper.logging_config import get_logger

logger = get_logger(__name__)


class Picker(Protocol):
    """Interactive chooser over a ranked candidate list."""

    def pick(self, candidates: Sequence[BranchCandidate], prompt: str) -> Optional[BranchCandidate]:
        """Return the chosen candidate, or None if the user cancelled."""
        ...


def find_candidate(candidates: Sequence[BranchCandidate], name: str) -> Optional[BranchCandidate]:
    """Exact lookup by branch name, then by any remote ref ("origin/feature").

    A remote ref also finds a candidate that collapsed with a local branch.
    """
    for candidate in candidates:
        if candidate.branch_name == name:
            return candidate
    for candidate in candidates:
        if candidate.remote_ref == name or name in candidate.remote_refs:
            return candidate
    return None


class SelectionEngine:
    """Resolves exactly one target for checkout or removal."""

    def __init__(self, root: Union[str, Path], repository_name: str, picker: Optional[Picker] = None):
        """Initialize the selection engine.

        Args:
            root: Worktree root directory
            repository_name: Per-repository directory name under root
            picker: Interactive picker, needed only when no name is given
        """
        self.root = Path(root)
        self.repository_name = repository_name
        self.picker = picker

    def select(
        self,
        candidates: Sequence[BranchCandidate],
        explicit_name: Optional[str] = None,
        create_flag: bool = False,
        prompt: str = PROMPT_SELECT_BRANCH,
    ) -> ResolvedTarget:
        """Resolve a target.

        With an explicit name, an exact match resolves directly. No match
        resolves to a brand-new branch when create_flag is set and raises
        BranchNotFoundError otherwise. Without a name the picker decides.

        Raises:
            InvalidInputError: If explicit_name is empty
            BranchNotFoundError: If the name does not resolve (or there is
                nothing to pick from)
            SelectionCancelled: If the user aborts the picker
        """
        if explicit_name is not None:
            if not explicit_name.strip():
                raise InvalidInputError("Branch name cannot be empty")

            candidate = find_candidate(candidates, explicit_name)
            if candidate is not None:
                logger.debug(f"Resolved '{explicit_name}' to candidate {candidate.branch_name}")
                return self.target_for_candidate(candidate)

            if create_flag:
                logger.debug(f"'{explicit_name}' not found; creating a new branch")
                return self.new_target(explicit_name)

            raise BranchNotFoundError(explicit_name)

        if not candidates:
            raise BranchNotFoundError()

        return self.target_for_candidate(self._pick(candidates, prompt))

    def _pick(self, candidates: Sequence[BranchCandidate], prompt: str) -> BranchCandidate:
        if self.picker is None:
            raise InvalidInputError("A branch name is required when no interactive picker is available")

        try:
            choice = self.picker.pick(candidates, prompt)
        except (KeyboardInterrupt, EOFError):
            raise SelectionCancelled() from None

        if choice is None:
            logger.debug("Picker cancelled")
            raise SelectionCancelled()
        return choice

    def target_for_candidate(self, candidate: BranchCandidate) -> ResolvedTarget:
        """Build a target from a known candidate."""
        if candidate.has_worktree and candidate.worktree_path:
            target_path = Path(candidate.worktree_path)
        else:
            target_path = resolve(self.root, self.repository_name, candidate.branch_name).path

        return ResolvedTarget(
            branch_name=candidate.branch_name,
            repository_name=self.repository_name,
            target_path=target_path,
            exists_as_worktree=candidate.has_worktree,
            exists_as_branch=candidate.is_local,
            start_point=None if candidate.is_local else candidate.remote_ref,
        )

    def new_target(self, branch_name: str) -> ResolvedTarget:
        """Build a target for a branch that does not exist yet."""
        return ResolvedTarget(
            branch_name=branch_name,
            repository_name=self.repository_name,
            target_path=resolve(self.root, self.repository_name, branch_name).path,
            exists_as_worktree=False,
            exists_as_branch=False,
        )
