"""Pytest fixtures for git-worktree-wrapper tests"""
import tempfile
from pathlib import Path
from unittest.mock import Mock
import pytest
import git

from git_worktree_wrapper.config import Config
from git_worktree_wrapper.models.branch import BranchCandidate


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def worktree_root(temp_dir):
    """Root directory for worktrees, outside the repository."""
    return temp_dir / "worktrees"


@pytest.fixture
def config(worktree_root):
    """Configuration pointing at the temporary worktree root."""
    return Config(worktree_root=worktree_root, no_colour=True)


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    # Create initial commit on main branch
    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    try:
        repo.git.branch('-M', 'main')
    except Exception:
        pass

    # Remote is never contacted; it names the repository and the remote refs
    repo.create_remote('origin', 'git@github.com:test/test-repo.git')

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Repository with local branches and a remote-only tracking ref."""
    repo = git_repo
    repo_path = Path(repo.working_dir)

    repo.git.checkout('-b', 'feature/test-feature')
    test_file = repo_path / "feature.txt"
    test_file.write_text("Feature content\n")
    repo.index.add(["feature.txt"])
    repo.index.commit("Add feature")

    repo.git.checkout('main')
    repo.git.branch('bugfix')

    # Remote-tracking refs without a fetch
    head_sha = repo.head.commit.hexsha
    repo.git.update_ref('refs/remotes/origin/main', head_sha)
    repo.git.update_ref('refs/remotes/origin/remote-only', head_sha)

    yield repo


@pytest.fixture
def mock_picker():
    """Picker that returns the first candidate it is shown."""
    picker = Mock()
    picker.pick = Mock(side_effect=lambda candidates, prompt: candidates[0])
    return picker


@pytest.fixture
def make_candidate():
    """Factory for BranchCandidate objects."""
    def _make(name, **kwargs):
        return BranchCandidate(branch_name=name, **kwargs)
    return _make
