"""Tests for WorktreeInventory and its parsers"""
from pathlib import Path

import pytest

from git_worktree_wrapper.exceptions import ExternalToolError, ParseError
from git_worktree_wrapper.services.git.inventory import (
    WorktreeInventory,
    parse_branch_listing,
    parse_worktree_porcelain,
    split_remote_ref,
)

PORCELAIN = """worktree /home/user/project
HEAD 1111111111111111111111111111111111111111
branch refs/heads/main

worktree /home/user/devel/worktrees/project/feature/x
HEAD 2222222222222222222222222222222222222222
branch refs/heads/feature/x
locked reason goes here

worktree /home/user/devel/worktrees/project/detached
HEAD 3333333333333333333333333333333333333333
detached
prunable gitdir file points to non-existent location
"""


class TestParseWorktreePorcelain:
    """Test porcelain parsing."""

    def test_parses_all_records(self):
        """Test every worktree block becomes a record."""
        records = parse_worktree_porcelain(PORCELAIN)
        assert [r.path for r in records] == [
            "/home/user/project",
            "/home/user/devel/worktrees/project/feature/x",
            "/home/user/devel/worktrees/project/detached",
        ]

    def test_fields(self):
        """Test branch, HEAD and flags are parsed."""
        main, feature, detached = parse_worktree_porcelain(PORCELAIN)

        assert main.branch == "main"
        assert main.head_commit == "1" * 40
        assert main.is_main is True

        assert feature.branch == "feature/x"
        assert feature.is_locked is True
        assert feature.is_main is False

        assert detached.branch is None
        assert detached.is_detached is True
        assert detached.is_prunable is True

    def test_missing_branch_line_is_valid(self):
        """Test a record without branch line (detached HEAD)."""
        records = parse_worktree_porcelain("worktree /a\nHEAD abc\n")
        assert len(records) == 1
        assert records[0].branch is None
        assert records[0].head_commit == "abc"

    def test_bare_entry(self):
        """Test bare repositories have no HEAD or branch."""
        records = parse_worktree_porcelain("worktree /srv/project.git\nbare\n\n")
        assert records[0].is_bare is True
        assert records[0].head_commit is None
        assert records[0].is_detached is False

    def test_unknown_lines_ignored(self):
        """Test new attributes from future git versions are ignored."""
        output = "worktree /a\nHEAD abc\nbranch refs/heads/x\nsomething-new value\n"
        records = parse_worktree_porcelain(output)
        assert records[0].branch == "x"

    def test_no_trailing_blank_line(self):
        """Test the last record is kept without a trailing blank line."""
        records = parse_worktree_porcelain("worktree /a\nHEAD abc\n\nworktree /b\nHEAD def")
        assert [r.path for r in records] == ["/a", "/b"]

    def test_path_with_spaces(self):
        """Test paths keep embedded spaces."""
        records = parse_worktree_porcelain("worktree /home/u/my project\nHEAD abc\n")
        assert records[0].path == "/home/u/my project"

    def test_non_branch_ref(self):
        """Test refs outside refs/heads/ give no branch."""
        records = parse_worktree_porcelain("worktree /a\nbranch refs/remotes/origin/x\n")
        assert records[0].branch is None

    def test_empty_output(self):
        assert parse_worktree_porcelain("") == []

    def test_attribute_before_worktree_line(self):
        """Test output not starting with a worktree line is a parse error."""
        with pytest.raises(ParseError):
            parse_worktree_porcelain("HEAD abc\nworktree /a\n")

    def test_worktree_without_path(self):
        with pytest.raises(ParseError):
            parse_worktree_porcelain("worktree \nHEAD abc\n")


class TestParseBranchListing:
    """Test for-each-ref parsing."""

    def test_local_and_remote(self):
        """Test local refs keep their name and remote refs are split."""
        output = (
            "refs/heads/feature/x\x1f1700000000\x1f2023-11-14T22:13:20+00:00\x1fAlice\x1fAdd x\n"
            "refs/remotes/origin/feature/x\x1f1700000100\x1f2023-11-14T22:15:00+00:00\x1fBob\x1fFix x\n"
        )
        local, remote = parse_branch_listing(output, ["origin"])

        assert local.name == "feature/x"
        assert local.ref == "feature/x"
        assert local.is_remote is False
        assert local.committed_at == 1700000000
        assert local.author == "Alice"
        assert local.subject == "Add x"

        assert remote.name == "feature/x"
        assert remote.ref == "origin/feature/x"
        assert remote.remote == "origin"
        assert remote.committed_at == 1700000100

    def test_remote_head_skipped(self):
        """Test origin/HEAD symrefs are not branches."""
        output = "refs/remotes/origin/HEAD\x1f1700000000\x1f\x1f\x1f\n"
        assert parse_branch_listing(output, ["origin"]) == []

    def test_empty_timestamp(self):
        """Test an empty timestamp means unknown."""
        records = parse_branch_listing("refs/heads/x\x1f\x1f\x1f\x1f\n")
        assert records[0].committed_at is None

    def test_subject_with_separator_kept(self):
        records = parse_branch_listing("refs/heads/x\x1f1\x1fd\x1fa\x1fpart1\x1fpart2\n")
        assert records[0].subject == "part1\x1fpart2"

    def test_invalid_timestamp(self):
        with pytest.raises(ParseError):
            parse_branch_listing("refs/heads/x\x1fyesterday\x1f\x1f\x1f\n")

    def test_missing_fields(self):
        with pytest.raises(ParseError):
            parse_branch_listing("refs/heads/x\n")

    def test_unconfigured_remote(self):
        """Test refs of a removed remote still split on the first slash."""
        records = parse_branch_listing("refs/remotes/upstream/dev\x1f5\x1f\x1f\x1f\n", ["origin"])
        assert records[0].remote == "upstream"
        assert records[0].name == "dev"


class TestSplitRemoteRef:
    """Test remote prefix splitting."""

    def test_longest_remote_wins(self):
        assert split_remote_ref("team/a/feature", ["team", "team/a"]) == ("team/a", "feature")

    def test_no_remote(self):
        assert split_remote_ref("feature/x", ["origin"]) == (None, "feature/x")


class TestWorktreeInventory:
    """Test the inventory against a real repository."""

    def test_list_main_worktree(self, git_repo):
        """Test the main worktree is reported with its branch."""
        inventory = WorktreeInventory(git_repo.working_dir)
        records = inventory.list()

        assert len(records) == 1
        assert Path(records[0].path).resolve() == Path(git_repo.working_dir).resolve()
        assert records[0].branch == "main"
        assert records[0].is_main is True
        assert records[0].last_modified is not None

    def test_list_linked_worktree(self, git_repo_with_branches, temp_dir):
        """Test linked worktrees appear after the main one."""
        worktree_path = temp_dir / "linked"
        git_repo_with_branches.git.worktree("add", str(worktree_path), "bugfix")

        records = WorktreeInventory(git_repo_with_branches.working_dir).list()

        assert [r.branch for r in records] == ["main", "bugfix"]
        assert Path(records[1].path).resolve() == worktree_path.resolve()

    def test_raw_list_is_verbatim(self, git_repo):
        """Test raw_list returns git's output unchanged, trailing newline included."""
        inventory = WorktreeInventory(git_repo.working_dir)
        raw = inventory.raw_list()

        assert raw.endswith("\n")
        assert "[main]" in raw
        assert raw.rstrip("\n") == git_repo.git.worktree("list")

    def test_list_branches(self, git_repo_with_branches):
        """Test local and remote-tracking branches are listed."""
        records = WorktreeInventory(git_repo_with_branches.working_dir).list_branches()
        refs = {r.ref for r in records}

        assert {"main", "bugfix", "feature/test-feature"} <= refs
        assert {"origin/main", "origin/remote-only"} <= refs
        assert all(r.committed_at is not None for r in records)
        assert all(r.author == "Test User" for r in records)

    def test_remotes(self, git_repo):
        assert WorktreeInventory(git_repo.working_dir).remotes() == ["origin"]

    def test_current_branch(self, git_repo):
        assert WorktreeInventory(git_repo.working_dir).current_branch() == "main"

    def test_current_branch_detached(self, git_repo):
        """Test detached HEAD has no current branch."""
        git_repo.git.checkout(git_repo.head.commit.hexsha)
        assert WorktreeInventory(git_repo.working_dir).current_branch() is None

    def test_repository_name_from_origin(self, git_repo):
        assert WorktreeInventory(git_repo.working_dir).repository_name() == "test-repo"

    def test_repository_name_without_origin(self, git_repo):
        """Test fallback to the directory that holds the git dir."""
        git_repo.delete_remote(git_repo.remote("origin"))
        assert WorktreeInventory(git_repo.working_dir).repository_name() == "test_repo"

    def test_repository_name_from_linked_worktree(self, git_repo, temp_dir):
        """Test a linked worktree reports the main repository's name."""
        git_repo.delete_remote(git_repo.remote("origin"))
        linked = temp_dir / "elsewhere"
        git_repo.git.worktree("add", "-b", "side", str(linked))

        assert WorktreeInventory(str(linked)).repository_name() == "test_repo"

    def test_not_a_repository(self, temp_dir):
        """Test a plain directory is an external tool error."""
        plain = temp_dir / "plain"
        plain.mkdir()
        with pytest.raises(ExternalToolError, match="Not a git repository"):
            WorktreeInventory(str(plain)).list()
