"""Custom exceptions for git-worktree-wrapper"""

from typing import Optional


class GitWorktreeWrapperError(Exception):
    """Base exception for all git-worktree-wrapper errors."""
    pass


class InvalidInputError(GitWorktreeWrapperError):
    """Exception raised for malformed branch or path arguments."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ExternalToolError(GitWorktreeWrapperError):
    """Exception raised when a git invocation fails.

    The message carries git's own stderr so it can be shown to the user as-is.
    """

    def __init__(self, operation: str, message: Optional[str] = None, status: Optional[int] = None):
        self.operation = operation
        self.message = message
        self.status = status

        error_msg = f"git {operation} failed"
        if status is not None:
            error_msg += f" (exit {status})"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class ParseError(GitWorktreeWrapperError):
    """Exception raised when git output does not have the expected shape."""

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"Unexpected output from {source}: {message}")


class BranchNotFoundError(GitWorktreeWrapperError):
    """Exception raised when a requested branch does not resolve."""

    def __init__(self, branch: Optional[str] = None):
        self.branch = branch
        if branch is None:
            super().__init__("No branches found")
        else:
            super().__init__(f"Branch '{branch}' does not exist (use -b to create it)")


class WorktreeNotFoundError(GitWorktreeWrapperError):
    """Exception raised when a requested branch has no worktree."""

    def __init__(self, branch: Optional[str] = None):
        self.branch = branch
        if branch is None:
            super().__init__("No worktrees found")
        else:
            super().__init__(f"No worktree found for branch '{branch}'")


class SelectionCancelled(GitWorktreeWrapperError):
    """Raised when the user aborts the interactive picker. Not a failure."""

    def __init__(self):
        super().__init__("Selection cancelled")
