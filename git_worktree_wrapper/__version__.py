"""Version information for git-worktree-wrapper."""

try:
    from git_worktree_wrapper._version import __version__
except ImportError:
    # Running from a source tree that setuptools-scm has not built
    __version__ = "0.0.0+unknown"
