"""Shared constants for git-worktree-wrapper."""

# Sentinel that prefixes the path line consumed by the auto-cd shell function
CD_PREFIX = "GWW_CD:"

# Environment variables read by Config.from_env
ENV_WORKTREE_ROOT = "WORKTREE_ROOT"
ENV_NO_COLOUR = "GWW_NO_COLOUR"
ENV_NO_COLOR_STANDARD = "NO_COLOR"
ENV_INIT_SUBMODULES = "GWW_INIT_SUBMODULES"

# Default root relative to $HOME when WORKTREE_ROOT is unset
DEFAULT_WORKTREE_ROOT_PARTS = ("devel", "worktrees")

TRUTHY_VALUES = {"1", "true", "yes", "on"}

DEFAULT_REMOTE = "origin"

# Field separator for for-each-ref output (ASCII unit separator)
FIELD_SEPARATOR = "\x1f"

BRANCH_LISTING_FORMAT = (
    "%(refname)%1f%(committerdate:unix)%1f%(committerdate:iso8601-strict)"
    "%1f%(authorname)%1f%(subject)"
)

LOCAL_REF_PREFIX = "refs/heads/"
REMOTE_REF_PREFIX = "refs/remotes/"

# Picker prompts
PROMPT_SELECT_BRANCH = "Select branch"
PROMPT_SELECT_WORKTREE = "Select worktree"

# Placeholders for candidates without commit metadata
UNKNOWN_TIME = "unknown time"
UNKNOWN_AUTHOR = "unknown author"
UNKNOWN_SUBJECT = "unknown subject"

# Picker label tags, keyed by BranchSource value
SOURCE_TAGS = {
    "worktree": "T",
    "local": "L",
    "remote": "R",
}
SYMBOL_CURRENT_BRANCH = "*"

# Rich styles for picker labels
LABEL_STYLES = {
    "tag": "bold cyan",
    "subject": "magenta",
    "author": "yellow",
    "timestamp": "dim",
}
