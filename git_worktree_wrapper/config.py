"""Configuration handling for git-worktree-wrapper"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from git_worktree_wrapper.constants import (
    DEFAULT_WORKTREE_ROOT_PARTS,
    ENV_INIT_SUBMODULES,
    ENV_NO_COLOR_STANDARD,
    ENV_NO_COLOUR,
    ENV_WORKTREE_ROOT,
    TRUTHY_VALUES,
)


def default_worktree_root(home: Optional[str] = None) -> Path:
    """Fallback worktree root under the user's home directory."""
    base = Path(home) if home else Path.home()
    return base.joinpath(*DEFAULT_WORKTREE_ROOT_PARTS)


@dataclass
class Config:
    """Configuration for git-worktree-wrapper with validation.

    Built once at startup and passed into the core; nothing below the CLI
    reads the environment.
    """

    worktree_root: Path = field(default_factory=default_worktree_root)

    # Output
    no_colour: bool = False
    verbose: bool = False
    debug: bool = False

    # Checkout behaviour
    init_submodules: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_worktree_root()

    def _validate_worktree_root(self):
        """Validate worktree_root is a non-empty absolute path."""
        if isinstance(self.worktree_root, str):
            if not self.worktree_root.strip():
                raise ValueError("worktree_root cannot be empty")
            self.worktree_root = Path(self.worktree_root)
        self.worktree_root = self.worktree_root.expanduser()
        if not self.worktree_root.is_absolute():
            self.worktree_root = self.worktree_root.absolute()

    @property
    def use_color(self) -> bool:
        return not self.no_colour

    def to_dict(self) -> dict:
        """Convert config to dictionary (used for --debug output)."""
        return {
            "worktree_root": str(self.worktree_root),
            "no_colour": self.no_colour,
            "verbose": self.verbose,
            "debug": self.debug,
            "init_submodules": self.init_submodules,
        }

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "Config":
        """Create Config from environment variables.

        Args:
            environ: Environment mapping (defaults to os.environ)
            **overrides: Values from the command line (verbose, debug)
        """
        if environ is None:
            environ = os.environ

        root_value = environ.get(ENV_WORKTREE_ROOT)
        if root_value:
            worktree_root = Path(root_value)
        else:
            worktree_root = default_worktree_root(environ.get("HOME"))

        no_colour = ENV_NO_COLOUR in environ or ENV_NO_COLOR_STANDARD in environ
        init_submodules = environ.get(ENV_INIT_SUBMODULES, "").strip().lower() in TRUTHY_VALUES

        values = {
            "worktree_root": worktree_root,
            "no_colour": no_colour,
            "init_submodules": init_submodules,
        }
        values.update(overrides)
        return cls(**values)
