"""Formatting utilities for git-worktree-wrapper.

- branch: picker labels for branch candidates
- date: durations and commit times
"""

from .branch import format_source_tag, format_candidate_label
from .date import format_duration

__all__ = [
    # Branch
    "format_source_tag",
    "format_candidate_label",
    # Date
    "format_duration",
]
