"""Picker label formatting for branch candidates."""

from rich.text import Text

from git_worktree_wrapper.models.branch import BranchCandidate
from git_worktree_wrapper.constants import (
    LABEL_STYLES,
    SOURCE_TAGS,
    SYMBOL_CURRENT_BRANCH,
    UNKNOWN_AUTHOR,
    UNKNOWN_SUBJECT,
    UNKNOWN_TIME,
)


def format_source_tag(candidate: BranchCandidate) -> str:
    """
    Format the source tag shown in front of a candidate.

    Args:
        candidate: Branch candidate

    Returns:
        "[T*]", "[L ]" or "[R ]" (T = worktree, L = local, R = remote, * = current)
    """
    marker = SYMBOL_CURRENT_BRANCH if candidate.is_current else " "
    return f"[{SOURCE_TAGS[candidate.source.value]}{marker}]"


def format_candidate_label(candidate: BranchCandidate, use_color: bool = True) -> Text:
    """
    Format a candidate as one picker line: tag, name, subject, author, commit time.

    Args:
        candidate: Branch candidate
        use_color: Apply rich styles when True

    Returns:
        Rich Text (unstyled when use_color is False)
    """
    tag = format_source_tag(candidate)
    subject = f"\"{candidate.subject or UNKNOWN_SUBJECT}\""
    author = f"[{candidate.author or UNKNOWN_AUTHOR}]"
    timestamp = f"({candidate.committed_label or UNKNOWN_TIME})"

    def style(name: str) -> str:
        return LABEL_STYLES[name] if use_color else ""

    label = Text()
    label.append(tag, style=style("tag"))
    label.append(" ")
    label.append(candidate.branch_name)
    label.append(" ")
    label.append(subject, style=style("subject"))
    label.append(" ")
    label.append(author, style=style("author"))
    label.append(" ")
    label.append(timestamp, style=style("timestamp"))
    return label
