"""Fuzzy matching used by the interactive picker."""

from typing import List, Sequence

from git_worktree_wrapper.models.branch import BranchCandidate

BOUNDARY_CHARS = "/_-."


def fuzzy_score(query: str, text: str) -> float:
    """Fuzzy match a query against a branch name.

    Returns a score where higher is better and 0 means no match.

    Scoring priorities:
    - Exact substring matches score highest
    - Matches at word boundaries (after /, _, -, .) score higher
    - Consecutive character matches score higher
    - Shorter names get a small bonus, substring matches included
    """
    if not query:
        return 1.0

    query_lower = query.lower()
    text_lower = text.lower()

    idx = text_lower.find(query_lower)
    if idx != -1:
        boundary_bonus = 0.2 if idx == 0 or text[idx - 1] in BOUNDARY_CHARS else 0
        length_bonus = max(0.0, 0.5 - len(text) / 400)
        # Above 1.0, so substring matches always outrank subsequence matches
        return 1.0 + boundary_bonus + length_bonus

    # Subsequence match: every query character in order
    query_idx = 0
    consecutive_bonus = 0.0
    boundary_bonus = 0.0
    last_match = -2

    for i, char in enumerate(text_lower):
        if query_idx < len(query_lower) and char == query_lower[query_idx]:
            if i == last_match + 1:
                consecutive_bonus += 0.1
            if i == 0 or text[i - 1] in BOUNDARY_CHARS:
                boundary_bonus += 0.15
            last_match = i
            query_idx += 1

    if query_idx < len(query_lower):
        return 0.0

    base_score = len(query) / len(text)
    length_penalty = len(text) / 300
    score = base_score + consecutive_bonus + boundary_bonus - length_penalty
    # Keep real matches above zero; stays below the substring range
    return min(max(0.01, score), 0.99)


def fuzzy_filter(query: str, candidates: Sequence[BranchCandidate]) -> List[BranchCandidate]:
    """Candidates matching query, best first; ties keep the ranked order.

    An empty query returns every candidate in ranked order.
    """
    if not query:
        return list(candidates)

    scored = []
    for position, candidate in enumerate(candidates):
        score = fuzzy_score(query, candidate.branch_name)
        if score > 0:
            scored.append((-score, position, candidate))

    scored.sort(key=lambda item: (item[0], item[1]))
    return [candidate for _, _, candidate in scored]
