"""
Near-miss suggestions for unknown command names.
"""

from collections.abc import Iterable

from portfolio_terminal.constants import MAX_SUGGESTION_DISTANCE, MAX_SUGGESTIONS


def edit_distance(first: str, second: str) -> int:
    """Levenshtein distance with unit cost for insert, delete and substitute."""
    previous = list(range(len(second) + 1))
    for i, first_char in enumerate(first, start=1):
        current = [i]
        for j, second_char in enumerate(second, start=1):
            cost = 0 if first_char == second_char else 1
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + cost,  # substitution
                )
            )
        previous = current
    return previous[-1]


def is_similar(command: str, candidate: str) -> bool:
    """Return True when ``candidate`` is a plausible intended spelling."""
    if command and candidate and candidate[0] == command[0]:
        return True
    if candidate in command or command in candidate:
        return True
    return edit_distance(command, candidate) <= MAX_SUGGESTION_DISTANCE


def get_similar_commands(
    command: str, candidates: Iterable[str], limit: int = MAX_SUGGESTIONS
) -> list[str]:
    """Return up to ``limit`` similar candidates, in candidate order.

    Matches are not ranked by distance: the first qualifying candidates win.
    """
    lowered = command.lower()
    suggestions: list[str] = []
    for candidate in candidates:
        if is_similar(lowered, candidate):
            suggestions.append(candidate)
            if len(suggestions) >= limit:
                break
    return suggestions
