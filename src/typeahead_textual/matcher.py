"""Case-insensitive prefix matching of candidates against user input."""

from __future__ import annotations

from collections.abc import Sequence

from typeahead_textual.models import Candidate


def is_blank(text: str) -> bool:
    """Return True if *text* is empty or consists only of whitespace."""
    return text == "" or text.isspace()


def filter_candidates(candidates: Sequence[str], text: str) -> list[Candidate]:
    """Return the candidates that start with *text*, ignoring case.

    Blank input never matches anything. Matches keep the order (and any
    repetitions) of *candidates*; the matched prefix keeps the candidate's
    own casing.

    Args:
        candidates: Strings to filter.
        text: The user's current input.

    Returns:
        One ``Candidate`` per match, split at ``len(text)``.
    """
    if is_blank(text):
        return []
    size = len(text)
    wanted = text.upper()
    return [
        Candidate(matched_prefix=item[:size], remainder=item[size:])
        for item in candidates
        if len(item) >= size and item[:size].upper() == wanted
    ]
