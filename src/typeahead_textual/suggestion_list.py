"""Ordered suggestion list with keyboard focus tracking."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from typeahead_textual.errors import TypeaheadIntegrationError
from typeahead_textual.models import Candidate, Direction

logger = logging.getLogger(__name__)


class SuggestionList:
    """The visible candidates and which of them holds keyboard focus.

    ``focused_index`` is None while the text field has focus. It is always
    either None or a valid index into ``suggestions``; installing a new
    match list resets it to None.
    """

    def __init__(
        self,
        suggestions: Iterable[Candidate] = (),
        focused_index: int | None = None,
    ) -> None:
        """Initialize the list.

        Args:
            suggestions: The current match list.
            focused_index: Index of the focused suggestion, if any.

        Raises:
            TypeaheadIntegrationError: If *focused_index* is out of range.
        """
        self._suggestions: tuple[Candidate, ...] = tuple(suggestions)
        self._focused_index: int | None = None
        if focused_index is not None:
            self._focused_index = self._check_index(focused_index)

    @property
    def suggestions(self) -> tuple[Candidate, ...]:
        return self._suggestions

    @property
    def focused_index(self) -> int | None:
        return self._focused_index

    def __len__(self) -> int:
        return len(self._suggestions)

    def install(self, suggestions: Iterable[Candidate]) -> None:
        """Replace the match list and return focus to the text field."""
        self._suggestions = tuple(suggestions)
        self._focused_index = None

    def focus_first(self) -> None:
        """Focus the first suggestion; a no-op when the list is empty."""
        if self._suggestions:
            self._focused_index = 0

    def focus(self, index: int) -> None:
        """Focus the suggestion at *index*.

        Raises:
            TypeaheadIntegrationError: If *index* is out of range.
        """
        self._focused_index = self._check_index(index)

    def advance_focus(self, direction: Direction) -> bool:
        """Move keyboard focus one step through the list.

        Forward from the field enters the list at the first suggestion and
        forward from the last suggestion wraps back to the first. Backward
        from the first suggestion returns focus to the field; backward from
        the field is left to the default handler.

        Args:
            direction: Which way to move.

        Returns:
            True if focus moved and the caller must suppress the default
            focus traversal, False if the default behaviour should apply.
        """
        if not self._suggestions:
            return False
        current = self._focused_index
        if direction is Direction.FORWARD:
            if current is None or current == len(self._suggestions) - 1:
                self._focused_index = 0
            else:
                self._focused_index = current + 1
            return True
        if current is None:
            return False
        self._focused_index = None if current == 0 else current - 1
        return True

    def select(self, index: int) -> Candidate:
        """Return the candidate at *index* and clear the focus.

        Raises:
            TypeaheadIntegrationError: If *index* is out of range.
        """
        candidate = self._suggestions[self._check_index(index)]
        self._focused_index = None
        return candidate

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self._suggestions):
            logger.warning(
                "Suggestion index %d out of range (%d suggestions)",
                index,
                len(self._suggestions),
            )
            raise TypeaheadIntegrationError(
                f"suggestion index {index} is out of range for "
                f"{len(self._suggestions)} suggestion(s)"
            )
        return index
