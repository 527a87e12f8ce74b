"""Typeahead state machine.

The module-level functions are pure transitions from one ``TypeaheadState``
to the next. ``TypeaheadController`` holds the current state for a host
binding, feeds it events, and subscribes to outside-interaction
notifications while active.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import replace

from typeahead_textual.errors import TypeaheadConfigError
from typeahead_textual.keys import KeyAction, KeyEvent, classify
from typeahead_textual.matcher import filter_candidates, is_blank
from typeahead_textual.models import (
    Direction,
    FocusTarget,
    Transition,
    TypeaheadState,
    TypeaheadStatus,
)
from typeahead_textual.notifier import OutsideInteractionNotifier
from typeahead_textual.suggestion_list import SuggestionList

logger = logging.getLogger(__name__)

_DIRECTIONS = {
    KeyAction.TAB_FORWARD: Direction.FORWARD,
    KeyAction.TAB_BACKWARD: Direction.BACKWARD,
}


def initial_state() -> TypeaheadState:
    """Return the Idle state: no text, box hidden."""
    return TypeaheadState()


def change_text(
    state: TypeaheadState, candidates: Sequence[str], text: str
) -> Transition:
    """Handle a new input text.

    The match list is recomputed and focus returns to the field. Non-blank
    text always shows the box, even if it had been dismissed.
    """
    status = TypeaheadStatus.IDLE if is_blank(text) else TypeaheadStatus.FILTERING
    new_state = TypeaheadState(
        status=status,
        input_text=text,
        suggestions=tuple(filter_candidates(candidates, text)),
        focused_index=None,
    )
    return Transition(new_state)


def press_key(
    state: TypeaheadState,
    candidates: Sequence[str],
    event: KeyEvent,
    index: int | None = None,
) -> Transition:
    """Handle a key press on the field (*index* None) or on a suggestion.

    Keys only have an effect while the box is visible. Anything the
    typeahead does not handle comes back with ``prevent_default`` False so
    the host lets the key through.

    Raises:
        TypeaheadIntegrationError: If *index* is not a rendered suggestion.
    """
    action = classify(event)
    if action is KeyAction.OTHER or state.status is not TypeaheadStatus.FILTERING:
        return Transition(state)

    items = SuggestionList(state.suggestions)
    if index is not None:
        items.focus(index)
    state = replace(state, focused_index=items.focused_index)

    if action is KeyAction.ESCAPE:
        return _dismiss(state, FocusTarget.input_field())

    if action is KeyAction.ENTER:
        if items.focused_index is None:
            return Transition(state)
        return _select(state, candidates, items, items.focused_index)

    if not items.advance_focus(_DIRECTIONS[action]):
        return Transition(state)
    focused = items.focused_index
    focus = (
        FocusTarget.input_field() if focused is None else FocusTarget.suggestion(focused)
    )
    return Transition(
        replace(state, focused_index=focused), focus=focus, prevent_default=True
    )


def click_suggestion(
    state: TypeaheadState, candidates: Sequence[str], index: int
) -> Transition:
    """Handle a pointer selection of the suggestion at *index*.

    Clicks arriving after the box was hidden are ignored.

    Raises:
        TypeaheadIntegrationError: If *index* is not a rendered suggestion.
    """
    if state.status is not TypeaheadStatus.FILTERING:
        return Transition(state)
    return _select(state, candidates, SuggestionList(state.suggestions), index)


def interact_outside(state: TypeaheadState) -> Transition:
    """Handle pointer activity outside the widget.

    Dismisses like Escape. Focus returns to the field only if a suggestion
    held it, since the hidden suggestion cannot keep focus; otherwise it stays
    wherever the pointer put it.
    """
    if state.status is not TypeaheadStatus.FILTERING:
        return Transition(state)
    if state.focused_index is not None:
        return _dismiss(state, FocusTarget.input_field())
    return _dismiss(state, FocusTarget.unchanged())


def _dismiss(state: TypeaheadState, focus: FocusTarget) -> Transition:
    new_state = replace(state, status=TypeaheadStatus.DISMISSED, focused_index=None)
    return Transition(new_state, focus=focus, prevent_default=True)


def _select(
    state: TypeaheadState,
    candidates: Sequence[str],
    items: SuggestionList,
    index: int,
) -> Transition:
    value = items.select(index).value
    new_state = TypeaheadState(
        status=TypeaheadStatus.DISMISSED,
        input_text=value,
        suggestions=tuple(filter_candidates(candidates, value)),
        focused_index=None,
    )
    return Transition(
        new_state,
        focus=FocusTarget.input_field(),
        prevent_default=True,
        replaces_text=True,
    )


def _validate_candidates(candidates: Iterable[str]) -> tuple[str, ...]:
    """Return *candidates* as a tuple, rejecting anything but strings.

    Raises:
        TypeaheadConfigError: If *candidates* is a bare string, is not
            iterable, or contains a non-string entry.
    """
    if isinstance(candidates, (str, bytes)):
        raise TypeaheadConfigError(
            "candidates must be a sequence of strings, not a single string"
        )
    try:
        items = tuple(candidates)
    except TypeError:
        raise TypeaheadConfigError(
            f"candidates must be a sequence of strings, got {type(candidates).__name__}"
        ) from None
    for position, item in enumerate(items):
        if not isinstance(item, str):
            raise TypeaheadConfigError(
                f"candidate at position {position} is {type(item).__name__}, not str"
            )
    return items


class TypeaheadController:
    """Stateful front end to the typeahead transitions for a host binding.

    Every event handler returns the resulting ``Transition`` and also passes
    it to *on_transition*, which is how transitions triggered by the
    outside-interaction notifier reach the host.
    """

    def __init__(
        self,
        candidates: Iterable[str],
        notifier: OutsideInteractionNotifier | None = None,
        on_transition: Callable[[Transition], None] | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            candidates: The fixed list of strings to suggest from.
            notifier: Source of outside-interaction notifications.
            on_transition: Called with every transition after it is applied.

        Raises:
            TypeaheadConfigError: If *candidates* is not a sequence of strings.
        """
        self._candidates = _validate_candidates(candidates)
        self._notifier = notifier
        self._on_transition = on_transition
        self._state = initial_state()
        self._active = False

    @property
    def candidates(self) -> tuple[str, ...]:
        return self._candidates

    @property
    def state(self) -> TypeaheadState:
        """The current state snapshot."""
        return self._state

    @property
    def is_active(self) -> bool:
        return self._active

    def activate(self) -> None:
        """Start listening for outside interactions. Safe to call twice."""
        if self._active:
            return
        if self._notifier is not None:
            self._notifier.subscribe(self.on_outside_interaction)
        self._active = True

    def deactivate(self) -> None:
        """Stop listening for outside interactions. Safe to call twice."""
        if not self._active:
            return
        if self._notifier is not None:
            self._notifier.unsubscribe(self.on_outside_interaction)
        self._active = False

    def on_text_changed(self, text: str) -> Transition:
        return self._commit(change_text(self._state, self._candidates, text))

    def on_key_press(self, event: KeyEvent, index: int | None = None) -> Transition:
        """Handle a key press on the field, or on the suggestion at *index*."""
        return self._commit(press_key(self._state, self._candidates, event, index))

    def on_suggestion_clicked(self, index: int) -> Transition:
        return self._commit(click_suggestion(self._state, self._candidates, index))

    def on_outside_interaction(self) -> Transition:
        return self._commit(interact_outside(self._state))

    def _commit(self, transition: Transition) -> Transition:
        self._state = transition.state
        logger.debug(
            "typeahead %s: focus=%s matches=%d",
            transition.state.status.value,
            transition.state.focused_index,
            len(transition.state.suggestions),
        )
        if self._on_transition is not None:
            self._on_transition(transition)
        return transition
