"""Data models for typeahead candidates, key presses, and widget state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Candidate:
    """A matching candidate split into the typed prefix and the rest.

    ``matched_prefix + remainder`` is always the original candidate string.
    The split is only meaningful for the input text that produced it.
    """

    matched_prefix: str
    remainder: str

    @property
    def value(self) -> str:
        """Return the full candidate string."""
        return self.matched_prefix + self.remainder


@dataclass(frozen=True)
class KeyPress:
    """A raw key press: the key identifier and whether shift was held."""

    key: str
    shift: bool = False

    @classmethod
    def from_key_name(cls, name: str) -> KeyPress:
        """Build a key press from a Textual key name such as ``"shift+tab"``.

        Args:
            name: The key name as reported by ``events.Key.key``.

        Returns:
            The parsed key press. Modifiers other than shift are kept in
            the key identifier so they never match a navigation key.
        """
        parts = name.split("+")
        shift = "shift" in parts[:-1]
        modifiers = [p for p in parts[:-1] if p != "shift"]
        return cls(key="+".join([*modifiers, parts[-1]]), shift=shift)


class TypeaheadStatus(Enum):
    """Lifecycle state of the suggestion box."""

    IDLE = "Idle"
    FILTERING = "Filtering"
    DISMISSED = "Dismissed"


class Direction(Enum):
    """Focus traversal direction through the suggestion list."""

    FORWARD = "forward"
    BACKWARD = "backward"


class FocusKind(Enum):
    """Where the host should move input focus after a transition."""

    UNCHANGED = "unchanged"
    FIELD = "field"
    SUGGESTION = "suggestion"


@dataclass(frozen=True)
class FocusTarget:
    """Declarative focus intent that the host binding carries out."""

    kind: FocusKind = FocusKind.UNCHANGED
    index: int | None = None

    @classmethod
    def unchanged(cls) -> FocusTarget:
        return cls()

    @classmethod
    def input_field(cls) -> FocusTarget:
        return cls(kind=FocusKind.FIELD)

    @classmethod
    def suggestion(cls, index: int) -> FocusTarget:
        return cls(kind=FocusKind.SUGGESTION, index=index)


@dataclass(frozen=True)
class TypeaheadState:
    """A snapshot of the typeahead for one render cycle.

    ``focused_index`` is None while the text field holds logical focus,
    otherwise an index into ``suggestions``.
    """

    status: TypeaheadStatus = TypeaheadStatus.IDLE
    input_text: str = ""
    suggestions: tuple[Candidate, ...] = field(default_factory=tuple)
    focused_index: int | None = None

    @property
    def is_box_visible(self) -> bool:
        """Whether the suggestion box should be shown."""
        return self.status is TypeaheadStatus.FILTERING


@dataclass(frozen=True)
class Transition:
    """The outcome of handling one event.

    Attributes:
        state: The resulting state.
        focus: Focus transfer the host should perform.
        prevent_default: Whether the host must suppress the event's
            default behaviour (focus traversal, text insertion).
        replaces_text: Whether ``state.input_text`` must be written back
            to the text field (a suggestion was committed).
    """

    state: TypeaheadState
    focus: FocusTarget = field(default_factory=FocusTarget)
    prevent_default: bool = False
    replaces_text: bool = False
