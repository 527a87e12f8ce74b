"""Typeahead input widget: a text field with a navigable suggestion box."""

from __future__ import annotations

from collections.abc import Iterable

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, Static

from typeahead_textual.errors import TypeaheadIntegrationError
from typeahead_textual.models import (
    Candidate,
    FocusKind,
    KeyPress,
    Transition,
    TypeaheadState,
)
from typeahead_textual.notifier import InteractionNotifier
from typeahead_textual.typeahead import TypeaheadController
from typeahead_textual.widgets.pointer import PointerDispatcher


class TypeaheadField(Input):
    """The text field of a typeahead.

    Navigation keys go to the typeahead first; anything it does not handle
    falls through to the normal Input behaviour.
    """

    def __init__(self, owner: TypeaheadInput, **kwargs) -> None:
        """Initialize the field.

        Args:
            owner: The typeahead this field belongs to.
            **kwargs: Passed through to ``Input``.
        """
        self._owner = owner
        super().__init__(**kwargs)

    async def _on_key(self, event: events.Key) -> None:
        """Let the typeahead claim Tab, Escape and Enter."""
        if self._owner.route_key(event, None):
            event.prevent_default()
            event.stop()
            return
        await super()._on_key(event)

    def on_mount(self) -> None:
        """Report every text change to the typeahead as it happens."""
        self.watch(self, "value", self._owner.handle_text_changed, init=False)


class SuggestionItem(Static, can_focus=True):
    """One suggestion row, with the typed prefix shown in bold."""

    def __init__(self, owner: TypeaheadInput, candidate: Candidate, index: int) -> None:
        """Initialize the row.

        Args:
            owner: The typeahead this row belongs to.
            candidate: The candidate to display.
            index: Position of the candidate in the current match list.
        """
        super().__init__(
            Text.assemble((candidate.matched_prefix, "bold"), candidate.remainder),
            id=f"suggestion-{index}",
            classes="suggestion",
        )
        self._owner = owner
        self.candidate = candidate
        self.index = index

    def on_key(self, event: events.Key) -> None:
        if self._owner.route_key(event, self.index):
            event.prevent_default()
            event.stop()

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self._owner.select_suggestion(self.index)


class TypeaheadInput(Widget):
    """A text field that suggests matching candidates as the user types.

    Tab moves from the field into the suggestion list and cycles through
    it, Shift+Tab on the first suggestion returns to the field, Enter or a
    click fills the field with a suggestion, and Escape or a click anywhere
    else closes the list. Outside clicks are only seen when the app is a
    ``PointerCaptureApp``.
    """

    DEFAULT_CSS = """
    TypeaheadInput {
        height: auto;
        width: 1fr;
    }

    TypeaheadInput #suggestion-box {
        height: auto;
        border: round $primary;
        background: $surface;
    }

    TypeaheadInput SuggestionItem {
        height: 1;
        width: 100%;
        padding: 0 1;
    }

    TypeaheadInput SuggestionItem:hover {
        background: #808080;
        color: #ffffff;
    }

    TypeaheadInput SuggestionItem:focus {
        background: $accent;
        color: $text;
    }
    """

    class Selected(Message):
        """Posted when a suggestion has been committed to the field."""

        def __init__(self, typeahead: TypeaheadInput, value: str) -> None:
            super().__init__()
            self.typeahead = typeahead
            self.value = value

        @property
        def control(self) -> TypeaheadInput:
            return self.typeahead

    class StateChanged(Message):
        """Posted after every transition has been rendered."""

        def __init__(self, typeahead: TypeaheadInput, state: TypeaheadState) -> None:
            super().__init__()
            self.typeahead = typeahead
            self.state = state

        @property
        def control(self) -> TypeaheadInput:
            return self.typeahead

    def __init__(
        self,
        candidates: Iterable[str],
        *,
        placeholder: str = "",
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the typeahead.

        Args:
            candidates: The strings to suggest from.
            placeholder: Placeholder text for the field.
            id: Widget id.
            classes: Widget CSS classes.

        Raises:
            TypeaheadConfigError: If *candidates* is not a sequence of strings.
        """
        super().__init__(id=id, classes=classes)
        self._outside = InteractionNotifier()
        self.controller = TypeaheadController(
            candidates, notifier=self._outside, on_transition=self._schedule
        )
        self._placeholder = placeholder
        self._dispatcher: PointerDispatcher | None = None
        self._committed_text: str | None = None
        self._rendered: tuple[Candidate, ...] = ()

    def compose(self) -> ComposeResult:
        """Create the field and the (initially hidden) suggestion box."""
        yield TypeaheadField(self, placeholder=self._placeholder, id="typeahead-field")
        yield Vertical(id="suggestion-box")

    @property
    def value(self) -> str:
        """The current text of the field."""
        return self.controller.state.input_text

    def on_mount(self) -> None:
        """Hide the box and start listening for outside clicks."""
        self.query_one("#suggestion-box", Vertical).display = False
        self.controller.activate()
        dispatcher = getattr(self.app, "pointer_dispatcher", None)
        if isinstance(dispatcher, PointerDispatcher):
            dispatcher.subscribe(self._on_pointer_down)
            self._dispatcher = dispatcher

    def on_unmount(self) -> None:
        """Stop listening for outside clicks."""
        self.controller.deactivate()
        if self._dispatcher is not None:
            self._dispatcher.unsubscribe(self._on_pointer_down)
            self._dispatcher = None

    def handle_text_changed(self, value: str) -> None:
        """Feed a text change from the field into the controller."""
        if value == self._committed_text:
            # The field echoing a committed selection back.
            self._committed_text = None
            return
        self.controller.on_text_changed(value)

    def route_key(self, event: events.Key, index: int | None) -> bool:
        """Feed a key press into the controller.

        Args:
            event: The key event.
            index: The suggestion the key was pressed on, or None for the field.

        Returns:
            True if the typeahead handled the key and its default behaviour
            must be suppressed.
        """
        try:
            transition = self.controller.on_key_press(
                KeyPress.from_key_name(event.key), index
            )
        except TypeaheadIntegrationError as exc:
            self.notify(str(exc), severity="error", timeout=5)
            return False
        return transition.prevent_default

    def select_suggestion(self, index: int) -> None:
        """Commit the suggestion at *index* as if it had been clicked."""
        try:
            self.controller.on_suggestion_clicked(index)
        except TypeaheadIntegrationError as exc:
            self.notify(str(exc), severity="error", timeout=5)

    def _on_pointer_down(self, target: Widget | None) -> None:
        if target is None or self not in target.ancestors_with_self:
            self._outside.notify()

    def _schedule(self, transition: Transition) -> None:
        self.call_later(self._apply, transition)

    async def _apply(self, transition: Transition) -> None:
        """Render one transition: box contents, visibility, text, then focus."""
        state = transition.state
        field = self.query_one(TypeaheadField)
        box = self.query_one("#suggestion-box", Vertical)

        if state.suggestions != self._rendered:
            await box.remove_children()
            await box.mount_all(
                SuggestionItem(self, candidate, index)
                for index, candidate in enumerate(state.suggestions)
            )
            self._rendered = state.suggestions
        box.display = state.is_box_visible and bool(state.suggestions)

        if transition.replaces_text and field.value != state.input_text:
            self._committed_text = state.input_text
            field.value = state.input_text
            field.cursor_position = len(state.input_text)

        focus = transition.focus
        if focus.kind is FocusKind.FIELD:
            field.focus()
        elif focus.kind is FocusKind.SUGGESTION:
            items = list(box.query(SuggestionItem))
            if focus.index is not None and focus.index < len(items):
                items[focus.index].focus()

        self.post_message(self.StateChanged(self, state))
        if transition.replaces_text:
            self.post_message(self.Selected(self, state.input_text))
