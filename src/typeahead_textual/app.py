"""Demo Textual application for typeahead-textual."""

from __future__ import annotations

from collections.abc import Sequence

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Button, Static

from typeahead_textual.config import load_theme
from typeahead_textual.models import TypeaheadState
from typeahead_textual.widgets.pointer import PointerCaptureApp
from typeahead_textual.widgets.typeahead_input import TypeaheadInput

CAR_BRANDS: list[str] = [
    "Alfa Romeo",
    "Audi",
    "BMW",
    "Chevrolet",
    "Chrysler",
    "Dodge",
    "Ferrari",
    "Fiat",
    "Ford",
    "Honda",
    "Hyundai",
    "Jaguar",
    "Jeep",
    "Kia",
    "Mazda",
    "Mercedez-Benz",
    "Mitsubishi",
    "Nissan",
    "Peugeot",
    "Porsche",
    "SAAB",
    "Subaru",
    "Suzuki",
    "Toyota",
    "Volkswagen",
    "Volvo",
]


def debug_label(state: TypeaheadState) -> str:
    """Describe the typeahead state for the debug status line."""
    index = "-" if state.focused_index is None else str(state.focused_index)
    return f"{state.status.value}: focus index {index}, matches {len(state.suggestions)}"


class StopsPropagationButton(Button):
    """A button that swallows its own clicks and counts them.

    Used to show that clicking it still closes an open suggestion list.
    """

    def __init__(self, **kwargs) -> None:
        """Initialize with a zero click count."""
        super().__init__(self._label_for(0), **kwargs)
        self.clicks = 0

    @staticmethod
    def _label_for(clicks: int) -> str:
        return f"Clicked {clicks} times (stops propagation)"

    def on_click(self, event) -> None:
        event.prevent_default()
        event.stop()
        self.clicks += 1
        self.label = self._label_for(self.clicks)


class FocusablePanel(Static, can_focus=True):
    """Plain text that takes part in the tab order."""


class TypeaheadDemoApp(PointerCaptureApp):
    """Demo page: some content, the typeahead, and a focusable panel after it."""

    TITLE = "typeahead-textual"
    CSS_PATH = "styles/app.tcss"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, candidates: Sequence[str] = CAR_BRANDS, debug: bool = False) -> None:
        """Initialize the app.

        Args:
            candidates: Strings offered by the typeahead.
            debug: Show a status line with the focus index and match count.
        """
        super().__init__()
        self.candidates = list(candidates)
        self.show_debug = debug
        saved_theme = load_theme()
        if saved_theme:
            self.theme = saved_theme

    def compose(self) -> ComposeResult:
        """Create the demo layout."""
        with Vertical(id="demo-page"):
            yield StopsPropagationButton(id="stops-propagation")
            yield Static("Before typeahead", id="before")
            yield TypeaheadInput(
                self.candidates, placeholder="Car brand", id="typeahead"
            )
            yield FocusablePanel("After typeahead (focusable)", id="after")
        if self.show_debug:
            yield Static(debug_label(TypeaheadState()), id="debug-bar")

    def on_mount(self) -> None:
        """Start with the cursor in the typeahead."""
        self.query_one("#typeahead-field").focus()

    def on_typeahead_input_state_changed(self, event: TypeaheadInput.StateChanged) -> None:
        """Refresh the debug readout."""
        if not self.show_debug:
            return
        self.query_one("#debug-bar", Static).update(debug_label(event.state))
