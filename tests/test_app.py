"""Tests for the demo application."""

from __future__ import annotations

import pytest
from textual.widgets import Static

from typeahead_textual.app import (
    CAR_BRANDS,
    StopsPropagationButton,
    TypeaheadDemoApp,
    debug_label,
)
from typeahead_textual.models import TypeaheadState
from typeahead_textual.widgets.typeahead_input import (
    SuggestionItem,
    TypeaheadField,
    TypeaheadInput,
)


@pytest.fixture(autouse=True)
def _no_saved_theme(monkeypatch):
    monkeypatch.setattr("typeahead_textual.app.load_theme", lambda: None)


class TestTypeaheadDemoApp:
    """Tests for the demo page."""

    async def test_field_focused_on_start(self):
        app = TypeaheadDemoApp()
        async with app.run_test(size=(80, 40)) as pilot:
            await pilot.pause()
            assert isinstance(app.focused, TypeaheadField)

    async def test_uses_car_brands_by_default(self):
        app = TypeaheadDemoApp()
        async with app.run_test(size=(80, 40)) as pilot:
            await pilot.pause()
            await pilot.press("v")
            await pilot.pause()
            values = [item.candidate.value for item in app.query(SuggestionItem)]
            assert values == ["Volkswagen", "Volvo"]
            assert app.candidates == CAR_BRANDS

    async def test_custom_candidates(self):
        app = TypeaheadDemoApp(candidates=["Saab", "Seat"])
        async with app.run_test(size=(80, 40)) as pilot:
            await pilot.pause()
            await pilot.press("s", "e")
            await pilot.pause()
            values = [item.candidate.value for item in app.query(SuggestionItem)]
            assert values == ["Seat"]

    async def test_tab_past_typeahead_reaches_after_panel(self):
        app = TypeaheadDemoApp()
        async with app.run_test(size=(80, 40)) as pilot:
            await pilot.pause()
            await pilot.press("tab")
            await pilot.pause()
            assert app.focused.id == "after"

    async def test_debug_bar_tracks_focus(self):
        app = TypeaheadDemoApp(debug=True)
        async with app.run_test(size=(80, 40)) as pilot:
            await pilot.pause()
            await pilot.press("a", "tab")
            await pilot.pause()
            state = app.query_one(TypeaheadInput).controller.state
            assert debug_label(state) == "Filtering: focus index 0, matches 2"
            assert app.query_one("#debug-bar", Static)

    async def test_no_debug_bar_by_default(self):
        app = TypeaheadDemoApp()
        async with app.run_test(size=(80, 40)) as pilot:
            await pilot.pause()
            assert not app.query("#debug-bar")

    async def test_stopped_click_still_closes_list(self):
        app = TypeaheadDemoApp()
        async with app.run_test(size=(80, 40)) as pilot:
            await pilot.pause()
            await pilot.press("a")
            await pilot.pause()
            button = app.query_one("#stops-propagation", StopsPropagationButton)
            app.pointer_dispatcher.notify(button)
            await pilot.click("#stops-propagation")
            await pilot.pause()
            assert button.clicks == 1
            assert not app.query_one("#suggestion-box").display


class TestDebugLabel:
    """Tests for the debug status text."""

    def test_idle(self):
        assert debug_label(TypeaheadState()) == "Idle: focus index -, matches 0"
