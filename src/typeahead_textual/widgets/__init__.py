"""Textual widgets that render and drive the typeahead."""

from __future__ import annotations

from typeahead_textual.widgets.pointer import PointerCaptureApp, PointerDispatcher
from typeahead_textual.widgets.typeahead_input import (
    SuggestionItem,
    TypeaheadField,
    TypeaheadInput,
)

__all__ = [
    "PointerCaptureApp",
    "PointerDispatcher",
    "SuggestionItem",
    "TypeaheadField",
    "TypeaheadInput",
]
