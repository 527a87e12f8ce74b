"""A keyboard-navigable typeahead input for Textual applications."""

from __future__ import annotations

from typeahead_textual.errors import (
    TypeaheadConfigError,
    TypeaheadError,
    TypeaheadIntegrationError,
)
from typeahead_textual.matcher import filter_candidates, is_blank
from typeahead_textual.models import Candidate, KeyPress, TypeaheadState, TypeaheadStatus
from typeahead_textual.typeahead import TypeaheadController

__all__ = [
    "Candidate",
    "KeyPress",
    "TypeaheadConfigError",
    "TypeaheadController",
    "TypeaheadError",
    "TypeaheadIntegrationError",
    "TypeaheadState",
    "TypeaheadStatus",
    "filter_candidates",
    "is_blank",
]
