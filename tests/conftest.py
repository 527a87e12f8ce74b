"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from typeahead_textual.models import Candidate, TypeaheadState, TypeaheadStatus


@pytest.fixture
def cars() -> list[str]:
    """The candidate list used by the scenario tests."""
    return ["Audi", "Alfa Romeo", "BMW"]


@pytest.fixture
def filtering_state() -> TypeaheadState:
    """State after typing "a" against the ``cars`` fixture."""
    return TypeaheadState(
        status=TypeaheadStatus.FILTERING,
        input_text="a",
        suggestions=(
            Candidate(matched_prefix="A", remainder="udi"),
            Candidate(matched_prefix="A", remainder="lfa Romeo"),
        ),
    )


@pytest.fixture
def candidates_file(tmp_path: Path) -> Path:
    """A small candidates file with blanks, padding and a duplicate."""
    path = tmp_path / "brands.txt"
    path.write_text("Saab\n\n  Skoda  \nSeat\nSaab\n   \n", encoding="utf-8")
    return path
