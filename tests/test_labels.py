"""Mini README: Tests for label parsing and the presentation table."""

from __future__ import annotations

import numpy as np
import pytest

from scenesemantics.classification import LABEL_DISPLAY, Label
from scenesemantics.errors import UnmappedLabelError


def test_parse_accepts_codes_names_and_members() -> None:
    assert Label.parse(1) is Label.WALL
    assert Label.parse(np.int32(7)) is Label.DOOR
    assert Label.parse(0) is Label.NONE
    assert Label.parse("ceiling") is Label.CEILING
    assert Label.parse(" Window ") is Label.WINDOW
    assert Label.parse("None") is Label.NONE
    assert Label.parse(Label.SEAT) is Label.SEAT


@pytest.mark.parametrize("raw", [8, -1, "stairs", True, 1.5, None])
def test_parse_rejects_unmapped_values(raw) -> None:
    with pytest.raises(UnmappedLabelError):
        Label.parse(raw)


def test_every_label_has_display_metadata() -> None:
    assert set(LABEL_DISPLAY) == set(Label)
    assert Label.WALL.display_name == "Wall"
    assert len(Label.FLOOR.display_color) == 3
    assert [label.value for label in Label] == [
        "Ceiling",
        "Door",
        "Floor",
        "Seat",
        "Table",
        "Wall",
        "Window",
        "None",
    ]
