"""Mini README: Semantic labels attached to reconstructed mesh faces.

Structure:
    * Label - closed enumeration of face classifications.
    * LabelDisplay - presentation metadata (name and RGB colour).
    * LABEL_DISPLAY - static table consumed by presentation layers only.

The engine itself only stores and compares ``Label`` members. Raw values
coming from AR providers (integer codes or names) are normalised through
``Label.parse``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Any, Dict, Tuple

from .errors import UnmappedLabelError


class Label(Enum):
    """Face classification reported by scene reconstruction."""

    CEILING = "Ceiling"
    DOOR = "Door"
    FLOOR = "Floor"
    SEAT = "Seat"
    TABLE = "Table"
    WALL = "Wall"
    WINDOW = "Window"
    NONE = "None"

    @property
    def display_name(self) -> str:
        return LABEL_DISPLAY[self].display_name

    @property
    def display_color(self) -> Tuple[int, int, int]:
        return LABEL_DISPLAY[self].display_color

    @classmethod
    def parse(cls, raw: Any) -> "Label":
        """Resolve a raw classification value, raising ``UnmappedLabelError``."""

        if isinstance(raw, Label):
            return raw
        if isinstance(raw, bool):
            raise UnmappedLabelError(raw)
        if isinstance(raw, Integral):
            try:
                return _RAW_CODES[int(raw)]
            except KeyError:
                raise UnmappedLabelError(raw) from None
        if isinstance(raw, str):
            label = _NAMES.get(raw.strip().lower())
            if label is None:
                raise UnmappedLabelError(raw)
            return label
        raise UnmappedLabelError(raw)


@dataclass(frozen=True, slots=True)
class LabelDisplay:
    """Presentation metadata for a label."""

    display_name: str
    display_color: Tuple[int, int, int]


LABEL_DISPLAY: Dict[Label, LabelDisplay] = {
    Label.CEILING: LabelDisplay("Ceiling", (0, 255, 255)),
    Label.DOOR: LabelDisplay("Door", (165, 42, 42)),
    Label.FLOOR: LabelDisplay("Floor", (0, 0, 255)),
    Label.SEAT: LabelDisplay("Seat", (128, 0, 128)),
    Label.TABLE: LabelDisplay("Table", (255, 255, 0)),
    Label.WALL: LabelDisplay("Wall", (0, 255, 0)),
    Label.WINDOW: LabelDisplay("Window", (255, 0, 0)),
    Label.NONE: LabelDisplay("None", (255, 255, 255)),
}

# ARMeshClassification raw values.
_RAW_CODES: Dict[int, Label] = {
    0: Label.NONE,
    1: Label.WALL,
    2: Label.FLOOR,
    3: Label.CEILING,
    4: Label.TABLE,
    5: Label.SEAT,
    6: Label.WINDOW,
    7: Label.DOOR,
}

_NAMES: Dict[str, Label] = {label.value.lower(): label for label in Label}
