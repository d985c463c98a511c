from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Tuple

from .errors import ButtonOutOfRange, InvalidColorCharacter, TooFewLights
from .ring import neighborhood

MIN_LIGHTS = 3


class Color(enum.Enum):
    """The color a light can be. The value is its display glyph."""

    OFF = "X"
    RED = "R"
    GREEN = "G"

    @property
    def glyph(self) -> str:
        return self.value


# OFF -> RED -> GREEN -> OFF
NEXT_COLOR: Dict[Color, Color] = {
    Color.OFF: Color.RED,
    Color.RED: Color.GREEN,
    Color.GREEN: Color.OFF,
}

_CHAR_TO_COLOR: Dict[str, Color] = {
    "G": Color.GREEN,
    "g": Color.GREEN,
    "R": Color.RED,
    "r": Color.RED,
    "_": Color.OFF,
    " ": Color.OFF,
    "X": Color.OFF,
    "x": Color.OFF,
}


def next_color(color: Color) -> Color:
    return NEXT_COLOR[color]


@dataclass(frozen=True)
class State:
    """Colors of every light around the ring, in button order."""

    lights: Tuple[Color, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.lights, tuple):
            object.__setattr__(self, "lights", tuple(self.lights))
        if len(self.lights) < MIN_LIGHTS:
            raise TooFewLights(len(self.lights))

    @classmethod
    def from_string(cls, text: str) -> "State":
        return state_from_string(text)

    @property
    def num_lights(self) -> int:
        return len(self.lights)

    @property
    def buttons(self) -> range:
        return range(len(self.lights))

    def push(self, button: int) -> "State":
        """Return the state after pushing `button`.

        The light under the button and both of its ring neighbours advance one
        color. Raises ButtonOutOfRange for anything outside `0..N-1`.
        """
        n = len(self.lights)
        if isinstance(button, bool) or not isinstance(button, int) or not 0 <= button < n:
            raise ButtonOutOfRange(button, n)
        lights = list(self.lights)
        for i in neighborhood(button, n):
            lights[i] = NEXT_COLOR[lights[i]]
        return State(tuple(lights))

    def printable_state(self) -> str:
        """Visual representation of the state, like "GGXXR"."""
        return "".join(c.glyph for c in self.lights)

    def __str__(self) -> str:
        return self.printable_state()

    def __len__(self) -> int:
        return len(self.lights)


def state_from_string(text: str) -> State:
    """Parse a state such as "RGX_x". Raises TooFewLights / InvalidColorCharacter."""
    if len(text) < MIN_LIGHTS:
        raise TooFewLights(len(text))
    lights = []
    for ch in text:
        color = _CHAR_TO_COLOR.get(ch)
        if color is None:
            raise InvalidColorCharacter(ch)
        lights.append(color)
    return State(tuple(lights))


