from __future__ import annotations

import itertools
from typing import Iterator

import pytest

from tricolor.state import Color, State


def all_states(num_lights: int) -> Iterator[State]:
    for lights in itertools.product(list(Color), repeat=num_lights):
        yield State(lights)


@pytest.fixture
def five_off() -> State:
    return State((Color.OFF,) * 5)
