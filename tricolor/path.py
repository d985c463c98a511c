from __future__ import annotations

from dataclasses import dataclass
from typing import List, MutableSet, Optional

from .state import State

NO_BUTTON = -1
NO_PREV = -1


class PathArena:
    """Backing storage for every Path node created during one search.

    Nodes are stored as parallel lists and refer to their predecessor by index,
    so a whole search tree lives in three lists.
    """

    def __init__(self) -> None:
        self.states: List[State] = []
        self.pushed: List[int] = []
        self.prev: List[int] = []

    def __len__(self) -> int:
        return len(self.states)

    def add(self, state: State, pushed: int, prev: int) -> "Path":
        self.states.append(state)
        self.pushed.append(pushed)
        self.prev.append(prev)
        return Path(self, len(self.states) - 1)

    def root(self, state: State) -> "Path":
        return self.add(state, NO_BUTTON, NO_PREV)


@dataclass(frozen=True, eq=False)
class Path:
    """Where we are and how we got here.

    A handle on one node of a PathArena:
    - `state` is the current state.
    - `pushed` is the button pushed to reach it, NO_BUTTON for the root.
    - `prev` is the previous step along the path, None for the root.
    """

    arena: PathArena
    index: int

    @property
    def state(self) -> State:
        return self.arena.states[self.index]

    @property
    def pushed(self) -> int:
        return self.arena.pushed[self.index]

    @property
    def prev(self) -> Optional["Path"]:
        prev = self.arena.prev[self.index]
        if prev == NO_PREV:
            return None
        return Path(self.arena, prev)

    def next(self, visited: MutableSet[State]) -> List["Path"]:
        """Return one-step extensions that reach states not yet in `visited`.

        Each new state is added to `visited` as soon as it is produced, so two
        buttons leading to the same state yield only the lower button.
        """
        state = self.state
        out: List[Path] = []
        for button in state.buttons:
            new_state = state.push(button)
            if new_state in visited:
                continue
            visited.add(new_state)
            out.append(self.arena.add(new_state, button, self.index))
        return out

    def printable_button(self) -> str:
        if self.pushed == NO_BUTTON:
            return " "
        return str(self.pushed)

    def steps(self) -> List["Path"]:
        """Every node from the root to this one, root first."""
        out: List[Path] = []
        step: Optional[Path] = self
        while step is not None:
            out.append(step)
            step = step.prev
        out.reverse()
        return out

    def printable_path(self) -> List[str]:
        return [f"{step.printable_button()}: {step.state.printable_state()}" for step in self.steps()]

    def buttons(self) -> List[int]:
        return [step.pushed for step in self.steps()[1:]]

    @property
    def depth(self) -> int:
        """Number of buttons pushed to get here."""
        depth = 0
        prev = self.arena.prev[self.index]
        while prev != NO_PREV:
            depth += 1
            prev = self.arena.prev[prev]
        return depth
