from __future__ import annotations


class TricolorError(ValueError):
    """Base class for every failure raised by the solver core."""


class TooFewLights(TricolorError):
    def __init__(self, count: int) -> None:
        super().__init__(f"State must be at least 3 characters, got {count}")
        self.count = count


class InvalidColorCharacter(TricolorError):
    def __init__(self, character: str) -> None:
        super().__init__(
            f"Invalid light color: {character!r}; must be green (Gg), red (Rr), or off (_Xx )"
        )
        self.character = character


class LightCountMismatch(TricolorError):
    def __init__(self, start_count: int, goal_count: int) -> None:
        super().__init__(
            f"Start and goal must have the same number of lights (start={start_count}, goal={goal_count})"
        )
        self.start_count = start_count
        self.goal_count = goal_count


class ButtonOutOfRange(TricolorError):
    def __init__(self, button: object, num_buttons: int) -> None:
        super().__init__(f"Button {button!r} out of range 0..{num_buttons - 1}")
        self.button = button
        self.num_buttons = num_buttons


class SearchFailed(TricolorError):
    """The search finished without producing a path."""


class NoPathExists(SearchFailed):
    pass


class SearchBudgetExceeded(SearchFailed):
    def __init__(self, message: str, *, max_states: int) -> None:
        super().__init__(message)
        self.max_states = max_states
