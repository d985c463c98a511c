from .errors import (
    ButtonOutOfRange,
    InvalidColorCharacter,
    LightCountMismatch,
    NoPathExists,
    SearchBudgetExceeded,
    SearchFailed,
    TooFewLights,
    TricolorError,
)
from .path import NO_BUTTON, Path, PathArena
from .problem import Problem
from .solver import MAX_ITERATIONS, SolveResult, search, solve_problem
from .state import NEXT_COLOR, Color, State, next_color, state_from_string

__version__ = "0.1.0"

__all__ = [
    "ButtonOutOfRange",
    "Color",
    "InvalidColorCharacter",
    "LightCountMismatch",
    "MAX_ITERATIONS",
    "NEXT_COLOR",
    "NO_BUTTON",
    "NoPathExists",
    "Path",
    "PathArena",
    "Problem",
    "SearchBudgetExceeded",
    "SearchFailed",
    "SolveResult",
    "State",
    "TooFewLights",
    "TricolorError",
    "next_color",
    "search",
    "solve_problem",
    "state_from_string",
]
