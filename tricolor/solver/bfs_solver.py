from __future__ import annotations

import logging
import time
from collections import deque
from typing import Deque, Set, Tuple

from ..errors import LightCountMismatch, NoPathExists, SearchBudgetExceeded
from ..path import Path, PathArena
from ..problem import Problem
from ..state import State
from .types import SolveResult

logger = logging.getLogger(__name__)

# 10_000 is a few seconds of processing at most. Five lights are exhausted in well under 100.
MAX_ITERATIONS = 10_000


def search(start: State, goal: State, max_states: int = MAX_ITERATIONS) -> Path:
    """Return the shortest path from `start` to `goal`.

    At most `max_states` transitions (new Path nodes) are considered; the budget
    is checked before each expansion. Among equally short paths the one with the
    lowest button at each step wins.

    Raises NoPathExists when every reachable state was explored without finding
    `goal`, and SearchBudgetExceeded when the budget ran out first.
    """
    path, _transitions = _search(start, goal, max_states)
    return path


def _search(start: State, goal: State, max_states: int) -> Tuple[Path, int]:
    if start.num_lights != goal.num_lights:
        raise LightCountMismatch(start.num_lights, goal.num_lights)
    if max_states < 0:
        raise ValueError(f"max_states must be >= 0, got {max_states}")

    arena = PathArena()
    root = arena.root(start)
    if goal == start:
        return root, 0

    logger.debug("Searching %s -> %s (max_states=%d)", start, goal, max_states)

    visited: Set[State] = {start}
    frontier: Deque[Path] = deque([root])
    transitions = 0
    while frontier and transitions < max_states:
        current = frontier.popleft()
        for step in current.next(visited):
            transitions += 1
            if step.state == goal:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("Reached %s at depth %d after %d transitions", goal, step.depth, transitions)
                return step, transitions
            frontier.append(step)

    if not frontier:
        logger.debug("Exhausted %d reachable states from %s", len(visited), start)
        raise NoPathExists(f"Can't reach {goal} from {start}")
    logger.debug("Budget of %d transitions spent with %d paths pending", max_states, len(frontier))
    raise SearchBudgetExceeded(
        f"Can't reach {goal} from {start} within {max_states} iterations",
        max_states=max_states,
    )


def solve_problem(problem: Problem, *, max_states: int = MAX_ITERATIONS) -> SolveResult:
    """Search a parsed Problem and report the path with search statistics."""
    start_time = time.monotonic()
    path, transitions = _search(problem.start, problem.goal, max_states)
    elapsed_ms = (time.monotonic() - start_time) * 1000.0
    return SolveResult(path=path, transitions=transitions, elapsed_ms=elapsed_ms)
