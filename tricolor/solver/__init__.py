from .bfs_solver import MAX_ITERATIONS, search, solve_problem
from .types import SolveResult

# Upper bound accepted from untrusted callers such as the HTTP service.
MAX_STATES_LIMIT = 1_000_000

__all__ = [
    "MAX_ITERATIONS",
    "MAX_STATES_LIMIT",
    "SolveResult",
    "search",
    "solve_problem",
]
