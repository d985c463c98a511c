from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List

# Allow running `python backend/app.py` from repo root.
_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from tricolor.errors import SearchFailed, TricolorError
from tricolor.problem import Problem
from tricolor.ring import Graph, build_ring_graph
from tricolor.solver import MAX_ITERATIONS, MAX_STATES_LIMIT, solve_problem

logger = logging.getLogger(__name__)


class ParseRequest(BaseModel):
    start: str
    goal: str


class SolveRequest(ParseRequest):
    max_states: int = Field(default=MAX_ITERATIONS, ge=0, le=MAX_STATES_LIMIT)


def _ring_payload(g: Graph) -> Dict[str, Any]:
    return {
        "lights": [{"id": light_id, "pos": list(light.pos)} for light_id, light in g.lights.items()],
        "edges": [[u, v] for u, v in g.edges()],
    }


def _parse_problem(req: ParseRequest) -> Problem:
    try:
        return Problem.parse(req.start, req.goal)
    except TricolorError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


app = FastAPI(title="Tricolor Solver API", version="0.1.0")

cors_raw = os.environ.get("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")
cors_list = [c.strip() for c in cors_raw.split(",") if c.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_list or ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/parse")
def parse_problem(req: ParseRequest) -> Dict[str, Any]:
    problem = _parse_problem(req)
    return {
        "start": problem.start.printable_state(),
        "goal": problem.goal.printable_state(),
        "lights": problem.num_lights,
    }


@app.post("/solve")
def solve(req: SolveRequest) -> Dict[str, Any]:
    problem = _parse_problem(req)
    try:
        res = solve_problem(problem, max_states=req.max_states)
    except SearchFailed as e:
        logger.info("No solution for %s -> %s: %s", problem.start, problem.goal, e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    buttons: List[int] = res.buttons
    return {
        "start": problem.start.printable_state(),
        "goal": problem.goal.printable_state(),
        "buttons": buttons,
        "steps": res.steps,
        "states": [step.state.printable_state() for step in res.path.steps()],
        "transitions": res.transitions,
        "elapsed_ms": res.elapsed_ms,
        "ring": _ring_payload(build_ring_graph(problem.num_lights)),
    }


if __name__ == "__main__":
    import uvicorn

    host = os.environ.get("HOST", "127.0.0.1")
    port = int(os.environ.get("PORT", "8000"))
    reload = os.environ.get("RELOAD", "0").lower() in {"1", "true", "yes", "y", "on"}
    uvicorn.run("backend.app:app", host=host, port=port, reload=reload)
