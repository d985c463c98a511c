from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from .errors import LightCountMismatch
from .state import State, state_from_string


@dataclass
class Problem:
    """A start/goal pair for the ring of lights.

    - `start` and `goal` always have the same number of lights.
    - `meta` carries free-form directives read from a problem file.
    """

    start: State
    goal: State
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.start.num_lights != self.goal.num_lights:
            raise LightCountMismatch(self.start.num_lights, self.goal.num_lights)

    @property
    def num_lights(self) -> int:
        return self.start.num_lights

    @staticmethod
    def parse(start: str, goal: str) -> "Problem":
        """Parse both states; raises LightCountMismatch if their lengths differ."""
        return Problem(start=state_from_string(start), goal=state_from_string(goal))

    @staticmethod
    def from_file(path: str | Path) -> "Problem":
        path = Path(path)
        if path.suffix.lower() == ".json":
            return Problem.from_json(path.read_text(encoding="utf-8"))
        return Problem.from_text(path.read_text(encoding="utf-8"), source_name=str(path))

    @staticmethod
    def from_json(text: str) -> "Problem":
        obj = json.loads(text)
        if not isinstance(obj, dict):
            raise ValueError("Problem JSON must be an object with 'start' and 'goal'")
        for key in ("start", "goal"):
            if not isinstance(obj.get(key), str):
                raise ValueError(f"Problem JSON needs a string {key!r}")
        problem = Problem.parse(obj["start"], obj["goal"])
        meta = obj.get("meta")
        if meta is None:
            meta = {}
        if not isinstance(meta, dict):
            raise ValueError(f"Problem JSON 'meta' must be an object, got {type(meta).__name__}")
        problem.meta = dict(meta)
        return problem

    @staticmethod
    def from_text(text: str, *, source_name: str = "<text>") -> "Problem":
        """Parse a two-line problem file: the start state, then the goal state.

        Lines like "# key: value" are metadata; "# " lines without ":" are
        comments. Spaces inside a state line are OFF lights, so lines are not
        stripped beyond the line ending.
        """
        meta: Dict[str, Any] = {"source": source_name}
        rows: List[str] = []
        for ln in text.splitlines():
            ln = ln.rstrip("\r")
            # a line of spaces is an all-off state
            if not ln:
                continue
            if ln.startswith("#") and len(ln) >= 2 and ln[1].isspace():
                hdr = ln[1:].strip()
                if ":" in hdr:
                    k, v = [x.strip() for x in hdr.split(":", 1)]
                    meta[k] = v
                continue
            rows.append(ln)

        if len(rows) != 2:
            raise ValueError(f"Expected a start and a goal line in {source_name}, found {len(rows)} lines")

        problem = Problem.parse(rows[0], rows[1])
        problem.meta = meta
        return problem
