from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..path import Path


@dataclass
class SolveResult:
    path: Path  # final node; walk `prev` back to the start
    transitions: int  # Path nodes created by the search
    elapsed_ms: float

    @property
    def buttons(self) -> List[int]:
        return self.path.buttons()

    @property
    def steps(self) -> List[str]:
        return self.path.printable_path()
