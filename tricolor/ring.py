from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Set, Tuple

LightId = int


@dataclass
class Light:
    id: LightId
    pos: Tuple[float, float, float]
    data: Dict[str, Any] = field(default_factory=dict)


def neighborhood(button: int, num_lights: int) -> Tuple[int, int, int]:
    """Lights touched by `button`: its left neighbour, itself, its right neighbour.

    Both neighbours wrap, so button 0's left neighbour is the last light.
    """
    return ((button - 1) % num_lights, button, (button + 1) % num_lights)


class Graph:
    """The ring of lights as an undirected graph with per-light positions."""

    def __init__(self) -> None:
        self.lights: Dict[LightId, Light] = {}
        self._adj: Dict[LightId, Set[LightId]] = {}

    def add_light(self, light: Light) -> None:
        if light.id in self.lights:
            raise ValueError(f"Light already exists: {light.id!r}")
        self.lights[light.id] = light
        self._adj[light.id] = set()

    def add_edge(self, u: LightId, v: LightId) -> None:
        if u == v:
            raise ValueError("Self-loops are not supported")
        if u not in self.lights or v not in self.lights:
            raise KeyError(f"Both endpoints must exist (u={u!r}, v={v!r})")
        self._adj[u].add(v)
        self._adj[v].add(u)

    def edges(self) -> Iterator[Tuple[LightId, LightId]]:
        """Yield undirected edges once (u < v)."""
        for u, nbs in self._adj.items():
            for v in nbs:
                if u < v:
                    yield (u, v)

    def __len__(self) -> int:
        return len(self.lights)


def build_ring_graph(num_lights: int, *, radius: float | None = None) -> Graph:
    """Place `num_lights` lights on a circle and connect each to its ring neighbours."""
    if num_lights < 3:
        raise ValueError(f"A ring needs at least 3 lights, got {num_lights}")

    r = radius if radius is not None else max(1.0, float(num_lights) / (2.0 * math.pi))

    g = Graph()
    for i in range(num_lights):
        # Light 0 at the top, increasing clockwise.
        theta = math.pi / 2.0 - 2.0 * math.pi * float(i) / float(num_lights)
        g.add_light(Light(id=i, pos=(r * math.cos(theta), r * math.sin(theta), 0.0), data={"button": i}))
    for i in range(num_lights):
        g.add_edge(i, (i + 1) % num_lights)
    return g
