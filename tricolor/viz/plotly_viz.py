from __future__ import annotations

from pathlib import Path as FilePath
from typing import Dict, Optional, Sequence

from ..path import NO_BUTTON, Path
from ..ring import build_ring_graph
from ..state import Color, State


_COLOR_HEX: Dict[Color, str] = {
    Color.OFF: "#7f7f7f",  # gray
    Color.RED: "#d62728",  # red
    Color.GREEN: "#2ca02c",  # green
}

_PRESSED_OUTLINE = "#1f77b4"  # blue


def build_plotly_figure(
    states: Sequence[State],
    *,
    pushed: Optional[Sequence[int]] = None,
    title: str = "Tricolor",
):
    """Draw each state as a ring of lights, one concentric ring per step.

    The first state is the innermost ring. `pushed[i]` is the button pressed to
    reach `states[i]` (NO_BUTTON for the start); that light gets an outline.
    """
    import plotly.graph_objects as go

    if not states:
        raise ValueError("Nothing to draw: no states given")
    num_lights = states[0].num_lights
    base = build_ring_graph(num_lights, radius=1.0)

    traces = []
    for depth, state in enumerate(states):
        scale = 1.0 + depth
        button = pushed[depth] if pushed is not None else NO_BUTTON

        ex, ey = [], []
        for u, v in base.edges():
            pu = base.lights[u].pos
            pv = base.lights[v].pos
            ex += [pu[0] * scale, pv[0] * scale, None]
            ey += [pu[1] * scale, pv[1] * scale, None]
        traces.append(
            go.Scatter(
                x=ex,
                y=ey,
                mode="lines",
                line=dict(width=1, color="rgba(160,160,160,0.5)"),
                hoverinfo="none",
                showlegend=False,
            )
        )

        lx, ly, ltext, lcolor, lsize, loutline = [], [], [], [], [], []
        for light_id, light in base.lights.items():
            color = state.lights[light_id]
            lx.append(light.pos[0] * scale)
            ly.append(light.pos[1] * scale)
            ltext.append(f"step={depth}<br>light={light_id}<br>color={color.name}")
            lcolor.append(_COLOR_HEX[color])
            lsize.append(14 if light_id == button else 10)
            loutline.append(3 if light_id == button else 0)
        traces.append(
            go.Scatter(
                x=lx,
                y=ly,
                mode="markers",
                marker=dict(size=lsize, color=lcolor, line=dict(width=loutline, color=_PRESSED_OUTLINE)),
                text=ltext,
                hoverinfo="text",
                name=f"{'start' if depth == 0 else f'push {button}'}: {state.printable_state()}",
            )
        )

    fig = go.Figure(data=traces)
    fig.update_layout(
        title=title,
        xaxis=dict(visible=False),
        yaxis=dict(visible=False, scaleanchor="x", scaleratio=1),
        margin=dict(l=0, r=0, t=40, b=0),
    )
    return fig


def build_path_figure(path: Path, *, title: str = "Tricolor"):
    steps = path.steps()
    return build_plotly_figure(
        [step.state for step in steps],
        pushed=[step.pushed for step in steps],
        title=title,
    )


def write_plotly_html(
    path: Path,
    *,
    out_path: str | FilePath,
    title: str = "Tricolor",
) -> FilePath:
    out_path = FilePath(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fig = build_path_figure(path, title=title)
    fig.write_html(str(out_path), include_plotlyjs="cdn", full_html=True)
    return out_path
