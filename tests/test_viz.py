from __future__ import annotations

import pytest

from tricolor.solver import search
from tricolor.state import state_from_string
from tricolor.viz import build_path_figure, build_plotly_figure, write_plotly_html


def test_one_ring_per_step():
    path = search(state_from_string("XXXXX"), state_from_string("RRRRG"))
    fig = build_path_figure(path, title="demo")
    # an edge trace and a light trace for each of the three steps
    assert len(fig.data) == 6
    assert fig.layout.title.text == "demo"
    assert fig.data[1].name == "start: XXXXX"
    assert fig.data[5].name == "push 3: RRRRG"


def test_pressed_light_is_outlined():
    path = search(state_from_string("XXX"), state_from_string("RRR"))
    fig = build_path_figure(path)
    assert list(fig.data[1].marker.line.width) == [0, 0, 0]
    assert list(fig.data[3].marker.line.width) == [3, 0, 0]


def test_needs_states():
    with pytest.raises(ValueError):
        build_plotly_figure([])


def test_write_html(tmp_path):
    path = search(state_from_string("XXX"), state_from_string("GGG"))
    out = write_plotly_html(path, out_path=tmp_path / "nested" / "ring.html")
    assert out.exists()
    assert "<html" in out.read_text(encoding="utf-8")
