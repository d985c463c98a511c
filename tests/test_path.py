from __future__ import annotations

from tricolor.path import NO_BUTTON, PathArena
from tricolor.state import state_from_string


def test_root_prints_blank_button():
    root = PathArena().root(state_from_string("XXX"))
    assert root.pushed == NO_BUTTON
    assert root.prev is None
    assert root.depth == 0
    assert root.printable_path() == [" : XXX"]
    assert root.buttons() == []


def test_next_skips_duplicate_siblings():
    # On three lights every button touches every light.
    start = state_from_string("XXX")
    root = PathArena().root(start)
    visited = {start}
    children = root.next(visited)
    assert [c.pushed for c in children] == [0]
    assert children[0].state == state_from_string("RRR")
    assert visited == {start, state_from_string("RRR")}


def test_next_is_in_button_order_and_marks_visited(five_off):
    arena = PathArena()
    root = arena.root(five_off)
    visited = {five_off}
    children = root.next(visited)
    assert [c.pushed for c in children] == [0, 1, 2, 3, 4]
    assert all(c.prev.index == root.index for c in children)
    assert len(visited) == 6
    assert len(arena) == 6
    assert root.next(visited) == []


def test_printable_path_is_root_first(five_off):
    root = PathArena().root(five_off)
    visited = {five_off}
    first = root.next(visited)[0]
    second = first.next(visited)[3]
    assert second.depth == 2
    assert second.buttons() == [0, 3]
    assert second.printable_path() == [
        " : XXXXX",
        "0: RRXXR",
        "3: RRRRG",
    ]
