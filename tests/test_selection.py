import pytest

from hexwordpuzzle.controller.selection import SelectionTracker, GestureState
from hexwordpuzzle.model.geometry_primitives import Point, hexagon_vertices
from hexwordpuzzle.model.ring import Cell, Ring, layout


def make_ring(*cells, size=10.0):
    """Ring from (letter, x, y) triples, for placing cells exactly."""
    built = tuple(
        Cell(letter=letter, center=Point(x, y), boundary=hexagon_vertices(Point(x, y), size))
        for letter, x, y in cells
    )
    return Ring(cells=built, center=Point(0, 0), radius=0.0, hexagon_size=size, width=500, height=500)


@pytest.fixture
def abc_ring():
    return layout(["A", "B", "C"], 300, 300)


def drag(tracker, *points):
    first, *rest = points
    tracker.begin_gesture(first.x, first.y)
    for p in rest:
        tracker.continue_gesture(p.x, p.y)
    tracker.end_gesture()


def test_revisiting_a_cell_is_ignored(abc_ring, listener):
    tracker = SelectionTracker(abc_ring, listener)
    a, b, _ = abc_ring

    drag(tracker, a.center, b.center, a.center)

    assert listener.events == [
        ("started",),
        ("updated", "AB"),
        ("updated", "AB"),
        ("selected", "AB"),
    ]


def test_press_alone_does_not_report_an_update(abc_ring, listener):
    tracker = SelectionTracker(abc_ring, listener)
    a = abc_ring[0]

    tracker.begin_gesture(a.center.x, a.center.y)

    assert listener.events == [("started",)]
    assert tracker.path == (0,)
    assert tracker.current_word == "A"


def test_gesture_touching_nothing_selects_no_word(abc_ring, listener):
    tracker = SelectionTracker(abc_ring, listener)

    drag(tracker, abc_ring.center, Point(151, 151))

    assert listener.events == [("started",)]
    assert listener.words() == []


def test_update_fires_every_sample_once_path_is_non_empty(abc_ring, listener):
    tracker = SelectionTracker(abc_ring, listener)
    a = abc_ring[0]

    tracker.begin_gesture(abc_ring.center.x, abc_ring.center.y)
    tracker.continue_gesture(abc_ring.center.x, abc_ring.center.y)
    tracker.continue_gesture(a.center.x, a.center.y)
    tracker.continue_gesture(abc_ring.center.x, abc_ring.center.y)

    assert listener.events == [("started",), ("updated", "A"), ("updated", "A")]


def test_cells_need_not_be_adjacent(abc_ring, listener):
    tracker = SelectionTracker(abc_ring, listener)
    a, b, c = abc_ring

    drag(tracker, c.center, a.center, b.center)

    assert listener.words() == ["CAB"]


def test_path_has_no_duplicates_over_many_revisits(abc_ring):
    tracker = SelectionTracker(abc_ring)
    a, b, c = abc_ring

    tracker.begin_gesture(a.center.x, a.center.y)
    for p in [b.center, a.center, b.center, c.center, a.center, c.center] * 5:
        tracker.continue_gesture(p.x, p.y)

    assert tracker.path == (0, 1, 2)
    assert len(set(tracker.path)) == len(tracker.path)


def test_one_sample_hitting_two_cells_appends_in_ring_order(listener):
    # Expanded boxes of the two cells overlap between x=100 and x=130.
    ring = make_ring(("Y", 130, 100), ("X", 100, 100))
    tracker = SelectionTracker(ring, listener)

    tracker.begin_gesture(120, 100)
    tracker.end_gesture()

    assert listener.words() == ["YX"]


def test_hit_uses_expanded_bounding_box(listener):
    ring = make_ring(("Q", 100, 100))
    tracker = SelectionTracker(ring, listener)

    # Hexagon spans x 90..110 and y ~91.3..108.7; the margin adds 20 on every side.
    tracker.begin_gesture(129.9, 128.6)
    assert tracker.path == (0,)

    tracker.begin_gesture(130.0, 100)
    assert tracker.path == ()


def test_end_clears_selection_and_returns_to_idle(abc_ring, listener):
    tracker = SelectionTracker(abc_ring, listener)
    a, b, _ = abc_ring

    tracker.begin_gesture(a.center.x, a.center.y)
    tracker.continue_gesture(b.center.x, b.center.y)
    assert tracker.state is GestureState.DRAGGING
    assert tracker.is_selected(0) and tracker.is_selected(1)
    assert tracker.polyline == (a.center, b.center)

    tracker.end_gesture()

    assert tracker.state is GestureState.IDLE
    assert tracker.path == ()
    assert tracker.polyline == ()
    assert not any(tracker.is_selected(i) for i in range(len(abc_ring)))


def test_word_selected_fires_once_per_gesture(abc_ring, listener):
    tracker = SelectionTracker(abc_ring, listener)
    a, b, _ = abc_ring

    drag(tracker, a.center, b.center)
    tracker.end_gesture()

    assert listener.words() == ["AB"]


def test_new_press_starts_a_fresh_path(abc_ring, listener):
    tracker = SelectionTracker(abc_ring, listener)
    a, b, c = abc_ring

    tracker.begin_gesture(a.center.x, a.center.y)
    tracker.continue_gesture(b.center.x, b.center.y)
    tracker.begin_gesture(c.center.x, c.center.y)
    tracker.end_gesture()

    assert listener.words() == ["C"]


def test_moves_and_release_without_press_are_ignored(abc_ring, listener):
    tracker = SelectionTracker(abc_ring, listener)
    a = abc_ring[0]

    tracker.continue_gesture(a.center.x, a.center.y)
    tracker.end_gesture()

    assert listener.events == []
    assert tracker.path == ()


def test_cancel_reports_no_word(abc_ring, listener):
    tracker = SelectionTracker(abc_ring, listener)
    a = abc_ring[0]

    tracker.begin_gesture(a.center.x, a.center.y)
    tracker.cancel_gesture()
    tracker.end_gesture()

    assert listener.words() == []
    assert tracker.state is GestureState.IDLE


def test_relayout_of_same_letters_keeps_the_path(abc_ring, listener):
    tracker = SelectionTracker(abc_ring, listener)
    a = abc_ring[0]
    tracker.begin_gesture(a.center.x, a.center.y)

    bigger = layout(["A", "B", "C"], 600, 600)
    tracker.set_ring(bigger)
    b = bigger[1]
    tracker.continue_gesture(b.center.x, b.center.y)
    tracker.end_gesture()

    assert listener.words() == ["AB"]


def test_new_letters_drop_the_gesture(abc_ring, listener):
    tracker = SelectionTracker(abc_ring, listener)
    a = abc_ring[0]
    tracker.begin_gesture(a.center.x, a.center.y)

    tracker.set_ring(layout(["X", "Y"], 300, 300))
    tracker.end_gesture()

    assert tracker.state is GestureState.IDLE
    assert listener.words() == []


def test_works_without_listener_or_ring():
    tracker = SelectionTracker()
    tracker.begin_gesture(10, 10)
    tracker.continue_gesture(20, 20)
    tracker.end_gesture()
    assert tracker.current_word == ""
    assert tracker.polyline == ()
