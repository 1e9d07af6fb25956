import pytest

from hexwordpuzzle.controller.board import HexagonBoard
from hexwordpuzzle.errors import InvalidInputError


@pytest.fixture
def board(listener):
    board = HexagonBoard()
    board.set_listener(listener)
    return board


def test_letters_wait_for_a_surface(board):
    assert board.set_letters(["A", "B", "C"]) is None
    assert board.ring is None
    assert board.cells() == []

    ring = board.resize(300, 300)

    assert ring is board.ring
    assert ring.letters == ("A", "B", "C")
    assert ring.hexagon_size == pytest.approx(100.0)


def test_set_letters_is_idempotent(board):
    board.resize(300, 300)
    first = board.set_letters(["A", "B", "C"])
    second = board.set_letters(("A", "B", "C"))
    assert second is first


def test_resize_relays_out_the_same_letters(board):
    board.resize(300, 300)
    board.set_letters(["A", "B", "C"])
    before = board.ring

    after = board.resize(600, 450)

    assert after is not before
    assert after.letters == before.letters
    assert (after.width, after.height) == (600, 450)
    assert after.hexagon_size == pytest.approx(450 * 0.8 / (3 * 0.8))
    assert after.center.x == pytest.approx(300)
    assert after.center.y == pytest.approx(225)


def test_resize_to_the_same_size_keeps_the_ring(board):
    board.resize(300, 300)
    ring = board.set_letters(["A"])
    assert board.resize(300, 300) is ring


def test_empty_letters_rejected(board):
    board.resize(300, 300)
    with pytest.raises(InvalidInputError):
        board.set_letters([])


def test_failed_resize_keeps_previous_ring(board):
    board.resize(300, 300)
    ring = board.set_letters(["A", "B"])

    with pytest.raises(InvalidInputError):
        board.resize(0, 300)

    assert board.ring is ring
    assert board.size == (300, 300)


def test_new_letters_replace_the_ring(board):
    board.resize(300, 300)
    board.set_letters(["A", "B", "C"])
    ring = board.set_letters(["X", "Y"])
    assert ring.letters == ("X", "Y")
    assert len(board.cells()) == 2


def test_drag_reports_word_and_render_data(board, listener):
    board.resize(300, 300)
    board.set_letters(["A", "B", "C"])
    a, b, c = board.ring

    board.begin_gesture(a.center.x, a.center.y)
    board.continue_gesture(b.center.x, b.center.y)

    views = board.cells()
    assert [v.letter for v in views] == ["A", "B", "C"]
    assert [v.selected for v in views] == [True, True, False]
    assert views[0].boundary == a.boundary
    assert board.selection_polyline == (a.center, b.center)
    assert board.current_word == "AB"
    assert board.text_size == pytest.approx(100 / 1.8)

    board.continue_gesture(a.center.x, a.center.y)
    board.end_gesture()

    assert listener.words() == ["AB"]
    assert not any(v.selected for v in board.cells())
    assert board.selection_polyline == ()


def test_cancel_gesture(board, listener):
    board.resize(300, 300)
    board.set_letters(["A", "B", "C"])
    a = board.ring[0]

    board.begin_gesture(a.center.x, a.center.y)
    board.cancel_gesture()
    board.end_gesture()

    assert listener.words() == []
