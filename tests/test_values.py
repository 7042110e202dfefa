from __future__ import annotations

from textarea_engine.buffer import Position, Range


def make_range(a: tuple[int, int], b: tuple[int, int]) -> Range:
    return Range(Position(*a), Position(*b))


def test_position_ordering_is_row_major() -> None:
    assert Position(0, 9).is_before(Position(1, 0))
    assert Position(2, 1).is_after(Position(2, 0))
    assert Position(1, 1).equals(Position(1, 1))
    assert sorted([Position(1, 0), Position(0, 5), Position(0, 1)]) == [
        Position(0, 1),
        Position(0, 5),
        Position(1, 0),
    ]


def test_position_str() -> None:
    assert str(Position(3, 4)) == "(3, 4)"


def test_range_normalizes_backward_input() -> None:
    span = make_range((2, 3), (0, 1))

    assert span.start == Position(0, 1)
    assert span.end == Position(2, 3)
    assert span.start_row_col() == (0, 1)
    assert span.end_row_col() == (2, 3)


def test_range_contains_is_inclusive() -> None:
    span = make_range((0, 2), (1, 3))

    assert span.contains(Position(0, 2))
    assert span.contains(Position(1, 3))
    assert span.contains(Position(0, 50))
    assert not span.contains(Position(0, 1))
    assert not span.contains(Position(1, 4))


def test_range_empty_and_single_line() -> None:
    assert make_range((1, 1), (1, 1)).is_empty()
    assert make_range((1, 1), (1, 4)).is_single_line()
    assert not make_range((1, 1), (2, 0)).is_single_line()
