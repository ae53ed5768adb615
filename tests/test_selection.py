import pytest
from hypothesis import given, strategies as st

from shamir_recover import DuplicateIndex, InsufficientShares, InvalidThreshold, Point, select


def test_select_takes_smallest_indices_in_order():
    points = [Point(5, 50), Point(2, 20), Point(9, 90), Point(1, 10)]
    assert select(points, 3) == [Point(1, 10), Point(2, 20), Point(5, 50)]


def test_select_accepts_any_iterable():
    assert select((Point(x, x) for x in (3, 1, 2)), 2) == [Point(1, 1), Point(2, 2)]


def test_select_rejects_duplicate_index():
    with pytest.raises(DuplicateIndex) as exc:
        select([Point(1, 4), Point(2, 7), Point(1, 5)], 2)
    assert exc.value.index == 1


def test_select_rejects_duplicate_even_with_equal_values():
    with pytest.raises(DuplicateIndex):
        select([Point(3, 9), Point(3, 9)], 1)


def test_select_insufficient_shares():
    with pytest.raises(InsufficientShares) as exc:
        select([Point(1, 1), Point(2, 2)], 3)
    assert exc.value.available == 2
    assert exc.value.required == 3


@pytest.mark.parametrize("k", [0, -1])
def test_select_rejects_non_positive_threshold(k):
    with pytest.raises(InvalidThreshold):
        select([Point(1, 1)], k)


@given(
    xs=st.lists(st.integers(min_value=1, max_value=10_000), min_size=1, max_size=30, unique=True),
    data=st.data(),
)
def test_select_is_independent_of_input_order(xs, data):
    points = [Point(x, x * 7 + 1) for x in xs]
    k = data.draw(st.integers(min_value=1, max_value=len(points)))
    shuffled = data.draw(st.permutations(points))
    chosen = select(shuffled, k)
    assert chosen == select(points, k)
    assert [p.x for p in chosen] == sorted(xs)[:k]
