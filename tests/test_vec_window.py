import copy

import pytest

from souplang.vec_window import VecWindow

ITEMS = ["a", "b", "c", "d", "e"]


def test_whole_sequence_by_default():
    window = VecWindow(ITEMS)
    assert list(window) == ITEMS
    assert len(window) == len(ITEMS)
    assert (window.start, window.end) == (0, len(ITEMS))


@pytest.mark.parametrize("start,end", [(3, 2), (0, 6), (-1, 2)])
def test_invalid_bounds_raise(start, end):
    with pytest.raises(ValueError):
        VecWindow(ITEMS, start, end)


def test_empty_window():
    window = VecWindow([], 0, 0)
    assert window.is_empty()
    assert not window
    assert window.first() is None
    assert window.last() is None
    assert window.pop_first() is None
    assert window.pop_last() is None


def test_first_last_get():
    window = VecWindow(ITEMS, 1, 4)
    assert window.first() == "b"
    assert window.last() == "d"
    assert window.get(0) == "b"
    assert window.get(2) == "d"
    assert window.get(3) is None
    assert window.get(-1) is None


def test_pop_first_and_last_shrink():
    window = VecWindow(ITEMS)
    assert window.pop_first() == "a"
    assert window.pop_last() == "e"
    assert list(window) == ["b", "c", "d"]


def test_skip_and_take_clamp():
    window = VecWindow(ITEMS, 1, 4)
    assert list(window.skip(1)) == ["c", "d"]
    assert window.skip(100).is_empty()
    assert list(window.take(2)) == ["b", "c"]
    assert list(window.take(100)) == ["b", "c", "d"]
    assert list(window) == ["b", "c", "d"]


def test_shrink_only_inside():
    window = VecWindow(ITEMS, 1, 4)
    window.shrink_start_to(0)
    window.shrink_end_to(5)
    assert (window.start, window.end) == (1, 4)
    window.shrink_start_to(2)
    window.shrink_end_to(3)
    assert list(window) == ["c"]


def test_find_is_relative():
    window = VecWindow(ITEMS, 2, 5)
    assert window.find(lambda x: x == "d") == 1
    assert window.find(lambda x: x == "a") is None


def test_empty_method():
    window = VecWindow(ITEMS, 1, 3).empty()
    assert window.is_empty()
    assert window.items is ITEMS


def test_snip():
    window = VecWindow(ITEMS, 1, 5)
    left, right = window.snip(2)
    assert list(left) == ["b", "c"]
    assert list(right) == ["d", "e"]
    assert window.snip(4) is None


def test_split_drops_separators():
    items = [1, 0, 2, 3, 0, 4]
    parts = VecWindow(items).split(lambda x: x == 0)
    assert [list(p) for p in parts] == [[1], [2, 3], [4]]


def test_split_leading_separator_gives_empty_then_rest():
    items = [0, 1, 0, 2]
    parts = VecWindow(items).split(lambda x: x == 0)
    assert [list(p) for p in parts] == [[0, 1], [2]]


def test_split_including_start_keeps_separators():
    items = ["k", 1, "k", 2, "k"]
    parts = VecWindow(items).split_including_start(lambda x: x == "k")
    assert [list(p) for p in parts] == [["k", 1], ["k", 2], ["k"]]


def test_split_including_start_small_windows():
    assert VecWindow([]).split_including_start(lambda x: True) == []
    single = VecWindow(["x"])
    assert single.split_including_start(lambda x: True) == [single]


def test_split_parts_cover_window():
    items = list(range(10))
    window = VecWindow(items, 1, 9)
    parts = window.split_including_start(lambda x: x % 3 == 0)
    assert [x for part in parts for x in part] == list(window)


def test_split_once():
    items = [1, 2, 0, 3, 0]
    left, right = VecWindow(items).split_once(lambda x: x == 0)
    assert list(left) == [1, 2]
    assert list(right) == [3, 0]
    assert VecWindow(items).split_once(lambda x: x == 9) is None


def test_copy_is_independent():
    window = VecWindow(ITEMS)
    duplicate = copy.copy(window)
    duplicate.pop_first()
    assert window.first() == "a"
    assert duplicate.first() == "b"
    assert duplicate != window


def test_equality_and_repr():
    assert VecWindow(ITEMS, 1, 2) == VecWindow(ITEMS, 1, 2)
    assert repr(VecWindow(ITEMS, 0, 2)) == repr(["a", "b"])