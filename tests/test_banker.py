import pytest

from oslabs.banker import BankerAlgorithm


def _labels(seq):
    return " ".join(f"P{i}" for i in seq)


def _make(processes, resources, available, maximum, allocation):
    banker = BankerAlgorithm(processes, resources)
    banker.set_available(available)
    banker.set_maximum(maximum)
    banker.set_allocation(allocation)
    return banker


@pytest.fixture
def textbook():
    return _make(
        5,
        3,
        [3, 3, 2],
        [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]],
        [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]],
    )


def test_safe_sequence_0():
    banker = _make(
        5,
        3,
        [3, 3, 2],
        [[7, 4, 3], [3, 3, 2], [7, 0, 2], [2, 2, 2], [4, 3, 3]],
        [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]],
    )
    assert banker.is_safe() is True
    assert _labels(banker.safe_sequence()) == "P1 P2 P3 P4 P0"


def test_unsafe_1():
    banker = _make(
        5,
        4,
        [2, 3, 3, 2],
        [[6, 0, 1, 2], [2, 7, 5, 0], [2, 3, 5, 4], [1, 6, 5, 3], [1, 6, 5, 6]],
        [[0, 0, 1, 2], [1, 0, 0, 0], [1, 3, 5, 4], [0, 6, 3, 3], [0, 0, 1, 4]],
    )
    assert banker.is_safe() is False
    assert banker.safe_sequence() == []


def test_unsafe_2():
    banker = _make(
        5,
        4,
        [1, 0, 2, 0],
        [[1, 1, 2, 1], [2, 1, 3, 1], [1, 0, 1, 2], [3, 1, 1, 0], [2, 0, 2, 1]],
        [[0, 0, 1, 0], [1, 0, 1, 0], [0, 0, 0, 1], [2, 0, 0, 0], [0, 0, 1, 0]],
    )
    assert banker.is_safe() is False


def test_safe_sequence_3():
    banker = _make(
        5,
        4,
        [2, 1, 3, 2],
        [[5, 2, 4, 3], [1, 3, 2, 2], [3, 1, 3, 3], [2, 4, 3, 1], [4, 2, 3, 4]],
        [[1, 0, 1, 1], [0, 1, 1, 0], [1, 1, 0, 1], [1, 2, 1, 0], [2, 0, 1, 1]],
    )
    assert banker.is_safe() is True
    assert _labels(banker.safe_sequence()) == "P2 P3 P4 P0 P1"


def test_safe_sequence_4():
    banker = _make(
        6,
        5,
        [3, 2, 2, 1, 3],
        [
            [6, 4, 3, 2, 5],
            [2, 1, 2, 3, 1],
            [5, 3, 3, 1, 2],
            [1, 3, 2, 4, 0],
            [4, 2, 1, 0, 3],
            [3, 3, 3, 3, 3],
        ],
        [
            [2, 1, 0, 1, 1],
            [1, 0, 1, 1, 0],
            [1, 1, 2, 0, 1],
            [0, 1, 1, 2, 0],
            [2, 1, 0, 0, 1],
            [1, 1, 1, 0, 1],
        ],
    )
    assert banker.is_safe() is True
    assert _labels(banker.safe_sequence()) == "P4 P2 P0 P1 P3 P5"


def test_request_single_valid(textbook):
    assert textbook.is_safe() is True
    assert textbook.request_resources(0, [1, 1, 0]) is True
    assert textbook.is_safe() is True
    assert _labels(textbook.safe_sequence()) == "P1 P3 P4 P0 P2"


def test_request_multiple_valid(textbook):
    assert textbook.request_resources(0, [1, 1, 0]) is True
    assert textbook.request_resources(4, [1, 0, 0]) is True
    assert textbook.is_safe() is True
    assert _labels(textbook.safe_sequence()) == "P1 P3 P4 P0 P2"


def test_request_one_invalid(textbook):
    assert textbook.request_resources(0, [1, 1, 0]) is True
    assert textbook.request_resources(2, [10, 0, 0]) is False
    assert textbook.is_safe() is True
    assert _labels(textbook.safe_sequence()) == "P1 P3 P4 P0 P2"


def test_request_multiple_invalid():
    banker = _make(
        6,
        6,
        [10, 9, 2, 1, 0, 0],
        [
            [2, 2, 2, 2, 0, 0],
            [3, 3, 3, 3, 0, 0],
            [1, 1, 1, 1, 0, 0],
            [4, 4, 4, 4, 0, 0],
            [2, 2, 2, 2, 0, 0],
            [1, 0, 0, 0, 0, 0],
        ],
        [
            [1, 1, 1, 1, 0, 0],
            [2, 2, 2, 2, 0, 0],
            [1, 0, 0, 0, 0, 0],
            [3, 3, 3, 3, 0, 0],
            [1, 1, 1, 1, 0, 0],
            [0, 0, 0, 0, 0, 0],
        ],
    )
    assert banker.is_safe() is True
    assert banker.request_resources(0, [2, 0, 0, 0, 0, 0]) is False
    assert banker.request_resources(5, [10, 0, 0, 0, 0, 0]) is False
    assert banker.request_resources(0, [-1, 0, 0, 0, 0, 0]) is False
    assert banker.request_resources(0, [1, 1]) is False


def test_initial_state_9():
    banker = _make(
        5,
        4,
        [1, 1, 1, 1],
        [[2, 2, 2, 2], [3, 3, 3, 3], [1, 1, 1, 1], [4, 4, 4, 4], [2, 2, 2, 2]],
        [[1, 1, 1, 1], [1, 1, 1, 1], [2, 0, 0, 0], [1, 1, 1, 1], [1, 1, 0, 0]],
    )
    assert banker.is_safe() is True


def test_edge_case():
    banker = _make(1, 1, [1], [[1]], [[0]])
    assert banker.is_safe() is True
    assert _labels(banker.safe_sequence()) == "P0"


def test_request_leaves_state_unchanged(textbook):
    before = (list(textbook.available), [list(r) for r in textbook.need])
    textbook.request_resources(1, [1, 0, 2])
    assert (textbook.available, textbook.need) == before


def test_request_bad_process_index(textbook):
    assert textbook.request_resources(-1, [0, 0, 0]) is False
    assert textbook.request_resources(5, [0, 0, 0]) is False


def test_need_derived_from_allocation(textbook):
    assert textbook.need[0] == [7, 4, 3]
    assert textbook.need[2] == [6, 0, 0]