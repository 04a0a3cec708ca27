import pytest

from algoshelf.binary_search import binary_search, binary_search_recursive

TEN = [0, 12, 23, 53, 66, 81, 244, 1244, 9929, 10121]
TWO = [0, 1]
ONE = [123]
THREE = [12, 34, 56]
FIVE = [12, 34, 56, 78, 90]


@pytest.mark.parametrize(
    "target, numbers, expected",
    [
        (23, TEN, 2),
        (0, TEN, 0),
        (10121, TEN, 9),
        (155, TEN, -1),
        (-1, TEN, -1),
        (10122, TEN, -1),
        (0, TWO, 0),
        (1, TWO, 1),
        (2, TWO, -1),
        (123, ONE, 0),
        (1, ONE, -1),
        (-45, ONE, -1),
        (12, THREE, 0),
        (34, THREE, 1),
        (56, THREE, 2),
        (999, THREE, -1),
        (12, FIVE, 0),
        (34, FIVE, 1),
        (56, FIVE, 2),
        (78, FIVE, 3),
        (90, FIVE, 4),
        (-1, FIVE, -1),
        (-45, FIVE, -1),
        (45, FIVE, -1),
        (999, FIVE, -1),
    ],
)
def test_binary_search(target, numbers, expected):
    assert binary_search(target, numbers) == expected


@pytest.mark.parametrize(
    "target, numbers, expected",
    [
        (23, TEN, 2),
        (0, TEN, 0),
        (10121, TEN, 9),
        (155, TEN, -1),
        (-1, TEN, -1),
        (10122, TEN, -1),
        (0, TWO, 0),
        (1, TWO, 1),
        (-1, TWO, -1),
        (2, TWO, -1),
        (123, ONE, 0),
        (1, ONE, -1),
        (12, THREE, 0),
        (34, THREE, 1),
        (56, THREE, 2),
        (0, THREE, -1),
        (5, THREE, -1),
        (44, THREE, -1),
        (999, THREE, -1),
        (12, FIVE, 0),
        (34, FIVE, 1),
        (56, FIVE, 2),
        (78, FIVE, 3),
        (90, FIVE, 4),
        (0, FIVE, -1),
        (27, FIVE, -1),
        (44, FIVE, -1),
        (999, FIVE, -1),
    ],
)
def test_binary_search_recursive(target, numbers, expected):
    assert binary_search_recursive(target, numbers, 0, len(numbers)) == expected


def test_recursive_default_bounds_match_iterative():
    for target in TEN + [-5, 100, 20000]:
        assert binary_search_recursive(target, TEN) == binary_search(target, TEN)


def test_empty_sequence():
    assert binary_search(1, []) == -1
    assert binary_search_recursive(1, []) == -1