import pytest

from aclib.algo.bisection import (
    bisect,
    bisect_left,
    bisect_left_by_key,
    bisect_right,
    bisect_right_by_key,
    bisect_unit,
    initial_indices,
    log_ceil,
    log_floor,
    sqrt_ceil,
    sqrt_floor,
)


def test_bisect_normal():
    a6 = [False, False, False, True, True, True]
    assert bisect(lambda i: a6[i], 0, len(a6)) == 3
    assert bisect(lambda i: a6[i], 0) == 3
    a7false = [False, False, False, False, True, True, True]
    assert bisect(lambda i: a7false[i], 0, len(a7false)) == 4
    assert bisect(lambda i: a7false[i], 0) == 4
    a7true = [False, False, False, True, True, True, True]
    assert bisect(lambda i: a7true[i], 0, len(a7true)) == 3
    assert bisect(lambda i: a7true[i], 0) == 3
    a8 = [False, False, False, False, True, True, True, True]
    assert bisect(lambda i: a8[i], 0, len(a8)) == 4
    assert bisect(lambda i: a8[i], 0) == 4


def test_initial_indices_unbounded_end():
    a6 = [False, False, False, True, True, True]
    assert initial_indices(lambda i: a6[i], 0) == (2, 4)


def test_initial_indices_bounded():
    assert initial_indices(lambda i: i > 3, 0, 10) == (0, 9)
    assert initial_indices(lambda i: i > 3, 0, 10, inclusive=True) == (0, 10)


def test_bisect_integer():
    def sq(x):
        return x * x

    assert bisect(lambda i: sq(i) > 100, 0) == 11
    assert bisect(lambda i: sq(i) > 100, None, 11) is None
    assert bisect(lambda i: sq(i) > 100, None, 11, inclusive=True) == 11
    assert bisect(lambda i: sq(i) > 100, None, 10, inclusive=True) is None
    assert bisect(lambda i: sq(i) >= 100, None, 10, inclusive=True) == 10

    def cube(x):
        return x * x * x

    assert bisect(lambda i: cube(i) > 100) == 5
    assert bisect(lambda i: cube(i) > -100) == -4


def test_bisect_float():
    def sq(x):
        return x * x

    r = bisect_unit(lambda i: sq(i) > 100.0, 0.05, 0.0)
    assert 10.0 <= r < 10.05
    assert bisect_unit(lambda i: sq(i) > 100.0, 0.05, None, 11.0) is None
    r = bisect_unit(lambda i: sq(i) > 100.0, 0.05, None, 11.0, inclusive=True)
    assert 10.0 <= r < 10.05
    assert bisect_unit(lambda i: sq(i) > 100.0, 0.05, None, 10.0, inclusive=True) is None
    r = bisect_unit(lambda i: sq(i) > 1000.0, 0.00000001)
    assert 31.622776 <= r < 31.622777


@pytest.mark.parametrize(
    "x, expected",
    [(0, 0), (1, 1), (2, 2), (3, 2), (4, 2), (5, 3), (10, 4), (99, 10), (100, 10), (101, 11)],
)
def test_sqrt_ceil(x, expected):
    assert sqrt_ceil(x) == expected


@pytest.mark.parametrize(
    "x, expected",
    [(0, 0), (1, 1), (2, 1), (3, 1), (4, 2), (5, 2), (10, 3), (99, 9), (100, 10), (101, 10)],
)
def test_sqrt_floor(x, expected):
    assert sqrt_floor(x) == expected


@pytest.mark.parametrize(
    "a, x, expected",
    [
        (2, 0, 0),
        (2, 1, 0),
        (2, 2, 1),
        (2, 3, 2),
        (2, 4, 2),
        (2, 5, 3),
        (2, 7, 3),
        (2, 8, 3),
        (2, 9, 4),
        (10, 9, 0),
        (10, 10, 1),
        (10, 11, 2),
    ],
)
def test_log_ceil(a, x, expected):
    assert log_ceil(a, x) == expected


@pytest.mark.parametrize(
    "a, x, expected",
    [
        (2, 0, 0),
        (2, 1, 0),
        (2, 2, 1),
        (2, 3, 1),
        (2, 4, 2),
        (2, 5, 2),
        (2, 7, 2),
        (2, 8, 3),
        (2, 9, 3),
        (10, 9, 0),
        (10, 10, 1),
        (10, 11, 1),
    ],
)
def test_log_floor(a, x, expected):
    assert log_floor(a, x) == expected


C = [(1, "one1"), (1, "one2"), (3, "three"), (5, "five"), (6, "six")]


def test_bisect_left():
    a = [1, 1, 2, 3, 5, 8, 13, 21, 34]
    assert bisect_left(a, 0) == 0
    assert bisect_left(a, 1) == 0
    assert bisect_left(a, 2) == 2
    assert bisect_left(a, 4) == 4
    assert bisect_left(a, 21) == 7
    assert bisect_left(a, 34) == 8
    assert bisect_left(a, 35) == 9
    b = [1.0, 1.0, 1.141, 1.732, 2.0, 2.236]
    assert bisect_left(b, 1.0) == 0
    assert bisect_left(b, 1.5) == 3
    assert bisect_left(b, 0.0) == 0
    assert bisect_left(b, 3.14) == 6

    def key(k):
        return k[0]

    assert bisect_left_by_key(C, 0, key) == 0
    assert bisect_left_by_key(C, 1, key) == 0
    assert bisect_left_by_key(C, 2, key) == 2
    assert bisect_left_by_key(C, 3, key) == 2
    assert bisect_left_by_key(C, 6, key) == 4
    assert bisect_left_by_key(C, 10000, key) == 5


def test_bisect_right():
    a = [1, 1, 2, 3, 5, 8, 13, 21, 34]
    assert bisect_right(a, 0) == 0
    assert bisect_right(a, 1) == 2
    assert bisect_right(a, 2) == 3
    assert bisect_right(a, 4) == 4
    assert bisect_right(a, 21) == 8
    assert bisect_right(a, 34) == 9
    assert bisect_right(a, 35) == 9
    b = [1.0, 1.0, 1.141, 1.732, 2.0, 2.236]
    assert bisect_right(b, 1.0) == 2
    assert bisect_right(b, 1.5) == 3
    assert bisect_right(b, 0.0) == 0
    assert bisect_right(b, 3.14) == 6

    def key(k):
        return k[0]

    assert bisect_right_by_key(C, 0, key) == 0
    assert bisect_right_by_key(C, 1, key) == 2
    assert bisect_right_by_key(C, 2, key) == 2
    assert bisect_right_by_key(C, 3, key) == 3
    assert bisect_right_by_key(C, 5, key) == 4
    assert bisect_right_by_key(C, 6, key) == 5
    assert bisect_right_by_key(C, 10000, key) == 5


def test_empty_bisect():
    assert bisect(lambda i: i * i >= 100, 10, 11) is None
    assert bisect(lambda i: i * i >= 100, 10, 10) is None
    assert bisect_left([], 10) == 0
    assert bisect_right([], 10) == 0
    assert bisect_left_by_key([], 10, lambda k: k[0]) == 0
    assert bisect_right_by_key([], 10, lambda k: k[0]) == 0