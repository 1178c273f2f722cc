import pytest

from utilkit.setops import (
    diff_set,
    diff_set_func,
    intersect_set,
    intersect_set_func,
    symmetric_diff_set,
    symmetric_diff_set_func,
    union_set,
    union_set_func,
)


def eq(a, b):
    return a == b


DIFF_CASES = [
    ([1, 3, 5, 7], [1, 3, 5], [7]),
    ([1, 3, 5], [1, 3, 5, 7], []),
    ([1, 3, 5, 7, 7], [1, 3, 5], [7]),
    ([1, 1, 3, 5, 7], [1, 3, 5, 5], [7]),
]

INTERSECT_CASES = [
    ([1, 3, 5, 7], [1, 3, 5], [1, 3, 5]),
    ([], [1, 3, 5, 7], []),
    (None, [1, 3, 5, 7], []),
    ([1, 3, 5, 5], [1, 3, 5], [1, 3, 5]),
    ([1, 3, 5, 5], [], []),
    ([1, 3, 5, 5], None, []),
    ([1, 1, 3, 5, 7], [1, 3, 5, 5], [1, 3, 5]),
]

SYMMETRIC_CASES = [
    ([1, 2, 4, 3], [4, 5, 6, 1], [2, 3, 5, 6]),
    ([1, 2, 3, 4], [4, 5, 6, 1], [2, 3, 5, 6]),
    ([1, 1, 2, 3, 4], [4, 5, 6, 1, 7, 6], [3, 6, 7, 5, 2]),
    ([], [1], [1]),
    ([1, 3, 5], [2, 4], [1, 3, 2, 4, 5]),
    (None, None, []),
]

UNION_CASES = [
    ([1, 2, 3], [4, 5, 6, 1], [1, 2, 3, 4, 5, 6]),
    ([], [1, 3], [1, 3]),
    ([1, 3], [], [1, 3]),
    ([], [], []),
]


@pytest.mark.parametrize("src, dst, want", DIFF_CASES)
def test_diff_set(src, dst, want):
    assert sorted(diff_set(src, dst)) == sorted(want)


@pytest.mark.parametrize("src, dst, want", DIFF_CASES)
def test_diff_set_func(src, dst, want):
    assert sorted(diff_set_func(src, dst, eq)) == sorted(want)


@pytest.mark.parametrize("src, dst, want", INTERSECT_CASES)
def test_intersect_set(src, dst, want):
    assert sorted(intersect_set(src, dst)) == sorted(want)


@pytest.mark.parametrize("src, dst, want", INTERSECT_CASES)
def test_intersect_set_func(src, dst, want):
    assert sorted(intersect_set_func(src, dst, eq)) == sorted(want)


@pytest.mark.parametrize("src, dst, want", SYMMETRIC_CASES)
def test_symmetric_diff_set(src, dst, want):
    assert sorted(symmetric_diff_set(src, dst)) == sorted(want)


@pytest.mark.parametrize("src, dst, want", SYMMETRIC_CASES)
def test_symmetric_diff_set_func(src, dst, want):
    assert sorted(symmetric_diff_set_func(src, dst, eq)) == sorted(want)


@pytest.mark.parametrize("src, dst, want", UNION_CASES)
def test_union_set(src, dst, want):
    assert sorted(union_set(src, dst)) == sorted(want)


@pytest.mark.parametrize("src, dst, want", UNION_CASES)
def test_union_set_func(src, dst, want):
    assert sorted(union_set_func(src, dst, eq)) == sorted(want)


def test_examples():
    assert sorted(diff_set([1, 3, 2, 2, 4], [3, 4, 5, 6])) == [1, 2]
    assert diff_set_func([1, 3, 2, 2, 4], [3, 4, 5, 6], eq) == [1, 2]
    assert sorted(intersect_set([1, 2, 3, 3, 4], [1, 1, 3])) == [1, 3]
    assert intersect_set([1, 2, 3, 3, 4], [5, 7]) == []
    assert sorted(intersect_set_func([1, 2, 3, 3, 4], [1, 1, 3], eq)) == [1, 3]
    assert intersect_set_func([1, 2, 3, 3, 4], [5, 7], eq) == []
    assert sorted(symmetric_diff_set([1, 3, 4, 2], [2, 5, 7, 3])) == [1, 4, 5, 7]
    assert sorted(symmetric_diff_set_func([1, 3, 4, 2], [2, 5, 7, 3], eq)) == [1, 4, 5, 7]
    assert sorted(union_set([1, 3, 4, 5], [1, 4, 7])) == [1, 3, 4, 5, 7]
    assert sorted(union_set_func([1, 3, 4, 5], [1, 4, 7], eq)) == [1, 3, 4, 5, 7]


def test_func_variants_work_with_unhashable_elements():
    src = [{"id": 1}, {"id": 2}, {"id": 2}]
    dst = [{"id": 2}, {"id": 3}]
    same = lambda a, b: a["id"] == b["id"]  # noqa: E731
    assert diff_set_func(src, dst, same) == [{"id": 1}]
    assert intersect_set_func(src, dst, same) == [{"id": 2}]
    assert sorted(x["id"] for x in union_set_func(src, dst, same)) == [1, 2, 3]