import pytest

from utilkit.index import (
    index,
    index_all,
    index_all_func,
    index_func,
    last_index,
    last_index_func,
)


def eq(a, b):
    return a == b


INDEX_CASES = [
    ([1, 1, 3, 5], 1, 0),
    ([], 1, -1),
    (None, 1, -1),
    ([1, 4, 6], 7, -1),
    ([1, 3, 4, 2, 0], 0, 4),
]

LAST_INDEX_CASES = [
    ([1, 1, 3, 5], 1, 1),
    ([], 1, -1),
    (None, 1, -1),
    ([1, 4, 6], 7, -1),
    ([0, 1, 3, 4, 2, 0], 0, 5),
]

INDEX_ALL_CASES = [
    ([1, 1, 3, 5], 1, [0, 1]),
    ([], 1, []),
    ([1, 4, 6], 7, []),
    ([0, 1, 3, 4, 2, 0], 0, [0, 5]),
]


@pytest.mark.parametrize("src, dst, want", INDEX_CASES)
def test_index(src, dst, want):
    assert index(src, dst) == want


@pytest.mark.parametrize("src, dst, want", INDEX_CASES)
def test_index_func(src, dst, want):
    assert index_func(src, dst, eq) == want


@pytest.mark.parametrize("src, dst, want", LAST_INDEX_CASES)
def test_last_index(src, dst, want):
    assert last_index(src, dst) == want


@pytest.mark.parametrize("src, dst, want", LAST_INDEX_CASES)
def test_last_index_func(src, dst, want):
    assert last_index_func(src, dst, eq) == want


@pytest.mark.parametrize("src, dst, want", INDEX_ALL_CASES)
def test_index_all(src, dst, want):
    assert index_all(src, dst) == want


@pytest.mark.parametrize("src, dst, want", INDEX_ALL_CASES)
def test_index_all_func(src, dst, want):
    assert index_all_func(src, dst, eq) == want


def test_examples():
    assert index([1, 2, 3], 1) == 0
    assert index([1, 2, 3], 4) == -1
    assert index_func([1, 2, 3], 1, eq) == 0
    assert index_func([1, 2, 3], 4, eq) == -1
    assert index_all([1, 2, 3, 4, 5, 3, 9], 3) == [2, 5]
    assert index_all([1, 2, 3], 4) == []
    assert index_all_func([1, 2, 3, 4, 5, 3, 9], 3, eq) == [2, 5]
    assert index_all_func([1, 2, 3], 4, eq) == []


def test_last_index_func_passes_dst_first():
    calls = []

    def record(a, b):
        calls.append((a, b))
        return False

    assert last_index_func([10, 20], 5, record) == -1
    assert calls == [(5, 20), (5, 10)]