import random

import pytest

from cpkit.indexed_set import IndexedSet


def test_against_python_set():
    rng = random.Random(3)
    n = 5000
    s = IndexedSet(n)
    ref = set()
    for _ in range(3000):
        i = rng.randrange(n)
        if rng.random() < 0.6:
            s.insert(i)
            ref.add(i)
        else:
            s.erase(i)
            ref.discard(i)
        q = rng.randrange(-5, n + 5)
        assert s.find_next(q) == min((x for x in ref if x >= q), default=n)
        assert s.find_prev(q) == max((x for x in ref if x <= q), default=-1)
    assert list(s.iter_range(0, n)) == sorted(ref)


def test_build_from_values():
    vals = [i % 3 == 0 for i in range(200)]
    s = IndexedSet(200, vals)
    assert list(s.iter_range(10, 20)) == [12, 15, 18]
    assert 99 in s and 100 not in s
    t = IndexedSet(200, lambda i: i % 3 == 0)
    assert list(t.iter_range(0, 200)) == list(s.iter_range(0, 200))


def test_empty_set_queries():
    s = IndexedSet(0)
    assert s.find_next(0) == 0
    assert s.find_prev(0) == -1


def test_out_of_range_insert():
    with pytest.raises(IndexError):
        IndexedSet(10).insert(10)