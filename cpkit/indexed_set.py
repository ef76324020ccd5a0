"""Set of small integers backed by a 64-ary bitset tree."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional, Union

_LOG = 6
_MASK = 63

Values = Union[Callable[[int], object], Iterable[object], None]


def _low_bit(x: int) -> int:
    return (x & -x).bit_length() - 1


class IndexedSet:
    """A set over ``range(n)`` with fast successor and predecessor queries."""

    def __init__(self, n: int, values: Values = None) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self.n = n
        self._data: list[list[int]] = []
        m = n
        while True:
            size = (m + 63) >> _LOG
            self._data.append([0] * size)
            m = size
            if m <= 1:
                break
        if values is not None:
            flags = (values(i) for i in range(n)) if callable(values) else values
            for i, flag in enumerate(flags):
                if i >= n:
                    break
                if flag:
                    self.insert(i)

    def _check(self, i: int) -> None:
        if not 0 <= i < self.n:
            raise IndexError(f"index {i} out of range")

    def insert(self, i: int) -> None:
        self._check(i)
        for level in self._data:
            level[i >> _LOG] |= 1 << (i & _MASK)
            i >>= _LOG

    def erase(self, i: int) -> None:
        self._check(i)
        carry = 0
        for level in self._data:
            w = i >> _LOG
            level[w] = (level[w] & ~(1 << (i & _MASK))) | (carry << (i & _MASK))
            carry = int(level[w] != 0)
            i >>= _LOG

    def __contains__(self, i: int) -> bool:
        if not 0 <= i < self.n:
            return False
        return bool((self._data[0][i >> _LOG] >> (i & _MASK)) & 1)

    def find_next(self, i: int) -> int:
        """Smallest member ``>= i``, or ``n`` if there is none."""
        i = max(i, 0)
        for h, level in enumerate(self._data):
            if (i >> _LOG) >= len(level):
                break
            d = level[i >> _LOG] >> (i & _MASK)
            if not d:
                i = (i >> _LOG) + 1
                continue
            i += _low_bit(d)
            for g in range(h - 1, -1, -1):
                i <<= _LOG
                i += _low_bit(self._data[g][i >> _LOG])
            return i
        return self.n

    def find_prev(self, i: int) -> int:
        """Largest member ``<= i``, or ``-1`` if there is none."""
        i = min(i, self.n - 1)
        for h, level in enumerate(self._data):
            if i < 0:
                break
            d = level[i >> _LOG] & ((2 << (i & _MASK)) - 1)
            if not d:
                i = (i >> _LOG) - 1
                continue
            i = (i & ~_MASK) + d.bit_length() - 1
            for g in range(h - 1, -1, -1):
                i <<= _LOG
                i += self._data[g][i >> _LOG].bit_length() - 1
            return i
        return -1

    def iter_range(self, lo: int, hi: int) -> Iterator[int]:
        """Yield members in ``[lo, hi)`` in increasing order."""
        x = self.find_next(lo)
        while x < hi:
            yield x
            x = self.find_next(x + 1)