"""Suffix arrays, an FM-index for pattern search and LCP queries."""

from __future__ import annotations

from itertools import pairwise
from typing import Optional, Sequence, Union

from cpkit.sparse_table import SparseTable

Text = Union[str, Sequence[int]]


def _codes(s: Text) -> list[int]:
    if isinstance(s, str):
        return [ord(c) for c in s]
    codes = list(s)
    for c in codes:
        if not isinstance(c, int) or c < 0:
            raise ValueError(f"symbols must be non-negative integers, got {c!r}")
    return codes


def suffix_array(s: Text) -> list[int]:
    """Start positions of the suffixes of ``s`` in lexicographic order.

    ``s`` is a string or a sequence of non-negative integers; a suffix that
    is a prefix of another sorts first.
    """
    codes = _codes(s)
    n = len(codes)
    if n == 0:
        return []
    rank = codes
    sa = list(range(n))
    k = 1
    while True:
        keys = [(rank[i], rank[i + k] if i + k < n else -1) for i in range(n)]
        sa.sort(key=keys.__getitem__)
        new_rank = [0] * n
        for prev, cur in pairwise(sa):
            new_rank[cur] = new_rank[prev] + (keys[prev] != keys[cur])
        rank = new_rank
        if rank[sa[-1]] == n - 1:
            return sa
        k <<= 1


class BurrowsWheeler:
    """FM-index of ``s`` built from its suffix array ``sa``.

    :meth:`find` returns a half-open range ``[lo, hi)`` of positions in
    ``sa`` whose suffixes start with the pattern.
    """

    def __init__(self, s: Text, sa: Sequence[int]) -> None:
        codes = _codes(s)
        if len(sa) != len(codes):
            raise ValueError("suffix array length does not match the text")
        n = len(codes)
        self.n = n
        self.sigma = max(codes) + 1 if codes else 0
        self.last = codes[-1] if codes else -1
        loc = [0] * (self.sigma + 1)
        occ = [[0] * self.sigma]
        for i in range(n):
            loc[codes[i] + 1] += 1
            row = list(occ[-1])
            if sa[i] != 0:
                row[codes[sa[i] - 1]] += 1
            occ.append(row)
        for i in range(1, len(loc)):
            loc[i] += loc[i - 1]
        self._loc = loc
        self._occ = occ

    def find(self, t: Text, lo: Optional[int] = None, hi: Optional[int] = None) -> tuple[int, int]:
        """Range of suffix-array positions matching ``t[lo:hi]``."""
        codes = _codes(t)
        if lo is None:
            lo = 0
        if hi is None:
            hi = len(codes)
        mi, ma = 0, self.n
        started = False
        for i in range(hi - 1, lo - 1, -1):
            if mi >= ma:
                break
            c = codes[i]
            if c >= self.sigma:
                return 0, 0
            base = self._loc[c]
            is_last = c == self.last
            mi = base + self._occ[mi][c] + int(is_last and started)
            ma = base + self._occ[ma][c] + int(is_last)
            started = True
        return mi, ma


class SuffixLcpArray:
    """Longest common prefixes between suffixes.

    ``lcp[i]`` is the LCP of the suffixes at ``sa[i]`` and ``sa[i + 1]``;
    ``rank[i]`` is the position of suffix ``i`` in ``sa``.
    """

    def __init__(self, s: Text, sa: Sequence[int], want_rmq: bool = False) -> None:
        codes = _codes(s)
        n = len(codes)
        if len(sa) != n:
            raise ValueError("suffix array length does not match the text")
        self.n = n
        self.rank = [0] * n
        for i, p in enumerate(sa):
            self.rank[p] = i
        self.lcp = [0] * max(n - 1, 0)
        k = 0
        for i in range(n):
            r = self.rank[i]
            if r == n - 1:
                k = 0
                continue
            j = sa[r + 1]
            while i + k < n and j + k < n and codes[i + k] == codes[j + k]:
                k += 1
            self.lcp[r] = k
            if k > 0:
                k -= 1
        self._rmq: Optional[SparseTable] = None
        if want_rmq and self.lcp:
            self._rmq = SparseTable(self.lcp, min)
        self._want_rmq = want_rmq

    def find_lcp(self, a: int, b: Optional[int] = None) -> int:
        """LCP of suffixes ``a`` and ``b``; with ``b`` omitted, of ``a`` and its successor in order."""
        if b is None:
            return self.lcp[self.rank[a]]
        if a == b:
            return self.n - a
        if not self._want_rmq:
            raise ValueError("range queries need the table built with want_rmq=True")
        ra, rb = sorted((self.rank[a], self.rank[b]))
        return self._rmq.query(ra, rb)

    def count_distinct(self) -> int:
        """Number of distinct non-empty substrings."""
        return (self.n + 1) * self.n // 2 - sum(self.lcp)