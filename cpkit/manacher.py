"""Palindrome radii of a sequence by Manacher's algorithm."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class Manacher(Sequence):
    """Palindrome radii for every centre of ``s``.

    Entry ``2*i`` is the odd radius centred at ``s[i]`` (palindrome length
    ``2*r + 1``); entry ``2*i + 1`` is the even radius centred between
    ``s[i]`` and ``s[i + 1]`` (length ``2*r``).
    """

    def __init__(self, s: Sequence[Any]) -> None:
        n = len(s)
        rad: list[int] = [0] * max(2 * n - 1, 0)
        lo = hi = -1
        for z in range(len(rad)):
            i = (z + 1) >> 1
            j = z >> 1
            p = 0 if i >= hi else min(hi - i, rad[((lo + hi) << 1) - z])
            while j + p + 1 < n and i - p - 1 >= 0 and s[j + p + 1] == s[i - p - 1]:
                p += 1
            if j + p > hi:
                lo, hi = i - p, j + p
            rad[z] = p
        self._rad = rad

    def __len__(self) -> int:
        return len(self._rad)

    def __getitem__(self, z):
        return self._rad[z]

    def radius(self, index: int, odd: bool = True) -> int:
        """Odd radius at ``index``, or even radius between ``index`` and ``index + 1``."""
        return self._rad[(index << 1) | (0 if odd else 1)]

    def is_palindrome(self, lo: int, hi: int) -> bool:
        """True if ``s[lo:hi]`` is a non-empty palindrome."""
        if lo >= hi:
            return False
        p = lo + hi - 1
        return hi - lo <= (self._rad[p] << 1) + ((p & 1) ^ 1)