"""Prefix function (KMP failure function) and the automaton built on it."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Optional, Sequence


def prefix_function(s: Sequence[Any]) -> list[int]:
    """Return ``pi`` where ``pi[i]`` is the longest proper border of ``s[:i + 1]``."""
    n = len(s)
    if n == 0:
        return []
    pi = [0] * n
    j = 0
    for i in range(1, n):
        while j > 0 and s[i] != s[j]:
            j = pi[j - 1]
        if s[i] == s[j]:
            j += 1
        pi[i] = j
    return pi


def find_pos(
    w: Sequence[Any], s: Sequence[Any], pi: Optional[Sequence[int]] = None
) -> list[int]:
    """Start positions of every occurrence of ``s`` in ``w``.

    ``pi`` is the prefix function of ``s`` (or a :class:`PrefixAutomaton` of
    it); it is computed when not given.
    """
    n = len(s)
    if n == 0:
        raise ValueError("pattern must be non-empty")
    if pi is None:
        pi = prefix_function(s)
    res = []
    k = 0
    for i, c in enumerate(w):
        while k > 0 and (k == n or c != s[k]):
            k = pi[k - 1]
        if c == s[k]:
            k += 1
        if k == n:
            res.append(i - n + 1)
    return res


def count_prefix(pi: Sequence[int]) -> list[int]:
    """Number of occurrences of each prefix ``s[:i + 1]`` inside ``s``."""
    n = len(pi)
    res = [1] * n
    for i in range(n - 1, -1, -1):
        if pi[i] > 0:
            res[pi[i] - 1] += res[i]
    return res


def compress_prefix(pi: Sequence[int], n: Optional[int] = None) -> int:
    """Length of the shortest period that tiles ``s[:n + 1]`` exactly.

    ``n`` defaults to the last index; the whole length is returned when no
    shorter period divides it.
    """
    if n is None:
        n = len(pi) - 1
    if not 0 <= n < len(pi):
        raise IndexError(f"index {n} out of range")
    k = n + 1 - pi[n]
    return k if (n + 1) % k == 0 else n + 1


class PrefixAutomaton:
    """KMP automaton over an alphabet of ``states`` symbols.

    ``mapping`` sends each symbol to ``0 .. states - 1`` (identity by
    default). State ``i`` means the longest suffix read so far that is a
    prefix of the pattern has length ``i``; state ``len(s)`` is a full match.
    """

    def __init__(
        self,
        s: Sequence[Hashable],
        states: int,
        mapping: Optional[Callable[[Any], int]] = None,
    ) -> None:
        n = len(s)
        if n == 0:
            raise ValueError("pattern must be non-empty")
        if states <= 0:
            raise ValueError("number of symbols must be positive")
        self.num_states = states
        self._map: Callable[[Any], int] = mapping if mapping is not None else (lambda c: c)
        self._pi = prefix_function(s)
        table: list[list[int]] = []
        for i in range(n + 1):
            if i == n:
                table.append(list(table[self._pi[i - 1]]))
                continue
            mp = self._symbol(s[i])
            if i == 0:
                row = [0] * states
                row[mp] = 1
            else:
                row = list(table[self._pi[i - 1]])
                row[mp] = i + 1
            table.append(row)
        self._next = table

    def _symbol(self, ch: Any) -> int:
        mp = self._map(ch)
        if not 0 <= mp < self.num_states:
            raise ValueError(f"symbol {ch!r} maps outside the alphabet")
        return mp

    def next_state(self, state: int, ch: Any) -> int:
        """State reached from ``state`` after reading ``ch``."""
        return self._next[state][self._symbol(ch)]

    def __getitem__(self, i: int) -> int:
        return self._pi[i]

    def __len__(self) -> int:
        return len(self._pi)