"""Sparse tables and disjoint sparse tables for static range queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Sequence, Union

Combine = Callable[[Any, Any], Any]


@dataclass(frozen=True)
class Block:
    """The block ``[idx, idx + 2**dist)`` of a sparse table."""

    dist: int
    idx: int

    def child(self, right: bool) -> "Block":
        return Block(self.dist - 1, self.idx + ((1 << (self.dist - 1)) if right else 0))

    def range(self) -> tuple[int, int]:
        return self.idx, self.idx + (1 << self.dist)


class SparseTable:
    """``table[Block(k, i)]`` combines ``values[i : i + 2**k]``."""

    def __init__(self, values: Sequence[Any], combine: Combine) -> None:
        if not values:
            raise ValueError("sparse table needs at least one value")
        self.combine = combine
        n = len(values)
        self._data: list[list[Any]] = [list(values)]
        for k in range(1, n.bit_length()):
            prev, half = self._data[-1], 1 << (k - 1)
            self._data.append(
                [combine(prev[u], prev[u + half]) for u in range(n - (1 << k) + 1)]
            )

    def __len__(self) -> int:
        return len(self._data[0])

    def __getitem__(self, block: Union[Block, tuple[int, int]]) -> Any:
        dist, idx = (block.dist, block.idx) if isinstance(block, Block) else block
        return self._data[dist][idx]

    def _check(self, lo: int, hi: int) -> None:
        if not 0 <= lo < hi <= len(self):
            raise ValueError(f"invalid range [{lo}, {hi})")

    def cover(self, lo: int, hi: int) -> tuple[Block, Block]:
        """Two possibly overlapping blocks covering ``[lo, hi)``."""
        self._check(lo, hi)
        k = (hi - lo).bit_length() - 1
        return Block(k, lo), Block(k, hi - (1 << k))

    def query(self, lo: int, hi: int) -> Any:
        """Combine over ``[lo, hi)`` for an idempotent ``combine``."""
        a, b = self.cover(lo, hi)
        return self.combine(self[a], self[b])

    def blocks(self, lo: int, hi: int) -> Iterator[Block]:
        """Disjoint blocks exactly covering ``[lo, hi)``, left to right."""
        self._check(lo, hi)
        k = hi - lo
        for j in range(k.bit_length()):
            if (k >> j) & 1:
                yield Block(j, lo)
                lo += 1 << j

    def reverse_blocks(self, lo: int, hi: int) -> Iterator[Block]:
        """Disjoint blocks exactly covering ``[lo, hi)``, right to left."""
        self._check(lo, hi)
        k = hi - lo
        for j in range(k.bit_length() - 1, -1, -1):
            if (k >> j) & 1:
                hi -= 1 << j
                yield Block(j, hi)

    def fold(self, lo: int, hi: int) -> Any:
        """Combine over ``[lo, hi)`` in order; needs only associativity."""
        it = self.blocks(lo, hi)
        acc = self[next(it)]
        for b in it:
            acc = self.combine(acc, self[b])
        return acc


class DisjointSparseTable:
    """Answers associative range queries on ``[lo, hi]`` with one combine."""

    def __init__(self, values: Sequence[Any], combine: Combine) -> None:
        if not values:
            raise ValueError("table needs at least one value")
        self.combine = combine
        n = len(values)
        self._values = list(values)
        levels = (n - 1).bit_length() + 1 if n > 1 else 1
        self._rows: list[list[Any]] = [self._values]
        for h in range(1, levels):
            row: list[Any] = [None] * n
            span = 1 << h
            half = span >> 1
            for i in range(half, n, span):
                row[i - 1] = values[i - 1]
                for j in range(i - 2, i - half - 1, -1):
                    row[j] = combine(values[j], row[j + 1])
                row[i] = values[i]
                for j in range(i + 1, min(i + half, n)):
                    row[j] = combine(row[j - 1], values[j])
            self._rows.append(row)

    @staticmethod
    def depth(lo: int, hi: int) -> int:
        """Level at which ``lo`` and ``hi`` fall on opposite sides of a midpoint."""
        return (lo ^ hi).bit_length()

    def query(self, lo: int, hi: int) -> Any:
        """Combine ``values[lo..hi]`` inclusive."""
        if not 0 <= lo <= hi < len(self._values):
            raise ValueError(f"invalid range [{lo}, {hi}]")
        if lo == hi:
            return self._values[lo]
        row = self._rows[self.depth(lo, hi)]
        return self.combine(row[lo], row[hi])