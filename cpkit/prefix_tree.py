"""A trie counting the words that pass through and end at each node."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Iterable, Sequence, Union


@dataclass
class PrefixTreeNode:
    """A trie node.

    ``children[c]`` is the index of the child for symbol ``c`` or -1;
    ``num_starts`` counts stored words having this node's string as a
    prefix, ``num_ends`` counts stored words equal to it.
    """

    children: list[int]
    num_starts: int = 0
    num_ends: int = 0


@dataclass
class PrefixTree:
    """A trie over a fixed alphabet.

    ``alphabet`` is either a symbol count, with symbols being the integers
    ``0 .. alphabet - 1``, or a sequence of distinct symbols.
    """

    alphabet: Union[int, Sequence[Hashable]]
    nodes: list[PrefixTreeNode] = field(init=False)

    ROOT = 0

    def __post_init__(self) -> None:
        if isinstance(self.alphabet, int):
            if self.alphabet < 0:
                raise ValueError("alphabet size must be non-negative")
            self._size = self.alphabet
            self._index = None
        else:
            self._index = {sym: i for i, sym in enumerate(self.alphabet)}
            self._size = len(self._index)
        self.nodes = [self._new_node()]

    def _new_node(self) -> PrefixTreeNode:
        return PrefixTreeNode([-1] * self._size)

    def _slot(self, ch: Hashable) -> int:
        if self._index is None:
            if isinstance(ch, int) and 0 <= ch < self._size:
                return ch
        elif ch in self._index:
            return self._index[ch]
        raise IndexError(f"symbol {ch!r} is not in the alphabet")

    def __len__(self) -> int:
        return len(self.nodes)

    def next(self, node: int, ch: Hashable) -> int:
        """Child of ``node`` for ``ch``, created if missing."""
        slot = self._slot(ch)
        children = self.nodes[node].children
        if children[slot] < 0:
            children[slot] = len(self.nodes)
            self.nodes.append(self._new_node())
        return children[slot]

    def _walk(self, s: Iterable[Hashable], delta: int) -> int:
        r = self.ROOT
        for ch in s:
            self.nodes[r].num_starts += delta
            r = self.next(r, ch)
        self.nodes[r].num_starts += delta
        return r

    def insert(self, s: Iterable[Hashable]) -> int:
        """Add one occurrence of ``s``; return its node."""
        r = self._walk(s, 1)
        self.nodes[r].num_ends += 1
        return r

    def erase(self, s: Iterable[Hashable]) -> int:
        """Remove one occurrence of ``s``; return its node."""
        r = self._walk(s, -1)
        self.nodes[r].num_ends -= 1
        return r

    def find(self, s: Iterable[Hashable]) -> int:
        """Node of ``s``, or -1 if no stored path spells it."""
        r = self.ROOT
        for ch in s:
            r = self.nodes[r].children[self._slot(ch)]
            if r < 0:
                break
        return r

    def count_prefix(self, s: Iterable[Hashable], full: bool = True) -> int:
        """Number of stored words that are prefixes of ``s``.

        With ``full`` false, words equal to the whole of ``s`` are not counted.
        """
        r = self.ROOT
        count = 0
        for ch in s:
            count += self.nodes[r].num_ends
            r = self.nodes[r].children[self._slot(ch)]
            if r < 0:
                break
        if full and r >= 0:
            count += self.nodes[r].num_ends
        return count