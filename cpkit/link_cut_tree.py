"""Splay-tree based link-cut trees, also usable as implicit sequences.

Each :class:`LinkCutNode` is a splay-tree node. Used on its own, a splay tree
holds a sequence ordered by in-order position, with split, merge and
reversal. Used as a link-cut tree, the splay trees hold preferred paths of a
rooted forest and ``par`` doubles as the path-parent pointer of a splay root.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

Direction = Callable[["LinkCutNode"], int]
Predicate = Callable[["LinkCutNode"], bool]


class LinkCutNode:
    """A splay-tree node with a pending-reversal flag and a subtree size.

    Subclasses may keep aggregates by overriding :meth:`update` and lazy tags
    by overriding :meth:`push`, calling the base versions.
    """

    def __init__(self) -> None:
        self.c: list[Optional[LinkCutNode]] = [None, None]
        self.par: Optional[LinkCutNode] = None
        self.flip = False
        self.sz = 1

    def update(self) -> None:
        """Recompute the size from the children and fix their parent links."""
        self.sz = 1
        for child in self.c:
            if child is not None:
                child.par = self
                self.sz += child.sz

    def reverse(self) -> None:
        """Reverse the sequence held by this subtree."""
        self.flip = not self.flip
        self.c[0], self.c[1] = self.c[1], self.c[0]
        self.update()

    def push(self) -> None:
        """Pass a pending reversal from this node down to its children."""
        if self.flip:
            for child in self.c:
                if child is not None:
                    child.reverse()
            self.flip = False


def _left_size(v: LinkCutNode) -> int:
    left = v.c[0]
    return left.sz if left is not None else 0


def is_root(v: Optional[LinkCutNode]) -> bool:
    """True if ``v`` is the root of its splay tree."""
    if v is None:
        return False
    p = v.par
    return p is None or (p.c[0] is not v and p.c[1] is not v)


def rotate(v: LinkCutNode) -> None:
    """Rotate ``v`` above its parent."""
    u = v.par
    u.push()
    v.push()
    v.par = u.par
    grand = v.par
    if grand is not None:
        if grand.c[0] is u:
            grand.c[0] = v
        if grand.c[1] is u:
            grand.c[1] = v
    if v is u.c[0]:
        u.c[0] = v.c[1]
        v.c[1] = u
    else:
        u.c[1] = v.c[0]
        v.c[0] = u
    u.update()
    v.update()


def splay(v: Optional[LinkCutNode]) -> None:
    """Bring ``v`` to the root of its splay tree."""
    if v is None:
        return
    while not is_root(v):
        u = v.par
        if not is_root(u):
            if (u.c[0] is v) ^ (u.par.c[0] is u):
                rotate(v)
            else:
                rotate(u)
        rotate(v)


def find(v: Optional[LinkCutNode], direction: Direction) -> tuple[Optional[LinkCutNode], int]:
    """Descend from the root of ``v``'s splay tree guided by ``direction``.

    ``direction(node)`` returns -1 to go left, 1 to go right and 0 to stop.
    Returns the node reached (now splayed to the root) and the last direction.
    """
    if v is None:
        return None, 0
    splay(v)
    while True:
        v.push()
        d = direction(v)
        if d == 0:
            break
        u = v.c[0] if d == -1 else v.c[1]
        if u is None:
            break
        v = u
    splay(v)
    return v, d


def find_first(v: Optional[LinkCutNode]) -> Optional[LinkCutNode]:
    return find(v, lambda _: -1)[0]


def find_last(v: Optional[LinkCutNode]) -> Optional[LinkCutNode]:
    return find(v, lambda _: 1)[0]


def find_implicit(v: Optional[LinkCutNode], k: int) -> Optional[LinkCutNode]:
    """Return the node at position ``k`` of ``v``'s sequence, or None."""

    def direction(u: LinkCutNode) -> int:
        nonlocal k
        left = u.c[0]
        if left is not None:
            if left.sz > k:
                return -1
            k -= left.sz
        if k == 0:
            return 0
        k -= 1
        return 1

    node, d = find(v, direction)
    return node if d == 0 else None


def find_pos(v: LinkCutNode) -> int:
    """Position of ``v`` in its sequence."""
    splay(v)
    return _left_size(v)


def find_root(v: Optional[LinkCutNode]) -> Optional[LinkCutNode]:
    """Splay ``v`` and return it as the root of its splay tree."""
    splay(v)
    return v


def split(
    v: Optional[LinkCutNode], is_right: Predicate
) -> tuple[Optional[LinkCutNode], Optional[LinkCutNode]]:
    """Split into the prefix where ``is_right`` is false and the rest."""
    if v is None:
        return None, None
    v, d = find(v, lambda u: -1 if is_right(u) else 1)
    v.push()
    if d == -1:
        u = v.c[0]
        if u is None:
            return None, v
        v.c[0] = None
        u.par = v.par
        u = find_last(u)
        v.par = u
        v.update()
        return u, v
    u = v.c[1]
    if u is None:
        return v, None
    v.c[1] = None
    v.update()
    return v, u


def split_implicit(
    v: Optional[LinkCutNode], k: int
) -> tuple[Optional[LinkCutNode], Optional[LinkCutNode]]:
    """Split so that the left part holds the first ``k`` nodes."""

    def is_right(u: LinkCutNode) -> bool:
        nonlocal k
        hold = _left_size(u) + 1
        if k < hold:
            return True
        k -= hold
        return False

    return split(v, is_right)


def merge(v: Optional[LinkCutNode], u: Optional[LinkCutNode]) -> Optional[LinkCutNode]:
    """Concatenate the sequences of ``v`` and ``u``; return the new root."""
    if v is None:
        return u
    if u is None:
        return v
    v = find_last(v)
    splay(u)
    v.push()
    v.c[1] = u
    v.update()
    return v


def count_left(v: Optional[LinkCutNode], is_right: Predicate) -> int:
    """Number of nodes before the first one where ``is_right`` holds."""
    if v is None:
        return 0
    u, d = find(v, lambda w: -1 if is_right(w) else 1)
    return _left_size(u) + (d == 1)


def insert(
    root: Optional[LinkCutNode], v: LinkCutNode, is_right: Predicate
) -> Optional[LinkCutNode]:
    """Insert ``v`` before the first node where ``is_right`` holds."""
    left, right = split(root, is_right)
    return merge(left, merge(v, right))


def erase(v: LinkCutNode) -> Optional[LinkCutNode]:
    """Remove ``v`` from its sequence and return the root of what remains."""
    splay(v)
    v.push()
    x, y = v.c
    v.c[0] = v.c[1] = None
    z = merge(x, y)
    if z is not None:
        z.par = v.par
    v.par = None
    v.push()
    v.update()
    return z


def next_node(v: LinkCutNode) -> Optional[LinkCutNode]:
    """The node after ``v`` in its sequence, or None."""
    splay(v)
    v.push()
    if v.c[1] is None:
        return None
    v = v.c[1]
    while v.c[0] is not None:
        v.push()
        v = v.c[0]
    splay(v)
    return v


def previous_node(v: LinkCutNode) -> Optional[LinkCutNode]:
    """The node before ``v`` in its sequence, or None."""
    splay(v)
    v.push()
    if v.c[0] is None:
        return None
    v = v.c[0]
    while v.c[1] is not None:
        v.push()
        v = v.c[1]
    splay(v)
    return v


def size(v: Optional[LinkCutNode]) -> int:
    """Number of nodes in ``v``'s splay tree."""
    splay(v)
    return v.sz if v is not None else 0


def dfs_implicit(
    v: Optional[LinkCutNode],
    f: Callable[[int, LinkCutNode], None],
    offset: int = 0,
) -> None:
    """Call ``f(position, node)`` for every node below ``v``, parents first."""
    stack = [(v, offset)]
    while stack:
        node, base = stack.pop()
        if node is None:
            continue
        node.push()
        left, right = node.c
        cur = base + (left.sz if left is not None else 0)
        f(cur, node)
        stack.append((right, cur + 1))
        stack.append((left, base))


def _build_range(nodes: Sequence[LinkCutNode], lo: int, hi: int) -> Optional[LinkCutNode]:
    if hi < lo:
        return None
    mid = (lo + hi) >> 1
    node = nodes[mid]
    node.c[0] = _build_range(nodes, lo, mid - 1)
    node.c[1] = _build_range(nodes, mid + 1, hi)
    node.update()
    return node


def build(nodes: Sequence[LinkCutNode]) -> int:
    """Arrange ``nodes`` into a balanced splay tree in order; return the root's index."""
    n = len(nodes)
    _build_range(nodes, 0, n - 1)
    return (n - 1) >> 1


def expose(v: LinkCutNode) -> None:
    """Make the path from the tree root to ``v`` preferred, with ``v`` at its splay root."""
    r: Optional[LinkCutNode] = None
    u: Optional[LinkCutNode] = v
    while u is not None:
        splay(u)
        u.push()
        u.c[1] = r
        u.update()
        r = u
        u = u.par
    splay(v)


def find_lct_root(v: LinkCutNode) -> LinkCutNode:
    """Root of the represented tree containing ``v``."""
    expose(v)
    return find_first(v)


def make_lct_root(v: Optional[LinkCutNode]) -> None:
    """Re-root the represented tree at ``v``."""
    if v is None:
        return
    expose(v)
    v.reverse()


def link(u: LinkCutNode, v: LinkCutNode) -> bool:
    """Re-root ``v``'s tree at ``v`` and attach it below ``u``; False if already joined."""
    if u is v:
        return False
    make_lct_root(v)
    expose(u)
    if v.par is not None:
        return False
    v.par = u
    return True


def link_root(u: LinkCutNode, v: LinkCutNode) -> bool:
    """Attach the tree root ``v`` below ``u``; False if ``v`` is not a root or already joined."""
    if u is v:
        return False
    splay(v)
    if v.par is not None or v.c[0] is not None:
        return False
    expose(u)
    if v.par is not None:
        return False
    v.par = u
    return True


def cut(u: LinkCutNode, v: LinkCutNode) -> bool:
    """Remove the edge between ``u`` and ``v`` in either direction, if present."""
    if u is v:
        return False
    expose(u)
    splay(v)
    if v.par is not u:
        u, v = v, u
        expose(u)
        splay(v)
        if v.par is not u:
            return False
    v.par = None
    return True


def cut_root(u: LinkCutNode, v: LinkCutNode) -> bool:
    """Remove the edge from ``u`` down to its child ``v``."""
    if u is v:
        return False
    expose(u)
    splay(v)
    if v.par is not u:
        return False
    v.par = None
    return True


def cut_from_parent(v: LinkCutNode) -> bool:
    """Detach ``v`` from its parent; False if ``v`` is a root."""
    expose(v)
    v.push()
    left = v.c[0]
    if left is None:
        return False
    left.par = None
    v.c[0] = None
    v.update()
    return True


def same_comp(v: LinkCutNode, u: LinkCutNode) -> bool:
    """True if distinct nodes ``v`` and ``u`` are in the same tree."""
    expose(v)
    expose(u)
    return v.par is not None


def find_lca(v: LinkCutNode, u: LinkCutNode) -> Optional[LinkCutNode]:
    """Lowest common ancestor, or None if the nodes are in different trees."""
    if u is v:
        return u
    expose(v)
    expose(u)
    if v.par is None:
        return None
    splay(v)
    if v.par is None:
        return v
    return v.par


def is_ancestor(v: LinkCutNode, u: LinkCutNode) -> bool:
    """True if ``v`` is an ancestor of (or equal to) ``u``."""
    if u is v:
        return True
    expose(u)
    splay(v)
    return v.par is None and u.par is not None