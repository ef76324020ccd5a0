"""Line container for the convex hull trick."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right


class LineContainer:
    """Holds lines ``a*x + b`` and answers max (or min) at a point."""

    def __init__(self, maximum: bool = True) -> None:
        self.maximum = maximum
        self._lines: list[list] = []  # [a, b, p]: p is where the next line takes over

    def __len__(self) -> int:
        return len(self._lines)

    @staticmethod
    def _divide(a, b):
        if isinstance(a, int) and isinstance(b, int):
            return a // b
        return a / b

    def _intersect(self, x: int, y: int) -> bool:
        lx = self._lines[x]
        if y == len(self._lines):
            lx[2] = math.inf
            return False
        ly = self._lines[y]
        if lx[0] == ly[0]:
            lx[2] = math.inf if lx[1] > ly[1] else -math.inf
        else:
            lx[2] = self._divide(ly[1] - lx[1], lx[0] - ly[0])
        return lx[2] >= ly[2]

    def add_line(self, a, b) -> None:
        if not self.maximum:
            a, b = -a, -b
        lines = self._lines
        y = bisect_right(lines, (a, b), key=lambda l: (l[0], l[1]))
        lines.insert(y, [a, b, 0])
        z = y + 1
        while self._intersect(y, z):
            del lines[z]
        x = y
        if x != 0:
            x -= 1
            if self._intersect(x, y):
                del lines[y]
                self._intersect(x, x + 1)
        while x != 0 and lines[x - 1][2] >= lines[x][2]:
            del lines[x]
            x -= 1
            self._intersect(x, x + 1)

    def query(self, x):
        """Return the best value of the stored lines at ``x``."""
        if not self._lines:
            raise ValueError("no lines in container")
        a, b, _ = self._lines[bisect_left(self._lines, x, key=lambda l: l[2])]
        value = a * x + b
        return value if self.maximum else -value