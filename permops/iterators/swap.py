from __future__ import annotations

from typing import Optional

from permops.iterators.base import MutationIterator
from permops.permutation import Permutation


class AdjacentSwapIterator(MutationIterator):
    """Neighbors obtained by swapping positions i and i+1."""

    def __init__(self, p: Permutation):
        super().__init__(p, len(p) >= 2)
        self._i = -1
        self._x = -1

    def _advance(self) -> None:
        p = self._p
        if self._i >= 0:
            p.swap(self._i, self._i + 1)
        self._i += 1
        p.swap(self._i, self._i + 1)
        if self._i == len(p) - 2:
            self._has_more = False

    def set_savepoint(self) -> None:
        self._x = self._i

    def _restore(self) -> None:
        if self._x != self._i:
            if self._i >= 0:
                self._p.swap(self._i, self._i + 1)
            if self._x >= 0:
                self._p.swap(self._x, self._x + 1)


class SwapIterator(MutationIterator):
    """
    Neighbors obtained by swapping positions i < j, optionally with j - i <= window.

    Args:
        p: The permutation to walk.
        window: Maximum distance between the swapped positions, unlimited if None.
    """

    def __init__(self, p: Permutation, window: Optional[int] = None):
        if window is not None and window <= 0:
            raise ValueError("window must be positive")
        super().__init__(p, len(p) >= 2)
        self._w = len(p) if window is None else window
        self._i = self._j = 0
        self._x = self._y = 0

    def _advance(self) -> None:
        p = self._p
        if self._j > self._i:
            p.swap(self._i, self._j)
        self._j += 1
        if self._j > min(len(p) - 1, self._i + self._w):
            self._i += 1
            self._j = self._i + 1
        p.swap(self._i, self._j)
        if self._i == len(p) - 2:
            self._has_more = False

    def set_savepoint(self) -> None:
        self._x, self._y = self._i, self._j

    def _restore(self) -> None:
        if (self._i, self._j) != (self._x, self._y):
            if self._j > self._i:
                self._p.swap(self._i, self._j)
            if self._y > self._x:
                self._p.swap(self._x, self._y)


class WindowLimitedSwapIterator(SwapIterator):

    def __init__(self, p: Permutation, window: int):
        super().__init__(p, window)
