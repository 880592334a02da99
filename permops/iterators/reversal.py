from __future__ import annotations

from typing import Optional

from permops.iterators.base import MutationIterator
from permops.permutation import Permutation


class _ReversalWalk(MutationIterator):
    """
    Enumerates reversals [i, j] with lo <= i < j <= hi and j - i <= window.

    Reversals are grouped by centre i + j. Entering a centre is one swap
    (span 1 for an odd centre, span 2 for an even one), growing the reversal
    outward by one on each side is one more swap, and leaving a centre costs
    one real reverse() back to the original.
    """

    def __init__(self, p: Permutation, lo: int, hi: int, window: int):
        super().__init__(p, hi - lo >= 1 and window >= 1)
        self._lo = lo
        self._hi = hi
        self._w = window
        self._i = self._j = 0
        self._x = self._y = 0

    def _can_grow(self, i: int, j: int) -> bool:
        return i > self._lo and j < self._hi and j - i + 2 <= self._w

    def _advance(self) -> None:
        p = self._p
        i, j = self._i, self._j
        if i < j and self._can_grow(i, j):
            i -= 1
            j += 1
        else:
            if i < j:
                p.reverse(i, j)
                # even centres start with a span of 2, skipped for a window of 1
                centre = i + j + (1 if self._w >= 2 else 2)
            else:
                centre = 2 * self._lo + 1
            i = (centre - 1) // 2
            j = centre - i
        p.swap(i, j)
        self._i, self._j = i, j
        if not self._can_grow(i, j) and i + j >= 2 * self._hi - 1:
            self._has_more = False

    def set_savepoint(self) -> None:
        self._x, self._y = self._i, self._j

    def _restore(self) -> None:
        if (self._i, self._j) != (self._x, self._y):
            if self._i < self._j:
                self._p.reverse(self._i, self._j)
            if self._x < self._y:
                self._p.reverse(self._x, self._y)


class ReversalIterator(_ReversalWalk):
    """All n(n-1)/2 reversals of a sub-range, optionally limited to j - i <= window."""

    def __init__(self, p: Permutation, window: Optional[int] = None):
        if window is not None and window <= 0:
            raise ValueError("window must be positive")
        n = len(p)
        super().__init__(p, 0, n - 1, n if window is None else window)


class WindowLimitedReversalIterator(ReversalIterator):

    def __init__(self, p: Permutation, window: int):
        super().__init__(p, window)


class TwoChangeIterator(_ReversalWalk):
    """
    The n(n-3)/2 two-changes of a permutation viewed as a cyclic tour.

    Every two-change is one reversal [i, j] with 0 <= i < j <= n-2 and
    j - i <= n-3. Reversals touching the last position are equivalent to
    one of these on the cycle. Empty for n < 4.
    """

    def __init__(self, p: Permutation):
        n = len(p)
        super().__init__(p, 0, n - 2, n - 3)
