from __future__ import annotations

from typing import Optional

from permops.iterators.base import _InsertionWalk
from permops.permutation import Permutation


class InsertionIterator(_InsertionWalk):
    """
    Neighbors obtained by removing one element and reinserting it elsewhere.

    Moving an element one position left or right is the same permutation
    as moving its neighbor the other way, so the unlimited neighborhood has
    (n-1)^2 distinct members.

    Args:
        p: The permutation to walk.
        window: Maximum distance between the removal and insertion points,
            unlimited if None.
    """

    def __init__(self, p: Permutation, window: Optional[int] = None):
        if window is not None and window <= 0:
            raise ValueError("window must be positive")
        super().__init__(p, len(p) >= 2, len(p) if window is None else window)
        self._x = self._y = 0

    def _advance(self) -> None:
        if self._next_insertion():
            self._has_more = False

    def set_savepoint(self) -> None:
        self._x, self._y = self._i, self._j

    def _restore(self) -> None:
        if (self._i, self._j) != (self._x, self._y):
            self._p.remove_and_insert(self._i, self._j)
            self._p.remove_and_insert(self._y, self._x)


class WindowLimitedInsertionIterator(InsertionIterator):

    def __init__(self, p: Permutation, window: int):
        super().__init__(p, window)
