from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from permops.exceptions import IllegalStateError
from permops.permutation import Permutation


logger = logging.getLogger(__name__)


class MutationIterator(ABC):
    """
    Walks the neighborhood of a permutation in place.

    Each call to :meth:`next_mutant` turns the wrapped permutation into the
    next neighbor using one or two elementary operations. :meth:`rollback`
    returns it to the state recorded by :meth:`set_savepoint` (or to the
    original permutation when no savepoint was set) by applying the inverse
    of the current neighbor followed by the savepoint neighbor.

    The iterator also supports the Python iteration protocol, ``next(it)``
    advances and returns the live permutation.
    """

    def __init__(self, p: Permutation, has_more: bool):
        self._p = p
        self._has_more = has_more
        self._rolled = False

    def has_next(self) -> bool:
        return self._has_more and not self._rolled

    def next_mutant(self) -> None:
        """
        Mutates the permutation into the next neighbor.

        Raises:
            IllegalStateError: If the neighborhood is exhausted or rollback()
                has been called.
        """
        if self._rolled:
            raise IllegalStateError("illegal to call next_mutant after calling rollback")
        if not self._has_more:
            raise IllegalStateError("no neighbors left")
        self._advance()

    def rollback(self) -> None:
        """Restores the savepoint state. Only the first call has any effect."""
        if not self._rolled:
            self._rolled = True
            self._restore()
            logger.debug("%s rolled back", type(self).__name__)

    @abstractmethod
    def set_savepoint(self) -> None:
        """Records the current neighbor as the rollback target."""

    @abstractmethod
    def _advance(self) -> None:
        ...

    @abstractmethod
    def _restore(self) -> None:
        ...

    def __iter__(self) -> "MutationIterator":
        return self

    def __next__(self) -> Permutation:
        if not self.has_next():
            raise StopIteration
        self._advance()
        return self._p


class _InsertionWalk(MutationIterator):
    """
    Enumerates single element moves within a window.

    State (i, j) means the original permutation with the element from index j
    reinserted at index i. Rows with j > i come first and rows with j < i
    second. Moving one position along a row is a single swap, and only row
    ends pay for a remove_and_insert back to the original. An adjacent move
    (|i - j| == 1) equals the opposite adjacent move, so it appears only in
    the first pass.
    """

    def __init__(self, p: Permutation, has_more: bool, window: int):
        super().__init__(p, has_more)
        self._w = window
        self._i = 0
        self._j = 0

    def _next_insertion(self) -> bool:
        """Advances to the next move, returns True if it was the last one."""
        p = self._p
        n = len(p)
        w = self._w
        i, j = self._i, self._j
        if j >= i:
            j += 1
            if j > min(n - 1, i + w):
                p.remove_and_insert(i, j - 1)
                i += 1
                if i >= n - 1:
                    i, j = 2, 0
                    p.swap(1, 2)
                else:
                    j = i + 1
        else:
            j -= 1
            if j < max(0, i - w):
                p.remove_and_insert(i, j + 1)
                i += 1
                j = i - 2
                p.swap(i, i - 1)
        p.swap(i, j)
        self._i, self._j = i, j
        if n >= 3 and w >= 2:
            return i == n - 1 and j == max(0, n - 1 - w)
        return i == n - 2 and j == n - 1
