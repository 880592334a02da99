from __future__ import annotations

import logging
from typing import Optional

from permops.iterators.base import _InsertionWalk
from permops.permutation import Permutation


logger = logging.getLogger(__name__)


class BlockMoveIterator(_InsertionWalk):
    """
    Neighbors obtained by moving a contiguous block to a new position.

    State (i, j, s): the original permutation with the block of size s
    starting at j reinserted at i. A block move exchanges two adjacent
    blocks, so the neighborhood is enumerated by the size s of the smaller
    of the two:

    * s == 1 is the insertion walk.
    * for s >= 2, first the size s block sits on the right and moves left
      past a block of size >= s, then it sits on the left and moves right
      past a block of size > s.

    With a window w, the two exchanged blocks may cover at most w + 1
    positions in total.

    Args:
        p: The permutation to walk.
        window: Maximum span j + s - 1 - i of a move, unlimited if None.
    """

    def __init__(self, p: Permutation, window: Optional[int] = None):
        if window is not None and window <= 0:
            raise ValueError("window must be positive")
        n = len(p)
        w = n if window is None else window
        super().__init__(p, n >= 2, w)
        self._limit = w + 1
        self._max_s = min(n, self._limit) // 2
        self._s = 1
        self._next_s = 1
        self._x = self._y = 0
        self._z = 1

    def _advance(self) -> None:
        if self._next_s == 1:
            if self._next_insertion():
                self._end_phase()
            return
        p = self._p
        n = len(p)
        i, j, s = self._i, self._j, self._s
        if s != self._next_s:
            p.remove_and_insert_block(i, s, j)
            s = self._next_s
            j = n - s
            i = j - s
            p.remove_and_insert_block(j, s, i)
            logger.debug("block move phase for block size %d", s)
        elif j > i:
            if i > max(0, j - (self._limit - s)):
                i -= 1
                p.remove_and_insert(i, i + s)
            elif j > s:
                p.remove_and_insert_block(i, s, j)
                j -= 1
                i = j - s
                p.remove_and_insert_block(j, s, i)
            else:
                p.remove_and_insert_block(i, s, j)
                j = 0
                i = s + 1
                p.remove_and_insert_block(j, s, i)
        else:
            if i < min(n - s, j + self._limit - s):
                p.remove_and_insert(i + s, i)
                i += 1
            else:
                p.remove_and_insert_block(i, s, j)
                j += 1
                i = j + s + 1
                p.remove_and_insert_block(j, s, i)
        self._i, self._j, self._s = i, j, s
        if self._phase_finished():
            self._end_phase()

    def _phase_finished(self) -> bool:
        n = len(self._p)
        s = self._s
        if self._j > self._i:
            # right block moving left ends at (0, s), the other half exists
            # only if a block of size s + 1 fits beside it
            return self._i == 0 and self._j == s and 2 * s + 1 > min(n, self._limit)
        return self._i == n - s and self._j == n - 2 * s - 1

    def _end_phase(self) -> None:
        if self._next_s < self._max_s:
            self._next_s += 1
        else:
            self._has_more = False

    def set_savepoint(self) -> None:
        self._x, self._y, self._z = self._i, self._j, self._s

    def _restore(self) -> None:
        if (self._i, self._j, self._s) != (self._x, self._y, self._z):
            self._p.remove_and_insert_block(self._i, self._s, self._j)
            self._p.remove_and_insert_block(self._y, self._z, self._x)


class WindowLimitedBlockMoveIterator(BlockMoveIterator):

    def __init__(self, p: Permutation, window: int):
        super().__init__(p, window)
