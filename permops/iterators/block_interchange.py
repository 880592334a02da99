from __future__ import annotations

import logging
from enum import IntEnum

from permops.iterators.base import _InsertionWalk
from permops.permutation import Permutation


logger = logging.getLogger(__name__)


class Phase(IntEnum):
    INSERTION = 1        # adjacent blocks, one of them a single element
    ELEMENT_SWAP = 2     # non-adjacent single elements
    BLOCK_INSERTION = 3  # adjacent blocks, both of size >= 2
    BLOCK_SWAP = 4       # non-adjacent blocks, at least one of size >= 2


class BlockInterchangeIterator(_InsertionWalk):
    """
    Neighbors obtained by swap_blocks(h, i, j, k) for every h <= i < j <= k.

    The neighborhood is covered in four phases, each run to completion
    before the next one starts. The current neighbor is described by the
    phase and the indices (h, i, j, k):

    * INSERTION: element from j reinserted at i.
    * ELEMENT_SWAP: elements i and j swapped.
    * BLOCK_INSERTION: block [j, k] reinserted at i.
    * BLOCK_SWAP: swap_blocks(h, i, j, k).
    """

    def __init__(self, p: Permutation):
        n = len(p)
        super().__init__(p, n >= 2, n)
        self._pending = {
            Phase.INSERTION: n >= 2,
            Phase.ELEMENT_SWAP: n >= 3,
            Phase.BLOCK_INSERTION: n >= 4,
            Phase.BLOCK_SWAP: n >= 4,
        }
        self._phase = Phase.INSERTION
        self._h = 0
        self._k = 0
        self._next_s = 0
        self._saved = None

    def _end_phase(self, phase: Phase) -> None:
        self._pending[phase] = False
        self._has_more = any(self._pending.values())
        logger.debug("block interchange finished phase %s", phase.name)

    def _advance(self) -> None:
        if self._pending[Phase.INSERTION]:
            if self._next_insertion():
                self._end_phase(Phase.INSERTION)
        elif self._pending[Phase.ELEMENT_SWAP]:
            self._next_swap()
        elif self._pending[Phase.BLOCK_INSERTION]:
            self._next_block_insertion()
        else:
            self._next_block_swap()

    def set_savepoint(self) -> None:
        self._saved = (self._phase, self._h, self._i, self._j, self._k)

    def _restore(self) -> None:
        p = self._p
        h, i, j, k = self._h, self._i, self._j, self._k
        if self._phase == Phase.INSERTION:
            if i != j:
                p.remove_and_insert(i, j)
        elif self._phase == Phase.ELEMENT_SWAP:
            p.swap(i, j)
        elif self._phase == Phase.BLOCK_INSERTION:
            p.remove_and_insert_block(i, k - j + 1, j)
        else:
            p.swap_blocks(h, h + k - j, k - i + h, k)
        if self._saved is None:
            return
        phase, w, x, y, z = self._saved
        if phase == Phase.INSERTION:
            p.remove_and_insert(y, x)
        elif phase == Phase.ELEMENT_SWAP:
            p.swap(x, y)
        elif phase == Phase.BLOCK_INSERTION:
            p.remove_and_insert_block(y, z - y + 1, x)
        else:
            p.swap_blocks(w, x, y, z)

    # --- phase steps ---

    def _next_swap(self) -> None:
        p = self._p
        if self._phase == Phase.INSERTION:
            self._phase = Phase.ELEMENT_SWAP
            p.remove_and_insert(self._i, self._j)
            self._i = 0
            self._j = 2
        else:
            p.swap(self._i, self._j)
            self._j += 1
            if self._j >= len(p):
                self._i += 1
                self._j = self._i + 2
        p.swap(self._i, self._j)
        if self._i == len(p) - 3:
            self._end_phase(Phase.ELEMENT_SWAP)

    def _next_block_insertion(self) -> None:
        p = self._p
        n = len(p)
        i, j, k = self._i, self._j, self._k
        s = k - j + 1
        if self._phase == Phase.ELEMENT_SWAP:
            self._phase = Phase.BLOCK_INSERTION
            p.swap(i, j)
            self._next_s = 2
            j = n - 2
            k = j + 1
            i = j - 2
            p.remove_and_insert_block(j, 2, i)
            if i == 0:
                self._end_phase(Phase.BLOCK_INSERTION)
        elif s != self._next_s:
            p.remove_and_insert_block(i, s, j)
            s = self._next_s
            j = n - s
            i = j - s
            k = j + s - 1
            p.remove_and_insert_block(j, s, i)
            if i == 0:
                self._end_phase(Phase.BLOCK_INSERTION)
        elif j > i:
            if i > 0:
                i -= 1
                p.remove_and_insert(i, i + s)
            elif j > s:
                p.remove_and_insert_block(i, s, j)
                j -= 1
                k -= 1
                i = j - s
                p.remove_and_insert_block(j, s, i)
            else:
                p.remove_and_insert_block(i, s, j)
                j = 0
                k = s - 1
                i = s + 1
                p.remove_and_insert_block(j, s, i)
                if n == s + s + 1:
                    self._end_phase(Phase.BLOCK_INSERTION)
        else:
            if i < n - s:
                p.remove_and_insert(i + s, i)
                i += 1
            else:
                p.remove_and_insert_block(i, s, j)
                j += 1
                k += 1
                i = j + s + 1
                p.remove_and_insert_block(j, s, i)
                if i == n - s:
                    self._next_s += 1
        self._i, self._j, self._k = i, j, k

    def _next_block_swap(self) -> None:
        p = self._p
        n = len(p)
        h, i, j, k = self._h, self._i, self._j, self._k
        if self._phase == Phase.BLOCK_INSERTION:
            self._phase = Phase.BLOCK_SWAP
            p.remove_and_insert_block(i, k - j + 1, j)
            h, i, j, k = 0, 0, 2, 3
        else:
            p.swap_blocks(h, h + k - j, k - i + h, k)
            k += 1
            if k >= n:
                j += 1
                if j > n - 1 or (h == i and j == n - 1):
                    i += 1
                    if i > n - 3:
                        h += 1
                        i = h
                        j = i + 2
                        k = j + 1
                    else:
                        j = i + 2
                        k = j
                else:
                    k = j + 1 if h == i else j
        p.swap_blocks(h, i, j, k)
        self._h, self._i, self._j, self._k = h, i, j, k
        if h == n - 4 and h != i:
            self._end_phase(Phase.BLOCK_SWAP)
