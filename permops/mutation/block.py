from __future__ import annotations

from typing import Optional, Tuple

from permops.iterators.block_interchange import BlockInterchangeIterator
from permops.iterators.block_move import BlockMoveIterator, WindowLimitedBlockMoveIterator
from permops.mutation.base import IterableMutationOperator, UndoableMutationOperator, _check_window
from permops.permutation import Permutation
from permops.rng import SplittableGenerator, ensure_generator


class BlockMoveMutation(UndoableMutationOperator, IterableMutationOperator):
    """
    Removes a random block and reinserts it at a random earlier or later index.

    A sorted triple (low, mid, top) drawn from [0, n] describes the move: the
    block [mid, top] is reinserted at low. A top of n collapses onto mid, so
    that single element blocks are as likely as any other block.
    """

    def __init__(self, rng: Optional[SplittableGenerator] = None):
        self._rng = ensure_generator(rng)
        self._indexes = (0, 0, 0)

    def _generate_indexes(self, n: int) -> Tuple[int, int, int]:
        low, mid, top = self._rng.next_int_triple(n + 1, sort=True)
        if top == n:
            top = mid
        return low, mid, top

    def mutate(self, c: Permutation) -> None:
        if len(c) >= 2:
            self._indexes = low, mid, top = self._generate_indexes(len(c))
            c.remove_and_insert_block(mid, top - mid + 1, low)

    def undo(self, c: Permutation) -> None:
        if len(c) >= 2:
            low, mid, top = self._indexes
            c.remove_and_insert_block(low, top - mid + 1, mid)

    def split(self) -> "BlockMoveMutation":
        return BlockMoveMutation(rng=self._rng.split())

    def iterator(self, p: Permutation) -> BlockMoveIterator:
        return BlockMoveIterator(p)


class WindowLimitedBlockMoveMutation(BlockMoveMutation):
    """
    Block move whose touched range, from the insertion point to the end of
    the block, spans at most ``window`` positions beyond its first index.
    """

    def __init__(self, window: Optional[int] = None, rng: Optional[SplittableGenerator] = None):
        super().__init__(rng)
        self._window = _check_window(window)

    def _generate_indexes(self, n: int) -> Tuple[int, int, int]:
        if self._window >= n:
            return super()._generate_indexes(n)
        low, mid, top = self._rng.next_windowed_int_triple(n + 1, self._window + 1, sort=True)
        if top == n or top - low > self._window:
            top = mid
        return low, mid, top

    def split(self) -> "WindowLimitedBlockMoveMutation":
        return WindowLimitedBlockMoveMutation(self._window, rng=self._rng.split())

    def iterator(self, p: Permutation) -> WindowLimitedBlockMoveIterator:
        return WindowLimitedBlockMoveIterator(p, min(self._window, max(len(p), 1)))


class BlockInterchangeMutation(UndoableMutationOperator, IterableMutationOperator):
    """
    Exchanges two random non-overlapping blocks [h, i] and [j, k].

    Every h <= i < j <= k is equally likely. Four sorted distinct values
    a < b < c < d from [0, n+2) map one to one onto (a, b-1, c-1, d-2).
    """

    def __init__(self, rng: Optional[SplittableGenerator] = None):
        self._rng = ensure_generator(rng)
        self._blocks = (0, 0, 0, 0)

    def mutate(self, c: Permutation) -> None:
        if len(c) >= 2:
            a, b, d1, d2 = sorted(int(v) for v in self._rng.sample(len(c) + 2, 4))
            self._blocks = h, i, j, k = a, b - 1, d1 - 1, d2 - 2
            c.swap_blocks(h, i, j, k)

    def undo(self, c: Permutation) -> None:
        if len(c) >= 2:
            h, i, j, k = self._blocks
            c.swap_blocks(h, h + k - j, k - i + h, k)

    def split(self) -> "BlockInterchangeMutation":
        return BlockInterchangeMutation(rng=self._rng.split())

    def iterator(self, p: Permutation) -> BlockInterchangeIterator:
        return BlockInterchangeIterator(p)
