from __future__ import annotations

from typing import Optional

from permops.iterators.reversal import ReversalIterator, WindowLimitedReversalIterator
from permops.mutation.base import IterableMutationOperator, UndoableMutationOperator, _check_window
from permops.permutation import Permutation
from permops.rng import SplittableGenerator, ensure_generator


class ReversalMutation(UndoableMutationOperator, IterableMutationOperator):
    """Reverses a random sub-range. Reversing the same range again undoes it."""

    def __init__(self, rng: Optional[SplittableGenerator] = None):
        self._rng = ensure_generator(rng)
        self._i = 0
        self._j = 0

    def mutate(self, c: Permutation) -> None:
        if len(c) >= 2:
            self._i, self._j = self._rng.next_int_pair(len(c))
            c.reverse(self._i, self._j)

    def undo(self, c: Permutation) -> None:
        if len(c) >= 2:
            c.reverse(self._i, self._j)

    def split(self) -> "ReversalMutation":
        return ReversalMutation(rng=self._rng.split())

    def iterator(self, p: Permutation) -> ReversalIterator:
        return ReversalIterator(p)


class WindowLimitedReversalMutation(UndoableMutationOperator, IterableMutationOperator):

    def __init__(self, window: Optional[int] = None, rng: Optional[SplittableGenerator] = None):
        self._window = _check_window(window)
        self._rng = ensure_generator(rng)
        self._i = 0
        self._j = 0

    def mutate(self, c: Permutation) -> None:
        if len(c) >= 2:
            self._i, self._j = self._rng.next_windowed_int_pair(len(c), self._window)
            c.reverse(self._i, self._j)

    def undo(self, c: Permutation) -> None:
        if len(c) >= 2:
            c.reverse(self._i, self._j)

    def split(self) -> "WindowLimitedReversalMutation":
        return WindowLimitedReversalMutation(self._window, rng=self._rng.split())

    def iterator(self, p: Permutation) -> WindowLimitedReversalIterator:
        return WindowLimitedReversalIterator(p, min(self._window, max(len(p), 1)))
