from __future__ import annotations

from typing import Optional

from permops.iterators.insertion import InsertionIterator, WindowLimitedInsertionIterator
from permops.mutation.base import IterableMutationOperator, UndoableMutationOperator, _check_window
from permops.permutation import Permutation
from permops.rng import SplittableGenerator, ensure_generator


class InsertionMutation(UndoableMutationOperator, IterableMutationOperator):
    """Removes a random element and reinserts it at a different random index."""

    def __init__(self, rng: Optional[SplittableGenerator] = None):
        self._rng = ensure_generator(rng)
        self._i = 0
        self._j = 0

    def mutate(self, c: Permutation) -> None:
        if len(c) >= 2:
            self._i, self._j = self._rng.next_int_pair(len(c))
            c.remove_and_insert(self._i, self._j)

    def undo(self, c: Permutation) -> None:
        if len(c) >= 2:
            c.remove_and_insert(self._j, self._i)

    def split(self) -> "InsertionMutation":
        return InsertionMutation(rng=self._rng.split())

    def iterator(self, p: Permutation) -> InsertionIterator:
        return InsertionIterator(p)


class WindowLimitedInsertionMutation(UndoableMutationOperator, IterableMutationOperator):
    """Insertion where the element moves at most ``window`` positions."""

    def __init__(self, window: Optional[int] = None, rng: Optional[SplittableGenerator] = None):
        self._window = _check_window(window)
        self._rng = ensure_generator(rng)
        self._i = 0
        self._j = 0

    def mutate(self, c: Permutation) -> None:
        if len(c) >= 2:
            self._i, self._j = self._rng.next_windowed_int_pair(len(c), self._window)
            c.remove_and_insert(self._i, self._j)

    def undo(self, c: Permutation) -> None:
        if len(c) >= 2:
            c.remove_and_insert(self._j, self._i)

    def split(self) -> "WindowLimitedInsertionMutation":
        return WindowLimitedInsertionMutation(self._window, rng=self._rng.split())

    def iterator(self, p: Permutation) -> WindowLimitedInsertionIterator:
        return WindowLimitedInsertionIterator(p, min(self._window, max(len(p), 1)))
