from __future__ import annotations

from typing import Optional

from permops.iterators.swap import AdjacentSwapIterator, SwapIterator, WindowLimitedSwapIterator
from permops.mutation.base import IterableMutationOperator, UndoableMutationOperator, _check_window
from permops.permutation import Permutation
from permops.rng import SplittableGenerator, ensure_generator


class SwapMutation(UndoableMutationOperator, IterableMutationOperator):
    """Swaps two randomly chosen positions."""

    def __init__(self, rng: Optional[SplittableGenerator] = None):
        self._rng = ensure_generator(rng)
        self._i = 0
        self._j = 0

    def mutate(self, c: Permutation) -> None:
        if len(c) >= 2:
            self._i, self._j = self._rng.next_int_pair(len(c))
            c.swap(self._i, self._j)

    def undo(self, c: Permutation) -> None:
        if len(c) >= 2:
            c.swap(self._i, self._j)

    def split(self) -> "SwapMutation":
        return SwapMutation(rng=self._rng.split())

    def iterator(self, p: Permutation) -> SwapIterator:
        return SwapIterator(p)


class AdjacentSwapMutation(UndoableMutationOperator, IterableMutationOperator):
    """Swaps a random position with its right neighbor."""

    def __init__(self, rng: Optional[SplittableGenerator] = None):
        self._rng = ensure_generator(rng)
        self._i = 0

    def mutate(self, c: Permutation) -> None:
        if len(c) >= 2:
            self._i = self._rng.next_int(len(c) - 1)
            c.swap(self._i, self._i + 1)

    def undo(self, c: Permutation) -> None:
        if len(c) >= 2:
            c.swap(self._i, self._i + 1)

    def split(self) -> "AdjacentSwapMutation":
        return AdjacentSwapMutation(rng=self._rng.split())

    def iterator(self, p: Permutation) -> AdjacentSwapIterator:
        return AdjacentSwapIterator(p)


class WindowLimitedSwapMutation(UndoableMutationOperator, IterableMutationOperator):
    """
    Swaps two random positions at most ``window`` apart.

    Args:
        window: Maximum distance between the swapped positions. Unlimited
            if None.
        rng: Source of randomness, a factory generator if None.
    """

    def __init__(self, window: Optional[int] = None, rng: Optional[SplittableGenerator] = None):
        self._window = _check_window(window)
        self._rng = ensure_generator(rng)
        self._i = 0
        self._j = 0

    def mutate(self, c: Permutation) -> None:
        if len(c) >= 2:
            self._i, self._j = self._rng.next_windowed_int_pair(len(c), self._window)
            c.swap(self._i, self._j)

    def undo(self, c: Permutation) -> None:
        if len(c) >= 2:
            c.swap(self._i, self._j)

    def split(self) -> "WindowLimitedSwapMutation":
        return WindowLimitedSwapMutation(self._window, rng=self._rng.split())

    def iterator(self, p: Permutation) -> WindowLimitedSwapIterator:
        return WindowLimitedSwapIterator(p, min(self._window, max(len(p), 1)))
