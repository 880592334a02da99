from __future__ import annotations

from typing import Optional

import numpy as np

from permops.mutation.base import MutationOperator, UndoableMutationOperator, _check_window
from permops.permutation import Permutation
from permops.rng import SplittableGenerator, ensure_generator


class ScrambleMutation(MutationOperator):
    """Randomly shuffles a random contiguous range."""

    def __init__(self, rng: Optional[SplittableGenerator] = None):
        self._rng = ensure_generator(rng)

    def mutate(self, c: Permutation) -> None:
        if len(c) >= 2:
            i, j = self._rng.next_int_pair(len(c))
            c.scramble(i, j, self._rng)

    def split(self) -> "ScrambleMutation":
        return ScrambleMutation(rng=self._rng.split())


class UndoableScrambleMutation(UndoableMutationOperator):
    """Scramble mutation that keeps the previous array to restore the shuffled range."""

    def __init__(self, rng: Optional[SplittableGenerator] = None):
        self._rng = ensure_generator(rng)
        self._last = np.empty(0, dtype=np.int64)
        self._lo = 0
        self._hi = -1

    def _pair(self, n: int):
        return self._rng.next_int_pair(n, sort=True)

    def mutate(self, c: Permutation) -> None:
        if len(c) >= 2:
            self._last = c.to_array()
            self._lo, self._hi = self._pair(len(c))
            c.scramble(self._lo, self._hi, self._rng)

    def undo(self, c: Permutation) -> None:
        if len(c) >= 2:
            c.array[self._lo:self._hi + 1] = self._last[self._lo:self._hi + 1]

    def split(self) -> "UndoableScrambleMutation":
        return UndoableScrambleMutation(rng=self._rng.split())


class WindowLimitedScrambleMutation(MutationOperator):
    """Scrambles a random range spanning at most ``window`` positions beyond its start."""

    def __init__(self, window: Optional[int] = None, rng: Optional[SplittableGenerator] = None):
        self._window = _check_window(window)
        self._rng = ensure_generator(rng)

    def mutate(self, c: Permutation) -> None:
        if len(c) >= 2:
            i, j = self._rng.next_windowed_int_pair(len(c), self._window)
            c.scramble(i, j, self._rng)

    def split(self) -> "WindowLimitedScrambleMutation":
        return WindowLimitedScrambleMutation(self._window, rng=self._rng.split())


class WindowLimitedUndoableScrambleMutation(UndoableScrambleMutation):

    def __init__(self, window: Optional[int] = None, rng: Optional[SplittableGenerator] = None):
        super().__init__(rng)
        self._window = _check_window(window)

    def _pair(self, n: int):
        return self._rng.next_windowed_int_pair(n, self._window, sort=True)

    def split(self) -> "WindowLimitedUndoableScrambleMutation":
        return WindowLimitedUndoableScrambleMutation(self._window, rng=self._rng.split())


class UniformScrambleMutation(MutationOperator):
    """
    Shuffles the positions chosen independently with probability ``u``.

    Args:
        u: Per-position selection probability, 0 <= u <= 1.
        guarantee_change: If True and fewer than two positions are chosen,
            a random pair of positions is shuffled instead.
        rng: Source of randomness, a factory generator if None.
    """

    def __init__(self, u: float, guarantee_change: bool = False, rng: Optional[SplittableGenerator] = None):
        if u < 0 or u > 1:
            raise ValueError("u must be in [0.0, 1.0]")
        self._u = u
        self._guarantee_change = guarantee_change
        self._rng = ensure_generator(rng)

    def _indexes(self, n: int) -> np.ndarray:
        indexes = self._rng.sample_with_probability(n, self._u)
        if self._guarantee_change and len(indexes) < 2:
            indexes = np.array(self._rng.next_int_pair(n), dtype=np.int64)
        return indexes

    def mutate(self, c: Permutation) -> None:
        if len(c) >= 2:
            c.scramble_indices(self._indexes(len(c)), self._rng)

    def split(self) -> "UniformScrambleMutation":
        return UniformScrambleMutation(self._u, self._guarantee_change, rng=self._rng.split())


class UndoableUniformScrambleMutation(UniformScrambleMutation, UndoableMutationOperator):

    def __init__(self, u: float, guarantee_change: bool = False, rng: Optional[SplittableGenerator] = None):
        super().__init__(u, guarantee_change, rng)
        self._last = np.empty(0, dtype=np.int64)

    def mutate(self, c: Permutation) -> None:
        if len(c) >= 2:
            self._last = c.to_array()
            c.scramble_indices(self._indexes(len(c)), self._rng)

    def undo(self, c: Permutation) -> None:
        if len(c) >= 2:
            c.array[:] = self._last

    def split(self) -> "UndoableUniformScrambleMutation":
        return UndoableUniformScrambleMutation(self._u, self._guarantee_change, rng=self._rng.split())
