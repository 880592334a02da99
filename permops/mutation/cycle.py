from __future__ import annotations

import math
from abc import abstractmethod
from typing import Optional

import numpy as np

from permops.mutation.base import UndoableMutationOperator
from permops.permutation import Permutation
from permops.rng import SplittableGenerator, ensure_generator


class _CycleBase(UndoableMutationOperator):
    """Moves the values at k random positions one step along a random cycle."""

    def __init__(self, rng: Optional[SplittableGenerator]):
        self._rng = ensure_generator(rng)
        self._indexes = np.empty(0, dtype=np.int64)

    @abstractmethod
    def _cycle_length(self, n: int) -> int:
        ...

    def mutate(self, c: Permutation) -> None:
        n = len(c)
        if n >= 2:
            # sample() returns the positions in random order, which is the cycle order
            self._indexes = self._rng.sample(n, self._cycle_length(n))
            c.cycle(self._indexes)

    def undo(self, c: Permutation) -> None:
        if len(c) >= 2:
            c.cycle(self._indexes[::-1])


class CycleMutation(_CycleBase):
    """
    Cycle mutation with a uniformly random cycle length in [2, max_cycle_length].

    Args:
        max_cycle_length: Longest cycle to induce, at least 2.
        rng: Source of randomness, a factory generator if None.
    """

    def __init__(self, max_cycle_length: int, rng: Optional[SplittableGenerator] = None):
        if max_cycle_length < 2:
            raise ValueError("max_cycle_length must be at least 2")
        super().__init__(rng)
        self._bound = max_cycle_length - 1

    def _cycle_length(self, n: int) -> int:
        return 2 + self._rng.next_int(min(self._bound, n - 1))

    def split(self) -> "CycleMutation":
        return CycleMutation(self._bound + 1, rng=self._rng.split())


class CycleAlphaMutation(_CycleBase):
    """
    Cycle mutation where a cycle of length k is chosen with probability
    proportional to alpha^(k-2), so short cycles dominate for small alpha.

    Args:
        alpha: Decay of the cycle length distribution, 0 < alpha < 1.
        rng: Source of randomness, a factory generator if None.
    """

    def __init__(self, alpha: float, rng: Optional[SplittableGenerator] = None):
        if alpha <= 0 or alpha >= 1:
            raise ValueError("alpha must be in the interval (0, 1)")
        super().__init__(rng)
        self._alpha = alpha
        self._log_alpha = math.log(alpha)
        self._last_n = 0
        self._term = 0.0

    def _cycle_length(self, n: int) -> int:
        return self._compute_k(n, self._rng.next_double())

    def _compute_k(self, n: int, u: float) -> int:
        """Inverse CDF of the truncated geometric cycle length distribution."""
        if n != self._last_n:
            self._term = 1 - self._alpha ** (n - 1)
            self._last_n = n
        k = int(math.log(1 - u * self._term) / self._log_alpha) + 2
        return min(k, n)

    def split(self) -> "CycleAlphaMutation":
        return CycleAlphaMutation(self._alpha, rng=self._rng.split())
