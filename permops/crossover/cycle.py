from __future__ import annotations

from typing import Optional

import numpy as np
from numba import njit

from permops.crossover.base import CrossoverOperator, _check_u
from permops.permutation import Permutation
from permops.rng import SplittableGenerator


# ==============================================================================
# Numba-accelerated cycle exchange.
# ==============================================================================

@njit(cache=True)
def _numba_swap_cycle(raw1: np.ndarray, raw2: np.ndarray, inv1: np.ndarray,
                      start: int, done: np.ndarray) -> None:
    """
    Exchanges between the parents every position of the cycle through
    ``start``. inv1 is the inverse of the first parent before any exchange.
    """
    i = start
    while True:
        temp = raw1[i]
        raw1[i] = raw2[i]
        raw2[i] = temp
        done[i] = True
        i = inv1[raw1[i]]
        if i == start:
            break


class CycleCrossover(CrossoverOperator):
    """
    Cycle crossover (CX).

    Following position start -> position in parent 1 of parent 2's element
    at start -> ... traces a cycle of positions. The children are the
    parents with the elements of that one cycle exchanged, so every element
    keeps the position it had in one of the parents.
    """

    def _cross(self, c1: Permutation, c2: Permutation) -> None:
        self._internal_cross(c1, c2, self._rng.next_int(len(c1)))

    @staticmethod
    def _internal_cross(c1: Permutation, c2: Permutation, start: int) -> None:
        done = np.zeros(len(c1), dtype=np.bool_)
        _numba_swap_cycle(c1.array, c2.array, c1.get_inverse(), start, done)


class UniformCycleCrossover(CrossoverOperator):
    """
    Uniform cycle crossover (UCX): exchanges every cycle that contains at
    least one of the positions chosen with probability ``u``.
    """

    def __init__(self, u: float = 0.5, rng: Optional[SplittableGenerator] = None):
        super().__init__(rng)
        self._u = _check_u(u)

    def _cross(self, c1: Permutation, c2: Permutation) -> None:
        self._internal_cross(c1, c2, self._rng.sample_with_probability(len(c1), self._u))

    @staticmethod
    def _internal_cross(c1: Permutation, c2: Permutation, starts: np.ndarray) -> None:
        inv1 = c1.get_inverse()
        done = np.zeros(len(c1), dtype=np.bool_)
        for start in starts:
            if not done[start]:
                _numba_swap_cycle(c1.array, c2.array, inv1, int(start), done)
