from __future__ import annotations

from typing import Optional

import numpy as np
from numba import njit

from permops.crossover.base import CrossoverOperator, _check_u
from permops.permutation import Permutation
from permops.rng import SplittableGenerator


@njit(cache=True)
def _numba_matched_swaps(raw1: np.ndarray, raw2: np.ndarray, indexes: np.ndarray) -> None:
    """
    For each index k, swaps inside child 1 so that it holds parent 2's
    element at k, and symmetrically for child 2.
    """
    n = len(raw1)
    inv1 = np.empty(n, dtype=np.int64)
    inv2 = np.empty(n, dtype=np.int64)
    for x in range(n):
        inv1[raw1[x]] = x
        inv2[raw2[x]] = x
    old1 = raw1.copy()
    old2 = raw2.copy()
    for t in range(len(indexes)):
        k = indexes[t]
        g = inv1[old2[k]]
        if k != g:
            temp = raw1[k]
            raw1[k] = raw1[g]
            raw1[g] = temp
            inv1[raw1[g]] = g
            inv1[old2[k]] = k
        g = inv2[old1[k]]
        if k != g:
            temp = raw2[k]
            raw2[k] = raw2[g]
            raw2[g] = temp
            inv2[raw2[g]] = g
            inv2[old1[k]] = k


class PartiallyMatchedCrossover(CrossoverOperator):
    """
    Partially matched crossover (PMX).

    Child 1 takes parent 2's segment [i, j] and keeps every other element of
    parent 1 where it was, except those displaced by the segment, which
    move to the freed positions.
    """

    def _cross(self, c1: Permutation, c2: Permutation) -> None:
        n = len(c1)
        self._internal_cross(c1, c2, self._rng.next_int(n), self._rng.next_int(n))

    @staticmethod
    def _internal_cross(c1: Permutation, c2: Permutation, i: int, j: int) -> None:
        if j < i:
            i, j = j, i
        _numba_matched_swaps(c1.array, c2.array, np.arange(i, j + 1, dtype=np.int64))


class UniformPartiallyMatchedCrossover(CrossoverOperator):
    """
    Uniform partially matched crossover (UPMX): the PMX exchange applied to
    positions chosen independently with probability ``u``.
    """

    def __init__(self, u: float = 1.0 / 3.0, rng: Optional[SplittableGenerator] = None):
        super().__init__(rng)
        self._u = _check_u(u)

    def _cross(self, c1: Permutation, c2: Permutation) -> None:
        self._internal_cross(c1, c2, self._rng.sample_with_probability(len(c1), self._u))

    @staticmethod
    def _internal_cross(c1: Permutation, c2: Permutation, indexes: np.ndarray) -> None:
        _numba_matched_swaps(c1.array, c2.array, np.ascontiguousarray(indexes, dtype=np.int64))
