from __future__ import annotations

from typing import Optional

import numpy as np
from numba import njit

from permops.crossover.base import CrossoverOperator, _check_u
from permops.permutation import Permutation
from permops.rng import SplittableGenerator


@njit(cache=True)
def _numba_precedence_cross(raw1: np.ndarray, raw2: np.ndarray, mask: np.ndarray) -> None:
    """
    Where mask is True a child takes the next unused element of its own
    parent, elsewhere the next unused element of the other parent. Every
    (child, source parent) combination keeps its own read pointer.
    """
    n = len(raw1)
    old1 = raw1.copy()
    old2 = raw2.copy()
    used1 = np.zeros(n, dtype=np.bool_)
    used2 = np.zeros(n, dtype=np.bool_)
    i = 0
    j = 0
    x = 0
    y = 0
    for k in range(n):
        if mask[k]:
            while used1[old1[i]]:
                i += 1
            while used2[old2[j]]:
                j += 1
            raw1[k] = old1[i]
            raw2[k] = old2[j]
            i += 1
            j += 1
        else:
            while used1[old2[x]]:
                x += 1
            while used2[old1[y]]:
                y += 1
            raw1[k] = old2[x]
            raw2[k] = old1[y]
            x += 1
            y += 1
        used1[raw1[k]] = True
        used2[raw2[k]] = True


class PrecedencePreservativeCrossover(CrossoverOperator):
    """
    Precedence preservative crossover (PPX), two-point form.

    A child is built left to right. Outside a random segment [i, j] it takes
    the next element of its own parent not yet placed, inside the segment
    the next such element of the other parent. Every precedence in a child
    therefore comes from one of the parents.
    """

    def _cross(self, c1: Permutation, c2: Permutation) -> None:
        n = len(c1)
        i = self._rng.next_int(n)
        j = self._rng.next_int(n)
        if j < i:
            i, j = j, i
        self._internal_cross(c1.array, c2.array, i, j)

    @staticmethod
    def _internal_cross(raw1: np.ndarray, raw2: np.ndarray, i: int, j: int) -> None:
        mask = np.ones(len(raw1), dtype=np.bool_)
        mask[i:j + 1] = False
        _numba_precedence_cross(raw1, raw2, mask)


class UniformPrecedencePreservativeCrossover(CrossoverOperator):
    """
    Uniform precedence preservative crossover (UPPX): a random mask, True
    with probability ``u``, decides position by position which parent
    supplies the next element.
    """

    def __init__(self, u: float = 0.5, rng: Optional[SplittableGenerator] = None):
        super().__init__(rng)
        self._u = _check_u(u)

    def _cross(self, c1: Permutation, c2: Permutation) -> None:
        self._internal_cross(c1.array, c2.array, self._rng.array_mask(len(c1), self._u))

    @staticmethod
    def _internal_cross(raw1: np.ndarray, raw2: np.ndarray, mask: np.ndarray) -> None:
        _numba_precedence_cross(raw1, raw2, np.ascontiguousarray(mask, dtype=np.bool_))
