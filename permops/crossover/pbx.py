from __future__ import annotations

import numpy as np
from numba import njit

from permops.crossover.base import CrossoverOperator
from permops.permutation import Permutation


@njit(cache=True)
def _numba_position_child(raw: np.ndarray, order: np.ndarray, targets: np.ndarray,
                          alternates: np.ndarray) -> None:
    """
    Places every element at its target index if free, otherwise at its
    alternate index if free, otherwise at the leftmost open index.
    Elements are considered in ``order``.
    """
    n = len(raw)
    for x in range(n):
        raw[x] = -1
    unused = np.empty(n, dtype=np.int64)
    fallback = np.empty(n, dtype=np.int64)
    size = 0
    for x in range(n):
        e = order[x]
        if raw[targets[e]] < 0:
            raw[targets[e]] = e
        else:
            unused[size] = e
            fallback[size] = alternates[e]
            size += 1
    remaining = 0
    for x in range(size):
        e = unused[x]
        if raw[fallback[x]] < 0:
            raw[fallback[x]] = e
        else:
            unused[remaining] = e
            remaining += 1
    open_index = 0
    for x in range(remaining):
        while raw[open_index] >= 0:
            open_index += 1
        raw[open_index] = unused[x]


class PositionBasedCrossover(CrossoverOperator):
    """
    Position based crossover (PBX).

    Every element aims for the index it has in its own parent, except a
    random half of the elements, which aim for the index they have in the
    other parent. Conflicts are resolved in a random order. A loser tries
    the index it would have aimed for in the other child, then takes the
    leftmost free index.
    """

    def _cross(self, c1: Permutation, c2: Permutation) -> None:
        n = len(c1)
        targets1 = c1.get_inverse()
        targets2 = c2.get_inverse()
        order = self._rng.permutation(n)
        swapped = self._rng.sample_with_probability(n, 0.5)
        targets1[swapped], targets2[swapped] = targets2[swapped], targets1[swapped]
        _numba_position_child(c1.array, order, targets1, targets2)
        _numba_position_child(c2.array, order, targets2, targets1)
