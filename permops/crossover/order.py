"""Order based crossovers.

Each child keeps some positions of its own parent and receives the rest of
its elements in the relative order they have in the other parent.
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Optional, Tuple

import numpy as np

from permops.crossover.base import CrossoverOperator, _check_u
from permops.permutation import Permutation
from permops.rng import SplittableGenerator


def _leftovers(raw1: np.ndarray, raw2: np.ndarray, keep: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Elements of each parent not kept by the other child, in parent order.

    Returns:
        (list1, list2) where list1 holds the elements of raw1 absent from
        raw2[keep] and list2 the elements of raw2 absent from raw1[keep].
    """
    n = len(raw1)
    in1 = np.zeros(n, dtype=bool)
    in2 = np.zeros(n, dtype=bool)
    in1[raw1[keep]] = True
    in2[raw2[keep]] = True
    return raw1[~in2[raw1]], raw2[~in1[raw2]]


class _SegmentOrderCrossover(CrossoverOperator):

    def _random_segment(self, n: int) -> Tuple[int, int]:
        i = self._rng.next_int(n)
        j = self._rng.next_int(n)
        return (i, j) if i <= j else (j, i)

    @staticmethod
    @abstractmethod
    def _fill_positions(n: int, i: int, j: int) -> np.ndarray:
        ...

    def _cross(self, c1: Permutation, c2: Permutation) -> None:
        i, j = self._random_segment(len(c1))
        self._internal_cross(c1.array, c2.array, i, j)

    def _internal_cross(self, raw1: np.ndarray, raw2: np.ndarray, i: int, j: int) -> None:
        n = len(raw1)
        if j - i + 1 == n:
            return
        list1, list2 = _leftovers(raw1, raw2, np.arange(i, j + 1))
        positions = self._fill_positions(n, i, j)
        raw1[positions] = list2
        raw2[positions] = list1


class OrderCrossover(_SegmentOrderCrossover):
    """
    Order crossover (OX).

    Each child keeps a random segment [i, j] of its own parent. The other
    positions are filled starting right after the segment and wrapping
    around to the front.
    """

    @staticmethod
    def _fill_positions(n: int, i: int, j: int) -> np.ndarray:
        return np.concatenate((np.arange(j + 1, n), np.arange(0, i)))


class NonWrappingOrderCrossover(_SegmentOrderCrossover):
    """
    Non-wrapping order crossover (NWOX): like OX, but the other positions are
    filled left to right, so the children keep the parents' absolute
    positions better.
    """

    @staticmethod
    def _fill_positions(n: int, i: int, j: int) -> np.ndarray:
        return np.concatenate((np.arange(0, i), np.arange(j + 1, n)))


class UniformOrderBasedCrossover(CrossoverOperator):
    """
    Uniform order based crossover (UOBX).

    Positions chosen with probability ``u`` stay fixed, the others receive
    the remaining elements in the other parent's order.

    Args:
        u: Probability that a position is fixed, 0 < u < 1.
        rng: Source of randomness, a factory generator if None.
    """

    def __init__(self, u: float = 0.5, rng: Optional[SplittableGenerator] = None):
        super().__init__(rng)
        self._u = _check_u(u)

    def _cross(self, c1: Permutation, c2: Permutation) -> None:
        self._internal_cross(c1.array, c2.array, self._rng.array_mask(len(c1), self._u))

    @staticmethod
    def _internal_cross(raw1: np.ndarray, raw2: np.ndarray, mask: np.ndarray) -> None:
        open_positions = ~mask
        if open_positions.any():
            list1, list2 = _leftovers(raw1, raw2, mask)
            raw1[open_positions] = list2
            raw2[open_positions] = list1


class OrderCrossoverTwo(CrossoverOperator):
    """
    Order crossover 2 (OX2).

    A random mask selects positions of the other parent. The elements found
    there keep their places in the child but are re-ordered to follow the
    other parent's order.
    """

    def __init__(self, u: float = 0.5, rng: Optional[SplittableGenerator] = None):
        super().__init__(rng)
        self._u = _check_u(u)

    def _cross(self, c1: Permutation, c2: Permutation) -> None:
        self._internal_cross(c1.array, c2.array, self._rng.array_mask(len(c1), self._u))

    @staticmethod
    def _internal_cross(raw1: np.ndarray, raw2: np.ndarray, mask: np.ndarray) -> None:
        n = len(raw1)
        selected1 = raw1[mask]
        selected2 = raw2[mask]
        in1 = np.zeros(n, dtype=bool)
        in2 = np.zeros(n, dtype=bool)
        in1[selected1] = True
        in2[selected2] = True
        positions1 = in2[raw1]
        positions2 = in1[raw2]
        raw1[positions1] = selected2
        raw2[positions2] = selected1
