from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from permops.mutation.base import MutationOperator, UndoableMutationOperator
from permops.permutation import Permutation
from permops.rng import SplittableGenerator, ensure_generator


def _cumulative_weights(count: int, weights: Sequence[float]) -> np.ndarray:
    if count == 0:
        raise ValueError("at least one operator is required")
    if len(weights) != count:
        raise ValueError("number of weights must equal number of operators")
    if any(w <= 0 for w in weights):
        raise ValueError("weights must be positive")
    return np.cumsum(np.asarray(weights, dtype=float))


def _choose(cumulative: np.ndarray, rng: SplittableGenerator) -> int:
    if len(cumulative) == 1:
        return 0
    u = rng.next_double() * cumulative[-1]
    return min(int(np.searchsorted(cumulative, u, side="right")), len(cumulative) - 1)


class WeightedHybridMutation(MutationOperator):
    """
    Applies one of several mutations, chosen per call with probability
    proportional to its weight.

    Args:
        mutations: The component operators.
        weights: One positive weight per operator.
        rng: Source of randomness, a factory generator if None.
    """

    def __init__(self, mutations: Sequence[MutationOperator], weights: Sequence[float],
                 rng: Optional[SplittableGenerator] = None):
        self._cumulative = _cumulative_weights(len(mutations), weights)
        self._mutations = list(mutations)
        self._weights = list(weights)
        self._rng = ensure_generator(rng)

    def mutate(self, c: Permutation) -> None:
        self._mutations[_choose(self._cumulative, self._rng)].mutate(c)

    def split(self) -> "WeightedHybridMutation":
        return type(self)([m.split() for m in self._mutations], self._weights, rng=self._rng.split())


class WeightedHybridUndoableMutation(WeightedHybridMutation, UndoableMutationOperator):
    """Weighted hybrid of undoable mutations. undo() reverts whichever one ran last."""

    def __init__(self, mutations: Sequence[UndoableMutationOperator], weights: Sequence[float],
                 rng: Optional[SplittableGenerator] = None):
        super().__init__(mutations, weights, rng)
        self._last: Optional[UndoableMutationOperator] = None

    def mutate(self, c: Permutation) -> None:
        self._last = self._mutations[_choose(self._cumulative, self._rng)]
        self._last.mutate(c)

    def undo(self, c: Permutation) -> None:
        if self._last is not None:
            self._last.undo(c)
