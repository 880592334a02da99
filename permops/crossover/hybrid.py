from __future__ import annotations

from typing import Optional, Sequence

from permops.crossover.base import CrossoverOperator
from permops.mutation.hybrid import _choose, _cumulative_weights
from permops.permutation import Permutation
from permops.rng import SplittableGenerator


class WeightedHybridCrossover(CrossoverOperator):
    """
    Applies one of several crossovers, chosen per call with probability
    proportional to its weight.

    Args:
        crossovers: The component operators.
        weights: One positive weight per operator.
        rng: Source of randomness, a factory generator if None.
    """

    def __init__(self, crossovers: Sequence[CrossoverOperator], weights: Sequence[float],
                 rng: Optional[SplittableGenerator] = None):
        super().__init__(rng)
        self._cumulative = _cumulative_weights(len(crossovers), weights)
        self._crossovers = list(crossovers)
        self._weights = list(weights)

    def _cross(self, c1: Permutation, c2: Permutation) -> None:
        self._crossovers[_choose(self._cumulative, self._rng)].cross(c1, c2)

    def split(self) -> "WeightedHybridCrossover":
        return type(self)([x.split() for x in self._crossovers], self._weights, rng=self._rng.split())
