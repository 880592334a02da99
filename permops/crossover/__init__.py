from permops.crossover.base import CrossoverOperator
from permops.crossover.cycle import CycleCrossover, UniformCycleCrossover
from permops.crossover.edge import (
    EdgeMap,
    EdgeRecombination,
    EnhancedEdgeMap,
    EnhancedEdgeRecombination,
)
from permops.crossover.hybrid import WeightedHybridCrossover
from permops.crossover.order import (
    NonWrappingOrderCrossover,
    OrderCrossover,
    OrderCrossoverTwo,
    UniformOrderBasedCrossover,
)
from permops.crossover.pbx import PositionBasedCrossover
from permops.crossover.pmx import PartiallyMatchedCrossover, UniformPartiallyMatchedCrossover
from permops.crossover.ppx import PrecedencePreservativeCrossover, UniformPrecedencePreservativeCrossover

__all__ = [
    "CrossoverOperator",
    "CycleCrossover",
    "UniformCycleCrossover",
    "EdgeMap",
    "EnhancedEdgeMap",
    "EdgeRecombination",
    "EnhancedEdgeRecombination",
    "WeightedHybridCrossover",
    "OrderCrossover",
    "NonWrappingOrderCrossover",
    "UniformOrderBasedCrossover",
    "OrderCrossoverTwo",
    "PositionBasedCrossover",
    "PartiallyMatchedCrossover",
    "UniformPartiallyMatchedCrossover",
    "PrecedencePreservativeCrossover",
    "UniformPrecedencePreservativeCrossover",
]
