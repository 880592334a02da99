from permops.mutation.base import IterableMutationOperator, MutationOperator, UndoableMutationOperator
from permops.mutation.block import BlockInterchangeMutation, BlockMoveMutation, WindowLimitedBlockMoveMutation
from permops.mutation.cycle import CycleAlphaMutation, CycleMutation
from permops.mutation.hybrid import WeightedHybridMutation, WeightedHybridUndoableMutation
from permops.mutation.insertion import InsertionMutation, WindowLimitedInsertionMutation
from permops.mutation.reversal import ReversalMutation, WindowLimitedReversalMutation
from permops.mutation.rotation import RotationMutation
from permops.mutation.scramble import (
    ScrambleMutation,
    UndoableScrambleMutation,
    UndoableUniformScrambleMutation,
    UniformScrambleMutation,
    WindowLimitedScrambleMutation,
    WindowLimitedUndoableScrambleMutation,
)
from permops.mutation.swap import AdjacentSwapMutation, SwapMutation, WindowLimitedSwapMutation
from permops.mutation.two_change import ThreeOptMutation, TwoChangeMutation

__all__ = [
    "MutationOperator",
    "UndoableMutationOperator",
    "IterableMutationOperator",
    "SwapMutation",
    "AdjacentSwapMutation",
    "WindowLimitedSwapMutation",
    "ReversalMutation",
    "WindowLimitedReversalMutation",
    "InsertionMutation",
    "WindowLimitedInsertionMutation",
    "BlockMoveMutation",
    "WindowLimitedBlockMoveMutation",
    "BlockInterchangeMutation",
    "RotationMutation",
    "TwoChangeMutation",
    "ThreeOptMutation",
    "CycleMutation",
    "CycleAlphaMutation",
    "ScrambleMutation",
    "UndoableScrambleMutation",
    "WindowLimitedScrambleMutation",
    "WindowLimitedUndoableScrambleMutation",
    "UniformScrambleMutation",
    "UndoableUniformScrambleMutation",
    "WeightedHybridMutation",
    "WeightedHybridUndoableMutation",
]
