from permops.iterators.base import MutationIterator
from permops.iterators.block_interchange import BlockInterchangeIterator
from permops.iterators.block_move import BlockMoveIterator, WindowLimitedBlockMoveIterator
from permops.iterators.insertion import InsertionIterator, WindowLimitedInsertionIterator
from permops.iterators.reversal import ReversalIterator, TwoChangeIterator, WindowLimitedReversalIterator
from permops.iterators.rotation import RotationIterator
from permops.iterators.swap import AdjacentSwapIterator, SwapIterator, WindowLimitedSwapIterator

__all__ = [
    "MutationIterator",
    "AdjacentSwapIterator",
    "SwapIterator",
    "WindowLimitedSwapIterator",
    "ReversalIterator",
    "WindowLimitedReversalIterator",
    "TwoChangeIterator",
    "InsertionIterator",
    "WindowLimitedInsertionIterator",
    "BlockMoveIterator",
    "WindowLimitedBlockMoveIterator",
    "BlockInterchangeIterator",
    "RotationIterator",
]
