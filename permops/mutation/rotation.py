from __future__ import annotations

from typing import Optional

from permops.iterators.rotation import RotationIterator
from permops.mutation.base import IterableMutationOperator, UndoableMutationOperator
from permops.permutation import Permutation
from permops.rng import SplittableGenerator, ensure_generator


class RotationMutation(UndoableMutationOperator, IterableMutationOperator):
    """Rotates the permutation left by a random non-zero amount."""

    def __init__(self, rng: Optional[SplittableGenerator] = None):
        self._rng = ensure_generator(rng)
        self._r = 0

    def mutate(self, c: Permutation) -> None:
        if len(c) >= 2:
            self._r = 1 + self._rng.next_int(len(c) - 1)
            c.rotate(self._r)

    def undo(self, c: Permutation) -> None:
        if len(c) >= 2:
            c.rotate(-self._r)

    def split(self) -> "RotationMutation":
        return RotationMutation(rng=self._rng.split())

    def iterator(self, p: Permutation) -> RotationIterator:
        return RotationIterator(p)
