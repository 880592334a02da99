from __future__ import annotations

from permops.iterators.base import MutationIterator
from permops.permutation import Permutation


class RotationIterator(MutationIterator):
    """The n-1 non-trivial left rotations, each one rotate(1) away from the previous."""

    def __init__(self, p: Permutation):
        super().__init__(p, len(p) >= 2)
        self._r = 0
        self._saved = 0

    def _advance(self) -> None:
        self._p.rotate(1)
        self._r += 1
        if self._r == len(self._p) - 1:
            self._has_more = False

    def set_savepoint(self) -> None:
        self._saved = self._r

    def _restore(self) -> None:
        if self._r != self._saved:
            self._p.rotate(self._saved - self._r)
