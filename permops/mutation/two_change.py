"""Edge-changing mutations for permutations read as cyclic tours.

Position i is joined to position i+1 and the last position to the first.
A two-change replaces two of these edges and a three-change replaces three.
Both are realised with reversals, block moves and a rotation, without
touching more of the array than needed.
"""
from __future__ import annotations

from typing import List, Optional

from permops.iterators.reversal import TwoChangeIterator
from permops.mutation.base import IterableMutationOperator, UndoableMutationOperator
from permops.permutation import Permutation
from permops.rng import SplittableGenerator, ensure_generator


class TwoChangeMutation(UndoableMutationOperator, IterableMutationOperator):
    """
    Uniformly random two-change (2-opt move). A no-op for n < 4.

    The move reverses a segment of the tour, which is the same tour as
    reversing the complementary wrap-around segment. Whichever of the two is
    shorter is the one applied, and applying it twice is the identity, so
    undo() simply applies it again.
    """

    def __init__(self, rng: Optional[SplittableGenerator] = None):
        self._rng = ensure_generator(rng)
        self._a = 0
        self._b = 0

    def mutate(self, c: Permutation) -> None:
        n = len(c)
        if n >= 4:
            self._internal_mutate(c, self._rng.next_int(n), 1 + self._rng.next_int(n - 3))

    def undo(self, c: Permutation) -> None:
        if len(c) >= 4:
            self._apply(c)

    def split(self) -> "TwoChangeMutation":
        return TwoChangeMutation(rng=self._rng.split())

    def iterator(self, p: Permutation) -> TwoChangeIterator:
        return TwoChangeIterator(p)

    def _internal_mutate(self, c: Permutation, first: int, delta: int) -> None:
        n = len(c)
        b = first + delta
        if b >= n:
            self._a = b - n + 1
            self._b = first - 1
        else:
            self._a = first
            self._b = b
        self._apply(c)

    def _apply(self, c: Permutation) -> None:
        n = len(c)
        a, b = self._a, self._b
        if b - a < (n >> 1):
            c.reverse(a, b)
            return
        # reverse the wrap-around segment [b+1 .. n-1, 0 .. a-1] instead
        right_count = n - b - 1
        i = a - 1
        j = b + 1
        if a > right_count:
            while j < n:
                c.swap(i, j)
                i -= 1
                j += 1
            c.reverse(0, i)
        else:
            while i >= 0:
                c.swap(i, j)
                i -= 1
                j += 1
            if a < right_count:
                c.reverse(j, n - 1)


class ThreeOptMutation(UndoableMutationOperator):
    """
    Uniformly random two-change or three-change.

    Three distinct cut points are drawn and the permutation is rotated so
    that the first one sits at index 0. The three resulting segments can be
    recombined in four ways, and ``which`` picks one of them. Where a segment
    is a single element some of the four coincide, or collapse into a
    two-change, and each of those configurations maps to its single distinct
    change. At n == 4 every move is a two-change, which is delegated to
    :class:`TwoChangeMutation`. A no-op for n < 4.
    """

    def __init__(self, rng: Optional[SplittableGenerator] = None):
        self._rng = ensure_generator(rng)
        self._two_change = TwoChangeMutation(rng=self._rng.split())
        self._indexes: List[int] = [0, 0, 0]
        self._which = 0
        self._last_rotation = 0

    def mutate(self, c: Permutation) -> None:
        n = len(c)
        if n >= 5:
            self._indexes = list(self._rng.next_int_triple(n, sort=True))
            self._which = self._rng.next_biased_int(4)
            self._three_or_two_change(self._indexes, self._which, c)
        elif n == 4:
            self._two_change.mutate(c)

    def undo(self, c: Permutation) -> None:
        n = len(c)
        if n >= 5:
            self._undo_three_or_two_change(self._indexes, self._which, c)
        elif n == 4:
            self._two_change.undo(c)

    def split(self) -> "ThreeOptMutation":
        return ThreeOptMutation(rng=self._rng.split())

    # --- helper methods ---

    def _three_or_two_change(self, indexes: List[int], which: int, c: Permutation) -> None:
        """Applies the move, normalizing ``indexes`` in place so that indexes[0] == 0."""
        n = len(c)
        self._last_rotation = indexes[0]
        c.rotate(indexes[0])
        indexes[2] -= indexes[0]
        indexes[1] -= indexes[0]
        indexes[0] = 0
        i1, i2 = indexes[1], indexes[2]
        if i2 == 2:
            c.swap(0, 1)
        elif i1 == 1:
            if i2 == n - 1:
                c.swap(0, i2)
            elif which == 0:
                c.remove_and_insert_block(1, i2 - 1, 0)
            elif n - i2 >= i2 - i1:
                c.reverse(0, i2 - 1)
            else:
                c.reverse(1, i2 - 1)
        elif i1 == n - 2:
            c.swap(i1, i2)
        elif i2 == n - 1:
            if which == 0:
                c.remove_and_insert_block(i2, 1, i1)
            elif i1 >= i2 - i1:
                c.reverse(i1, i2)
            else:
                c.reverse(i1, i2 - 1)
        elif i2 == i1 + 1:
            if which == 0:
                c.remove_and_insert_block(i1, 1, 0)
            elif i1 <= n - i2:
                c.reverse(0, i1)
            else:
                c.reverse(i1, n - 1)
        elif which == 0:
            c.remove_and_insert_block(i1, i2 - i1, 0)
        elif which == 1:
            c.reverse(0, i1 - 1)
            c.reverse(i1, i2 - 1)
        elif which == 2:
            c.reverse(0, i1 - 1)
            c.remove_and_insert_block(i1, i2 - i1, 0)
        else:
            c.reverse(i1, i2 - 1)
            c.remove_and_insert_block(i1, i2 - i1, 0)

    def _undo_three_or_two_change(self, indexes: List[int], which: int, c: Permutation) -> None:
        n = len(c)
        i1, i2 = indexes[1], indexes[2]
        if i2 == 2:
            c.swap(0, 1)
        elif i1 == 1:
            if i2 == n - 1:
                c.swap(0, i2)
            elif which == 0:
                c.remove_and_insert_block(0, i2 - 1, 1)
            elif n - i2 >= i2 - i1:
                c.reverse(0, i2 - 1)
            else:
                c.reverse(1, i2 - 1)
        elif i1 == n - 2:
            c.swap(i1, i2)
        elif i2 == n - 1:
            if which == 0:
                c.remove_and_insert_block(i1, 1, i2)
            elif i1 >= i2 - i1:
                c.reverse(i1, i2)
            else:
                c.reverse(i1, i2 - 1)
        elif i2 == i1 + 1:
            if which == 0:
                c.remove_and_insert_block(0, 1, i1)
            elif i1 <= n - i2:
                c.reverse(0, i1)
            else:
                c.reverse(i1, n - 1)
        elif which == 0:
            c.remove_and_insert_block(0, i2 - i1, i1)
        elif which == 1:
            c.reverse(0, i1 - 1)
            c.reverse(i1, i2 - 1)
        elif which == 2:
            c.remove_and_insert_block(0, i2 - i1, i1)
            c.reverse(0, i1 - 1)
        else:
            c.remove_and_insert_block(0, i2 - i1, i1)
            c.reverse(i1, i2 - 1)
        c.rotate(-self._last_rotation)
