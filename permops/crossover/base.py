from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from permops.permutation import Permutation
from permops.rng import SplittableGenerator, ensure_generator


class CrossoverOperator(ABC):
    """
    Recombines two parents, replacing them in place with two children.

    Subclasses implement :meth:`_cross` on the raw arrays. Parents of length
    0 or 1 are left untouched.
    """

    def __init__(self, rng: Optional[SplittableGenerator] = None):
        self._rng = ensure_generator(rng)

    def cross(self, c1: Permutation, c2: Permutation) -> None:
        """
        Args:
            c1: First parent, replaced by the first child.
            c2: Second parent, replaced by the second child.

        Raises:
            ValueError: If the parents differ in length.
        """
        if len(c1) != len(c2):
            raise ValueError("parents must have the same length")
        if len(c1) > 1:
            self._cross(c1, c2)

    @abstractmethod
    def _cross(self, c1: Permutation, c2: Permutation) -> None:
        ...

    def split(self) -> "CrossoverOperator":
        """Returns a copy of this operator drawing from a split generator."""
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone._rng = self._rng.split()
        return clone


def _check_u(u: float) -> float:
    if u <= 0 or u >= 1:
        raise ValueError("u must be: 0.0 < u < 1.0")
    return u
