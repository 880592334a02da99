from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Optional

from permops.iterators.base import MutationIterator
from permops.permutation import Permutation


UNLIMITED_WINDOW = sys.maxsize


class MutationOperator(ABC):
    """A randomized in-place transformation of a permutation."""

    @abstractmethod
    def mutate(self, c: Permutation) -> None:
        ...

    @abstractmethod
    def split(self) -> "MutationOperator":
        """Returns an operator safe to use from another worker."""


class UndoableMutationOperator(MutationOperator):
    """A mutation whose most recent application can be reverted."""

    @abstractmethod
    def undo(self, c: Permutation) -> None:
        """Reverts the most recent mutate() on ``c``, which must be unchanged since."""


class IterableMutationOperator(ABC):
    """A mutation whose full neighborhood can be walked in place."""

    @abstractmethod
    def iterator(self, p: Permutation) -> MutationIterator:
        ...


def _check_window(window: Optional[int]) -> int:
    if window is None:
        return UNLIMITED_WINDOW
    if window <= 0:
        raise ValueError("window limit must be positive")
    return window
