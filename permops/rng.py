"""Random index sampling on top of numpy's ``Generator``.

Operators never share a generator. Each one is handed its own
``SplittableGenerator`` (explicitly, or from :func:`create_generator`), and
``split()`` derives an independent child stream through numpy's
``SeedSequence`` spawning.
"""
from __future__ import annotations

import logging
import threading
from typing import Optional, Tuple

import numpy as np


logger = logging.getLogger(__name__)


class SplittableGenerator:
    """
    Source of the random indices used by the permutation operators.

    Args:
        seed: Optional seed for a fresh ``numpy.random.Generator``.
        generator: An existing ``numpy.random.Generator`` to wrap. Takes
            precedence over ``seed``.
    """

    __slots__ = ("_gen",)

    def __init__(self, seed: Optional[int] = None, generator: Optional[np.random.Generator] = None):
        self._gen = generator if generator is not None else np.random.default_rng(seed)

    @property
    def generator(self) -> np.random.Generator:
        return self._gen

    def split(self) -> "SplittableGenerator":
        """Returns a generator whose stream is independent of this one."""
        return SplittableGenerator(generator=self._gen.spawn(1)[0])

    # --- scalars ---

    def next_int(self, bound: int) -> int:
        return int(self._gen.integers(bound))

    def next_biased_int(self, bound: int) -> int:
        # numpy's bounded integers are already unbiased, kept for the small-range call sites
        return int(self._gen.integers(bound))

    def next_double(self) -> float:
        return float(self._gen.random())

    # --- distinct index tuples ---

    def next_int_pair(self, n: int, sort: bool = False) -> Tuple[int, int]:
        """
        Two distinct indices uniformly from [0, n).

        Args:
            n: Exclusive upper bound, n >= 2.
            sort: If True the pair is returned in increasing order.

        Returns:
            Tuple (i, j) with i != j.
        """
        i = int(self._gen.integers(n))
        j = int(self._gen.integers(n - 1))
        if j >= i:
            j += 1
        if sort and j < i:
            return j, i
        return i, j

    def next_int_triple(self, n: int, sort: bool = False) -> Tuple[int, int, int]:
        i = int(self._gen.integers(n))
        j = int(self._gen.integers(n - 1))
        k = int(self._gen.integers(n - 2))
        if j >= i:
            j += 1
        lo, hi = (i, j) if i < j else (j, i)
        if k >= lo:
            k += 1
        if k >= hi:
            k += 1
        if sort:
            return tuple(sorted((i, j, k)))
        return i, j, k

    def next_windowed_int_pair(self, n: int, window: int, sort: bool = False) -> Tuple[int, int]:
        """
        Two distinct indices from [0, n) no more than ``window`` apart.

        Uniform over all such pairs. Rejection sampling on (start, offset)
        keeps every admissible pair equally likely.
        """
        if window >= n - 1:
            return self.next_int_pair(n, sort)
        while True:
            i = int(self._gen.integers(n))
            j = i + 1 + int(self._gen.integers(window))
            if j < n:
                break
        if not sort and self._gen.integers(2):
            return j, i
        return i, j

    def next_windowed_int_triple(self, n: int, window: int, sort: bool = False) -> Tuple[int, int, int]:
        """
        Three distinct indices from [0, n) with max - min <= ``window``.

        Args:
            n: Exclusive upper bound, n >= 3.
            window: Maximum span, must be at least 2.
            sort: If True the triple is returned in increasing order.
        """
        if window < 2:
            raise ValueError("window must be at least 2 for a triple")
        if window >= n - 1:
            return self.next_int_triple(n, sort)
        while True:
            i = int(self._gen.integers(n))
            d1, d2 = self.next_int_pair(window)
            if i + 1 + max(d1, d2) < n:
                break
        result = [i, i + 1 + d1, i + 1 + d2]
        if sort:
            result.sort()
        else:
            self._gen.shuffle(result)
        return result[0], result[1], result[2]

    # --- subsets ---

    def sample(self, n: int, k: int) -> np.ndarray:
        """k distinct indices from [0, n), in random order."""
        return self._gen.choice(n, size=k, replace=False).astype(np.int64)

    def sample_with_probability(self, n: int, u: float) -> np.ndarray:
        """Each index of [0, n) kept independently with probability u, increasing order."""
        return np.flatnonzero(self._gen.random(n) < u).astype(np.int64)

    def array_mask(self, n: int, u: float) -> np.ndarray:
        return self._gen.random(n) < u

    def shuffle(self, array) -> None:
        self._gen.shuffle(array)

    def permutation(self, n: int) -> np.ndarray:
        return self._gen.permutation(n).astype(np.int64)


# ==============================================================================
# Process-wide factory. Each call to create_generator() spawns a new child of
# the root generator, so seeding the root makes every operator reproducible.
# ==============================================================================

_lock = threading.Lock()
_root = np.random.default_rng()


def configure(seed: Optional[int]) -> None:
    """Reseeds the root generator. ``None`` reseeds from OS entropy."""
    global _root
    with _lock:
        _root = np.random.default_rng(seed)
    logger.debug("root generator reseeded (seed=%s)", seed)


def configure_default() -> None:
    configure(None)


def create_generator() -> SplittableGenerator:
    with _lock:
        child = _root.spawn(1)[0]
    return SplittableGenerator(generator=child)


def ensure_generator(rng: Optional[SplittableGenerator]) -> SplittableGenerator:
    """Returns ``rng`` or, when it is None, a fresh generator from the factory."""
    return rng if rng is not None else create_generator()
