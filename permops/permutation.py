from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Union

import numpy as np

from permops._kernels import (
    _numba_cycle,
    _numba_is_permutation,
    _numba_remove_and_insert_block,
    _numba_reverse,
    _numba_rotate,
    _numba_swap_blocks,
)
from permops.rng import SplittableGenerator, create_generator


class Permutation:
    """
    A mutable permutation of the integers 0..n-1 stored in an int64 numpy array.

    Every public method leaves the permutation valid. Operators and iterators
    work on the live array through :attr:`array`, so they must also leave it a
    permutation when they return.
    """

    __slots__ = ("_a",)

    def __init__(self, values: Union[Sequence[int], np.ndarray, "Permutation"]):
        """
        Args:
            values: Sequence holding each of 0..n-1 exactly once. The values
                are copied.
        """
        if isinstance(values, Permutation):
            self._a = values._a.copy()
            return
        a = np.array(values, dtype=np.int64)
        if a.ndim != 1:
            raise ValueError("a permutation must be one dimensional")
        if not _numba_is_permutation(a):
            raise ValueError("values are not a permutation of 0..n-1")
        self._a = a

    @classmethod
    def _wrap(cls, a: np.ndarray) -> "Permutation":
        p = cls.__new__(cls)
        p._a = a
        return p

    @classmethod
    def identity(cls, n: int) -> "Permutation":
        if n < 0:
            raise ValueError("length must be non-negative")
        return cls._wrap(np.arange(n, dtype=np.int64))

    @classmethod
    def random(cls, n: int, rng: Optional[SplittableGenerator] = None) -> "Permutation":
        if n < 0:
            raise ValueError("length must be non-negative")
        if rng is None:
            rng = create_generator()
        return cls._wrap(rng.permutation(n))

    # --- sequence protocol ---

    def __len__(self) -> int:
        return len(self._a)

    def __getitem__(self, i):
        if isinstance(i, slice):
            return self._a[i].copy()
        return int(self._a[i])

    def __iter__(self) -> Iterator[int]:
        return iter(self._a.tolist())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Permutation):
            return NotImplemented
        return np.array_equal(self._a, other._a)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Permutation({self._a.tolist()})"

    @property
    def array(self) -> np.ndarray:
        """The live backing array."""
        return self._a

    def copy(self) -> "Permutation":
        return Permutation._wrap(self._a.copy())

    def to_array(self) -> np.ndarray:
        return self._a.copy()

    def to_list(self) -> List[int]:
        return self._a.tolist()

    def is_valid(self) -> bool:
        return bool(_numba_is_permutation(self._a))

    def get_inverse(self) -> np.ndarray:
        """Array inv such that inv[p[k]] == k."""
        inv = np.empty_like(self._a)
        inv[self._a] = np.arange(len(self._a), dtype=np.int64)
        return inv

    # --- primitives ---

    def _check(self, *indices: int) -> None:
        n = len(self._a)
        for i in indices:
            if i < 0 or i >= n:
                raise IndexError(f"index {i} out of range for length {n}")

    def swap(self, i: int, j: int) -> None:
        self._check(i, j)
        a = self._a
        a[i], a[j] = a[j], a[i]

    def reverse(self, i: Optional[int] = None, j: Optional[int] = None) -> None:
        """Reverses positions i..j inclusive, in either order. No arguments reverses everything."""
        if i is None:
            i, j = 0, len(self._a) - 1
        elif j is None:
            raise TypeError("reverse needs both indices or neither")
        elif j < i:
            i, j = j, i
        if i < j:
            self._check(i, j)
            _numba_reverse(self._a, i, j)

    def remove_and_insert(self, i: int, j: int) -> None:
        """Removes the element at i and reinserts it at j, shifting the elements between."""
        if i != j:
            self._check(i, j)
            _numba_remove_and_insert_block(self._a, i, 1, j)

    def remove_and_insert_block(self, i: int, size: int, j: int) -> None:
        """
        Removes the block starting at i and reinserts it so that it starts at j.

        Args:
            i: First index of the block.
            size: Number of elements in the block.
            j: Index where the block begins afterwards.
        """
        if size == 0 or i == j:
            return
        if size < 0:
            raise ValueError("block size must be non-negative")
        self._check(i, j, i + size - 1, j + size - 1)
        _numba_remove_and_insert_block(self._a, i, size, j)

    def swap_blocks(self, a: int, b: int, i: int, j: int) -> None:
        """
        Exchanges blocks [a, b] and [i, j], keeping the elements between them in order.

        Requires a <= b < i <= j. The inverse is swap_blocks(a, a+j-i, j-b+a, j).
        """
        if not (a <= b < i <= j):
            raise ValueError("swap_blocks requires a <= b < i <= j")
        self._check(a, j)
        _numba_swap_blocks(self._a, a, b, i, j)

    def rotate(self, k: int) -> None:
        """Left rotation by k, new[x] = old[(x + k) % n]. Negative k rotates right."""
        n = len(self._a)
        if n == 0:
            return
        k %= n
        if k:
            _numba_rotate(self._a, k)

    def cycle(self, indices: Sequence[int]) -> None:
        """
        Moves values along a cycle of positions: p[idx[t-1]] <- p[idx[t]], and
        the last position receives the old p[idx[0]]. Cycling the reversed
        index sequence undoes it.
        """
        idx = np.ascontiguousarray(indices, dtype=np.int64)
        if len(idx) < 2:
            return
        if len(idx) == 2:
            self.swap(int(idx[0]), int(idx[1]))
            return
        self._check(int(idx.min()), int(idx.max()))
        _numba_cycle(self._a, idx)

    def scramble(self, i: int, j: int, rng: SplittableGenerator) -> None:
        """Uniformly shuffles positions i..j inclusive (either order)."""
        if j < i:
            i, j = j, i
        if i < j:
            self._check(i, j)
            rng.shuffle(self._a[i:j + 1])

    def scramble_indices(self, indices: Sequence[int], rng: SplittableGenerator) -> None:
        idx = np.asarray(indices, dtype=np.int64)
        if len(idx) < 2:
            return
        shuffled = idx.copy()
        rng.shuffle(shuffled)
        self._a[idx] = self._a[shuffled]
