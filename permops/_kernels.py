import numpy as np
from numba import njit


# ==============================================================================
# Numba-accelerated standalone kernels for the permutation primitives.
# Every kernel mutates the int64 array it receives in place. Index checks are
# done by the caller (Permutation), the kernels assume valid arguments.
# ==============================================================================

@njit(cache=True)
def _numba_reverse(a: np.ndarray, i: int, j: int) -> None:
    while i < j:
        temp = a[i]
        a[i] = a[j]
        a[j] = temp
        i += 1
        j -= 1


@njit(cache=True)
def _numba_remove_and_insert_block(a: np.ndarray, i: int, size: int, j: int) -> None:
    """
    Moves the block a[i:i+size] so that it starts at index j.
    """
    if size == 0 or i == j:
        return
    temp = np.empty(size, dtype=np.int64)
    for k in range(size):
        temp[k] = a[i + k]
    if i < j:
        for k in range(i, j):
            a[k] = a[k + size]
    else:
        for k in range(i - 1, j - 1, -1):
            a[k + size] = a[k]
    for k in range(size):
        a[j + k] = temp[k]


@njit(cache=True)
def _numba_swap_blocks(a: np.ndarray, h: int, i: int, j: int, k: int) -> None:
    """
    Exchanges the blocks a[h..i] and a[j..k] (inclusive), h <= i < j <= k.
    """
    total = k - h + 1
    temp = np.empty(total, dtype=np.int64)
    w = 0
    for x in range(j, k + 1):
        temp[w] = a[x]
        w += 1
    for x in range(i + 1, j):
        temp[w] = a[x]
        w += 1
    for x in range(h, i + 1):
        temp[w] = a[x]
        w += 1
    for x in range(total):
        a[h + x] = temp[x]


@njit(cache=True)
def _numba_rotate(a: np.ndarray, k: int) -> None:
    n = len(a)
    temp = a.copy()
    for x in range(n):
        a[x] = temp[(x + k) % n]


@njit(cache=True)
def _numba_cycle(a: np.ndarray, indices: np.ndarray) -> None:
    m = len(indices)
    first = a[indices[0]]
    for t in range(1, m):
        a[indices[t - 1]] = a[indices[t]]
    a[indices[m - 1]] = first


@njit(cache=True)
def _numba_is_permutation(a: np.ndarray) -> bool:
    n = len(a)
    seen = np.zeros(n, dtype=np.bool_)
    for x in range(n):
        v = a[x]
        if v < 0 or v >= n or seen[v]:
            return False
        seen[v] = True
    return True
