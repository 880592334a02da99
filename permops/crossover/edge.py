"""Edge recombination crossovers.

Both parents are read as cycles. The edge map lists, for every element, its
neighbors in either parent (at most four). A child starts with its parent's
first element and repeatedly moves to a live neighbor of the last placed
element, preferring neighbors that have the fewest live edges left.

The enhanced variant marks edges present in both parents by storing the
neighbor ``v`` as ``-(v + 1)`` and follows such edges unconditionally.
"""
from __future__ import annotations

import logging
from typing import Tuple

import numpy as np
from numba import njit

from permops.crossover.base import CrossoverOperator
from permops.permutation import Permutation
from permops.rng import SplittableGenerator


logger = logging.getLogger(__name__)


# ==============================================================================
# Numba-accelerated edge map construction.
# ==============================================================================

@njit(cache=True)
def _numba_mark_common(adj: np.ndarray, u: int, v: int) -> None:
    i = 0
    while adj[u, i] != v:
        i += 1
    adj[u, i] = -(v + 1)


@njit(cache=True)
def _numba_add_edge(adj: np.ndarray, count: np.ndarray, present: np.ndarray,
                    u: int, v: int, enhanced: bool) -> None:
    if not present[u, v]:
        adj[u, count[u]] = v
        present[u, v] = True
        count[u] += 1
    elif enhanced:
        _numba_mark_common(adj, u, v)


@njit(cache=True)
def _numba_build_edge_map(raw1: np.ndarray, raw2: np.ndarray,
                          enhanced: bool) -> Tuple[np.ndarray, np.ndarray]:
    """
    Returns:
        (adj, count): adj[e, :count[e]] are the neighbors of element e.
    """
    n = len(raw1)
    adj = np.zeros((n, 4), dtype=np.int64)
    count = np.empty(n, dtype=np.int64)
    present = np.zeros((n, n), dtype=np.bool_)
    for i in range(n):
        adj[raw1[i], 0] = raw1[i - 1]
        present[raw1[i], raw1[i - 1]] = True
    if n <= 2:
        count[:] = 1
        return adj, count
    count[:] = 2
    for i in range(n):
        adj[raw1[i - 1], 1] = raw1[i]
        present[raw1[i - 1], raw1[i]] = True
    _numba_add_edge(adj, count, present, raw2[0], raw2[n - 1], enhanced)
    _numba_add_edge(adj, count, present, raw2[n - 1], raw2[0], enhanced)
    for i in range(1, n):
        _numba_add_edge(adj, count, present, raw2[i], raw2[i - 1], enhanced)
        _numba_add_edge(adj, count, present, raw2[i - 1], raw2[i], enhanced)
    if enhanced:
        # both neighbors common: interior of a shared run, store them plain
        for i in range(n):
            if count[i] == 2:
                adj[i, 0] = -(adj[i, 0] + 1)
                adj[i, 1] = -(adj[i, 1] + 1)
    return adj, count


class EdgeMap:
    """
    Live adjacency lists for edge recombination.

    Args:
        raw1: First parent.
        raw2: Second parent, same length.
        rng: Breaks ties between equally constrained neighbors.
    """

    _enhanced = False

    def __init__(self, raw1: np.ndarray, raw2: np.ndarray, rng: SplittableGenerator):
        self._rng = rng
        self.adj, self.count = _numba_build_edge_map(
            np.ascontiguousarray(raw1, dtype=np.int64),
            np.ascontiguousarray(raw2, dtype=np.int64),
            self._enhanced,
        )
        self.done = np.zeros(len(self.count), dtype=bool)

    def copy(self) -> "EdgeMap":
        """A copy of the adjacency lists, with nothing marked used."""
        other = type(self).__new__(type(self))
        other._rng = self._rng
        other.adj = self.adj.copy()
        other.count = self.count.copy()
        other.done = np.zeros(len(self.count), dtype=bool)
        return other

    @staticmethod
    def _decode(e: int) -> int:
        return e

    def pick(self, frm: int) -> int:
        """
        The next element to follow ``frm``: the live neighbor with the fewest
        live edges, or any unused element when ``frm`` has none left. Returns
        -1 when every element is used.
        """
        k = self.count[frm]
        if k == 1:
            return self._decode(int(self.adj[frm, 0]))
        if k > 0:
            return self._pick_fewest(frm, k)
        return self.any_remaining()

    def _pick_fewest(self, frm: int, k: int) -> int:
        neighbors = self.adj[frm, :k]
        remaining = self.count[neighbors]
        ties = np.flatnonzero(remaining == remaining.min())
        if len(ties) > 1:
            return int(neighbors[ties[self._rng.next_biased_int(len(ties))]])
        return int(neighbors[ties[0]])

    def used(self, element: int) -> None:
        """Marks ``element`` placed and drops every edge leading to it."""
        for x in range(self.count[element]):
            self.remove(self._decode(int(self.adj[element, x])), element)
        self.done[element] = True

    def remove(self, lst: int, element: int) -> None:
        i = 0
        while self._decode(int(self.adj[lst, i])) != element:
            i += 1
        self.count[lst] -= 1
        self.adj[lst, i] = self.adj[lst, self.count[lst]]

    def any_remaining(self) -> int:
        """An unused element with the fewest live edges, -1 if none is left."""
        candidates = np.flatnonzero(~self.done)
        if len(candidates) == 0:
            return -1
        logger.debug("no live neighbor left, choosing among %d unused elements", len(candidates))
        remaining = self.count[candidates]
        ties = candidates[remaining == remaining.min()]
        if len(ties) > 1:
            return int(ties[self._rng.next_biased_int(len(ties))])
        return int(ties[0])


class EnhancedEdgeMap(EdgeMap):
    """Edge map that also records which edges both parents share."""

    _enhanced = True

    @staticmethod
    def _decode(e: int) -> int:
        return e if e >= 0 else -(e + 1)

    def _pick_fewest(self, frm: int, k: int) -> int:
        neighbors = self.adj[frm, :k]
        common = np.flatnonzero(neighbors < 0)
        if len(common) > 0:
            return self._decode(int(neighbors[common[0]]))
        return super()._pick_fewest(frm, k)


class EdgeRecombination(CrossoverOperator):
    """
    Edge recombination (ER).

    Children inherit as many of the parents' adjacencies as possible. Each
    child keeps its own parent's first element. Both children are grown
    from the same initial edge map.
    """

    _map_type = EdgeMap

    def _cross(self, c1: Permutation, c2: Permutation) -> None:
        edge_map = self._map_type(c1.array, c2.array, self._rng)
        self._build(c1.array, edge_map.copy())
        self._build(c2.array, edge_map)

    @staticmethod
    def _build(raw: np.ndarray, edge_map: EdgeMap) -> None:
        for i in range(1, len(raw)):
            edge_map.used(int(raw[i - 1]))
            raw[i] = edge_map.pick(int(raw[i - 1]))


class EnhancedEdgeRecombination(EdgeRecombination):
    """
    Enhanced edge recombination (EER): edge recombination that always
    follows an edge common to both parents when one is available, so shared
    runs survive into the children.
    """

    _map_type = EnhancedEdgeMap
