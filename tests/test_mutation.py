import numpy as np
import pytest

from permops import Permutation, SplittableGenerator
from permops.iterators import (
    AdjacentSwapIterator,
    BlockInterchangeIterator,
    BlockMoveIterator,
    InsertionIterator,
    ReversalIterator,
    RotationIterator,
    SwapIterator,
    TwoChangeIterator,
    WindowLimitedBlockMoveIterator,
    WindowLimitedInsertionIterator,
    WindowLimitedReversalIterator,
    WindowLimitedSwapIterator,
)
from permops.mutation import (
    AdjacentSwapMutation,
    BlockInterchangeMutation,
    BlockMoveMutation,
    CycleAlphaMutation,
    CycleMutation,
    InsertionMutation,
    ReversalMutation,
    RotationMutation,
    ScrambleMutation,
    SwapMutation,
    ThreeOptMutation,
    TwoChangeMutation,
    UndoableScrambleMutation,
    UndoableUniformScrambleMutation,
    UniformScrambleMutation,
    WeightedHybridMutation,
    WeightedHybridUndoableMutation,
    WindowLimitedBlockMoveMutation,
    WindowLimitedInsertionMutation,
    WindowLimitedReversalMutation,
    WindowLimitedScrambleMutation,
    WindowLimitedSwapMutation,
    WindowLimitedUndoableScrambleMutation,
)
from permops.mutation.cycle import _CycleBase

from neighborhoods import (
    block_interchange_neighbors,
    block_move_neighbors,
    insertion_neighbors,
    reversal_neighbors,
    rotation_neighbors,
    swap_neighbors,
)


def seeded(seed=7):
    return SplittableGenerator(seed=seed)


UNDOABLE = [
    lambda r: SwapMutation(rng=r),
    lambda r: AdjacentSwapMutation(rng=r),
    lambda r: WindowLimitedSwapMutation(2, rng=r),
    lambda r: ReversalMutation(rng=r),
    lambda r: WindowLimitedReversalMutation(2, rng=r),
    lambda r: InsertionMutation(rng=r),
    lambda r: WindowLimitedInsertionMutation(2, rng=r),
    lambda r: BlockMoveMutation(rng=r),
    lambda r: WindowLimitedBlockMoveMutation(3, rng=r),
    lambda r: BlockInterchangeMutation(rng=r),
    lambda r: RotationMutation(rng=r),
    lambda r: TwoChangeMutation(rng=r),
    lambda r: ThreeOptMutation(rng=r),
    lambda r: CycleMutation(4, rng=r),
    lambda r: CycleAlphaMutation(0.5, rng=r),
    lambda r: UndoableScrambleMutation(rng=r),
    lambda r: WindowLimitedUndoableScrambleMutation(2, rng=r),
    lambda r: UndoableUniformScrambleMutation(0.5, rng=r),
    lambda r: WeightedHybridUndoableMutation(
        [SwapMutation(rng=seeded(1)), ReversalMutation(rng=seeded(2))], [1.0, 3.0], rng=r),
]

NOT_UNDOABLE = [
    lambda r: ScrambleMutation(rng=r),
    lambda r: WindowLimitedScrambleMutation(2, rng=r),
    lambda r: UniformScrambleMutation(0.5, rng=r),
    lambda r: UniformScrambleMutation(0.3, guarantee_change=True, rng=r),
    lambda r: WeightedHybridMutation([ScrambleMutation(rng=seeded(3)), SwapMutation(rng=seeded(4))], [1, 1], rng=r),
]


@pytest.mark.parametrize("make", UNDOABLE)
@pytest.mark.parametrize("n", range(0, 8))
def test_mutate_then_undo_restores(make, n, assert_valid):
    m = make(seeded(n))
    p = Permutation.random(n, seeded(100 + n))
    for _ in range(20):
        before = p.copy()
        m.mutate(p)
        assert_valid(p, n)
        m.undo(p)
        assert p == before


@pytest.mark.parametrize("make", NOT_UNDOABLE)
@pytest.mark.parametrize("n", range(0, 8))
def test_mutation_keeps_permutation_valid(make, n, assert_valid):
    m = make(seeded(n))
    p = Permutation.identity(n)
    for _ in range(20):
        m.mutate(p)
        assert_valid(p, n)


@pytest.mark.parametrize("make", UNDOABLE + NOT_UNDOABLE)
def test_short_permutations_untouched(make):
    m = make(seeded())
    for n in (0, 1):
        p = Permutation.identity(n)
        m.mutate(p)
        assert p == Permutation.identity(n)


@pytest.mark.parametrize("make,expected", [
    (lambda r: SwapMutation(rng=r), swap_neighbors),
    (lambda r: AdjacentSwapMutation(rng=r), lambda n: swap_neighbors(n, 1)),
    (lambda r: ReversalMutation(rng=r), reversal_neighbors),
    (lambda r: InsertionMutation(rng=r), insertion_neighbors),
    (lambda r: BlockMoveMutation(rng=r), block_move_neighbors),
    (lambda r: BlockInterchangeMutation(rng=r), block_interchange_neighbors),
    (lambda r: RotationMutation(rng=r), rotation_neighbors),
])
def test_mutation_stays_in_neighborhood(make, expected):
    n = 5
    m = make(seeded())
    allowed = expected(n)
    seen = set()
    for _ in range(2000):
        p = Permutation.identity(n)
        m.mutate(p)
        seen.add(tuple(p))
    assert seen == allowed


@pytest.mark.parametrize("make,expected", [
    (lambda w, r: WindowLimitedSwapMutation(w, rng=r), swap_neighbors),
    (lambda w, r: WindowLimitedReversalMutation(w, rng=r), reversal_neighbors),
    (lambda w, r: WindowLimitedInsertionMutation(w, rng=r), insertion_neighbors),
    (lambda w, r: WindowLimitedBlockMoveMutation(w, rng=r), block_move_neighbors),
])
@pytest.mark.parametrize("window", [1, 2, 3, 10])
def test_windowed_mutation_covers_window(make, expected, window):
    n = 6
    m = make(window, seeded(window))
    allowed = expected(n, window)
    seen = set()
    for _ in range(2000):
        p = Permutation.identity(n)
        m.mutate(p)
        assert tuple(p) in allowed
        seen.add(tuple(p))
    assert seen == allowed


def test_windowed_scramble_stays_in_window():
    n, window = 8, 2
    m = WindowLimitedScrambleMutation(window, rng=seeded())
    for _ in range(200):
        p = Permutation.identity(n)
        m.mutate(p)
        moved = [k for k in range(n) if p[k] != k]
        if moved:
            assert max(moved) - min(moved) <= window


@pytest.mark.parametrize("make", [
    lambda: WindowLimitedSwapMutation(0),
    lambda: WindowLimitedReversalMutation(-1),
    lambda: WindowLimitedInsertionMutation(0),
    lambda: WindowLimitedBlockMoveMutation(0),
    lambda: WindowLimitedScrambleMutation(0),
    lambda: CycleMutation(1),
    lambda: CycleAlphaMutation(0.0),
    lambda: CycleAlphaMutation(1.0),
    lambda: UniformScrambleMutation(1.5),
    lambda: WeightedHybridMutation([], []),
    lambda: WeightedHybridMutation([SwapMutation()], [1.0, 2.0]),
    lambda: WeightedHybridMutation([SwapMutation()], [0.0]),
])
def test_invalid_arguments_rejected(make):
    with pytest.raises(ValueError):
        make()


@pytest.mark.parametrize("m,iterator_type", [
    (SwapMutation(), SwapIterator),
    (AdjacentSwapMutation(), AdjacentSwapIterator),
    (WindowLimitedSwapMutation(2), WindowLimitedSwapIterator),
    (ReversalMutation(), ReversalIterator),
    (WindowLimitedReversalMutation(2), WindowLimitedReversalIterator),
    (InsertionMutation(), InsertionIterator),
    (WindowLimitedInsertionMutation(2), WindowLimitedInsertionIterator),
    (BlockMoveMutation(), BlockMoveIterator),
    (WindowLimitedBlockMoveMutation(2), WindowLimitedBlockMoveIterator),
    (BlockInterchangeMutation(), BlockInterchangeIterator),
    (RotationMutation(), RotationIterator),
    (TwoChangeMutation(), TwoChangeIterator),
])
def test_iterator_factories(m, iterator_type):
    it = m.iterator(Permutation.identity(5))
    assert type(it) is iterator_type
    assert it.has_next()


def test_windowed_iterator_window_exceeding_length():
    p = Permutation.identity(4)
    it = WindowLimitedSwapMutation().iterator(p)
    count = 0
    while it.has_next():
        it.next_mutant()
        count += 1
    assert count == 6


@pytest.mark.parametrize("make", UNDOABLE + NOT_UNDOABLE)
def test_split_is_independent_and_same_type(make):
    m = make(seeded())
    s = m.split()
    assert type(s) is type(m)
    assert s is not m
    p = Permutation.identity(6)
    s.mutate(p)
    assert p.is_valid()


def test_split_streams_reproducible():
    a = SwapMutation(rng=seeded(11)).split()
    b = SwapMutation(rng=seeded(11)).split()
    p, q = Permutation.identity(10), Permutation.identity(10)
    for _ in range(10):
        a.mutate(p)
        b.mutate(q)
    assert p == q


def test_cycle_mutation_moves_k_elements():
    m = CycleMutation(3, rng=seeded())
    for _ in range(100):
        p = Permutation.identity(10)
        m.mutate(p)
        changed = sum(1 for k in range(10) if p[k] != k)
        assert changed in (2, 3)


def test_cycle_alpha_lengths_in_range():
    m = CycleAlphaMutation(0.5, rng=seeded())
    for n in (2, 3, 8):
        for u in np.linspace(0.0, 0.999, 25):
            k = m._compute_k(n, float(u))
            assert 2 <= k <= n
    assert m._compute_k(8, 0.0) == 2


def test_uniform_scramble_guarantee_change():
    m = UniformScrambleMutation(0.0, guarantee_change=True, rng=seeded())
    p = Permutation.identity(2)
    changed = 0
    for _ in range(50):
        m.mutate(p)
        changed += p.to_list() != [0, 1]
        assert p.is_valid()
    assert changed > 0


def test_uniform_scramble_zero_probability_is_noop():
    m = UniformScrambleMutation(0.0, rng=seeded())
    p = Permutation.identity(6)
    m.mutate(p)
    assert p == Permutation.identity(6)


def test_hybrid_uses_every_operator():
    swap = SwapMutation(rng=seeded(1))
    rotate = RotationMutation(rng=seeded(2))
    m = WeightedHybridUndoableMutation([swap, rotate], [1.0, 1.0], rng=seeded(3))
    kinds = set()
    rotations = rotation_neighbors(5)
    for _ in range(100):
        p = Permutation.identity(5)
        m.mutate(p)
        kinds.add("rotation" if tuple(p) in rotations else "swap")
        m.undo(p)
        assert p == Permutation.identity(5)
    assert kinds == {"rotation", "swap"}


def test_cycle_base_is_abstract():
    with pytest.raises(TypeError):
        _CycleBase(seeded())
