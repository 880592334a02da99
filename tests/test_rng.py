from collections import Counter

import numpy as np
import pytest

from permops import SplittableGenerator
from permops import rng as rng_module


def test_seeded_generators_repeat():
    a, b = SplittableGenerator(seed=5), SplittableGenerator(seed=5)
    assert [a.next_int(100) for _ in range(10)] == [b.next_int(100) for _ in range(10)]


def test_split_gives_new_stream():
    parent = SplittableGenerator(seed=5)
    child = parent.split()
    assert isinstance(child, SplittableGenerator)
    assert child.generator is not parent.generator
    xs = [parent.next_int(1 << 30) for _ in range(5)]
    ys = [child.next_int(1 << 30) for _ in range(5)]
    assert xs != ys


@pytest.mark.parametrize("sort", [False, True])
def test_int_pair_distinct(rng, sort):
    for n in range(2, 8):
        for _ in range(50):
            i, j = rng.next_int_pair(n, sort)
            assert 0 <= i < n and 0 <= j < n and i != j
            if sort:
                assert i < j


def test_int_pair_uniform(rng):
    counts = Counter(rng.next_int_pair(3) for _ in range(6000))
    assert len(counts) == 6
    assert min(counts.values()) > 800


@pytest.mark.parametrize("sort", [False, True])
def test_int_triple_distinct(rng, sort):
    for n in range(3, 8):
        for _ in range(50):
            t = rng.next_int_triple(n, sort)
            assert len(set(t)) == 3
            assert all(0 <= v < n for v in t)
            if sort:
                assert list(t) == sorted(t)


@pytest.mark.parametrize("window", [1, 2, 3, 20])
def test_windowed_pair(rng, window):
    n = 10
    seen = set()
    for _ in range(500):
        i, j = rng.next_windowed_int_pair(n, window)
        assert i != j and abs(i - j) <= min(window, n - 1)
        seen.add((min(i, j), max(i, j)))
        i, j = rng.next_windowed_int_pair(n, window, sort=True)
        assert i < j
    expected = sum(1 for i in range(n) for j in range(i + 1, n) if j - i <= window)
    assert len(seen) == expected


@pytest.mark.parametrize("window", [2, 3, 5])
def test_windowed_triple(rng, window):
    n = 9
    for _ in range(300):
        t = rng.next_windowed_int_triple(n, window)
        assert len(set(t)) == 3
        assert max(t) - min(t) <= window
        assert all(0 <= v < n for v in t)
    with pytest.raises(ValueError):
        rng.next_windowed_int_triple(n, 1)


def test_sample(rng):
    for k in range(0, 6):
        s = rng.sample(5, k)
        assert len(s) == k == len(set(s.tolist()))
        assert s.dtype == np.int64


def test_sample_with_probability(rng):
    assert len(rng.sample_with_probability(10, 0.0)) == 0
    assert rng.sample_with_probability(10, 1.0).tolist() == list(range(10))
    s = rng.sample_with_probability(1000, 0.25)
    assert 150 < len(s) < 350
    assert np.all(np.diff(s) > 0)


def test_array_mask_and_permutation(rng):
    mask = rng.array_mask(8, 0.5)
    assert mask.dtype == bool and mask.shape == (8,)
    perm = rng.permutation(8)
    assert sorted(perm.tolist()) == list(range(8))


def test_factory_seeding_is_reproducible():
    try:
        rng_module.configure(123)
        a = rng_module.create_generator().next_int(1 << 30)
        b = rng_module.create_generator().next_int(1 << 30)
        rng_module.configure(123)
        assert rng_module.create_generator().next_int(1 << 30) == a
        assert rng_module.create_generator().next_int(1 << 30) == b
    finally:
        rng_module.configure_default()


def test_ensure_generator():
    g = SplittableGenerator(seed=1)
    assert rng_module.ensure_generator(g) is g
    assert isinstance(rng_module.ensure_generator(None), SplittableGenerator)
