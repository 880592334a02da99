import pytest

from permops import Permutation, SplittableGenerator


@pytest.fixture
def rng():
    return SplittableGenerator(seed=42)


@pytest.fixture
def assert_valid():
    def check(p: Permutation, n: int):
        assert len(p) == n
        assert p.is_valid()
        assert sorted(p) == list(range(n))
    return check
