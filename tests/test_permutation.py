import numpy as np
import pytest

from permops import Permutation, SplittableGenerator


def test_construction_validates():
    assert Permutation([2, 0, 1]).to_list() == [2, 0, 1]
    assert len(Permutation([])) == 0
    for bad in ([0, 0, 1], [1, 2, 3], [-1, 0], [[0, 1], [1, 0]]):
        with pytest.raises(ValueError):
            Permutation(bad)


def test_construction_copies():
    values = np.array([1, 0, 2])
    p = Permutation(values)
    values[0] = 9
    assert p.to_list() == [1, 0, 2]
    q = Permutation(p)
    q.swap(0, 1)
    assert p.to_list() == [1, 0, 2]


def test_identity_and_random():
    assert Permutation.identity(4).to_list() == [0, 1, 2, 3]
    p = Permutation.random(50, SplittableGenerator(seed=1))
    assert p.is_valid()
    assert p == Permutation.random(50, SplittableGenerator(seed=1))
    with pytest.raises(ValueError):
        Permutation.identity(-1)


def test_sequence_protocol():
    p = Permutation([3, 1, 0, 2])
    assert p[0] == 3
    assert isinstance(p[0], int)
    assert list(p) == [3, 1, 0, 2]
    s = p[1:3]
    s[0] = 99
    assert p.to_list() == [3, 1, 0, 2]
    assert repr(p) == "Permutation([3, 1, 0, 2])"
    assert p != [3, 1, 0, 2]
    with pytest.raises(TypeError):
        hash(p)


def test_get_inverse():
    p = Permutation([2, 0, 3, 1])
    inv = p.get_inverse()
    for k in range(4):
        assert inv[p[k]] == k


def test_swap_and_reverse():
    p = Permutation.identity(6)
    p.swap(1, 4)
    assert p.to_list() == [0, 4, 2, 3, 1, 5]
    p = Permutation.identity(6)
    p.reverse(4, 1)
    assert p.to_list() == [0, 4, 3, 2, 1, 5]
    p.reverse()
    assert p.to_list() == [5, 1, 2, 3, 4, 0]
    with pytest.raises(IndexError):
        p.reverse(0, 6)


@pytest.mark.parametrize("i,j", [(-1, 0), (0, -2), (4, 0), (1, 9)])
def test_swap_rejects_out_of_range(i, j):
    p = Permutation.identity(4)
    with pytest.raises(IndexError):
        p.swap(i, j)
    assert p == Permutation.identity(4)


def test_remove_and_insert():
    p = Permutation.identity(6)
    p.remove_and_insert(1, 4)
    assert p.to_list() == [0, 2, 3, 4, 1, 5]
    p.remove_and_insert(4, 1)
    assert p == Permutation.identity(6)
    p.remove_and_insert(5, 0)
    assert p.to_list() == [5, 0, 1, 2, 3, 4]


def test_remove_and_insert_block():
    p = Permutation.identity(7)
    p.remove_and_insert_block(1, 3, 3)
    assert p.to_list() == [0, 4, 5, 1, 2, 3, 6]
    p.remove_and_insert_block(3, 3, 1)
    assert p == Permutation.identity(7)
    p.remove_and_insert_block(4, 2, 0)
    assert p.to_list() == [4, 5, 0, 1, 2, 3, 6]
    with pytest.raises(IndexError):
        p.remove_and_insert_block(5, 3, 0)


def test_swap_blocks():
    p = Permutation.identity(8)
    p.swap_blocks(1, 2, 5, 7)
    assert p.to_list() == [0, 5, 6, 7, 3, 4, 1, 2]
    p.swap_blocks(1, 1 + 7 - 5, 7 - 2 + 1, 7)
    assert p == Permutation.identity(8)
    with pytest.raises(ValueError):
        p.swap_blocks(2, 3, 3, 5)


def test_rotate():
    p = Permutation.identity(5)
    p.rotate(2)
    assert p.to_list() == [2, 3, 4, 0, 1]
    p.rotate(-2)
    assert p == Permutation.identity(5)
    p.rotate(7)
    assert p.to_list() == [2, 3, 4, 0, 1]
    Permutation.identity(0).rotate(3)


def test_cycle_and_its_reverse():
    p = Permutation.identity(6)
    p.cycle([4, 1, 3])
    assert p.to_list() == [0, 3, 2, 4, 1, 5]
    p.cycle([3, 1, 4])
    assert p == Permutation.identity(6)
    p.cycle([2, 5])
    assert p.to_list() == [0, 1, 5, 3, 4, 2]


def test_scramble_stays_in_range():
    rng = SplittableGenerator(seed=4)
    for _ in range(20):
        p = Permutation.identity(10)
        p.scramble(6, 2, rng)
        assert p.is_valid()
        assert p[0:2].tolist() == [0, 1]
        assert p[7:].tolist() == [7, 8, 9]
        assert sorted(p[2:7].tolist()) == [2, 3, 4, 5, 6]


def test_scramble_indices():
    rng = SplittableGenerator(seed=4)
    p = Permutation.identity(8)
    p.scramble_indices([1, 4, 6], rng)
    assert p.is_valid()
    for k in (0, 2, 3, 5, 7):
        assert p[k] == k
    assert sorted(p[k] for k in (1, 4, 6)) == [1, 4, 6]
