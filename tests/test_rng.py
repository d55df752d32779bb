import pytest

from life_curses.core import RandomSource


def test_rand_stays_in_range():
    rng = RandomSource(3)
    draws = [rng.rand(5) for _ in range(500)]
    assert min(draws) == 0
    assert max(draws) == 4


def test_same_seed_same_sequence():
    a = RandomSource(11)
    b = RandomSource(11)
    assert [a.rand(100) for _ in range(20)] == [b.rand(100) for _ in range(20)]


def test_clock_seed_is_recorded():
    rng = RandomSource()
    assert rng.seed > 0


def test_rand_array_shape():
    draws = RandomSource(0).rand_array(2, (4, 6))
    assert draws.shape == (4, 6)
    assert set(draws.flatten()) <= {0, 1}


@pytest.mark.parametrize("n", [0, -3])
def test_non_positive_bound_is_rejected(n):
    rng = RandomSource(0)
    with pytest.raises(ValueError):
        rng.rand(n)
    with pytest.raises(ValueError):
        rng.rand_array(n, (2, 2))
