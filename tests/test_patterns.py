import numpy as np
import pytest

from life_curses.core import LifeBoard, RandomSource
from life_curses.evaluation import find_period
from life_curses.utils.patterns import (
    PATTERN_CATEGORIES,
    from_rows,
    get_pattern,
    pattern_names,
)


def test_from_rows_pads_short_rows():
    pattern = from_rows(["*.", "***"])
    assert pattern.dtype == bool
    assert pattern.tolist() == [[True, False, False], [True, True, True]]


def test_get_pattern_returns_copy():
    glider = get_pattern('glider')
    glider[:] = False
    assert get_pattern('glider').sum() == 5


def test_unknown_pattern_lists_available_names():
    with pytest.raises(ValueError, match="glider"):
        get_pattern('spaceship-x')


def test_pattern_names_cover_every_category():
    assert len(pattern_names()) == sum(len(c) for c in PATTERN_CATEGORIES.values())
    assert 'glider_gun' in pattern_names()


def test_glider_gun_shape():
    assert get_pattern('glider_gun').shape == (9, 36)
    assert get_pattern('glider_gun').sum() == 36


@pytest.mark.parametrize("category, expected_period", [
    ('still_lifes', 1),
    ('oscillators_p2', 2),
    ('oscillators_p3', 3),
])
def test_periodic_patterns_have_their_period(category, expected_period):
    for name, pattern in PATTERN_CATEGORIES[category].items():
        h, w = pattern.shape
        board = LifeBoard(w + 6, h + 6, rng=RandomSource(0), randomize=False)
        board.place_pattern(pattern)
        trajectory = board.trajectory(8)
        assert find_period(trajectory) == expected_period, name
        assert np.array_equal(trajectory[0], trajectory[expected_period]), name
