import numpy as np
import pytest

from eqcurve import HI_FREQ, LO_FREQ, density, eq_frequencies


def test_grid_bounds_and_order():
    freqs = eq_frequencies()
    assert freqs[0] == LO_FREQ == 50
    assert freqs[-1] == HI_FREQ == 14000
    assert np.all(np.diff(freqs) > 0)


def test_grid_steps():
    freqs = eq_frequencies()
    for freq, nxt in zip(freqs[:-2], freqs[1:-1]):
        step = freq / density(freq) * 2 / np.e
        assert nxt == pytest.approx(freq + step)


def test_grid_is_denser_where_ear_is_sensitive():
    freqs = eq_frequencies()
    ratios = freqs[1:] / freqs[:-1]
    low = ratios[freqs[:-1] < 80]
    mid = ratios[(freqs[:-1] > 2500) & (freqs[:-1] < 4000)]
    assert low.min() > mid.max()


def test_density():
    assert density(1000) == pytest.approx(400 / 60)
    assert density(20) == pytest.approx(400 / 109)
    assert density(3000) == pytest.approx(400 / 57)


def test_custom_range():
    freqs = eq_frequencies(100, 1000)
    assert freqs[0] == 100
    assert freqs[-1] == 1000
    assert np.all(np.diff(freqs) > 0)


def test_narrow_range_ends_at_upper_bound():
    freqs = eq_frequencies(1000, 1001)
    assert list(freqs) == [1000, 1001]


@pytest.mark.parametrize('lo, hi', [(100, 100), (200, 100), (0, 100)])
def test_invalid_range(lo, hi):
    with pytest.raises(ValueError):
        eq_frequencies(lo, hi)
