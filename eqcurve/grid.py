from functools import lru_cache

import numpy as np
from numba import njit

from eqcurve.curve import Curve

LO_FREQ = 50.0
HI_FREQ = 14000.0

# Rough tracing of an equal-loudness contour (Hz, dB).
EQUAL_LOUDNESS = Curve(
    [20, 80, 400, 1000, 1500, 2500, 4000, 8500, 15000, 19000, 30000],
    [109, 82, 62, 60, 64, 57, 57, 73, 72, 68, 130])


def density(freq):
    """
    Number of grid points per octave-like unit at the given frequency.
    The more sensitive the ear, the denser the grid.
    """
    return 400 / EQUAL_LOUDNESS.valueAt(freq)


def eq_frequencies(lo: float = LO_FREQ, hi: float = HI_FREQ) -> np.ndarray:
    """
    Generate the ascending analysis frequencies from ``lo`` up to and
    including ``hi``, spaced according to the equal-loudness density.
    """
    if not 0 < lo < hi:
        raise ValueError(f'Invalid frequency range: {lo} - {hi}')
    return _eq_frequencies(float(lo), float(hi))


@lru_cache
def _eq_frequencies(lo: float, hi: float) -> np.ndarray:
    freqs = _step(lo, hi, EQUAL_LOUDNESS.freq.copy(),
                  EQUAL_LOUDNESS.gain.copy())
    freqs.flags.writeable = False
    return freqs


@njit
def _step(lo: float, hi: float, xp: np.ndarray, fp: np.ndarray) -> np.ndarray:
    """
    Walk from ``lo`` towards ``hi`` with steps proportional to the
    frequency and inversely proportional to the density. The last
    point is always exactly ``hi``, even when the walk overshoots.
    """
    scale = 2 / np.e
    n = 0
    freq = lo
    while freq < hi:
        n += 1
        freq += freq / (400 / np.interp(freq, xp, fp)) * scale
    freqs = np.empty(n + 1)
    freq = lo
    for i in range(n):
        freqs[i] = freq
        freq += freq / (400 / np.interp(freq, xp, fp)) * scale
    freqs[n] = hi
    return freqs
