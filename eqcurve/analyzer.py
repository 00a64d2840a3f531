import logging
from typing import Optional, Sequence

import numpy as np
import numpy.typing as npt

from eqcurve.curve import Curve, db_to_power, power_to_db
from eqcurve.errors import EmptyInputError
from eqcurve.grid import eq_frequencies

WINDOW_STEPS = 20

logger = logging.getLogger('eqcurve')


def resample(curve: Curve, freqs: npt.ArrayLike) -> Curve:
    """
    Re-express ``curve`` on the given frequencies.

    Each new point gets the power average of the curve over the cell
    it represents, which reaches halfway to the neighbouring frequencies
    on either side. The first and last cells are one-sided.
    The cell is sampled at ``WINDOW_STEPS`` equally spaced frequencies.
    """
    freqs = np.asarray(freqs, dtype=float)
    if not freqs.size:
        return Curve([], [])
    left = np.concatenate([freqs[:1], freqs[:-1]])
    right = np.concatenate([freqs[1:], freqs[-1:]])
    x1 = (freqs + left) / 2
    x2 = (freqs + right) / 2
    steps = np.arange(WINDOW_STEPS) / WINDOW_STEPS
    x = x1[:, np.newaxis] + (x2 - x1)[:, np.newaxis] * steps
    power = db_to_power(curve.valueAt(x))
    return Curve(freqs, power_to_db(power.mean(axis=1)))


def combine(curves: Sequence[Curve]) -> Curve:
    """
    Average the curves in the power domain. All curves must have
    the same frequencies, as is the case after resampling them onto
    the same grid.
    """
    if not curves:
        raise EmptyInputError('No curves to combine')
    freq = curves[0].freq
    for curve in curves[1:]:
        if not np.array_equal(curve.freq, freq):
            raise ValueError('Curves must share the same frequencies')
    power = np.mean([db_to_power(curve.gain) for curve in curves], axis=0)
    return Curve(freq, power_to_db(power))


def difference(curve: Curve, other: Curve) -> Curve:
    """Gain of ``curve`` minus gain of ``other``."""
    freq = curve.freq
    return Curve(freq, curve.valueAt(freq) - other.valueAt(freq))


def normalize(curve: Curve) -> Curve:
    """Shift the curve so that its peak is at 0 dB."""
    peak = curve.peakGain()
    logger.debug('Peak gain before normalization: %.3f dB', peak)
    return curve.transform(lambda gain: gain - peak)


def correction(
        measurements: Sequence[Curve], target: Curve,
        freqs: Optional[npt.ArrayLike] = None) -> Curve:
    """
    Calculate the correction curve that takes the averaged
    measurements to the target.

    Args:
      measurements: Repeated measurements of the same system.
      target: Desired response.
      freqs: Frequencies to calculate the correction for. Defaults to
        the equal-loudness spaced grid.

    Returns:
      Correction curve with a peak gain of 0 dB.
    """
    if not measurements:
        raise EmptyInputError('No measurements given')
    if freqs is None:
        freqs = eq_frequencies()
    averaged = combine([resample(m, freqs) for m in measurements])
    target = resample(target, freqs)
    return normalize(difference(target, averaged))
