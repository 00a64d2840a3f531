from typing import Callable, Iterable, Iterator, NamedTuple, Union

import numpy as np
import numpy.typing as npt

from eqcurve.errors import EmptyCurveError


class Point(NamedTuple):
    """Single sample of a curve."""

    freq: float
    gain: float


class Curve:
    """
    Immutable gain-vs-frequency curve, made of samples that are
    strictly ascending in frequency.

    Gains are in dB. For the power-domain averaging to make sense
    all curves that are combined must be relative to the same
    reference, which in practice means gains are at or below 0 dB.

    Between samples the gain is interpolated linearly and outside
    the sampled range it is clamped to the nearest sample.
    """

    __slots__ = ('freq', 'gain')

    freq: np.ndarray
    gain: np.ndarray

    def __init__(self, freq: npt.ArrayLike, gain: npt.ArrayLike):
        freq = np.array(freq, dtype=float)
        gain = np.array(gain, dtype=float)
        if freq.ndim != 1 or freq.shape != gain.shape:
            raise ValueError(
                'Frequencies and gains must be 1-d and of the same length')
        if not np.all(np.isfinite(freq)) or np.any(freq <= 0):
            raise ValueError('Frequencies must be finite and positive')
        if np.any(np.diff(freq) <= 0):
            raise ValueError('Frequencies must be strictly ascending')
        freq.flags.writeable = False
        gain.flags.writeable = False
        object.__setattr__(self, 'freq', freq)
        object.__setattr__(self, 'gain', gain)

    @classmethod
    def fromPoints(cls, points: Iterable[Point]) -> 'Curve':
        points = list(points)
        return cls([p[0] for p in points], [p[1] for p in points])

    def __setattr__(self, name, value):
        raise AttributeError('Curve is immutable')

    def __len__(self) -> int:
        return self.freq.size

    def __iter__(self) -> Iterator[Point]:
        return (Point(f, g) for f, g in zip(
            self.freq.tolist(), self.gain.tolist()))

    def __repr__(self):
        return f'Curve({len(self)} points)'

    def valueAt(self, freq: npt.ArrayLike) -> Union[float, np.ndarray]:
        """
        Gain at the given frequency (or array of frequencies).
        """
        if not len(self):
            raise EmptyCurveError('Can not interpolate an empty curve')
        value = np.interp(freq, self.freq, self.gain)
        return float(value) if np.ndim(value) == 0 else value

    def transform(self, func: Callable[[float], float]) -> 'Curve':
        """Return new curve with ``func`` applied to every gain."""
        return Curve(self.freq, [func(g) for g in self.gain.tolist()])

    def peakGain(self) -> float:
        if not len(self):
            raise EmptyCurveError('Empty curve has no peak')
        return float(self.gain.max())


def db_to_power(db: npt.ArrayLike):
    return 10 ** (np.asarray(db, dtype=float) / 10)


def power_to_db(power: npt.ArrayLike):
    return 10 * np.log10(power)
