"""Calculate equalizer correction curves from spectrum measurements"""

from eqcurve.errors import (
    CurveError, EmptyCurveError, EmptyInputError, InputNotFoundError,
    ParseError)
from eqcurve.curve import Curve, Point, db_to_power, power_to_db
from eqcurve.grid import (
    EQUAL_LOUDNESS, HI_FREQ, LO_FREQ, density, eq_frequencies)
from eqcurve.analyzer import (
    WINDOW_STEPS, combine, correction, difference, normalize, resample)
from eqcurve.io_ import read_spectrum, write_correction
