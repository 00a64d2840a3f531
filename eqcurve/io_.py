import math

from eqcurve.curve import Curve
from eqcurve.errors import EmptyInputError, InputNotFoundError, ParseError


def read_spectrum(path: str) -> Curve:
    """
    Read a spectrum as exported by Audacity's "Plot Spectrum".

    The first line is a header and is skipped. Every other non-empty line
    has a frequency in Hz and a level in dB, separated by a tab.
    """
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as exc:
        raise InputNotFoundError(path) from exc
    try:
        lines = data.decode('utf-8').split('\n')
    except UnicodeDecodeError as exc:
        lineno = data.count(b'\n', 0, exc.start) + 1
        raise ParseError(path, lineno, 'not valid UTF-8 text') from None
    points = []
    for lineno, line in enumerate(lines[1:], 2):
        line = line.strip()
        if not line:
            continue
        fields = line.split('\t')
        if len(fields) < 2:
            raise ParseError(path, lineno, 'expected frequency and level')
        try:
            freq, db = float(fields[0]), float(fields[1])
        except ValueError:
            raise ParseError(path, lineno, f'not a number: {line!r}') from None
        if not (math.isfinite(freq) and math.isfinite(db)):
            raise ParseError(path, lineno, f'not a finite number: {line!r}')
        if freq <= 0:
            raise ParseError(
                path, lineno, f'frequency must be positive: {freq}')
        if points and freq <= points[-1][0]:
            raise ParseError(path, lineno, 'frequencies must be ascending')
        points.append((freq, db))
    if not points:
        raise EmptyInputError(f'No data in {path}')
    return Curve.fromPoints(points)


def write_correction(path: str, curve: Curve):
    """
    Write curve in the format of the JamesDSP arbitrary response
    equalizer: one tab-separated frequency and gain per line.
    """
    with open(path, 'w', newline='\n') as f:
        for freq, gain in curve:
            f.write(f'{freq:.3f}\t{gain:.3f}\n')
