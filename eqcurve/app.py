import argparse
import logging
import sys
from typing import List, Optional, Sequence

import eqcurve as eqc

logger = logging.getLogger('eqcurve')


def run(
        measurementPaths: Sequence[str], targetPath: str, outPath: str,
        lo: float = eqc.LO_FREQ, hi: float = eqc.HI_FREQ) -> eqc.Curve:
    """
    Read the measurements and target, calculate the correction
    and write it to ``outPath``. Nothing is written if any of the
    inputs is invalid.
    """
    if not measurementPaths:
        raise eqc.EmptyInputError('No measurement files given')
    measurements = []
    for path in measurementPaths:
        curve = eqc.read_spectrum(path)
        logger.info('Read %d points from %s', len(curve), path)
        measurements.append(curve)
    target = eqc.read_spectrum(targetPath)
    logger.info('Read %d points from target %s', len(target), targetPath)

    freqs = eqc.eq_frequencies(lo, hi)
    logger.info('Using %d frequencies from %g to %g Hz', freqs.size, lo, hi)
    corr = eqc.correction(measurements, target, freqs)
    eqc.write_correction(outPath, corr)
    logger.info('Wrote correction to %s', outPath)
    return corr


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='eqcurve',
        description='Calculate an equalizer correction curve from '
        'spectrum measurements and a target curve.')
    parser.add_argument(
        'measurements', nargs='*',
        default=['spectrum1.txt', 'spectrum2.txt'],
        help='Spectrum exports of repeated measurements')
    parser.add_argument(
        '-t', '--target', default='target.txt',
        help='Spectrum export of the target response')
    parser.add_argument(
        '-o', '--output', default='autoeq.csv',
        help='File to write the correction curve to')
    parser.add_argument(
        '--lo', type=float, default=eqc.LO_FREQ,
        help='Lowest frequency of the correction (Hz)')
    parser.add_argument(
        '--hi', type=float, default=eqc.HI_FREQ,
        help='Highest frequency of the correction (Hz)')
    parser.add_argument(
        '-v', '--verbose', action='store_true', help='Show debug output')
    args = parser.parse_args(argv)
    if not 0 < args.lo < args.hi:
        parser.error('--lo must be positive and below --hi')
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        format='%(levelname)s %(message)s',
        level=logging.DEBUG if args.verbose else logging.INFO)
    try:
        run(args.measurements, args.target, args.output, args.lo, args.hi)
    except (eqc.CurveError, OSError) as exc:
        logger.error('%s', exc)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
