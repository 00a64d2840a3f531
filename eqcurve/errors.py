class CurveError(Exception):
    """Base class for all errors raised by eqcurve."""


class InputNotFoundError(CurveError, FileNotFoundError):
    """An input file does not exist or can't be read."""

    def __init__(self, path: str):
        super().__init__(f'Could not read file: {path}')
        self.path = path


class ParseError(CurveError, ValueError):
    """A data line in a spectrum file is malformed."""

    def __init__(self, path: str, lineno: int, reason: str):
        super().__init__(f'{path}:{lineno}: {reason}')
        self.path = path
        self.lineno = lineno
        self.reason = reason


class EmptyInputError(CurveError, ValueError):
    """An input file has no data rows, or no measurements are given."""


class EmptyCurveError(CurveError, ValueError):
    """A query is made on a curve without points."""
