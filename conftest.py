"""Shared pytest fixtures."""

import pytest


@pytest.fixture
def write_spectrum():
    """Write frequencies and levels in the Audacity spectrum export format."""

    def write(path, freq, gain):
        with open(path, 'w') as f:
            f.write('Frequency (Hz)\tLevel (dB)\n')
            for fr, g in zip(freq, gain):
                f.write(f'{fr:f}\t{g:f}\n')
        return str(path)

    return write
