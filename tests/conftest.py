"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_fretboard.core import IntervalPattern, Note, Scale
from chuk_fretboard.instruments import FrettedInstrument, InstrumentLoader


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for project instrument files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def loader() -> InstrumentLoader:
    """Loader over the packaged instrument library only."""
    return InstrumentLoader()


@pytest.fixture
def guitar(loader: InstrumentLoader) -> FrettedInstrument:
    """Six-string guitar in standard tuning."""
    instrument = loader.get_instrument("guitar")
    assert instrument is not None
    return instrument


@pytest.fixture
def c_major() -> Scale:
    return Scale(Note.C, IntervalPattern.SCALE_MAJOR)
