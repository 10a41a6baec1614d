"""
Instrument definitions - string layouts the views render against.
"""

from chuk_fretboard.instruments.loader import InstrumentLoader
from chuk_fretboard.instruments.models import FrettedInstrument

__all__ = [
    "FrettedInstrument",
    "InstrumentLoader",
]
