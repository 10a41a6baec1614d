"""
chuk-fretboard - music theory on the fretboard.

Scales, modes and chords built over the chromatic ring, rendered as text
diagrams against a fretted instrument's strings.
"""

__version__ = "0.1.0"
