"""
Instrument models - fretted instruments as string layouts.

An instrument is an ordered list of open-string notes and a fret count.
Definitions are plain YAML validated into these models.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_fretboard.constants import DEFAULT_FRETS, MAX_FRETS
from chuk_fretboard.core.pitch import Note


def _parse_notes(value: Any) -> Any:
    """Accept 'E,A,D' strings and lists of labels as well as Note values."""
    if isinstance(value, str):
        value = [part for part in value.split(",") if part.strip()]
    if isinstance(value, (list, tuple)):
        return [Note.parse(item) if isinstance(item, str) else item for item in value]
    return value


def normalise_name(name: str) -> str:
    """Canonical instrument name: lower case, hyphen separated."""
    return name.strip().lower().replace("_", "-")


class FrettedInstrument(BaseModel):
    """
    A fretted instrument's string layout.

    Strings are listed lowest first. Octaves, when present, give the octave
    of each open string (E2 = 2) and enable octave colouring.
    """

    name: str = Field(..., description="Instrument name (e.g., 'guitar', 'banjo')")
    description: str = Field("", description="Human-readable description")
    frets: int = Field(DEFAULT_FRETS, gt=0, le=MAX_FRETS, description="Frets to display")
    strings: list[Note] = Field(..., min_length=1, description="Open-string notes, lowest first")
    octaves: list[int] | None = Field(None, description="Octave of each open string")

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure instrument name is a valid identifier."""
        if not v or not v.replace("_", "").replace("-", "").isalnum():
            raise ValueError(f"Invalid instrument name: {v}")
        return normalise_name(v)

    @field_validator("strings", mode="before")
    @classmethod
    def parse_strings(cls, v: Any) -> Any:
        return _parse_notes(v)

    @model_validator(mode="after")
    def check_octaves(self) -> FrettedInstrument:
        if self.octaves is not None and len(self.octaves) != len(self.strings):
            raise ValueError(
                f"{self.name}: {len(self.octaves)} octaves given for {len(self.strings)} strings"
            )
        return self

    @property
    def string_count(self) -> int:
        return len(self.strings)

    @property
    def supports_octaves(self) -> bool:
        return self.octaves is not None

    def note_at(self, string: int, fret: int) -> Note:
        """The note sounded on a string (0 = lowest) at a fret (0 = open)."""
        return self.strings[string].transpose(fret)

    def octave_at(self, string: int, fret: int) -> int | None:
        """
        The octave of the note at a string and fret.

        Returns None when the instrument carries no octave data.
        """
        if self.octaves is None:
            return None
        return self.octaves[string] + (self.strings[string].value + fret) // 12

    def with_overrides(
        self,
        strings: list[Note] | None = None,
        frets: int | None = None,
    ) -> FrettedInstrument:
        """
        Return a copy with a custom tuning and/or fret count.

        Octave data describes the original tuning, so any retuning drops it.
        """
        data = self.model_dump()
        if strings and list(strings) != self.strings:
            data["strings"] = list(strings)
            data["octaves"] = None
        if frets is not None:
            data["frets"] = frets
        return FrettedInstrument.model_validate(data)
