"""
Instrument loader - discovers and loads instrument definitions.

Instruments can come from:
1. Built-in library (shipped with package)
2. Project instruments (a user-supplied directory)
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from chuk_fretboard.instruments.models import FrettedInstrument, normalise_name

logger = logging.getLogger(__name__)


class InstrumentLoader:
    """
    Discovers and loads instrument definitions.

    Instruments are loaded from YAML files in the library and project
    directories. Project instruments override library instruments with the
    same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the instrument loader.

        Args:
            library_path: Path to built-in instrument library
            project_path: Path to project instruments directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, FrettedInstrument] = {}

    def list_instruments(self) -> list[FrettedInstrument]:
        """
        List all available instruments, sorted by name.

        Project instruments take precedence over library instruments.
        """
        instruments: dict[str, FrettedInstrument] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                instrument = self._load_instrument_file(path)
                if instrument:
                    instruments[instrument.name] = instrument

        return [instruments[name] for name in sorted(instruments)]

    def get_instrument(self, name: str) -> FrettedInstrument | None:
        """
        Get an instrument by name.

        Names match the way list_instruments() prints them, so 'Bass_Guitar'
        finds 'bass-guitar'. The file named after the instrument is tried
        first, then every other definition in the directory.

        Args:
            name: Instrument name (e.g. 'bass-guitar')

        Returns:
            FrettedInstrument if found, None otherwise
        """
        key = normalise_name(name)
        if key in self._cache:
            return self._cache[key]

        for directory in (self.project_path, self.library_path):
            if directory is None or not directory.exists():
                continue
            for path in self._candidate_files(directory, key):
                instrument = self._load_instrument_file(path)
                if instrument and instrument.name == key:
                    self._cache[key] = instrument
                    return instrument

        return None

    @staticmethod
    def _candidate_files(directory: Path, key: str) -> list[Path]:
        """YAML files in a directory, those whose stem matches the name first."""
        paths = sorted(directory.glob("*.yaml"))
        return sorted(paths, key=lambda path: normalise_name(path.stem) != key)

    def _load_instrument_file(self, path: Path) -> FrettedInstrument | None:
        """Load an instrument from a YAML file, skipping invalid ones."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return FrettedInstrument.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            logger.warning("Skipping instrument file %s: %s", path, e)
            return None

    def clear_cache(self) -> None:
        """Clear the instrument cache."""
        self._cache.clear()
