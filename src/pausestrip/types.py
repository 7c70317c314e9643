"""Core data types for pausestrip."""

import re
from dataclasses import dataclass, field
from pathlib import Path

import parselmouth


@dataclass
class CleanConfig:
    """Which tier to scan and how to tell speech from silence and pauses."""
    tier_name: str = "words"
    silence_pattern: str = r"^sil$"
    pause_label: str = "sp"
    short_pause: float = 0.15      # seconds; pauses this short are kept
    pitch_floor: float = 100.0     # Hz, for the intensity contour

    def compiled_silence(self) -> re.Pattern:
        """Compile silence_pattern, raising ValueError if it is not a valid regex."""
        try:
            return re.compile(self.silence_pattern)
        except re.error as e:
            raise ValueError(
                f"Invalid silence pattern {self.silence_pattern!r}: {e}"
            ) from e


@dataclass
class Interval:
    """A labeled [start, end) range on an interval tier."""
    index: int       # 1-based position in the tier
    start: float     # seconds
    end: float       # seconds
    label: str

    @property
    def duration(self) -> float:
        return self.end - self.start


@dataclass
class Fragment:
    """Audio extracted for one speech interval."""
    name: str                  # <basename>_<tier index>_<interval index>
    interval: Interval
    sound: parselmouth.Sound


@dataclass
class Token:
    """One input recording and its paired annotation."""
    basename: str
    audio_path: Path
    annotation_path: Path


@dataclass
class ReportRow:
    """Raw vs. cleaned statistics for one token."""
    token: str
    duration_raw: float
    amplitude_raw: float
    max_amplitude_raw: float
    duration_no_pauses: float
    amplitude_no_pauses: float

    def as_record(self) -> dict:
        """Return the row keyed by report column name."""
        return {
            "Token": self.token,
            "DurationRaw": self.duration_raw,
            "AmplitudeRaw": self.amplitude_raw,
            "MaxAmplitudeRaw": self.max_amplitude_raw,
            "DurationNoPauses": self.duration_no_pauses,
            "AmplitudeNoPauses": self.amplitude_no_pauses,
        }


@dataclass
class Result:
    """Output of one batch run."""
    table_path: Path
    rows: list[ReportRow]
    skipped: list[str] = field(default_factory=list)
    cleaned_paths: list[Path] = field(default_factory=list)
