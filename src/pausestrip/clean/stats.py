"""Concatenate a token's fragments and measure raw vs. cleaned audio."""

import parselmouth

from pausestrip.audio import (
    concatenate,
    get_duration,
    get_intensity,
    get_max_intensity,
)
from pausestrip.types import Fragment, ReportRow


def measure_raw(
    sound: parselmouth.Sound, pitch_floor: float = 100.0
) -> tuple[float, float, float]:
    """Return (duration, mean intensity dB, max intensity dB) of the original."""
    return (
        get_duration(sound),
        get_intensity(sound),
        get_max_intensity(sound, pitch_floor),
    )


def combine(fragments: list[Fragment]) -> parselmouth.Sound:
    """Concatenate fragment sounds in interval order."""
    if not fragments:
        raise ValueError("No fragments to combine")
    ordered = sorted(fragments, key=lambda f: f.interval.index)
    return concatenate([f.sound for f in ordered])


def summarize_token(
    basename: str,
    sound: parselmouth.Sound,
    fragments: list[Fragment],
    pitch_floor: float = 100.0,
) -> tuple[ReportRow, parselmouth.Sound]:
    """Build the report row for one token.

    Returns the row and the combined signal; the caller decides whether
    the combined signal is saved before dropping it.
    """
    duration_raw, amplitude_raw, max_amplitude_raw = measure_raw(sound, pitch_floor)

    combined = combine(fragments)
    row = ReportRow(
        token=basename,
        duration_raw=duration_raw,
        amplitude_raw=amplitude_raw,
        max_amplitude_raw=max_amplitude_raw,
        duration_no_pauses=get_duration(combined),
        amplitude_no_pauses=get_intensity(combined),
    )
    return row, combined
