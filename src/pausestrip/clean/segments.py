"""Walk a tier and extract the speech intervals from a recording."""

import logging

import parselmouth

from pausestrip.audio import extract_part
from pausestrip.clean.classify import classify_interval
from pausestrip.progress import ProgressLog
from pausestrip.types import CleanConfig, Fragment, Interval

logger = logging.getLogger(__name__)


def fragment_name(basename: str, tier_index: int, interval_index: int) -> str:
    """Name a fragment <basename>_<tier index>_<interval index>."""
    return f"{basename}_{tier_index}_{interval_index}"


def extract_fragments(
    sound: parselmouth.Sound,
    intervals: list[Interval],
    basename: str,
    tier_index: int,
    config: CleanConfig | None = None,
    log: ProgressLog | None = None,
) -> list[Fragment]:
    """Extract one fragment per speech interval, in interval order.

    Returns an empty list when no interval is speech. The list belongs to
    the caller; nothing is shared between calls.
    """
    config = config or CleanConfig()
    log = log or ProgressLog(logger)
    silence = config.compiled_silence()

    fragments: list[Fragment] = []
    for interval in sorted(intervals, key=lambda iv: iv.index):
        kind = classify_interval(
            interval.label,
            interval.duration,
            silence,
            config.pause_label,
            config.short_pause,
        )
        span = f"#{interval.index} {interval.label!r} {interval.start:.3f}-{interval.end:.3f}s"
        if kind == "silence":
            continue
        if kind == "pause":
            log.debug(f"{span} skipped: pause longer than {config.short_pause}s")
            continue

        part = extract_part(sound, interval.start, interval.end)
        fragments.append(Fragment(
            name=fragment_name(basename, tier_index, interval.index),
            interval=interval,
            sound=part,
        ))
        log.debug(f"{span} extracted")

    return fragments
