"""Decide whether an annotation interval is silence, a long pause or speech."""

import re
from typing import Literal

IntervalKind = Literal["silence", "pause", "speech"]


def classify_interval(
    label: str,
    duration: float,
    silence_pattern: re.Pattern | str = r"^sil$",
    pause_label: str = "sp",
    short_pause: float = 0.15,
) -> IntervalKind:
    """Classify one interval by its label and duration.

    - Labels matching silence_pattern are "silence".
    - pause_label intervals longer than short_pause are "pause".
    - Everything else is "speech", including blank labels and pauses of
      at most short_pause seconds.
    """
    if re.search(silence_pattern, label):
        return "silence"
    if label == pause_label and duration > short_pause:
        return "pause"
    return "speech"


def is_extractable(
    label: str,
    duration: float,
    silence_pattern: re.Pattern | str = r"^sil$",
    pause_label: str = "sp",
    short_pause: float = 0.15,
) -> bool:
    """True if the interval should be kept in the cleaned signal."""
    return classify_interval(
        label, duration, silence_pattern, pause_label, short_pause,
    ) == "speech"
