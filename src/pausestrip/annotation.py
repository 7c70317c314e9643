"""TextGrid access: load an annotation, find a tier, list its intervals."""

import logging
from dataclasses import dataclass
from pathlib import Path

from praatio.utilities import textgrid_io

from pausestrip.types import Interval

logger = logging.getLogger(__name__)

INTERVAL_TIER = "IntervalTier"


class TierNotFoundError(LookupError):
    """Raised when an annotation has no tier with the requested name."""

    def __init__(self, tier_name: str, available: list[str], source: str = ""):
        self.tier_name = tier_name
        self.available = available
        where = f" in {source}" if source else ""
        super().__init__(
            f"No tier named {tier_name!r}{where}. Available: {available}"
        )


@dataclass
class Tier:
    """One tier as it appears in the file."""
    name: str
    tier_class: str     # "IntervalTier" or "TextTier"
    entries: list       # (start, end, label) or (time, label) tuples


@dataclass
class Annotation:
    """The tiers of a TextGrid in file order, repeated names included."""
    tiers: list[Tier]
    xmin: float
    xmax: float

    @property
    def tier_names(self) -> list[str]:
        return [t.name for t in self.tiers]


def _read_text(path: Path) -> str:
    """Praat writes TextGrids as UTF-16 (with a BOM) or UTF-8."""
    raw = path.read_bytes()
    if raw.startswith((b"\xff\xfe", b"\xfe\xff")):
        return raw.decode("utf-16")
    return raw.decode("utf-8-sig")


def load_textgrid(path: str | Path) -> Annotation:
    """Parse a TextGrid file.

    Tiers keep their file order even when names repeat, and blank
    intervals are kept so interval indices match their position in the
    tier.

    Raises:
        FileNotFoundError: if the file does not exist.
        ValueError: if the file is not a readable TextGrid.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Annotation not found: {path}")
    try:
        data = textgrid_io.parseTextgridStr(_read_text(path), True)
        tiers = [
            Tier(name=t["name"], tier_class=t["class"], entries=list(t["entries"]))
            for t in data["tiers"]
        ]
        return Annotation(tiers=tiers, xmin=float(data["xmin"]), xmax=float(data["xmax"]))
    except (IndexError, KeyError, TypeError, ValueError, UnicodeError) as e:
        raise ValueError(f"Malformed annotation {path}: {e}") from e


def find_tier_index(annotation: Annotation, tier_name: str, source: str = "") -> int:
    """Return the 1-based index of the tier called tier_name.

    Scans every tier; if the name occurs more than once the last one wins.
    """
    found = None
    for i, name in enumerate(annotation.tier_names, start=1):
        if name == tier_name:
            found = i
    if found is None:
        raise TierNotFoundError(tier_name, annotation.tier_names, source)
    return found


def get_intervals(annotation: Annotation, tier_index: int) -> list[Interval]:
    """List the intervals of the tier at tier_index (1-based), in order."""
    tier = annotation.tiers[tier_index - 1]
    if tier.tier_class != INTERVAL_TIER:
        raise ValueError(f"Tier {tier.name!r} is not an interval tier")
    return [
        Interval(index=i, start=float(start), end=float(end), label=label)
        for i, (start, end, label) in enumerate(tier.entries, start=1)
    ]
