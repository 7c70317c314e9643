"""Report table: one row of raw vs. cleaned statistics per token."""

import logging
import os
import tempfile
from pathlib import Path

import pandas as pd

from pausestrip.types import ReportRow

logger = logging.getLogger(__name__)

COLUMNS = [
    "Token",
    "DurationRaw",
    "AmplitudeRaw",
    "MaxAmplitudeRaw",
    "DurationNoPauses",
    "AmplitudeNoPauses",
]


class ReportTable:
    """Append-only table of ReportRows, saved as CSV."""

    def __init__(self):
        self._rows: list[ReportRow] = []

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> list[ReportRow]:
        return list(self._rows)

    def append(self, row: ReportRow) -> None:
        self._rows.append(row)

    def to_frame(self) -> pd.DataFrame:
        """Return the table as a DataFrame with the report columns in order."""
        return pd.DataFrame([r.as_record() for r in self._rows], columns=COLUMNS)

    def save(self, path: str | Path) -> Path:
        """Write the table as UTF-8 CSV, atomically via temp file + rename."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
        os.close(fd)
        try:
            self.to_frame().to_csv(tmp, index=False, encoding="utf-8")
            os.replace(tmp, path)
        except Exception:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise
        logger.debug(f"Saved {len(self)} row(s) to {path}")
        return path
