"""Pausestrip clean: remove silences and long pauses from annotated recordings."""

import logging
from pathlib import Path

import parselmouth

from pausestrip.annotation import find_tier_index, get_intervals, load_textgrid
from pausestrip.audio import load_sound, save_wav
from pausestrip.clean.segments import extract_fragments
from pausestrip.clean.stats import summarize_token
from pausestrip.progress import ProgressLog
from pausestrip.report import ReportTable
from pausestrip.types import CleanConfig, ReportRow, Result, Token

logger = logging.getLogger(__name__)

ANNOTATION_SUFFIX = ".TextGrid"


def discover_tokens(input_dir: str | Path) -> list[Token]:
    """List the .wav files in input_dir with their paired annotations.

    Each X.wav needs an X.wav.TextGrid next to it. Tokens are sorted by
    filename so repeated runs see the same order.
    """
    input_dir = Path(input_dir)
    if not input_dir.is_dir():
        raise FileNotFoundError(f"Input directory not found: {input_dir}")

    tokens = []
    for audio_path in sorted(input_dir.glob("*.wav")):
        annotation_path = audio_path.with_name(audio_path.name + ANNOTATION_SUFFIX)
        if not annotation_path.exists():
            raise FileNotFoundError(
                f"Missing annotation for {audio_path.name}: expected {annotation_path}"
            )
        tokens.append(Token(
            basename=audio_path.stem,
            audio_path=audio_path,
            annotation_path=annotation_path,
        ))
    return tokens


def _table_filename(table_name: str) -> str:
    """Validate the report name and return it with a .csv extension."""
    name = table_name.strip()
    if name.lower().endswith(".csv"):
        name = name[:-4]
    if not name or "/" in name or "\\" in name:
        raise ValueError(f"Invalid table name: {table_name!r}")
    return f"{name}.csv"


def process_token(
    token: Token,
    config: CleanConfig | None = None,
    log: ProgressLog | None = None,
) -> tuple[ReportRow | None, parselmouth.Sound | None]:
    """Clean one token.

    Returns (row, combined signal), or (None, None) when the tier holds
    no speech interval.
    """
    config = config or CleanConfig()
    log = log or ProgressLog(logger)

    sound = load_sound(token.audio_path)
    tg = load_textgrid(token.annotation_path)
    tier_index = find_tier_index(tg, config.tier_name, source=token.annotation_path.name)
    intervals = get_intervals(tg, tier_index)
    log.info(f"{len(intervals)} interval(s) on tier {config.tier_name!r} (#{tier_index})")

    fragments = extract_fragments(
        sound, intervals, token.basename, tier_index, config, log.nested("  "),
    )
    if not fragments:
        log.info("No speech intervals, skipping")
        return None, None

    row, combined = summarize_token(token.basename, sound, fragments, config.pitch_floor)
    log.info(
        f"Kept {len(fragments)} fragment(s): "
        f"{row.duration_raw:.3f}s -> {row.duration_no_pauses:.3f}s"
    )
    return row, combined


def process(
    input_dir: str | Path,
    output_dir: str | Path,
    table_name: str,
    config: CleanConfig | None = None,
    save_cleaned: bool = False,
    checkpoint: bool = False,
) -> Result:
    """Run the clean pipeline over every token in input_dir.

    Writes <output_dir>/<table_name>.csv with one row per token that has
    at least one speech interval. Any failure aborts the whole run.
    """
    config = config or CleanConfig()
    config.compiled_silence()
    output_dir = Path(output_dir)
    table_path = output_dir / _table_filename(table_name)

    tokens = discover_tokens(input_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    log = ProgressLog(logger)
    log.info(f"Processing {len(tokens)} token(s) from {input_dir}")

    table = ReportTable()
    skipped: list[str] = []
    cleaned_paths: list[Path] = []

    for token in tokens:
        token_log = log.nested(f"  [{token.basename}] ")
        row, combined = process_token(token, config, token_log)
        if row is None:
            skipped.append(token.basename)
            continue

        table.append(row)
        if save_cleaned:
            cleaned_path = save_wav(output_dir / f"{token.basename}_nopauses.wav", combined)
            cleaned_paths.append(cleaned_path)
            token_log.info(f"Saved {cleaned_path.name}")
        del combined

        if checkpoint:
            table.save(table_path)

    table.save(table_path)
    log.info(f"Wrote {len(table)} row(s) to {table_path}")

    return Result(
        table_path=table_path,
        rows=table.rows,
        skipped=skipped,
        cleaned_paths=cleaned_paths,
    )
