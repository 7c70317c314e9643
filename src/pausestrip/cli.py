"""CLI entrypoint for pausestrip."""

import argparse
import logging
import sys

import parselmouth

from pausestrip.annotation import TierNotFoundError
from pausestrip.types import CleanConfig

logger = logging.getLogger("pausestrip")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    defaults = CleanConfig()
    parser = argparse.ArgumentParser(
        prog="pausestrip",
        description="Strip silences and pauses from annotated recordings "
                    "and report raw vs. cleaned duration and intensity",
    )
    parser.add_argument("input_dir",
                        help="Directory of X.wav files with X.wav.TextGrid annotations")
    parser.add_argument("output_dir",
                        help="Directory for the report (created if missing)")
    parser.add_argument("table_name",
                        help="Report file name without extension")
    parser.add_argument("--tier", default=defaults.tier_name,
                        help=f"Annotation tier to scan (default: {defaults.tier_name})")
    parser.add_argument("--silence-pattern", default=defaults.silence_pattern,
                        help=f"Regex for silence labels (default: {defaults.silence_pattern})")
    parser.add_argument("--pause-label", default=defaults.pause_label,
                        help=f"Label of pause intervals (default: {defaults.pause_label})")
    parser.add_argument("--short-pause", type=float, default=defaults.short_pause,
                        help="Pauses up to this many seconds are kept "
                             f"(default: {defaults.short_pause})")
    parser.add_argument("--pitch-floor", type=float, default=defaults.pitch_floor,
                        help="Minimum pitch in Hz for the intensity contour "
                             f"(default: {defaults.pitch_floor:g})")
    parser.add_argument("--save-cleaned", action="store_true", default=False,
                        help="Also write each cleaned recording as <name>_nopauses.wav")
    parser.add_argument("--checkpoint", action="store_true", default=False,
                        help="Save the report after every token, not only at the end")
    parser.add_argument("-v", "--verbose", action="store_true", default=False,
                        help="Log every interval decision")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(name)s %(levelname)s: %(message)s",
    )

    from pausestrip.clean import process

    config = CleanConfig(
        tier_name=args.tier,
        silence_pattern=args.silence_pattern,
        pause_label=args.pause_label,
        short_pause=args.short_pause,
        pitch_floor=args.pitch_floor,
    )

    try:
        result = process(
            input_dir=args.input_dir,
            output_dir=args.output_dir,
            table_name=args.table_name,
            config=config,
            save_cleaned=args.save_cleaned,
            checkpoint=args.checkpoint,
        )
    except (FileNotFoundError, TierNotFoundError, ValueError, parselmouth.PraatError) as e:
        logger.error(f"Aborted: {e}")
        sys.exit(1)

    print(f"Wrote {len(result.rows)} row(s) to {result.table_path}")
    if result.skipped:
        print(f"Skipped {len(result.skipped)} token(s) with no speech: "
              f"{', '.join(result.skipped)}")
    for path in result.cleaned_paths:
        print(f"  {path.name}")


if __name__ == "__main__":
    main()
