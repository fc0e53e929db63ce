"""CLI entry point: python -m tempo_practice <start> <end> <step> [--beats B] [--reps R] [--sets N]"""

import argparse
import logging
import sys

from tempo_practice.calculate import calculate
from tempo_practice.config import load_defaults
from tempo_practice.errors import TempoPracticeError
from tempo_practice.formatting import format_error_rate, format_seconds, format_time
from tempo_practice.precision.approximate import error_profile


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tempo-practice",
        description="Estimate practice time for a stepwise tempo climb",
    )
    parser.add_argument("start", type=float, help="Start tempo (BPM)")
    parser.add_argument("end", type=float, help="Target tempo (BPM)")
    parser.add_argument("step", type=float, help="Tempo increase per step (BPM)")
    parser.add_argument("--beats", type=int, default=None, help="Beats per phrase")
    parser.add_argument("--reps", type=int, default=None, help="Phrase repetitions per tempo step")
    parser.add_argument("--sets", type=int, default=None, help="Number of full climbs")
    parser.add_argument(
        "--profile",
        type=float,
        nargs="+",
        metavar="STEP",
        default=None,
        help="Also print approximation error for these step sizes",
    )
    parser.add_argument("--env-file", default=None, help="Read defaults from this .env file")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        defaults = load_defaults(args.env_file)
    except TempoPracticeError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=defaults.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    beats = args.beats if args.beats is not None else defaults.beats_per_phrase
    reps = args.reps if args.reps is not None else defaults.repetitions
    sets = args.sets if args.sets is not None else defaults.sets

    try:
        result = calculate(args.start, args.end, args.step, beats, reps, sets)
        profile = (
            error_profile(args.start, args.end, args.profile, beats, reps, sets)
            if args.profile
            else []
        )
    except TempoPracticeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print("--- Practice time ---")
    print(f"Total: {format_time(result.exact_seconds)} ({format_seconds(result.exact_seconds)})")
    print(f"Steps: {result.step_count}")
    print(f"Actual end tempo: {result.actual_end_tempo:g} BPM")

    print("\n--- Details ---")
    print(f"Exact:  {format_seconds(result.exact_seconds, 4)}")
    print(f"Approx: {format_seconds(result.approx_seconds, 4)}")
    print(f"Error:  {format_error_rate(result.error_rate_percent)}")
    print(f"Beats per step: {result.total_beats_per_step}")

    if profile:
        print("\n--- Error profile ---")
        for point in profile:
            print(f"  step {point.step_size:g}: n={point.step_count} "
                  f"error {format_error_rate(point.error_rate_percent)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
