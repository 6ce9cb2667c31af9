"""Command line harness for drawing reproducible PCG sequences."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "draw_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from pcg_random import DrawConfig, EntropyUnavailableError, run_draws

logger = logging.getLogger("run_draws")


def _parse_int(value: str) -> int:
    """Accept decimal or 0x-prefixed hex, with an optional leading minus."""

    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Expected an integer (decimal or 0x-prefixed hex), received '{value}'."
        ) from exc


def _parse_count(value: str) -> int:
    count = _parse_int(value)
    if count < 0:
        raise argparse.ArgumentTypeError("Draw count must be zero or positive.")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw 64-bit values from the two-stream PCG generator")
    parser.add_argument("--seed1", type=_parse_int, default=42, help="Initial state for the high-word stream")
    parser.add_argument("--seed2", type=_parse_int, default=42, help="Initial state for the low-word stream")
    parser.add_argument("--seq1", type=_parse_int, default=54, help="Sequence id for the high-word stream")
    parser.add_argument(
        "--seq2",
        type=_parse_int,
        default=54,
        help="Sequence id for the low-word stream (complemented if it matches --seq1)",
    )
    parser.add_argument("--count", type=_parse_count, default=32, help="Number of values to draw")
    parser.add_argument(
        "--advance",
        type=_parse_int,
        default=0,
        help="Jump this many draws ahead before drawing (negative jumps back)",
    )
    parser.add_argument(
        "--source",
        choices=("random", "urandom"),
        help="Seed from /dev/random or /dev/urandom instead of the explicit seeds",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging on stderr")
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "draw_logs/latest_run.json under the repository root."
        ),
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    cfg = DrawConfig(
        seed1=args.seed1,
        seed2=args.seed2,
        seq1=args.seq1,
        seq2=args.seq2,
        count=args.count,
        advance=args.advance,
        source=args.source,
    )
    try:
        result = run_draws(cfg)
    except EntropyUnavailableError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))
        logger.debug("Wrote report to %s", log_path)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
