"""Command line harness for deterministic RKISS draw runs."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "draw_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from rkiss import DEFAULT_SEED, WIDTHS, DrawConfig, run_draws

logger = logging.getLogger("rkiss.cli")


def _parse_seed(value: str) -> int:
    """Accept decimal or 0x-prefixed hex seeds."""

    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Seed must be an integer (decimal or 0x hex). Received: {value}"
        ) from exc


def _parse_count(value: str) -> int:
    try:
        count = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Count must be an integer. Received: {value}") from exc
    if count < 0:
        raise argparse.ArgumentTypeError("Count must be zero or a positive integer.")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw deterministic hash keys from RKISS")
    parser.add_argument(
        "--seed",
        type=_parse_seed,
        default=DEFAULT_SEED,
        help="Scramble rounds before the first draw (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument("--count", type=_parse_count, default=8, help="Number of draws to emit")
    parser.add_argument(
        "--kind",
        choices=list(WIDTHS),
        default="u64",
        help="Integer width each 64-bit draw is narrowed to",
    )
    parser.add_argument(
        "--decimal",
        action="store_true",
        help="Emit draws as integers instead of zero-padded hex strings",
    )
    parser.add_argument(
        "--stats-only",
        action="store_true",
        help="Only report stream statistics, not the draws themselves",
    )
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
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Verbosity of diagnostics written to stderr",
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cfg = DrawConfig(
        seed=args.seed,
        count=args.count,
        kind=args.kind,
        include_draws=not args.stats_only,
        hex_output=not args.decimal,
    )
    result = run_draws(cfg)

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))
        logger.info("Report written to %s", log_path)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
