"""Module entry point for `python -m gridseek`."""

from __future__ import annotations

import argparse

from gridseek.app import run_headless, run_interactive
from gridseek.config import LOG_LEVELS, load_config
from gridseek.log import configure_logging
from gridseek.search.errors import CellOutOfRange, InvalidEndpoints


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find shortest paths on a grid with blocked cells."
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run one search and print the board instead of opening the TUI.",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help="Grid dimension N for an NxN board.",
    )
    parser.add_argument(
        "--density",
        type=float,
        default=None,
        help="Probability that a generated tile is blocked.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for obstacle generation.",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds between animated search steps (TUI only).",
    )
    parser.add_argument(
        "--start",
        type=_parse_point,
        default=None,
        help="Start cell as X,Y (headless only; defaults to 0,0).",
    )
    parser.add_argument(
        "--end",
        type=_parse_point,
        default=None,
        help="End cell as X,Y (headless only; defaults to the far corner).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging verbosity.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        config = load_config(
            size=args.size,
            obstacle_density=args.density,
            seed=args.seed,
            step_delay=args.delay,
            log_level=args.log_level,
        )
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    configure_logging(config.log_level)

    if not args.headless:
        run_interactive(config)
        return

    try:
        run_headless(config, start=args.start, end=args.end)
    except (InvalidEndpoints, CellOutOfRange) as exc:
        raise SystemExit(str(exc)) from exc


def _parse_point(value: str) -> tuple[int, int]:
    try:
        x, y = (int(part) for part in value.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected X,Y but got {value!r}.") from exc
    return x, y


if __name__ == "__main__":
    main()
