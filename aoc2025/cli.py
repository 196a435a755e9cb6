from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from loguru import logger

from .config import Settings, configure_logging
from .console import print_errors, print_program_header, print_result
from .days import Challenge, challenges, solve_challenge
from .errors import ParseError
from .sources import data_path, from_stdin, read_lines
from .utils import run_sync


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aoc2025", description="Advent of Code 2025 puzzle solvers.")
    parser.add_argument(
        "days",
        nargs="*",
        type=int,
        metavar="DAY",
        help="days to solve (default: all of them)",
    )
    parser.add_argument("--stdin", action="store_true", help="read the input from standard input")
    parser.add_argument("--data-dir", type=Path, help="directory holding the day<N>.txt inputs")
    parser.add_argument("--end-marker", help="line ending the input read from standard input")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    return parser


async def load_input(challenge: Challenge, settings: Settings, use_stdin: bool) -> list[str]:
    if use_stdin:
        return await from_stdin(settings.end_marker).to_list()
    return await read_lines(challenge.day, settings.data_dir)


async def show_challenge(challenge: Challenge, settings: Settings, use_stdin: bool = False) -> bool:
    """Print the banner and results of one day. Returns whether it could be solved."""
    print_program_header(challenge.day, challenge.title)

    try:
        lines = await load_input(challenge, settings, use_stdin)
    except FileNotFoundError:
        logger.error("Cannot open the input file {}", data_path(challenge.day, settings.data_dir))
        return False

    try:
        results = await solve_challenge(challenge, lines)
    except ParseError as e:
        print_errors("Cannot read the puzzle input:", e.errors)
        return False

    for part, result in zip(challenge.parts, results):
        print_result(part.label, result)
    return True


async def show_challenges(days: Sequence[int], settings: Settings, use_stdin: bool = False) -> int:
    solved = [await show_challenge(challenges[day], settings, use_stdin) for day in days]
    return 0 if all(solved) else 1


@logger.catch(onerror=lambda _: sys.exit(1))
def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = Settings.from_env().override(
        data_dir=args.data_dir,
        end_marker=args.end_marker,
        log_level="DEBUG" if args.verbose else None,
    )
    configure_logging(settings.log_level)

    days = args.days or sorted(challenges)
    if unknown := [day for day in days if day not in challenges]:
        parser.error(f"no solver for day(s) {unknown}, choose from {sorted(challenges)}")
    if args.stdin and len(days) != 1:
        parser.error("--stdin needs exactly one day")

    logger.debug("Solving days {} with {}", days, settings)
    return run_sync(show_challenges)(days, settings, args.stdin)
