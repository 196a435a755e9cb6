from __future__ import annotations

from typing import Iterable

from loguru import logger

from ..errors import ErrorKind, InputError, collect_results
from ..ranges import Range, digit_length, find_invalid_ids_in_range
from ..stream import Stream

DAY = 2
TITLE = "Gift Shop"


def parse_range(text: str) -> Range | InputError:
    """Parse a `lo-hi` product id range. Ids are positive integers."""
    parts = text.split("-")
    if len(parts) != 2 or not all(part.isdecimal() for part in parts) or int(parts[0]) < 1:
        return InputError(ErrorKind.INVALID_RANGE, text)
    return Range(int(parts[0]), int(parts[1]))


async def parse_all_ranges(lines: Stream[str]) -> list[Range]:
    """Parse comma separated ranges, spread over any number of lines."""
    results = await (lines / str.strip % bool // (lambda line: line.split(",")) / parse_range).to_list()
    ranges = collect_results(results)
    logger.debug("Parsed {} ranges", len(ranges))
    return ranges


def find_max_possible_repetitions(ranges: Iterable[tuple[int, int]]) -> int:
    """The largest repeat count worth searching: every digit of the largest id repeated."""
    max_value = max((hi for _, hi in ranges), default=0)
    if max_value < 1:
        return 2
    return max(digit_length(max_value), 2)


def sum_all_invalid_ids(ranges: Iterable[tuple[int, int]], repeat_counts: Iterable[int]) -> int:
    """Sum of the distinct ids, over all ranges, made of a digit string repeated any of `repeat_counts` times.

    An id like `222222` is found for several repeat counts but only counted once.
    """
    repeat_counts = list(repeat_counts)
    invalid_ids = {
        invalid_id
        for range_ in ranges
        for repeats in repeat_counts
        for invalid_id in find_invalid_ids_in_range(range_, repeats)
    }
    return sum(invalid_ids)


async def part_1(lines: Stream[str]) -> int:
    return sum_all_invalid_ids(await parse_all_ranges(lines), [2])


async def part_2(lines: Stream[str]) -> int:
    ranges = await parse_all_ranges(lines)
    max_repetitions = find_max_possible_repetitions(ranges)
    return sum_all_invalid_ids(ranges, range(2, max_repetitions + 1))
