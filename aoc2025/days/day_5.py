from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from ..errors import ErrorKind, InputError, collect_results
from ..ranges import Range, count_covered, filter_covered, merge_ranges
from ..stream import Stream
from ..stream_utils import non_blank

DAY = 5
TITLE = "Cafeteria"


@dataclass
class CafeteriaData:
    fresh_ranges: list[Range]
    available_ingredients: list[int]


def parse_input_line(line: str) -> Range | int | InputError:
    """A line is either a fresh id range (`3-5`) or a single available ingredient id (`17`)."""
    parts = line.split("-")
    if not all(part.isdecimal() for part in parts) or len(parts) > 2:
        return InputError(ErrorKind.INVALID_INPUT, line)
    if len(parts) == 2:
        return Range(int(parts[0]), int(parts[1]))
    return int(line)


async def parse_input(lines: Stream[str]) -> CafeteriaData:
    results = collect_results(await (lines / non_blank() / str.strip / parse_input_line).to_list())
    data = CafeteriaData(
        fresh_ranges=[result for result in results if isinstance(result, Range)],
        available_ingredients=[result for result in results if not isinstance(result, Range)],
    )
    logger.debug("ranges: {}", data.fresh_ranges)
    logger.debug("available ingredients: {}", data.available_ingredients)
    return data


def find_available_fresh_ingredients(data: CafeteriaData) -> list[int]:
    return filter_covered(data.available_ingredients, data.fresh_ranges)


def count_all_fresh_ingredients(data: CafeteriaData) -> int:
    """Number of distinct ids considered fresh by any of the ranges."""
    return count_covered(merge_ranges(data.fresh_ranges))


async def part_1(lines: Stream[str]) -> int:
    return len(find_available_fresh_ingredients(await parse_input(lines)))


async def part_2(lines: Stream[str]) -> int:
    return count_all_fresh_ingredients(await parse_input(lines))
