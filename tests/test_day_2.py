from __future__ import annotations

import pytest

from aoc2025.days.day_2 import (
    find_max_possible_repetitions,
    parse_all_ranges,
    parse_range,
    sum_all_invalid_ids,
)
from aoc2025.errors import ErrorKind, InputError, ParseError
from aoc2025.sources import from_text
from example_inputs import DAY_2


def invalid(text: str) -> InputError:
    return InputError(ErrorKind.INVALID_RANGE, text)


def test_parse_range_valid() -> None:
    assert parse_range("1-2") == (1, 2)


@pytest.mark.parametrize("text", ("", "1-", "1 2", "a-b", "1-2-3", "0-5"))
def test_parse_range_invalid(text: str) -> None:
    assert parse_range(text) == invalid(text)


@pytest.mark.asyncio
async def test_parse_all_ranges_valid() -> None:
    ranges = await parse_all_ranges(from_text("1-2,3-4,5-6\n7-8"))
    assert ranges == [(1, 2), (3, 4), (5, 6), (7, 8)]


@pytest.mark.asyncio
async def test_parse_all_ranges_invalid() -> None:
    with pytest.raises(ParseError) as exc_info:
        await parse_all_ranges(from_text("1-2,3-4,5-6,a-b,d,12,7-8,-"))

    assert exc_info.value.errors == [invalid("a-b"), invalid("d"), invalid("12"), invalid("-")]


def test_find_max_possible_repetitions() -> None:
    assert find_max_possible_repetitions([(11, 22), (95, 2121212124)]) == 10
    assert find_max_possible_repetitions([(1, 5)]) == 2
    assert find_max_possible_repetitions([]) == 2


@pytest.mark.asyncio
async def test_example_ranges() -> None:
    ranges = await parse_all_ranges(from_text(DAY_2))
    assert sum_all_invalid_ids(ranges, [2]) == 1227775554


@pytest.mark.asyncio
async def test_example_ranges_all_repetitions() -> None:
    ranges = await parse_all_ranges(from_text(DAY_2))
    repeat_counts = range(2, find_max_possible_repetitions(ranges) + 1)
    assert sum_all_invalid_ids(ranges, repeat_counts) == 4174379265


def test_ids_found_for_several_repeat_counts_count_once() -> None:
    # 222222 is 222 twice, 22 three times and 2 six times
    assert sum_all_invalid_ids([(222220, 222224)], [2, 3, 6]) == 222222
