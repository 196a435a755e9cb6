from __future__ import annotations

import pytest

from aoc2025.days.day_3 import (
    find_largest_possible_combination,
    find_largest_possible_voltage,
    find_total_largest_voltage,
    parse_battery_banks,
    part_1,
    part_2,
)
from aoc2025.errors import ErrorKind, InputError, ParseError
from aoc2025.sources import from_text
from example_inputs import DAY_3


@pytest.mark.asyncio
async def test_parse_battery_banks_valid() -> None:
    banks = await parse_battery_banks(from_text("1234\n5678\n9012\n\n3456"))
    assert banks == [[1, 2, 3, 4], [5, 6, 7, 8], [9, 0, 1, 2], [3, 4, 5, 6]]


@pytest.mark.asyncio
async def test_parse_battery_banks_invalid() -> None:
    with pytest.raises(ParseError) as exc_info:
        await parse_battery_banks(from_text("1234\nabcd\n5678\n90ab"))

    assert exc_info.value.errors == [
        InputError(ErrorKind.INVALID_INPUT, "abcd"),
        InputError(ErrorKind.INVALID_INPUT, "90ab"),
    ]


def test_find_largest_combination() -> None:
    assert find_largest_possible_combination([9, 8, 7, 1, 1, 7, 8, 9], 3) == [9, 8, 9]
    assert find_largest_possible_combination([9, 8, 7, 1, 1, 7, 8, 7], 3) == [9, 8, 8]


def test_find_largest_combination_picks_after_previous_choice() -> None:
    assert find_largest_possible_combination([5, 9, 5, 1], 3) == [9, 5, 1]


def test_find_largest_combination_too_few_batteries() -> None:
    with pytest.raises(ValueError):
        find_largest_possible_combination([1, 2], 3)


def test_find_voltage() -> None:
    assert find_largest_possible_voltage([4, 5, 6, 1, 1, 1, 8, 9], 3) == 689


@pytest.mark.asyncio
async def test_example_data() -> None:
    banks = await parse_battery_banks(from_text(DAY_3))
    assert await find_total_largest_voltage(banks, 2) == 357


@pytest.mark.asyncio
async def test_total_voltage_of_no_banks() -> None:
    assert await find_total_largest_voltage([], 12) == 0


@pytest.mark.asyncio
async def test_example_data_twelve_batteries() -> None:
    banks = await parse_battery_banks(from_text(DAY_3))
    assert [find_largest_possible_voltage(bank, 12) for bank in banks] == [
        987654321111,
        811111111119,
        434234234278,
        888911112111,
    ]


@pytest.mark.asyncio
async def test_parse_battery_banks_too_short() -> None:
    with pytest.raises(ParseError) as exc_info:
        await parse_battery_banks(from_text("987654321111\n12345\n811111111119\n9"), 12)

    assert exc_info.value.errors == [
        InputError(ErrorKind.INVALID_INPUT, "12345"),
        InputError(ErrorKind.INVALID_INPUT, "9"),
    ]


@pytest.mark.asyncio
async def test_part_2_rejects_short_banks() -> None:
    assert await part_1(from_text("12345")) == 45
    with pytest.raises(ParseError):
        await part_2(from_text("12345"))
