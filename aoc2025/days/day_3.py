from __future__ import annotations

import operator
from functools import partial
from typing import Sequence

from ..errors import ErrorKind, InputError, collect_results
from ..stream import EitherIterable, Stream
from ..stream_utils import non_blank

DAY = 3
TITLE = "Lobby"


def parse_line(line: str, min_size: int = 1) -> list[int] | InputError:
    """A bank of batteries, one joltage digit per character.

    Banks with fewer than `min_size` batteries are rejected too.
    """
    if len(line) < min_size or not all(char in "0123456789" for char in line):
        return InputError(ErrorKind.INVALID_INPUT, line)
    return [int(char) for char in line]


async def parse_battery_banks(lines: Stream[str], count: int = 1) -> list[list[int]]:
    """Parse every bank, requiring at least `count` batteries in each."""
    parse = partial(parse_line, min_size=count)
    return collect_results(await (lines / non_blank() / str.strip / parse).to_list())


def find_largest_possible_combination(battery_bank: Sequence[int], count: int) -> list[int]:
    """Pick `count` batteries, keeping their order, that form the largest number.

    Greedy: each pick takes the leftmost maximum among the batteries that still leave enough
    batteries after it for the remaining picks.
    """
    if count > len(battery_bank):
        raise ValueError(f"Cannot pick {count} batteries from a bank of {len(battery_bank)}")

    combination: list[int] = []
    start = 0
    for picked in range(count):
        end = len(battery_bank) - (count - picked - 1)
        window = battery_bank[start:end]
        best = max(window)
        start += window.index(best) + 1
        combination.append(best)

    return combination


def find_largest_possible_voltage(battery_bank: Sequence[int], count: int) -> int:
    voltage = 0
    for battery in find_largest_possible_combination(battery_bank, count):
        voltage = voltage * 10 + battery
    return voltage


async def find_total_largest_voltage(battery_banks: EitherIterable[Sequence[int]], count: int) -> int:
    voltages = Stream(battery_banks) / partial(find_largest_possible_voltage, count=count)
    return await voltages.reduce(operator.add, 0)


async def part_1(lines: Stream[str]) -> int:
    return await find_total_largest_voltage(await parse_battery_banks(lines, 2), 2)


async def part_2(lines: Stream[str]) -> int:
    return await find_total_largest_voltage(await parse_battery_banks(lines, 12), 12)
