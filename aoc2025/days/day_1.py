from __future__ import annotations

from typing import Iterable

from loguru import logger

from ..errors import ErrorKind, InputError, collect_results
from ..stream import Stream
from ..stream_utils import non_blank

DAY = 1
TITLE = "Secret Entrance"

DIAL_SIZE = 100
INITIAL_STATE = 50

_DIRECTIONS = {"L": -1, "l": -1, "R": 1, "r": 1}


def parse_rotation_value(instruction: str) -> int | InputError:
    """Parse an instruction like `L42` into a signed rotation (negative is left)."""
    error = InputError(ErrorKind.INVALID_INSTRUCTION, instruction)
    if len(instruction) < 2:
        return error

    direction = _DIRECTIONS.get(instruction[0])
    distance = instruction[1:]
    if direction is None or not distance.isdecimal():
        return error

    return direction * int(distance)


def next_state(current_state: int, rotation_value: int) -> tuple[int, int]:
    """Turn the dial, returning the new position and how many times it passed zero on the way.

    Landing exactly on zero is not counted as passing it.
    """
    passed_zeroes = abs(rotation_value) // DIAL_SIZE
    remainder = abs(rotation_value) % DIAL_SIZE
    state = current_state + (remainder if rotation_value >= 0 else -remainder)

    if state >= DIAL_SIZE:
        state -= DIAL_SIZE
        if state != 0:
            passed_zeroes += 1
    elif state < 0:
        state += DIAL_SIZE
        if current_state != 0:
            passed_zeroes += 1

    return state, passed_zeroes


def count_zero_states(initial_state: int, rotations: Iterable[int]) -> tuple[int, int]:
    """Count how often the dial rests on zero, and how often it rests on or passes zero."""
    state = initial_state
    zeroes = 0
    zeroes_including_passed = 0

    for rotation in rotations:
        state, passed = next_state(state, rotation)
        zeroes_including_passed += passed
        if state == 0:
            zeroes += 1
            zeroes_including_passed += 1

    return zeroes, zeroes_including_passed


async def parse_rotations(lines: Stream[str]) -> list[int]:
    results = await (lines / non_blank() / str.strip / parse_rotation_value).to_list()
    rotations = collect_results(results)
    logger.debug("Parsed {} rotations", len(rotations))
    return rotations


async def part_1(lines: Stream[str]) -> int:
    zeroes, _ = count_zero_states(INITIAL_STATE, await parse_rotations(lines))
    return zeroes


async def part_2(lines: Stream[str]) -> int:
    _, zeroes_including_passed = count_zero_states(INITIAL_STATE, await parse_rotations(lines))
    return zeroes_including_passed
