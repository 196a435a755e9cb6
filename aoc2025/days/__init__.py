from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Coroutine

from ..stream import Stream
from . import day_1, day_2, day_3, day_4, day_5, day_6

PartFn = Callable[[Stream[str]], Coroutine[Any, Any, int]]


@dataclass(frozen=True)
class Part:
    label: str
    solve: PartFn


@dataclass(frozen=True)
class Challenge:
    day: int
    title: str
    parts: tuple[Part, ...]


challenges: dict[int, Challenge] = {
    challenge.day: challenge
    for challenge in (
        Challenge(
            day_1.DAY,
            day_1.TITLE,
            (
                Part("The password is", day_1.part_1),
                Part("The password for step 2 is", day_1.part_2),
            ),
        ),
        Challenge(
            day_2.DAY,
            day_2.TITLE,
            (
                Part("The sum of all invalid IDs for 2 repetitions is", day_2.part_1),
                Part("The sum of all invalid IDs for all possible repetitions is", day_2.part_2),
            ),
        ),
        Challenge(
            day_3.DAY,
            day_3.TITLE,
            (
                Part("Max possible voltage", day_3.part_1),
                Part("Max possible voltage (12 batteries)", day_3.part_2),
            ),
        ),
        Challenge(
            day_4.DAY,
            day_4.TITLE,
            (
                Part("Accessible rolls (first step)", day_4.part_1),
                Part("Accessible rolls (repeated)", day_4.part_2),
            ),
        ),
        Challenge(
            day_5.DAY,
            day_5.TITLE,
            (
                Part("Available fresh ingredients", day_5.part_1),
                Part("All fresh ingredients", day_5.part_2),
            ),
        ),
        Challenge(
            day_6.DAY,
            day_6.TITLE,
            (
                Part("Total", day_6.part_1),
                Part("Total (part 2)", day_6.part_2),
            ),
        ),
    )
}


async def solve_challenge(challenge: Challenge, lines: list[str]) -> list[int]:
    """Run every part of a challenge over the same input lines.

    Raises:
        ParseError: If the input is invalid; no part result is returned in that case.
    """
    return [await part.solve(Stream(lines)) for part in challenge.parts]


__all__ = ("Part", "Challenge", "challenges", "solve_challenge")
