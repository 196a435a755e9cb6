from __future__ import annotations

from loguru import logger

from ..errors import ErrorKind, InputError, ParseError, collect_results
from ..stream import Stream
from ..stream_utils import non_blank

DAY = 4
TITLE = "Printing Department"

MAX_OCCUPIED_ADJACENT = 3

PaperRollRow = list[bool]
PaperRollRack = list[PaperRollRow]

_CELLS = {"@": True, ".": False}


def parse_input_row(line: str) -> PaperRollRow | InputError:
    """`@` is a paper roll, `.` an empty spot."""
    if not all(char in _CELLS for char in line):
        return InputError(ErrorKind.ILLEGAL_INPUT, line)
    return [_CELLS[char] for char in line]


async def parse_paper_rolls(lines: Stream[str]) -> PaperRollRack:
    """Parse a rectangular rack of paper rolls, skipping blank lines.

    Raises:
        ParseError: On illegal characters (one error per bad row), an empty rack or rows of
            different widths.
    """
    rows = collect_results(await (lines / non_blank() / parse_input_row).to_list())

    if not rows:
        raise ParseError([InputError(ErrorKind.EMPTY_INPUT)])
    if len({len(row) for row in rows}) != 1:
        raise ParseError([InputError(ErrorKind.MISMATCHED_ROW_SIZE)])

    return rows


def pad_rack(rack: PaperRollRack) -> PaperRollRack:
    """Surround the rack with a border of empty spots, so every roll has 8 neighbours."""
    width = len(rack[0]) + 2
    border = [False] * width
    return [border, *([False, *row, False] for row in rack), list(border)]


def find_occupied_neighbor_count(padded_rack: PaperRollRack, row: int, column: int) -> int:
    return sum(
        padded_rack[r][c]
        for r in range(row - 1, row + 2)
        for c in range(column - 1, column + 2)
        if (r, c) != (row, column)
    )


def count_accessible_rolls(
    padded_rack: PaperRollRack,
    max_occupied_adjacent: int = MAX_OCCUPIED_ADJACENT,
    extract: bool = False,
) -> int:
    """Count rolls with at most `max_occupied_adjacent` occupied neighbours.

    With `extract`, accessible rolls are removed from the rack as they are found, so later rolls
    in the same scan already see them gone.
    """
    accessible = 0
    for row in range(1, len(padded_rack) - 1):
        for column in range(1, len(padded_rack[row]) - 1):
            if not padded_rack[row][column]:
                continue
            if find_occupied_neighbor_count(padded_rack, row, column) <= max_occupied_adjacent:
                if extract:
                    padded_rack[row][column] = False
                accessible += 1

    return accessible


def extract_all_accessible_rolls(padded_rack: PaperRollRack) -> int:
    """Keep removing accessible rolls until none are left to remove, returning how many were."""
    total = 0
    while extracted := count_accessible_rolls(padded_rack, extract=True):
        logger.debug("Extracted {} rolls", extracted)
        total += extracted
    return total


async def part_1(lines: Stream[str]) -> int:
    return count_accessible_rolls(pad_rack(await parse_paper_rolls(lines)))


async def part_2(lines: Stream[str]) -> int:
    return extract_all_accessible_rolls(pad_rack(await parse_paper_rolls(lines)))
