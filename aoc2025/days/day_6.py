from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, cast

from loguru import logger

from ..errors import ErrorKind, InputError, ParseError, collect_results
from ..stream import Stream
from ..stream_utils import non_blank

DAY = 6
TITLE = "Trash Compactor"


class Operation(Enum):
    ADD = "+"
    MULTIPLY = "*"


_OPERATIONS = {operation.value: operation for operation in Operation}


@dataclass
class MathProblem:
    numbers: list[int]
    operation: Operation

    def solve(self) -> int:
        if self.operation is Operation.ADD:
            return sum(self.numbers)
        return math.prod(self.numbers)


def _parse_number(token: str) -> int | InputError:
    if not token.isdecimal():
        return InputError(ErrorKind.INVALID_INPUT, token)
    return int(token)


def _parse_operation(token: str) -> Operation | InputError:
    if token not in _OPERATIONS:
        return InputError(ErrorKind.UNKNOWN_OPERATION, token)
    return _OPERATIONS[token]


async def _worksheet_rows(lines: Stream[str]) -> list[str]:
    rows = await (lines / non_blank()).to_list()
    if len(rows) < 2:
        raise ParseError([InputError(ErrorKind.EMPTY_INPUT)])
    return rows


async def parse_input(lines: Stream[str]) -> list[MathProblem]:
    """Read the worksheet the way humans do: one whitespace separated number per row and column.

    The last row holds the operation of each column.
    """
    table = [row.split() for row in await _worksheet_rows(lines)]
    if len({len(row) for row in table}) != 1:
        raise ParseError([InputError(ErrorKind.MISMATCHED_COLUMNS)])

    *number_rows, operation_row = table
    column_count = len(operation_row)
    values = collect_results(
        [
            *(_parse_number(token) for row in number_rows for token in row),
            *(_parse_operation(token) for token in operation_row),
        ]
    )
    numbers = cast(list[int], values[:-column_count])
    operations = cast(list[Operation], values[-column_count:])

    return [
        MathProblem(numbers=numbers[column::column_count], operation=operation)
        for column, operation in enumerate(operations)
    ]


def extract_column_ranges(operation_row: str, width: int | None = None) -> list[tuple[int, int]]:
    """Character column spans `(first, last)` of each problem, from the operation row.

    Each operation sits in the first column of its problem, and problems are separated by a
    single column of spaces. The last problem extends to `width` (by default the row's length).

    Examples:
        >>> extract_column_ranges("*   +   *   +  ")
        [(0, 2), (4, 6), (8, 10), (12, 14)]
    """
    ranges: list[tuple[int, int]] = []
    for index, char in enumerate(operation_row):
        if char in _OPERATIONS and index != 0:
            start = ranges[-1][1] + 2 if ranges else 0
            ranges.append((start, index - 2))

    start = ranges[-1][1] + 2 if ranges else 0
    ranges.append((start, (len(operation_row) if width is None else width) - 1))
    return ranges


def parse_col_numbers(col_min: int, col_max: int, number_table: Sequence[str]) -> list[int | InputError]:
    """Read the numbers of one problem column by column, right to left, digits top to bottom."""
    return [
        _parse_number("".join(row[column] for row in number_table if row[column] != " "))
        for column in range(col_max, col_min - 1, -1)
    ]


async def parse_input_part_2(lines: Stream[str]) -> list[MathProblem]:
    """Read the worksheet the way cephalopods do, see `parse_col_numbers`."""
    rows = await _worksheet_rows(lines)
    width = max(map(len, rows))
    *number_table, operation_row = [row.ljust(width) for row in rows]

    problems: list[MathProblem] = []
    errors: list[InputError] = []
    for col_min, col_max in extract_column_ranges(operation_row, width):
        operation = _parse_operation(operation_row[col_min])
        try:
            numbers = collect_results(parse_col_numbers(col_min, col_max, number_table))
        except ParseError as e:
            errors.extend(e.errors)
            numbers = []

        if isinstance(operation, InputError):
            errors.append(operation)
        elif numbers:
            problems.append(MathProblem(numbers=numbers, operation=operation))

    if errors:
        raise ParseError(errors)

    logger.debug("Parsed {} problems", len(problems))
    return problems


def grand_total(problems: Sequence[MathProblem]) -> int:
    return sum(problem.solve() for problem in problems)


async def part_1(lines: Stream[str]) -> int:
    return grand_total(await parse_input(lines))


async def part_2(lines: Stream[str]) -> int:
    return grand_total(await parse_input_part_2(lines))
