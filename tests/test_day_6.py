from __future__ import annotations

import pytest

from aoc2025.days.day_6 import (
    MathProblem,
    Operation,
    extract_column_ranges,
    grand_total,
    parse_col_numbers,
    parse_input,
    parse_input_part_2,
)
from aoc2025.errors import ErrorKind, InputError, ParseError
from aoc2025.sources import from_text
from example_inputs import DAY_6


@pytest.mark.asyncio
async def test_parse_example_input() -> None:
    problems = await parse_input(from_text(DAY_6))

    assert problems == [
        MathProblem(numbers=[123, 45, 6], operation=Operation.MULTIPLY),
        MathProblem(numbers=[328, 64, 98], operation=Operation.ADD),
        MathProblem(numbers=[51, 387, 215], operation=Operation.MULTIPLY),
        MathProblem(numbers=[64, 23, 314], operation=Operation.ADD),
    ]
    assert [problem.solve() for problem in problems] == [33210, 490, 4243455, 401]
    assert grand_total(problems) == 4277556


@pytest.mark.asyncio
async def test_parse_example_input_part_2() -> None:
    problems = await parse_input_part_2(from_text(DAY_6))

    assert problems == [
        MathProblem(numbers=[356, 24, 1], operation=Operation.MULTIPLY),
        MathProblem(numbers=[8, 248, 369], operation=Operation.ADD),
        MathProblem(numbers=[175, 581, 32], operation=Operation.MULTIPLY),
        MathProblem(numbers=[4, 431, 623], operation=Operation.ADD),
    ]
    assert [problem.solve() for problem in problems] == [8544, 625, 3253600, 1058]
    assert grand_total(problems) == 3263827


@pytest.mark.asyncio
async def test_parse_part_2_with_trimmed_operation_row() -> None:
    problems = await parse_input_part_2(from_text("12 3\n 4 56\n+  *"))
    assert problems == [
        MathProblem(numbers=[24, 1], operation=Operation.ADD),
        MathProblem(numbers=[6, 35], operation=Operation.MULTIPLY),
    ]


@pytest.mark.asyncio
async def test_parse_mismatched_columns() -> None:
    with pytest.raises(ParseError) as exc_info:
        await parse_input(from_text("1 2 3\n4 5\n+ * +"))

    assert exc_info.value.errors == [InputError(ErrorKind.MISMATCHED_COLUMNS)]


@pytest.mark.asyncio
async def test_parse_unknown_operation() -> None:
    with pytest.raises(ParseError) as exc_info:
        await parse_input(from_text("1 2 3\n4 5 6\n+ - /"))

    assert exc_info.value.errors == [
        InputError(ErrorKind.UNKNOWN_OPERATION, "-"),
        InputError(ErrorKind.UNKNOWN_OPERATION, "/"),
    ]


@pytest.mark.asyncio
async def test_parse_invalid_number() -> None:
    with pytest.raises(ParseError) as exc_info:
        await parse_input(from_text("1 x\n4 5\n+ *"))

    assert exc_info.value.errors == [InputError(ErrorKind.INVALID_INPUT, "x")]


@pytest.mark.asyncio
async def test_parse_empty() -> None:
    with pytest.raises(ParseError) as exc_info:
        await parse_input(from_text("+ *\n"))

    assert exc_info.value.errors == [InputError(ErrorKind.EMPTY_INPUT)]


def test_extract_column_ranges() -> None:
    assert extract_column_ranges("*    +   +      *   ") == [(0, 3), (5, 7), (9, 14), (16, 19)]


def test_column_ranges_example_data() -> None:
    #        11111
    #  012345678901234
    #  ---------------
    #  123 328  51 64
    #   45 64  387 23
    #    6 98  215 314
    operation_row = DAY_6.splitlines()[-1]
    assert extract_column_ranges(operation_row) == [(0, 2), (4, 6), (8, 10), (12, 14)]


def test_parse_col_numbers() -> None:
    number_table = DAY_6.splitlines()[:3]
    assert parse_col_numbers(0, 2, number_table) == [356, 24, 1]


def test_solve() -> None:
    assert MathProblem([2, 3, 4], Operation.ADD).solve() == 9
    assert MathProblem([2, 3, 4], Operation.MULTIPLY).solve() == 24


@pytest.mark.asyncio
async def test_parse_reports_numbers_and_operations_together() -> None:
    with pytest.raises(ParseError) as exc_info:
        await parse_input(from_text("1 x\n+ ?"))

    assert exc_info.value.errors == [
        InputError(ErrorKind.INVALID_INPUT, "x"),
        InputError(ErrorKind.UNKNOWN_OPERATION, "?"),
    ]


@pytest.mark.asyncio
async def test_parse_part_2_reports_numbers_and_operations_together() -> None:
    with pytest.raises(ParseError) as exc_info:
        await parse_input_part_2(from_text("1x 2\n?  +"))

    assert exc_info.value.errors == [
        InputError(ErrorKind.INVALID_INPUT, "x"),
        InputError(ErrorKind.UNKNOWN_OPERATION, "?"),
    ]
