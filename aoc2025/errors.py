from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, TypeVar

from loguru import logger

_T = TypeVar("_T")


class ErrorKind(Enum):
    INVALID_INSTRUCTION = "invalid instruction"
    INVALID_RANGE = "invalid range"
    INVALID_INPUT = "invalid input"
    ILLEGAL_INPUT = "illegal input"
    MISMATCHED_ROW_SIZE = "mismatched row size"
    EMPTY_INPUT = "empty input"
    MISMATCHED_COLUMNS = "mismatched columns"
    UNKNOWN_OPERATION = "unknown operation"


@dataclass(frozen=True)
class InputError:
    """A single problem found while parsing puzzle input.

    Line parsers return these instead of raising, so that every bad line of an input can be
    reported at once. `text` is the offending line or token, if there is one.
    """

    kind: ErrorKind
    text: str | None = None

    def __str__(self) -> str:
        if self.text is None:
            return self.kind.value
        return f"{self.kind.value}: {self.text!r}"


class ParseError(Exception):
    """Raised when an input contained at least one `InputError`.

    Carries all of them, in input order.
    """

    def __init__(self, errors: Sequence[InputError]) -> None:
        self.errors = list(errors)
        super().__init__(f"{len(self.errors)} invalid input item(s): " + "; ".join(map(str, self.errors)))


def collect_results(results: Iterable[_T | InputError]) -> list[_T]:
    """Split a batch of parse results into values and errors.

    Returns:
        The parsed values, if there were no errors.

    Raises:
        ParseError: With every error in the batch, if there was at least one.
    """
    values: list[_T] = []
    errors: list[InputError] = []
    for result in results:
        if isinstance(result, InputError):
            errors.append(result)
        else:
            values.append(result)

    if errors:
        logger.debug("Rejecting input with {} error(s)", len(errors))
        raise ParseError(errors)
    return values
