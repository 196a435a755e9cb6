from __future__ import annotations

from aoc2025.errors import ErrorKind, InputError, ParseError
from aoc2025.ranges import (
    Range,
    contains,
    count_covered,
    digit_length,
    filter_covered,
    find_invalid_ids_in_range,
    find_potential_partials,
    merge_ranges,
    ranges_overlap,
    repeat_partials,
)
from aoc2025.sources import from_file, from_stdin, from_text
from aoc2025.stream import Stream

__all__ = (
    "ErrorKind",
    "InputError",
    "ParseError",
    "Range",
    "Stream",
    "contains",
    "count_covered",
    "digit_length",
    "filter_covered",
    "find_invalid_ids_in_range",
    "find_potential_partials",
    "from_file",
    "from_stdin",
    "from_text",
    "merge_ranges",
    "ranges_overlap",
    "repeat_partials",
)
