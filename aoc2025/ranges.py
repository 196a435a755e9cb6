"""Pure functions over closed integer ranges `[lo, hi]`.

Two families live here:

- repeated-digit search: find every integer in a range whose decimal digits are a shorter
  digit string ("partial") repeated `k` times, e.g. `123123` is `123` repeated twice;
- range merging: fold overlapping ranges into a disjoint set, count the integers it covers,
  and test points for membership.

None of these functions validate that `lo <= hi`; inverted ranges give degenerate results.
"""
from __future__ import annotations

from typing import Iterable, NamedTuple, Sequence

from loguru import logger


class Range(NamedTuple):
    lo: int
    hi: int


def digit_length(n: int) -> int:
    """Number of decimal digits of a positive integer."""
    if n < 1:
        raise ValueError(f"digit_length() is only defined for positive integers, got {n}")
    return len(str(n))


########################################################################
# Repeated-digit search


def find_potential_partials(range_: tuple[int, int], repeats: int) -> list[int]:
    """Partials whose `repeats`-fold repetition could fall inside `range_`.

    For every total length between the digit lengths of the bounds that splits evenly into
    `repeats` parts, the candidates are the `len / repeats`-digit numbers between the leading
    digits of `lo` and of `hi`. Candidates are not guaranteed to land inside the range once
    repeated; `find_invalid_ids_in_range` filters them.

    Examples:
        >>> find_potential_partials((95, 115), 2)
        [9]
        >>> find_potential_partials((11, 22), 4)
        []
    """
    lo, hi = range_
    partials: list[int] = []

    for length in range(digit_length(lo), digit_length(hi) + 1):
        if length % repeats != 0:
            continue

        partial_len = length // repeats
        divisor = 10 ** (length - partial_len)
        min_partial = max(lo // divisor, 10 ** (partial_len - 1))
        max_partial = min(hi // divisor, 10**partial_len - 1)
        partials.extend(range(min_partial, max_partial + 1))

    return partials


def repeat_partial(partial: int, repeats: int, multipliers: dict[int, int]) -> int:
    """Concatenate the decimal digits of `partial` with themselves `repeats` times.

    `multipliers` caches the multiplier `1 + 10^L + 10^2L + ...` by partial length `L`; it is
    only valid for a single value of `repeats`.

    Examples:
        >>> repeat_partial(12, 3, {})
        121212
    """
    length = digit_length(partial)
    if (multiplier := multipliers.get(length)) is None:
        base = 10**length
        multiplier = multipliers[length] = sum(base**i for i in range(repeats))
    return partial * multiplier


def repeat_partials(partials: Iterable[int], repeats: int) -> list[int]:
    multipliers: dict[int, int] = {}
    return [repeat_partial(partial, repeats, multipliers) for partial in partials]


def find_invalid_ids_in_range(range_: tuple[int, int], repeats: int) -> list[int]:
    """All numbers in `range_` made of some digit string repeated exactly `repeats` times."""
    lo, hi = range_
    candidates = repeat_partials(find_potential_partials(range_, repeats), repeats)
    return [candidate for candidate in candidates if lo <= candidate <= hi]


########################################################################
# Range merging, coverage and membership


def ranges_overlap(a: tuple[int, int], b: tuple[int, int]) -> bool:
    """Whether the start of either range lies inside the other.

    Ranges that merely touch, like `(1, 2)` and `(3, 4)`, do not overlap.
    """
    return a[0] <= b[0] <= a[1] or b[0] <= a[0] <= b[1]


def merge_ranges_once(ranges: Iterable[tuple[int, int]]) -> tuple[int, list[Range]]:
    """A single merging pass.

    Each range is absorbed into the first already-collected range it overlaps, or collected as
    is. Returns the number of absorptions alongside the collected ranges.
    """
    merged: list[Range] = []
    absorbed = 0

    for lo, hi in ranges:
        for i, existing in enumerate(merged):
            if ranges_overlap((lo, hi), existing):
                merged[i] = Range(min(lo, existing.lo), max(hi, existing.hi))
                absorbed += 1
                break
        else:
            merged.append(Range(lo, hi))

    return absorbed, merged


def merge_ranges(ranges: Iterable[tuple[int, int]]) -> list[Range]:
    """Merge overlapping ranges into a disjoint set, sorted by lower bound.

    A single pass isn't enough, since a range grown late in a pass can come to overlap one
    collected earlier; passes are repeated until one absorbs nothing. Every absorbing pass
    shrinks the set, so this terminates.

    Examples:
        >>> merge_ranges([(3, 5), (10, 14), (16, 20), (12, 18)])
        [Range(lo=3, hi=5), Range(lo=10, hi=20)]
    """
    current = [Range(lo, hi) for lo, hi in ranges]
    iteration = 0

    while True:
        absorbed, merged = merge_ranges_once(current)
        logger.debug("Merge pass {}: {} absorbed, {} ranges left", iteration, absorbed, len(merged))
        iteration += 1
        if absorbed == 0:
            break
        current = merged

    return sorted(current)


def count_covered(ranges: Iterable[tuple[int, int]]) -> int:
    """Total number of integers covered by a disjoint set of ranges.

    Overlaps are counted twice; merge first.
    """
    return sum(hi - lo + 1 for lo, hi in ranges)


def contains(ranges: Iterable[tuple[int, int]], point: int) -> bool:
    return any(lo <= point <= hi for lo, hi in ranges)


def filter_covered(points: Iterable[int], ranges: Sequence[tuple[int, int]]) -> list[int]:
    """Points lying in at least one of `ranges`, in their original order and multiplicity."""
    return [point for point in points if contains(ranges, point)]


__all__ = (
    "Range",
    "digit_length",
    "find_potential_partials",
    "repeat_partial",
    "repeat_partials",
    "find_invalid_ids_in_range",
    "ranges_overlap",
    "merge_ranges_once",
    "merge_ranges",
    "count_covered",
    "contains",
    "filter_covered",
)
