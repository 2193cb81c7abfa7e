"""
Day 2: Secret Entrance - Mirror Numbers

Input is a comma separated list of inclusive ranges like "11-22".
Part 1 sums the mirror numbers (first half of the digits equals the
second half), part 2 sums every number made of a chunk repeated at
least twice.
"""

import logging
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

from advent_of_code import config
from advent_of_code.results import DayResult
from advent_of_code.utils import parse_file_to_array

logger = logging.getLogger(__name__)

DAY = 2
TITLE = "Secret Entrance - Mirror Numbers"
SEPARATOR = ","
SAMPLE_SIZE = 10


class InvalidRangeError(ValueError):
    """Raised when a range token is not of the form "<low>-<high>"."""


class Range(NamedTuple):
    low: int
    high: int

    def values(self) -> range:
        return range(self.low, self.high + 1)


def parse_range(token: str) -> Range:
    """
    Parse a "<low>-<high>" token.

    Raises:
        InvalidRangeError: If there are not exactly two integer parts.
    """
    parts = token.split("-")
    if len(parts) != 2:
        raise InvalidRangeError(f"Invalid input: {token}")
    if not all(part.isdecimal() for part in parts):
        raise InvalidRangeError(f"Invalid input: {token}")
    return Range(int(parts[0]), int(parts[1]))


def iter_ranges(tokens: Iterable[str]) -> Iterator[Range]:
    """Yield the valid ranges, logging and skipping the malformed ones."""
    for token in tokens:
        try:
            yield parse_range(token)
        except InvalidRangeError:
            logger.warning("Invalid input: %s", token)


def is_mirror(n: int) -> bool:
    s = str(n)
    # odd digit counts cannot be split evenly
    if len(s) % 2 != 0:
        return False

    half = len(s) // 2
    return s[:half] == s[half:]


def find_mirrors(tokens: Iterable[str]) -> Tuple[List[int], int]:
    """
    Part 1: collect every mirror number in the ranges.

    Returns:
        tuple[list[int], int]: Mirrors in range order, ascending within a
        range, and their sum. Overlapping ranges are counted twice.
    """
    mirrors = [n for r in iter_ranges(tokens) for n in r.values() if is_mirror(n)]
    return mirrors, sum(mirrors)


def divisors(n: int) -> List[int]:
    """All divisors of n in ascending order."""
    found = set()
    i = 1
    while i * i <= n:
        if n % i == 0:
            found.add(i)
            found.add(n // i)
        i += 1
    return sorted(found)


def is_repeated_pattern(n: int) -> bool:
    """True if n's digits are a shorter chunk repeated two or more times."""
    s = str(n)
    length = len(s)

    for d in divisors(length):
        # the chunk must be shorter than the whole string
        if d == 0 or d == length:
            continue
        if s[:d] * (length // d) == s:
            return True

    return False


def sum_repeated_patterns(tokens: Iterable[str]) -> int:
    """Part 2: sum every repeated-pattern number in the ranges."""
    return sum(n for r in iter_ranges(tokens) for n in r.values() if is_repeated_pattern(n))


def solve_tokens(ranges: List[str]) -> DayResult:
    """Solve both parts for already split range tokens."""
    mirrors, mirror_sum = find_mirrors(ranges)

    return DayResult(
        day=DAY,
        title=TITLE,
        part1=mirror_sum,
        part2=sum_repeated_patterns(ranges),
        details={
            "mirror_count": len(mirrors),
            "sample_mirrors": mirrors[:SAMPLE_SIZE],
        },
    )


def solve(path: Optional[str] = None) -> DayResult:
    """Solve both parts from the day 2 input file."""
    ranges = parse_file_to_array(path or config.problem_file(DAY), SEPARATOR)
    logger.info("Loaded %d ranges", len(ranges))
    return solve_tokens(ranges)
