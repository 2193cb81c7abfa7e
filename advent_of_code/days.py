from typing import Callable, Dict, List, NamedTuple, Optional

from advent_of_code import day1, day2
from advent_of_code.results import DayResult
from advent_of_code.utils import parse_text_to_array


class DayNotAvailableError(LookupError):
    """Raised when no solver exists for the requested day."""


class Day(NamedTuple):
    title: str
    separator: str
    solve: Callable[[Optional[str]], DayResult]
    solve_tokens: Callable[[List[str]], DayResult]


AVAILABLE_DAYS: Dict[int, Day] = {
    day1.DAY: Day(day1.TITLE, day1.SEPARATOR, day1.solve, day1.solve_tokens),
    day2.DAY: Day(day2.TITLE, day2.SEPARATOR, day2.solve, day2.solve_tokens),
}


def get_day(day: int) -> Day:
    entry = AVAILABLE_DAYS.get(day)
    if entry is None:
        raise DayNotAvailableError(f"Day {day} is not available yet.")
    return entry


def solve_day(day: int, path: Optional[str] = None) -> DayResult:
    """
    Run the solver registered for a day.

    Args:
        day (int): Day number.
        path (str | None): Input file to use instead of the configured one.

    Raises:
        DayNotAvailableError: If the day has no solver yet.
    """
    return get_day(day).solve(path)


def solve_day_text(day: int, text: str) -> DayResult:
    """Run a day's solver on raw input text instead of its input file."""
    entry = get_day(day)
    return entry.solve_tokens(parse_text_to_array(text, entry.separator))
