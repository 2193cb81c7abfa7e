from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass
class DayResult:
    """
    Answers for one day, ready for display.

    Attributes:
        day (int): Day number in the calendar.
        title (str): Puzzle title.
        part1 (int | None): First answer, if solved.
        part2 (int | None): Second answer, if solved.
        details (dict | None): Extra information shown below the answers.
    """
    day: int
    title: str
    part1: Optional[int] = None
    part2: Optional[int] = None
    details: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
