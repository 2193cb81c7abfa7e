"""
Day 1: Secret Entrance - Dial Password

A dial numbered 0-99 starts at 50 and is turned by a list of rotations
such as "L68" or "R48". Part 1 counts how often a rotation ends on 0,
part 2 counts every click that lands on 0, including whole laps.
"""

import logging
from functools import reduce
from typing import Iterable, List, NamedTuple, Optional

from advent_of_code import config
from advent_of_code.results import DayResult
from advent_of_code.utils import parse_file_to_array

logger = logging.getLogger(__name__)

DAY = 1
TITLE = "Secret Entrance - Dial Password"

DIAL_SIZE = 100
START_POSITION = 50
DIRECTIONS = ("L", "R")
SEPARATOR = "\n"


class InvalidInstructionError(ValueError):
    """Raised when a rotation is not a direction letter followed by a number."""


class Instruction(NamedTuple):
    direction: str
    magnitude: int

    @property
    def signed(self) -> int:
        return self.magnitude if self.direction == "R" else -self.magnitude


class DialState(NamedTuple):
    position: int = START_POSITION
    count: int = 0


def parse_instruction(token: str) -> Instruction:
    """
    Parse a rotation token.

    Args:
        token (str): Direction letter followed by a decimal distance, e.g. "R48".

    Returns:
        Instruction: The parsed rotation.

    Raises:
        InvalidInstructionError: If the direction or the distance is malformed.
    """
    direction, distance = token[:1], token[1:]
    if direction not in DIRECTIONS or not distance.isdecimal():
        raise InvalidInstructionError(f"Invalid action: {token}")
    return Instruction(direction, int(distance))


def wrap(x: int) -> int:
    """Bring a position back onto the dial, never negative."""
    return x % DIAL_SIZE


def zero_clicks(position: int, direction: str, magnitude: int) -> int:
    """
    Count the clicks of one rotation that land exactly on 0.

    Standing on 0 does not count; the first landing from there is a full lap away.
    """
    if magnitude <= 0:
        return 0

    base = wrap(position)
    if direction == "R":
        t0 = (DIAL_SIZE - base) % DIAL_SIZE
    elif direction == "L":
        t0 = base % DIAL_SIZE
    else:
        raise InvalidInstructionError(f"Invalid direction: {direction}")

    if t0 == 0:
        t0 = DIAL_SIZE

    if magnitude < t0:
        return 0
    return 1 + (magnitude - t0) // DIAL_SIZE


def _land(state: DialState, token: str) -> DialState:
    try:
        instruction = parse_instruction(token)
    except InvalidInstructionError:
        logger.warning("Invalid action detected: %s", token)
        return state

    position = wrap(state.position + instruction.signed)
    count = state.count + (1 if position == 0 else 0)
    logger.debug("After %s: position = %d", token, position)
    return DialState(position, count)


def _cross(state: DialState, token: str) -> DialState:
    instruction = parse_instruction(token)
    hits = zero_clicks(state.position, instruction.direction, instruction.magnitude)
    position = wrap(state.position + instruction.signed)
    if hits:
        logger.debug("%s passes 0 %d time(s)", token, hits)
    return DialState(position, state.count + hits)


def count_exact_landings(tokens: Iterable[str]) -> int:
    """
    Part 1: how many rotations leave the dial pointing at 0.

    Malformed rotations are logged and skipped.
    """
    return reduce(_land, tokens, DialState()).count


def count_zero_crossings(tokens: Iterable[str]) -> int:
    """
    Part 2: how many clicks land on 0, counting every lap of a long rotation.

    Raises:
        InvalidInstructionError: On the first malformed rotation.
    """
    return reduce(_cross, tokens, DialState()).count


def solve_tokens(actions: List[str]) -> DayResult:
    """Solve both parts for already split rotations."""
    return DayResult(
        day=DAY,
        title=TITLE,
        part1=count_exact_landings(actions),
        part2=count_zero_crossings(actions),
    )


def solve(path: Optional[str] = None) -> DayResult:
    """Solve both parts from the day 1 input file."""
    actions = parse_file_to_array(path or config.problem_file(DAY), SEPARATOR)
    logger.info("Loaded %d rotations", len(actions))
    return solve_tokens(actions)
