"""
Advent Calendar Challenge - interactive console runner.

Run:
    python -m advent_of_code              # interactive menu
    python -m advent_of_code --day 1      # solve one day and exit
    python -m advent_of_code --serve      # HTTP API on --host/--port
"""

import argparse
import logging
from typing import Callable, List, Optional

from advent_of_code import config
from advent_of_code.days import AVAILABLE_DAYS, solve_day
from advent_of_code.results import DayResult

logger = logging.getLogger(__name__)

RULE = "=" * 60
QUIT_WORDS = ("q", "quit", "exit")


def display_welcome() -> None:
    print("\n" + RULE)
    print("Advent Calendar Challenge Solutions")
    print(RULE)
    print("\nAvailable Days:")
    for day, entry in AVAILABLE_DAYS.items():
        print(f"  {day}. {entry.title}")
    print("\n" + RULE)


def display_results(result: DayResult) -> None:
    print("\n" + RULE)
    print(f"Day {result.day}: {result.title}")
    print(RULE)

    if result.part1 is not None:
        print(f"\nPart 1 Password: {result.part1}")
    if result.part2 is not None:
        print(f"Part 2 Password: {result.part2}")

    details = result.details or {}
    if details:
        print("\nAdditional Information:")
        if details.get("mirror_count"):
            print(f"  - Found {details['mirror_count']} mirror numbers")
        if details.get("sample_mirrors"):
            sample = ", ".join(str(n) for n in details["sample_mirrors"])
            print(f"  - Sample mirrors: {sample}...")

    print("\n" + RULE)


def run_day(day: int, path: Optional[str] = None) -> bool:
    """
    Solve a day and print its results.

    Returns:
        bool: True if the day was solved, False if it failed.
    """
    if day not in AVAILABLE_DAYS:
        print(f"\n[ERROR] Day {day} is not available yet.")
        return False

    try:
        print(f"\nSolving Day {day}...")
        result = solve_day(day, path)
    except (OSError, ValueError) as exc:
        logger.debug("Day %d failed", day, exc_info=True)
        print(f"\n[ERROR] Error solving Day {day}:")
        print(f"   {exc}")
        return False

    display_results(result)
    return True


def interactive_loop(prompt: Callable[[str], str] = input) -> None:
    """Ask for days until the user quits or input runs out."""
    display_welcome()
    choices = f"1-{max(AVAILABLE_DAYS)}"

    while True:
        try:
            answer = prompt(f'\nSelect a day ({choices}) or "q" to quit: ')
        except EOFError:
            break

        answer = answer.strip().lower()
        if answer in QUIT_WORDS:
            break

        try:
            day = int(answer)
        except ValueError:
            print(f'\n[ERROR] Invalid input. Please enter a number ({choices}) or "q" to quit.')
            continue

        run_day(day)

    print("\nThanks for using Advent Calendar Challenge Solutions!")
    print(RULE + "\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Advent calendar challenge solutions")
    parser.add_argument("--day", type=int, help="solve a single day and exit")
    parser.add_argument("--input", help="input file for --day (default: problem_files/problem_<day>)")
    parser.add_argument("--serve", action="store_true", help="serve the HTTP API instead of the menu")
    parser.add_argument("--host", default=config.HOST)
    parser.add_argument("--port", type=int, default=config.PORT)
    parser.add_argument("--log-level", type=str.upper, default=config.LOG_LEVEL, help="logging level (default: WARNING)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not isinstance(logging.getLevelName(args.log_level), int):
        parser.error(f"invalid log level: {args.log_level}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else args.log_level,
        format="[%(levelname)s] %(message)s",
    )

    if args.serve:
        import uvicorn

        uvicorn.run("advent_of_code.api:app", host=args.host, port=args.port)
        return 0

    if args.day is not None:
        return 0 if run_day(args.day, args.input) else 1

    interactive_loop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
