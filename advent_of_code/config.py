import os
from pathlib import Path


PROBLEM_DIR = Path(os.environ.get("AOC_PROBLEM_DIR", "./problem_files"))
LOG_LEVEL = os.environ.get("AOC_LOG_LEVEL", "WARNING").upper()

HOST = os.environ.get("AOC_HOST", "0.0.0.0")
# validated by the runner's argument parser
PORT = os.environ.get("AOC_PORT", "8000")


def problem_file(day: int) -> Path:
    """Path of the puzzle input for a given day."""
    return PROBLEM_DIR / f"problem_{day}"
