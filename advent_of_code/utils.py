"""Helpers to turn puzzle input into a list of tokens."""

from pathlib import Path
from typing import List, Union


def parse_text_to_array(text: str, separator: str = "\n") -> List[str]:
    """
    Split raw puzzle text into trimmed, non-empty tokens.

    Args:
        text (str): The raw input.
        separator (str): What the tokens are separated by.

    Returns:
        list[str]: Tokens in input order.
    """
    return [token.strip() for token in text.split(separator) if token.strip()]


def parse_file_to_array(path: Union[str, Path], separator: str = "\n") -> List[str]:
    """Read a puzzle input file and split it like parse_text_to_array."""
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    return parse_text_to_array(text, separator)
