from __future__ import annotations

"""Line matching for minigrep.

Results are new ``str`` objects, so they stay valid independently of the
``contents`` they were taken from.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config

__all__ = ["split_lines", "search", "search_case_insensitive", "search_with"]


def split_lines(contents: str) -> list[str]:
    """Split ``contents`` on ``\\n`` and ``\\r\\n`` line endings.

    A final line ending does not yield an empty trailing line, and a lone
    ``\\r`` inside a line is kept as ordinary text.
    """

    if not contents:
        return []
    lines = contents.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def search(query: str, contents: str) -> list[str]:
    return [line for line in split_lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> list[str]:
    needle = query.lower()
    return [line for line in split_lines(contents) if needle in line.lower()]


def search_with(config: Config, contents: str) -> list[str]:
    if config.ignore_case:
        return search_case_insensitive(config.query, contents)
    return search(config.query, contents)
