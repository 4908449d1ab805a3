from __future__ import annotations

"""Reading the target file and emitting matches."""

from pathlib import Path
from typing import Callable

from loguru import logger

from .config import Config
from .core import search_with
from .errors import ReadError

__all__ = ["read_contents", "run"]


def read_contents(path: str | Path) -> str:
    # no newline translation, \r and \r\n reach split_lines as-is
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise ReadError(str(path), exc.strerror or str(exc)) from exc
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ReadError(str(path), f"not valid UTF-8 ({exc.reason})") from exc


def run(config: Config, write: Callable[[str], object] = print) -> list[str]:
    """Search ``config.file_path`` and pass each matching line to ``write``.

    Nothing is written when the file cannot be read. Returns the matches,
    which may be empty.
    """
    logger.debug(f"Searching for {config.query!r}")
    logger.debug(f"In file {config.file_path}")

    contents = read_contents(config.file_path)
    logger.debug(f"Loaded {len(contents)} characters, ignore_case={config.ignore_case}")

    results = search_with(config, contents)
    for line in results:
        write(line)

    logger.debug(f"{len(results)} matching line(s)")
    return results
