from __future__ import annotations

"""Run configuration for minigrep."""

from dataclasses import dataclass
from typing import Mapping, Sequence
import os

from .errors import InsufficientArgumentsError

__all__ = ["Config", "IGNORE_CASE_ENV", "ignore_case_from_env"]

IGNORE_CASE_ENV = "IGNORE_CASE"


@dataclass(frozen=True, slots=True)
class Config:
    """Validated parameters of a single search run."""

    query: str
    file_path: str
    ignore_case: bool = False

    @classmethod
    def new(cls, args: Sequence[str], ignore_case: bool = False) -> Config:
        """Build a config from ``[program, query, file_path, ...]``.

        Only ``args[1]`` and ``args[2]`` are consumed; anything after them is
        ignored. Empty strings are accepted as-is.
        """

        if len(args) < 3:
            raise InsufficientArgumentsError()
        return cls(query=args[1], file_path=args[2], ignore_case=ignore_case)


def ignore_case_from_env(environ: Mapping[str, str] | None = None) -> bool:
    # presence is what counts, an empty value still enables it
    if environ is None:
        environ = os.environ
    return IGNORE_CASE_ENV in environ
