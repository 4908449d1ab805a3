"""minigrep - print the lines of a file that contain a query string.

Matching is plain substring containment, optionally case-insensitive.
"""

__version__ = "0.1.0"

from .config import Config, ignore_case_from_env  # noqa: E402
from .core import search, search_case_insensitive, search_with, split_lines  # noqa: E402
from .errors import ConfigError, InsufficientArgumentsError, MinigrepError, ReadError  # noqa: E402
from .runner import read_contents, run  # noqa: E402

__all__ = [
    "Config",
    "ConfigError",
    "InsufficientArgumentsError",
    "MinigrepError",
    "ReadError",
    "ignore_case_from_env",
    "read_contents",
    "run",
    "search",
    "search_case_insensitive",
    "search_with",
    "split_lines",
]
