from __future__ import annotations

"""Exception types raised by minigrep."""

__all__ = ["MinigrepError", "ConfigError", "InsufficientArgumentsError", "ReadError"]


class MinigrepError(Exception):
    pass


class ConfigError(MinigrepError, ValueError):
    pass


class InsufficientArgumentsError(ConfigError):
    def __init__(self, message: str = "Not enough arguments.") -> None:
        super().__init__(message)


class ReadError(MinigrepError):
    """The target file could not be loaded as text."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
