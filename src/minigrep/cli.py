"""Command-line interface for minigrep."""

from typing import List, Optional

import typer
from loguru import logger
from rich.console import Console

from .config import Config, ignore_case_from_env
from .errors import ConfigError, ReadError
from .log import setup_logger
from .runner import run


app = typer.Typer(
    name="minigrep",
    help="Print the lines of a file that contain QUERY",
    add_completion=False,
)
err_console = Console(stderr=True)


def _write_line(line: str) -> None:
    # color=True keeps escape sequences in the line when stdout is not a tty
    typer.echo(line, color=True)


@app.command(name="minigrep", context_settings={"ignore_unknown_options": True})
def minigrep_command(
    args: Optional[List[str]] = typer.Argument(
        None,
        metavar="QUERY FILE_PATH",
        help="Text to look for, then the file to search",
    ),
    ignore_case: bool = typer.Option(
        False,
        "-i",
        "--ignore-case",
        help="Case-insensitive matching (also enabled by setting IGNORE_CASE)",
    ),
    verbose: bool = typer.Option(
        False,
        "-v",
        "--verbose",
        help="Write debug logging to stderr",
    ),
    version: bool = typer.Option(
        False,
        "-V",
        "--version",
        help="Show version information",
    ),
) -> None:
    """
    Search FILE_PATH for lines containing QUERY.

    Examples:

        minigrep safe poem.txt

        IGNORE_CASE=1 minigrep rUsT poem.txt

        minigrep -n poem.txt

        minigrep -- -i poem.txt
    """
    if version:
        from . import __version__
        typer.echo(f"minigrep {__version__}")
        return

    setup_logger(verbose)
    argv = ["minigrep", *(args or [])]
    logger.debug(f"args={argv!r}")

    try:
        config = Config.new(argv, ignore_case=ignore_case or ignore_case_from_env())
    except ConfigError as error:
        err_console.print(f"[red]Problem parsing arguments:[/red] {error}", markup=True, highlight=False)
        err_console.print("Usage: minigrep [OPTIONS] QUERY FILE_PATH", markup=False, highlight=False)
        raise typer.Exit(code=1)

    try:
        run(config, write=_write_line)
    except ReadError as error:
        logger.debug(f"read failed: {error.__cause__!r}")
        err_console.print("[red]Application error:[/red] ", end="")
        err_console.print(str(error), markup=False, highlight=False)
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
