import functools
import sys
from typing import List, Optional

import click
import structlog
import typer
from rich.console import Console
from rich.traceback import Traceback

from .app import Application
from .logging_setup import setup_logging
from .state import APP_STATE

logger = structlog.get_logger(__name__)

# Boolean options that also accept the `--name=value` assignment form.
BOOL_OPTIONS = ("verbose",)


def handle_exceptions(func):
    """A decorator that turns any failure of the command into a fatal exit."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except Exception as e:
            logger.critical(str(e) or type(e).__name__)
            if APP_STATE.verbose_mode:
                Console(stderr=True).print(
                    Traceback.from_exception(type(e), e, e.__traceback__)
                )
            raise typer.Exit(code=1)

    return wrapper


def _option_name(arg: str) -> Optional[str]:
    """Returns the name of a `-name` / `--name` token, or None for anything else."""
    if arg.startswith("--"):
        body = arg[2:]
    elif arg.startswith("-"):
        body = arg[1:]
    else:
        return None
    if not body or body.startswith("-"):
        return None
    return body


def normalize_bool_assignments(args: List[str]) -> List[str]:
    """
    Rewrites `--verbose=true` / `-verbose=0` style tokens into the
    `--verbose` / `--no-verbose` form the parser understands, and `-help` into
    `--help`. Rewriting stops at `--` or the first non-flag argument. Tokens whose
    value is not a boolean are passed through so the parser reports them.
    """
    normalized = []
    for index, arg in enumerate(args):
        if arg == "--" or not arg.startswith("-") or arg == "-":
            normalized.extend(args[index:])
            break
        name = _option_name(arg)
        if name is None:
            normalized.append(arg)
            continue
        if name == "help":
            normalized.append("--help")
            continue
        name, sep, value = name.partition("=")
        if name not in BOOL_OPTIONS:
            normalized.append(arg)
            continue
        if not sep:
            normalized.append(f"--{name}")
            continue
        try:
            enabled = click.BOOL.convert(value, None, None)
        except click.BadParameter:
            normalized.append(arg)
            continue
        normalized.append(f"--{name}" if enabled else f"--no-{name}")
    return normalized


app = typer.Typer(
    name="ethereal-vault",
    help="EtherealVault command-line tool.",
    add_completion=False,
    rich_markup_mode="markdown",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.command()
@handle_exceptions
def run(
    verbose: bool = typer.Option(
        False, "--verbose/--no-verbose", help="Enable verbose logging."
    ),
):
    """Runs EtherealVault processing once."""
    APP_STATE.verbose_mode = verbose
    setup_logging(verbose)

    application = Application(verbose)
    application.run()


def main(argv: Optional[List[str]] = None):
    """The entrypoint for the `ethereal-vault` console script."""
    args = sys.argv[1:] if argv is None else list(argv)
    app(args=normalize_bool_assignments(args), prog_name="ethereal-vault")
