"""
CLI entry point for flashquiz.
"""

# Standard library imports
import logging
from pathlib import Path
from typing import Optional

# Third-party imports
import typer
from pydantic import ValidationError
from rich.console import Console

# Local application imports
from flashquiz.cli._options import apply_launch_args
from flashquiz.cli.interpreter import CommandInterpreter
from flashquiz.config import get_settings
from flashquiz.exceptions import FlashQuizError
from flashquiz.logging_config import setup_logging
from flashquiz.session import FlashcardSession

logger = logging.getLogger(__name__)

console = Console()

app = typer.Typer(
    name="flashquiz",
    help="Flashquiz: interactive term/definition flashcards.",
    add_completion=False,
)


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
    },
    epilog="Launch options: -import FILE loads cards at startup, "
    "-export FILE saves them on exit.",
)
def run(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Diagnostic log level. Falls back to FLASHQUIZ_LOG_LEVEL.",
    ),
    log_file: Optional[Path] = typer.Option(  # noqa: B008
        None,
        "--log-file",
        help="Also write diagnostics to this file. "
        "Falls back to FLASHQUIZ_LOG_FILE.",
    ),
):
    """
    Start an interactive flashcard session.

    Any `-import FILE` / `-export FILE` pairs among the remaining arguments
    are applied before the first command prompt.
    """
    overrides = {}
    if log_level is not None:
        overrides["log_level"] = log_level
    if log_file is not None:
        overrides["log_file"] = log_file
    try:
        settings = get_settings(**overrides)
    except ValidationError as e:
        console.print(
            f"Invalid configuration: {e}", style="bold red", markup=False
        )
        raise typer.Exit(code=1) from e
    setup_logging(settings.log_level, settings.log_file)
    logger.debug(f"Launch arguments: {ctx.args}")

    session = FlashcardSession(settings=settings, console=console)
    try:
        apply_launch_args(session, ctx.args)
        CommandInterpreter(session).run()
    except FlashQuizError as e:
        logger.error(f"Session aborted: {e}")
        console.print(f"Error: {e}", style="bold red", markup=False)
        raise typer.Exit(code=1) from e


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main():
    """
    Run the CLI application.

    If an unexpected exception occurs, print a bold red error message to the console and exit the process with status code 1.
    """
    try:
        app()
    except Exception as e:
        console.print(f"[bold red]UNEXPECTED ERROR: {e}[/bold red]")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
