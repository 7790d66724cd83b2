"""Typer app configuration and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.logging import RichHandler

from ..config import load_settings
from .core.console import err_console

# Load environment variables from .env file
load_dotenv()

# Engine loggers written to the log file
ENGINE_LOGGERS = ["story_engine", "story_render", "story_validator"]

LOG_FILE_NAME = "story_engine.log"

app = typer.Typer(
    name="web-stories",
    help="Turn articles into AMP Web Stories",
    add_completion=False,
)


def register_commands() -> None:
    """Register all commands from feature modules."""
    from .story.commands import generate, list_templates, render, validate

    app.command(name="generate")(generate)
    app.command(name="render")(render)
    app.command(name="validate")(validate)
    app.command(name="list-templates")(list_templates)


def setup_logging(log_dir: Path, verbose: bool = False) -> None:
    """Configure logging for CLI.

    - Suppresses root logger output
    - Engine loggers write to <log_dir>/story_engine.log
    - Verbose mode also echoes engine logs to stderr through Rich
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    # Remove any default console handlers from root logger
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.CRITICAL)

    file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"))

    console_handler = None
    if verbose:
        console_handler = RichHandler(console=err_console, show_path=False)
        console_handler.setLevel(logging.DEBUG)

    for logger_name in ENGINE_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        for handler in logger.handlers:
            handler.close()
        logger.handlers = [file_handler]
        if console_handler is not None:
            logger.addHandler(console_handler)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Echo engine logs to the console"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Directory for story_engine.log"),
) -> None:
    """Turn articles into AMP Web Stories."""
    setup_logging(log_dir or load_settings().log_dir, verbose)


# Register all commands
register_commands()


def main() -> None:
    """Entry point for the web-stories command."""
    app()
