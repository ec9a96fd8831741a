"""
Main CLI application
"""
import typer
from pathlib import Path
from typing import Optional

from ...core.logging import setup_logging, get_logger
from .push import register_push_commands
from .remote import register_remote_commands

logger = get_logger(__name__)

app = typer.Typer(
    name="devbridge",
    add_completion=False,
    help="Deploy build artifacts to devices over a device bridge",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

register_push_commands(app)
register_remote_commands(app)


@app.callback()
def main(
    log_level: str = typer.Option(
        "INFO",
        "--log-level",
        "-l",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Log file path",
    ),
):
    """
    devbridge - push packages to a device

    Use subcommands to perform different operations:
    - push: Push local files matching a glob into a remote directory
    - deploy: Run every [[push]] entry of a TOML file
    - ls: List remote files matching a pattern
    - exists: Check remote files exist
    """
    setup_logging(level=log_level, log_file=log_file)


def run():
    """CLI entry point"""
    app()


if __name__ == "__main__":
    run()
