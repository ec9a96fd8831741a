"""
Remote inspection CLI commands
"""
import typer
from typing import List, Optional

from ...core.constants import FILTER_LATEST
from ...domain.deploy import FilePattern
from .common import (
    stdout_console,
    load_config,
    build_transport,
    build_service,
    cli_errors,
)


def register_remote_commands(app: typer.Typer) -> None:
    """Register ls and exists commands on the main app"""
    app.command(name="ls")(ls_run)
    app.command(name="exists")(exists_run)


def ls_run(
    pattern: str = typer.Argument(..., help="Remote glob (e.g. '/tmp/*.wgt')"),
    latest: bool = typer.Option(
        False, "--latest", help="Only print the most recently changed match"
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", "-c", help="Configuration file path (TOML)"
    ),
    transport: Optional[str] = typer.Option(
        None, "--transport", "-t", help="Transport kind (sdb, ssh)"
    ),
    serial: Optional[str] = typer.Option(
        None, "--serial", "-s", help="Device serial passed to the bridge"
    ),
):
    """
    List remote files matching a pattern, newest first
    """
    with cli_errors("list remote files"):
        cfg = load_config(config_path, transport, serial)
        spec = FilePattern(pattern, FILTER_LATEST if latest else None)
        with build_transport(cfg) as device:
            paths = build_service(device).list_remote_files(spec)

        for path in paths:
            stdout_console.print(path, markup=False, highlight=False)


def exists_run(
    remote_paths: List[str] = typer.Argument(..., help="Remote file paths"),
    config_path: Optional[str] = typer.Option(
        None, "--config", "-c", help="Configuration file path (TOML)"
    ),
    transport: Optional[str] = typer.Option(
        None, "--transport", "-t", help="Transport kind (sdb, ssh)"
    ),
    serial: Optional[str] = typer.Option(
        None, "--serial", "-s", help="Device serial passed to the bridge"
    ),
):
    """
    Check remote files exist (exit code 1 if any is missing)
    """
    with cli_errors("check remote files"):
        cfg = load_config(config_path, transport, serial)
        missing = 0
        with build_transport(cfg) as device:
            service = build_service(device)
            for path in remote_paths:
                if service.file_exists(path):
                    stdout_console.print(f"[green]✓[/green] {path}")
                else:
                    missing += 1
                    stdout_console.print(f"[red]✗[/red] {path} (missing)")

        if missing:
            raise typer.Exit(1)
