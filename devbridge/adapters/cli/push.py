"""
Push CLI commands
"""
import typer
from pathlib import Path
from typing import List, Optional

from ...core.exceptions import ConfigError
from ...core.logging import get_logger
from ...domain.deploy import PushResult
from ..config.deploy_parser import parse_push_configs
from .common import (
    stdout_console,
    load_config,
    build_transport,
    build_service,
    cli_errors,
)

logger = get_logger(__name__)


def register_push_commands(app: typer.Typer) -> None:
    """Register push and deploy commands on the main app"""
    app.command(name="push")(push_run)
    app.command(name="deploy")(deploy_run)


def _print_summary(results: List[PushResult]) -> None:
    skipped = sum(1 for result in results if result.skipped)
    pushed = len(results) - skipped
    if not results:
        stdout_console.print("[yellow]⊘[/yellow] No local files matched, nothing to push")
        return
    stdout_console.print(
        f"[green]✓[/green] Done: {pushed} pushed, {skipped} skipped"
    )


def push_run(
    local_glob: str = typer.Argument(..., help="Local file or glob (e.g. 'build/*.wgt')"),
    remote_dir: str = typer.Argument(..., help="Remote directory"),
    overwrite: bool = typer.Option(
        False, "--overwrite/--no-overwrite", help="Replace files that already exist on the device"
    ),
    chmod: Optional[str] = typer.Option(
        None, "--chmod", help="chmod mode applied after each push (e.g. +x, 755)"
    ),
    require_match: bool = typer.Option(
        False, "--require-match", help="Fail when the local glob matches no files"
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
    Push local files into a remote directory

    Examples:
        devbridge push 'build/*.wgt' /home/developer
        devbridge push build/app.sh /home/developer --overwrite --chmod +x
    """
    with cli_errors("push"):
        cfg = load_config(config_path, transport, serial)
        with build_transport(cfg) as device:
            service = build_service(device, require_match)
            results = service.push(local_glob, remote_dir, overwrite, chmod)
        _print_summary(results)


def deploy_run(
    config_path: str = typer.Argument(..., help="Configuration file path (TOML)"),
    require_match: bool = typer.Option(
        False, "--require-match", help="Fail when a [[push]] src matches no files"
    ),
    serial: Optional[str] = typer.Option(
        None, "--serial", "-s", help="Device serial passed to the bridge"
    ),
):
    """
    Run every [[push]] entry of a configuration file, in order

    Example:
        devbridge deploy devbridge.toml
    """
    with cli_errors("deploy"):
        cfg = load_config(config_path, serial=serial)
        requests = parse_push_configs(cfg)
        if not requests:
            raise ConfigError(f"No [[push]] entries in {Path(config_path).name}")

        with build_transport(cfg) as device:
            results = build_service(device, require_match).deploy_all(requests)
        _print_summary(results)
