"""
Helpers shared by CLI commands
"""
import typer
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from ...core.constants import DEFAULT_CONFIG_FILE
from ...core.exceptions import BridgeError, ConfigError, DeployError, TransportError
from ...core.interfaces import Transport
from ...core.logging import get_logger, get_stdout_console, get_stderr_console
from ...domain.deploy import DeployService
from ..config.deploy_parser import parse_transport_config
from ..config.loader import ConfigLoader
from ..lister import GlobFileLister
from ..transport import create_transport

logger = get_logger(__name__)
stdout_console = get_stdout_console()
stderr_console = get_stderr_console()


def load_config(
    config_path: Optional[str],
    transport: Optional[str] = None,
    serial: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Load configuration for a command.

    An explicit --config must exist; otherwise ./devbridge.toml is used when
    present.
    """
    path: Optional[Path] = None
    if config_path:
        path = Path(config_path).expanduser()
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")
    elif Path(DEFAULT_CONFIG_FILE).exists():
        path = Path(DEFAULT_CONFIG_FILE)

    overrides = {"transport": {"kind": transport, "serial": serial}}
    return ConfigLoader().load(toml_path=path, cli_overrides=overrides)


def build_transport(cfg: Dict[str, Any]) -> Transport:
    return create_transport(parse_transport_config(cfg))


def build_service(transport: Transport, require_match: bool = False) -> DeployService:
    """Deploy service reporting progress on stdout"""
    return DeployService(
        transport=transport,
        file_lister=GlobFileLister(require_match=require_match),
        on_pushed=lambda local, remote: stdout_console.print(
            f"[green]✓[/green] Pushed [cyan]{local}[/cyan] → {remote}"
        ),
        on_skipped=lambda local, remote: stdout_console.print(
            f"[yellow]⊘[/yellow] Skipped: {remote} (exists)"
        ),
        on_chmod=lambda remote, mode: stdout_console.print(
            f"[green]✓[/green] chmod {mode} {remote}"
        ),
    )


@contextmanager
def cli_errors(action: str) -> Iterator[None]:
    """Turn library errors into a red message and exit code 1"""
    try:
        yield
    except typer.Exit:
        raise
    except ConfigError as e:
        stderr_console.print(f"[red]Config Error:[/red] {e}")
        raise typer.Exit(1)
    except TransportError as e:
        stderr_console.print(f"[red]Transport Error:[/red] {e}")
        raise typer.Exit(1)
    except DeployError as e:
        stderr_console.print(f"[red]Deploy Error:[/red] {e}")
        raise typer.Exit(1)
    except BridgeError as e:
        stderr_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception(f"Failed to {action}")
        stderr_console.print(f"[red]Error:[/red] Failed to {action}: {e}")
        raise typer.Exit(1)
