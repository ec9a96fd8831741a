"""
Transport selection
"""
from dataclasses import dataclass
from typing import Optional

from ...core.constants import (
    DEFAULT_TRANSPORT,
    DEFAULT_SDB_EXECUTABLE,
    DEFAULT_SSH_PORT,
    DEFAULT_SSH_TIMEOUT,
)
from ...core.exceptions import ConfigError
from ...core.interfaces import Transport
from .sdb import SdbTransport
from .ssh import SshTransport

TRANSPORT_KINDS = ("sdb", "ssh")


@dataclass
class TransportSettings:
    """Transport configuration ([transport] table)"""
    kind: str = DEFAULT_TRANSPORT
    executable: str = DEFAULT_SDB_EXECUTABLE
    serial: Optional[str] = None
    host: Optional[str] = None
    user: Optional[str] = None
    port: int = DEFAULT_SSH_PORT
    key: Optional[str] = None
    password: Optional[str] = None
    timeout: Optional[float] = None


def create_transport(settings: TransportSettings) -> Transport:
    """
    Create a transport from settings.

    Raises:
        ConfigError: If the kind is unknown or ssh settings are incomplete
    """
    if settings.kind == "sdb":
        return SdbTransport(
            executable=settings.executable,
            serial=settings.serial,
            timeout=settings.timeout,
        )

    if settings.kind == "ssh":
        if not settings.host or not settings.user:
            raise ConfigError("ssh transport requires 'host' and 'user'")
        return SshTransport(
            host=settings.host,
            user=settings.user,
            port=settings.port,
            password=settings.password,
            key_path=settings.key,
            timeout=settings.timeout if settings.timeout is not None else DEFAULT_SSH_TIMEOUT,
        )

    raise ConfigError(
        f"Unknown transport '{settings.kind}', expected one of: {', '.join(TRANSPORT_KINDS)}"
    )
