"""
Transport backed by SSH (devices running an SSH server)
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple

import paramiko

from ...core.constants import DEFAULT_SSH_PORT, DEFAULT_SSH_TIMEOUT
from ...core.exceptions import TransportError
from ...core.interfaces import Transport
from ...core.logging import get_logger

logger = get_logger(__name__)


class SshTransport(Transport):
    """
    Paramiko SSHClient wrapper:
    - password or key login (Ed25519 / RSA keys)
    - shell commands run in a pty, so stderr is folded into stdout the same
      way a bridge shell reports it
    - pushes through a cached SFTP channel
    - connects lazily on first use, supports with-context management
    """

    def __init__(
        self,
        host: str,
        user: str,
        port: int = DEFAULT_SSH_PORT,
        password: Optional[str] = None,
        key_path: Optional[str] = None,
        timeout: Optional[float] = DEFAULT_SSH_TIMEOUT,
    ) -> None:
        self.host = host
        self.user = user
        self.port = port
        self.password = password
        self.key_path = key_path
        self.timeout = timeout

        self.client = paramiko.SSHClient()
        self.client.set_missing_host_key_policy(paramiko.AutoAddPolicy())

        self._connected = False
        self._sftp: Optional[paramiko.SFTPClient] = None

    # --------------------
    # Connection management
    # --------------------
    def connect(self) -> None:
        if self._connected:
            return

        kwargs = dict(
            hostname=self.host,
            port=self.port,
            username=self.user,
            timeout=self.timeout,
        )
        if self.key_path:
            kwargs["pkey"] = self._load_private_key(self.key_path)
        else:
            kwargs["password"] = self.password

        try:
            self.client.connect(**kwargs)
        except (paramiko.SSHException, OSError) as e:
            raise TransportError(
                f"Failed to connect to {self.user}@{self.host}:{self.port}: {e}"
            ) from e
        self._connected = True

    def _load_private_key(self, path: str) -> paramiko.PKey:
        """Try Ed25519 then RSA"""
        p = Path(path).expanduser()

        try:
            return paramiko.Ed25519Key.from_private_key_file(str(p), password=self.password)
        except (paramiko.SSHException, OSError):
            try:
                return paramiko.RSAKey.from_private_key_file(str(p), password=self.password)
            except (paramiko.SSHException, OSError) as e:
                raise TransportError(f"Failed to load private key at {p}") from e

    def open_sftp(self) -> paramiko.SFTPClient:
        """Return SFTP client, reusing an open channel"""
        self.connect()
        if self._sftp is None or self._sftp.get_channel() is None:
            self._sftp = self.client.open_sftp()
        return self._sftp

    def close(self) -> None:
        if self._sftp is not None:
            self._sftp.close()
            self._sftp = None
        self.client.close()
        self._connected = False

    def __enter__(self) -> SshTransport:
        self.connect()
        return self

    # --------------------
    # Transport
    # --------------------
    def shell(self, command: str) -> Tuple[str, str]:
        self.connect()
        logger.debug(f"[ssh] {command}")
        try:
            _, stdout, stderr = self.client.exec_command(
                command, get_pty=True, timeout=self.timeout
            )
            out = stdout.read().decode("utf-8", errors="replace")
            err = stderr.read().decode("utf-8", errors="replace")
        except (paramiko.SSHException, OSError) as e:
            raise TransportError(f"Failed to run '{command}' on {self.host}: {e}") from e
        return out, err

    def push(self, local_path: str, remote_path: str) -> Tuple[str, str]:
        if not os.path.isfile(local_path):
            # Reported the same way a bridge push reports an unreadable source
            return "", f"cannot stat '{local_path}': No such file or directory"

        sftp = self.open_sftp()
        logger.debug(f"[sftp] {local_path} → {remote_path}")
        try:
            sftp.put(local_path, remote_path)
        except (paramiko.SSHException, OSError) as e:
            raise TransportError(
                f"Failed to copy {local_path} to {self.host}:{remote_path}: {e}"
            ) from e
        return "", ""
