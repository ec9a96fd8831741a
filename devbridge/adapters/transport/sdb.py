"""
Transport backed by a device bridge executable (sdb, adb)
"""
import subprocess
from typing import List, Optional, Tuple

from ...core.constants import DEFAULT_SDB_EXECUTABLE, BRIDGE_ERROR_PREFIXES
from ...core.exceptions import TransportError
from ...core.interfaces import Transport
from ...core.logging import get_logger

logger = get_logger(__name__)


def bridge_error(output: str) -> Optional[str]:
    """Return the bridge's own error line (e.g. "error: device not found"), if any"""
    for line in output.splitlines():
        line = line.strip()
        if line.startswith(BRIDGE_ERROR_PREFIXES):
            return line
    return None


class SdbTransport(Transport):
    """
    Runs `<executable> [-s serial] shell|push ...` as a child process.

    Shell output is returned with stderr folded into stdout, the way the
    bridge pty reports it. Bridges such as adb relay the exit status of the
    remote command, so a non-zero exit of `shell` only counts as a transport
    failure when the bridge printed its own error or nothing at all. A
    missing executable or a timeout always raise TransportError.
    """

    def __init__(
        self,
        executable: str = DEFAULT_SDB_EXECUTABLE,
        serial: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.executable = executable
        self.serial = serial
        self.timeout = timeout

    def _bridge_cmd(self, *args: str) -> List[str]:
        """Build bridge command with optional device serial"""
        cmd = [self.executable]
        if self.serial:
            cmd += ["-s", self.serial]
        cmd.extend(args)
        return cmd

    def _run(self, cmd: List[str], merge_stderr: bool = False) -> subprocess.CompletedProcess:
        logger.debug(f"[{self.executable}] {' '.join(cmd[1:])}")
        try:
            return subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise TransportError(f"Bridge executable not found: {self.executable}") from e
        except subprocess.TimeoutExpired as e:
            raise TransportError(
                f"{self.executable} timed out after {self.timeout}s: {' '.join(cmd[1:])}"
            ) from e

    def _exit_error(self, result: subprocess.CompletedProcess, detail: str) -> TransportError:
        return TransportError(
            f"{self.executable} exited with {result.returncode}: {detail.strip()}"
        )

    def shell(self, command: str) -> Tuple[str, str]:
        result = self._run(self._bridge_cmd("shell", command), merge_stderr=True)
        output = result.stdout or ""

        if result.returncode != 0:
            error = bridge_error(output)
            if error or not output.strip():
                raise self._exit_error(result, error or output)
            logger.debug(f"[{self.executable}] remote command exited with {result.returncode}")
        return output, ""

    def push(self, local_path: str, remote_path: str) -> Tuple[str, str]:
        result = self._run(self._bridge_cmd("push", local_path, remote_path))
        if result.returncode != 0:
            raise self._exit_error(result, result.stderr or result.stdout or "")
        return result.stdout, result.stderr
