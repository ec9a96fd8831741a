"""
Remote existence check and permission change
"""
from ...core.constants import STAT_COMMAND, CHMOD_COMMAND, STAT_MISSING_MARKER
from ...core.interfaces import Transport
from ...core.logging import get_logger

logger = get_logger(__name__)


def stat_reports_missing(stdout: str) -> bool:
    """Check stat output for the missing-file message"""
    return STAT_MISSING_MARKER in stdout


def remote_exists(transport: Transport, path: str) -> bool:
    """
    Check if remote file exists.

    Only the text of stdout is trusted; the bridge does not relay the exit
    status of the remote command reliably.

    Raises:
        TransportError: If the stat command could not be run
    """
    command = STAT_COMMAND.format(path=path)
    logger.debug(f"[stat] {command}")
    stdout, _ = transport.shell(command)
    return not stat_reports_missing(stdout)


def remote_chmod(transport: Transport, path: str, mode: str) -> None:
    """Change permissions of a remote file. Output is not inspected."""
    command = CHMOD_COMMAND.format(mode=mode, path=path)
    logger.debug(f"[chmod] {command}")
    transport.shell(command)
