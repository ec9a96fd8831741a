"""
Single file push helpers
"""
import posixpath
from typing import Optional

from ...core.constants import PUSH_FAILURE_MARKERS
from ...core.exceptions import PushVerificationError
from ...core.interfaces import Transport
from ...core.logging import get_logger

logger = get_logger(__name__)


def push_failure_marker(stderr: str) -> Optional[str]:
    """Return the first known failure marker found in push stderr, if any"""
    for marker in PUSH_FAILURE_MARKERS:
        if marker in stderr:
            return marker
    return None


def get_destination(local_path: str, remote_directory: str) -> str:
    """
    Join the basename of a local file onto a remote directory.

    >>> get_destination("build/package.wgt", "/home/developer/")
    '/home/developer/package.wgt'
    """
    basename = posixpath.basename(local_path.replace("\\", "/"))
    return posixpath.join(remote_directory, basename)


def push_raw(transport: Transport, local_path: str, remote_path: str) -> None:
    """
    Push one local file to an exact remote path.

    The bridge can exit cleanly while the copy itself failed, so stderr is
    checked for known failure messages as well.

    Args:
        transport: Device transport
        local_path: Local file path
        remote_path: Remote destination path

    Raises:
        TransportError: If the push call itself fails
        PushVerificationError: If stderr reports a failed copy
    """
    logger.debug(f"[push] {local_path} → {remote_path}")
    _, stderr = transport.push(local_path, remote_path)

    marker = push_failure_marker(stderr)
    if marker:
        raise PushVerificationError(local_path, remote_path, stderr, marker)
