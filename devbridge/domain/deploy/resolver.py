"""
Remote path resolution for file specs
"""
from collections.abc import Mapping
from typing import List

from ...core.constants import (
    LIST_COMMAND,
    FILTER_LATEST,
    LS_DIAGNOSTIC_PREFIX,
    LS_MISSING_MARKER,
)
from ...core.interfaces import Transport
from ...core.logging import get_logger
from .models import FilePattern, FileSpec

logger = get_logger(__name__)


def ls_reports_missing(line: str) -> bool:
    """Check an `ls` output line for the no-match diagnostic"""
    return line.startswith(LS_DIAGNOSTIC_PREFIX) and LS_MISSING_MARKER in line


def parse_listing(stdout: str) -> List[str]:
    """Split `ls -1` output into paths, dropping blank lines and no-match diagnostics"""
    paths = []
    for line in stdout.split("\n"):
        line = line.rstrip("\r")
        if not line.strip() or ls_reports_missing(line):
            continue
        paths.append(line)
    return paths


def list_remote_files(transport: Transport, file_spec: FileSpec) -> List[str]:
    """
    Resolve a file spec into concrete remote paths.

    Literal paths are returned as given without contacting the device and
    without checking that they exist. Pattern descriptors are expanded with
    `ls -1 -c`, which lists most recently changed files first.

    Args:
        transport: Device transport
        file_spec: Path string, sequence of path strings, FilePattern or
            {"pattern": ..., "filter": ...} mapping

    Returns:
        Ordered list of remote paths (empty if the pattern matches nothing)

    Raises:
        TransportError: If the listing command fails
        TypeError: If file_spec has an unsupported type
    """
    if isinstance(file_spec, str):
        return [file_spec]

    if isinstance(file_spec, Mapping):
        file_spec = FilePattern.from_dict(file_spec)

    if isinstance(file_spec, FilePattern):
        command = LIST_COMMAND.format(pattern=file_spec.pattern)
        logger.debug(f"[ls] {command}")
        stdout, _ = transport.shell(command)

        paths = parse_listing(stdout)
        if file_spec.filter == FILTER_LATEST:
            return paths[:1]
        return paths

    if isinstance(file_spec, list):
        return file_spec
    if isinstance(file_spec, tuple):
        return list(file_spec)

    raise TypeError(f"Unsupported file spec: {file_spec!r}")
