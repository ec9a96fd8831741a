"""
Deploy domain models
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Sequence, Union

from ...core.constants import DEFAULT_OVERWRITE


@dataclass(frozen=True)
class FilePattern:
    """
    Remote glob descriptor.

    Attributes:
        pattern: Glob expanded by the device shell (e.g. "/tmp/*.wgt")
        filter: "latest" keeps only the most recently changed match
    """
    pattern: str
    filter: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FilePattern":
        """Build from a {"pattern": ..., "filter": ...} mapping"""
        if "pattern" not in data:
            raise ValueError("File spec mapping requires a 'pattern' key")
        return cls(pattern=data["pattern"], filter=data.get("filter"))


# Literal remote path, ordered list of literal paths, or a pattern descriptor
FileSpec = Union[str, Sequence[str], FilePattern, Mapping[str, Any]]


class PushStatus(str, Enum):
    """Per-file push outcome"""
    PUSHED = "pushed"
    SKIPPED = "skipped"


@dataclass
class PushResult:
    """Result of one successful push_one call"""
    local_path: str
    remote_path: str
    status: PushStatus
    chmod: Optional[str] = None

    @property
    def skipped(self) -> bool:
        return self.status == PushStatus.SKIPPED


@dataclass
class DeploymentRequest:
    """
    One batch push: every file matching local_glob goes into remote_directory.
    """
    local_glob: str
    remote_directory: str
    overwrite: bool = DEFAULT_OVERWRITE
    chmod: Optional[str] = None
