"""
Deploy domain module
"""
from .models import FilePattern, FileSpec, PushStatus, PushResult, DeploymentRequest
from .service import DeployService
from .resolver import list_remote_files
from .remote_fs import remote_exists, remote_chmod
from .pusher import get_destination, push_raw

__all__ = [
    "FilePattern",
    "FileSpec",
    "PushStatus",
    "PushResult",
    "DeploymentRequest",
    "DeployService",
    "list_remote_files",
    "remote_exists",
    "remote_chmod",
    "get_destination",
    "push_raw",
]
