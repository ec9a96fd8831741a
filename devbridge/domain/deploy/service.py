"""
Deploy domain service - business logic
"""
from typing import Callable, Iterable, List, Optional

from ...core.interfaces import Transport, FileLister
from ...core.logging import get_logger
from .models import DeploymentRequest, FileSpec, PushResult, PushStatus
from .remote_fs import remote_exists, remote_chmod
from .pusher import get_destination, push_raw
from .resolver import list_remote_files

logger = get_logger(__name__)


class DeployService:
    """
    Deploy service - pure business logic.

    Pushes local build artifacts to a device through a Transport. Every
    transport call is made once, in order, with at most one in flight.
    No direct dependency on CLI, Typer, or a concrete bridge.
    """

    def __init__(
        self,
        transport: Transport,
        file_lister: FileLister,
        on_pushed: Optional[Callable[[str, str], None]] = None,
        on_skipped: Optional[Callable[[str, str], None]] = None,
        on_chmod: Optional[Callable[[str, str], None]] = None,
    ):
        """
        Initialize deploy service.

        Args:
            transport: Device transport
            file_lister: Local file enumerator
            on_pushed: Callback after a file is pushed (local_path, remote_path)
            on_skipped: Callback when an existing file is kept (local_path, remote_path)
            on_chmod: Callback after permissions change (remote_path, mode)
        """
        if transport is None:
            raise ValueError("DeployService requires a transport")
        if file_lister is None:
            raise ValueError("DeployService requires a file lister")

        self.transport = transport
        self.file_lister = file_lister
        self.on_pushed = on_pushed
        self.on_skipped = on_skipped
        self.on_chmod = on_chmod

    # --------------------
    # Remote checks
    # --------------------
    def file_exists(self, remote_path: str) -> bool:
        """Check if a remote file exists"""
        return remote_exists(self.transport, remote_path)

    def chmod(self, remote_path: str, mode: str) -> None:
        """Apply a chmod mode (e.g. "+x", "755") to a remote file"""
        remote_chmod(self.transport, remote_path, mode)
        if self.on_chmod:
            self.on_chmod(remote_path, mode)

    def list_remote_files(self, file_spec: FileSpec) -> List[str]:
        """Resolve a file spec into remote paths"""
        return list_remote_files(self.transport, file_spec)

    # --------------------
    # Push
    # --------------------
    def get_destination(self, local_path: str, remote_directory: str) -> str:
        """Remote path a local file lands on inside remote_directory"""
        return get_destination(local_path, remote_directory)

    def push_raw(self, local_path: str, remote_path: str) -> None:
        """Push one file to an exact remote path"""
        push_raw(self.transport, local_path, remote_path)

    def push_one(
        self,
        local_path: str,
        remote_directory: str,
        overwrite: bool = False,
        chmod: Optional[str] = None,
    ) -> PushResult:
        """
        Push one local file into a remote directory.

        Process:
        1. Compute destination
        2. Unless overwriting, keep an existing remote file and stop
        3. Push the file
        4. Apply chmod if requested

        Args:
            local_path: Local file path
            remote_directory: Remote directory
            overwrite: Replace the remote file if it already exists
            chmod: Mode passed to chmod after a successful push

        Returns:
            PushResult with status PUSHED or SKIPPED

        Raises:
            TransportError: If a transport call fails
            PushVerificationError: If the push output reports a failed copy
        """
        destination = self.get_destination(local_path, remote_directory)

        if not overwrite and self.file_exists(destination):
            logger.warning(
                f"{destination} already exists on the device, not overwriting "
                f"(enable overwrite to replace it)"
            )
            if self.on_skipped:
                self.on_skipped(local_path, destination)
            return PushResult(local_path, destination, PushStatus.SKIPPED)

        self.push_raw(local_path, destination)
        if self.on_pushed:
            self.on_pushed(local_path, destination)

        if chmod is not None:
            self.chmod(destination, chmod)

        return PushResult(local_path, destination, PushStatus.PUSHED, chmod=chmod)

    def push(
        self,
        local_glob: str,
        remote_directory: str,
        overwrite: bool = False,
        chmod: Optional[str] = None,
    ) -> List[PushResult]:
        """
        Push every local file matching local_glob into remote_directory.

        Files are pushed one at a time in enumeration order. The first
        failure stops the batch and is raised; files already pushed stay on
        the device.

        Returns:
            Results for each file, in order

        Raises:
            EnumerationError: If local files cannot be listed (nothing is pushed)
            TransportError: If a transport call fails
            PushVerificationError: If a push output reports a failed copy
        """
        local_files = self.file_lister.list(local_glob)
        logger.debug(f"{len(local_files)} file(s) match {local_glob}")

        results = []
        for local_path in local_files:
            results.append(
                self.push_one(local_path, remote_directory, overwrite, chmod)
            )
        return results

    def deploy(self, request: DeploymentRequest) -> List[PushResult]:
        """Run one deployment request"""
        return self.push(
            request.local_glob,
            request.remote_directory,
            request.overwrite,
            request.chmod,
        )

    def deploy_all(self, requests: Iterable[DeploymentRequest]) -> List[PushResult]:
        """Run deployment requests in order, stopping at the first failure"""
        results = []
        for request in requests:
            results.extend(self.deploy(request))
        return results
