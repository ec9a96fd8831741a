"""
Unified exception definitions
"""
from typing import Optional


class BridgeError(Exception):
    """Base exception class"""
    pass


class ConfigError(BridgeError):
    """Configuration error"""
    pass


class TransportError(BridgeError):
    """Device transport call failed (bridge daemon, connectivity, process)"""
    pass


class DeployError(BridgeError):
    """Deployment error"""
    pass


class PushVerificationError(DeployError):
    """
    Push reported success but the transport output shows the copy did not happen.
    """

    def __init__(self, local_path: str, remote_path: str, stderr: str, marker: Optional[str] = None):
        self.local_path = local_path
        self.remote_path = remote_path
        self.stderr = stderr
        self.marker = marker
        super().__init__(
            f"Push of {local_path} to {remote_path} failed: {stderr.strip() or marker}"
        )


class EnumerationError(DeployError):
    """Local file matching failed"""
    pass
