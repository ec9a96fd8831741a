"""
devbridge - deploy build artifacts to devices over a device bridge

Provides:
- Batch push of local files (glob) into a remote directory, fail-fast
- Overwrite policy and post-push chmod per file
- Remote existence check and remote listing (literal paths or patterns)
- sdb/adb and SSH transports, TOML configuration and a Typer CLI
"""

__version__ = "0.1.0"

from .core import (
    Transport,
    FileLister,
    BridgeError,
    ConfigError,
    TransportError,
    DeployError,
    PushVerificationError,
    EnumerationError,
)

from .domain.deploy import (
    DeployService,
    FilePattern,
    PushStatus,
    PushResult,
    DeploymentRequest,
)

__all__ = [
    # Version
    "__version__",
    # Service
    "DeployService",
    # Interfaces
    "Transport",
    "FileLister",
    # Models
    "FilePattern",
    "PushStatus",
    "PushResult",
    "DeploymentRequest",
    # Exceptions
    "BridgeError",
    "ConfigError",
    "TransportError",
    "DeployError",
    "PushVerificationError",
    "EnumerationError",
]
