"""
Transport adapters
"""
from .sdb import SdbTransport
from .ssh import SshTransport
from .factory import TransportSettings, create_transport, TRANSPORT_KINDS

__all__ = [
    "SdbTransport",
    "SshTransport",
    "TransportSettings",
    "create_transport",
    "TRANSPORT_KINDS",
]
