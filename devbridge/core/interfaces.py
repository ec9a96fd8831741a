"""
Core interfaces for dependency injection
"""
from abc import ABC, abstractmethod
from typing import List, Tuple


class Transport(ABC):
    """
    Device bridge transport interface.

    Implementations return raw text (stdout, stderr) without any bridge
    protocol framing and raise TransportError when the call itself fails.
    """

    @abstractmethod
    def shell(self, command: str) -> Tuple[str, str]:
        """Run a shell command on the device and return (stdout, stderr)"""
        pass

    @abstractmethod
    def push(self, local_path: str, remote_path: str) -> Tuple[str, str]:
        """Copy one local file to the device and return (stdout, stderr)"""
        pass

    def close(self) -> None:
        """Release transport resources"""
        pass

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class FileLister(ABC):
    """Local file enumerator interface"""

    @abstractmethod
    def list(self, pattern: str) -> List[str]:
        """Return local paths matching pattern, raise EnumerationError on failure"""
        pass
