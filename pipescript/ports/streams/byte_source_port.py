"""
Byte source port interface: anything that can produce bytes on demand.
"""

from abc import ABC, abstractmethod


class ByteSourcePort(ABC):
    """Port interface for a readable, forward-only byte source."""

    @abstractmethod
    def read(self, size: int = -1) -> bytes:
        """
        Read the next chunk of bytes.

        Short reads are allowed: a call may return fewer bytes than requested
        even when more are to come. Callers must keep reading until an empty
        result.

        Args:
            size: Maximum number of bytes to return, or -1 for no limit

        Returns:
            The next chunk of bytes, or b"" once the source is exhausted
        """
        pass
