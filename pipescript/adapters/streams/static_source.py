"""
In-memory byte source.
"""

from typing_extensions import override

from pipescript.ports.streams.byte_source_port import ByteSourcePort


class BytesSource(ByteSourcePort):
    """Byte source serving a fixed buffer."""

    def __init__(self, data: bytes = b""):
        self._data = bytes(data)
        self._offset = 0

    @override
    def read(self, size: int = -1) -> bytes:
        if size < 0:
            end = len(self._data)
        else:
            end = min(self._offset + size, len(self._data))
        chunk = self._data[self._offset : end]
        self._offset = end
        return chunk

    def __repr__(self) -> str:
        return f"BytesSource(size={len(self._data)}, offset={self._offset})"
