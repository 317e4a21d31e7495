"""
Byte source that builds its real source on first read.
"""

from typing import Callable, Optional

from typing_extensions import override

from pipescript.ports.streams.byte_source_port import ByteSourcePort


class DeferredSource(ByteSourcePort):
    """Wraps a thunk returning a byte source; the thunk runs at most once, on first read."""

    def __init__(self, thunk: Callable[[], ByteSourcePort]):
        self._thunk: Optional[Callable[[], ByteSourcePort]] = thunk
        self._source: Optional[ByteSourcePort] = None

    @property
    def resolved(self) -> bool:
        """Whether the underlying source has been built."""
        return self._source is not None

    @override
    def read(self, size: int = -1) -> bytes:
        if self._source is None:
            assert self._thunk is not None
            self._source = self._thunk()
            self._thunk = None
        return self._source.read(size)
