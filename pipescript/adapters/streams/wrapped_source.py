"""
Byte source wrapping an external binary stream (stdin, an open file, a socket file).
"""

from typing import BinaryIO, Callable, Optional

from typing_extensions import override

from pipescript.exceptions import StreamError
from pipescript.ports.streams.byte_source_port import ByteSourcePort


class WrappedSource(ByteSourcePort):
    """
    Adapter exposing a binary file object as a byte source.

    The wrapped object is given either directly or through ``factory``, a
    zero-argument callable that is only invoked on the first read.
    """

    def __init__(
        self,
        stream: Optional[BinaryIO] = None,
        *,
        factory: Optional[Callable[[], BinaryIO]] = None,
    ):
        """
        Initialize the adapter.

        Args:
            stream: Binary file object to read from
            factory: Callable producing the file object on first read

        Raises:
            StreamError: Unless exactly one of stream and factory is given
        """
        if (stream is None) == (factory is None):
            raise StreamError("WrappedSource needs exactly one of stream or factory")
        self._stream = stream
        self._factory = factory
        self._exhausted = False

    def _resolve(self) -> BinaryIO:
        if self._stream is None:
            assert self._factory is not None
            self._stream = self._factory()
            self._factory = None
        return self._stream

    @override
    def read(self, size: int = -1) -> bytes:
        """
        Read whatever the wrapped stream has available, up to ``size`` bytes.

        Buffered streams are read with ``read1`` so a call returns as soon as
        some bytes are available instead of waiting for ``size`` bytes or EOF.

        Raises:
            StreamError: If the wrapped stream is non-blocking and has nothing ready
        """
        # External streams may be interactive; once they report EOF we stay there.
        if self._exhausted:
            return b""
        stream = self._resolve()
        read1 = getattr(stream, "read1", None)
        chunk = read1(size) if callable(read1) else stream.read(size)
        if chunk is None:
            raise StreamError(
                "Wrapped stream has no data ready; non-blocking streams are not supported"
            )
        if not chunk and size != 0:
            self._exhausted = True
        return chunk
