"""
Stream domain entity: a handle on the last stage of a pipeline.
"""

import logging
import sys
from typing import BinaryIO, Callable, Iterator, Optional

from pipescript.adapters.streams.deferred_source import DeferredSource
from pipescript.adapters.streams.wrapped_source import WrappedSource
from pipescript.config.settings import settings
from pipescript.entities.Command import Command, CommandError
from pipescript.exceptions import StreamError
from pipescript.ports.streams.byte_source_port import ByteSourcePort

logger = logging.getLogger(__name__)

StageBuilder = Callable[[ByteSourcePort], Command]


class Stream:
    """
    Handle on the active Command of a pipeline.

    Piping never mutates a Stream; it returns a new one whose command is only
    built the first time it is needed (read, name, errors). Reading pulls bytes
    through every upstream stage on demand.
    """

    __slots__ = ("_command", "_factory")

    def __init__(
        self,
        command: Optional[Command] = None,
        *,
        factory: Optional[Callable[[], Command]] = None,
    ):
        """
        Initialize the stream.

        Args:
            command: The active command
            factory: Zero-argument callable building the command on first use,
                as an alternative to passing it directly

        Raises:
            StreamError: Unless exactly one of command and factory is given
        """
        if (command is None) == (factory is None):
            raise StreamError("Stream needs exactly one of command or factory")
        self._command = command
        self._factory = factory

    @property
    def command(self) -> Command:
        """The active command, built on first access."""
        if self._command is None:
            assert self._factory is not None
            command = self._factory()
            if not isinstance(command, Command):
                raise StreamError(
                    f"Pipeline stage must return a Command, got {type(command).__name__}"
                )
            logger.debug(f"Built pipeline stage: {command.name}")
            self._command = command
            self._factory = None
        return self._command

    @property
    def name(self) -> str:
        return self.command.name

    @property
    def errors(self) -> tuple[CommandError, ...]:
        """Errors recorded by the active stage only."""
        return self.command.errors

    def error(self) -> Optional[StreamError]:
        return self.command.error()

    def pipe_to(self, build_next: StageBuilder) -> "Stream":
        """
        Attach a new stage whose input is this stream's output.

        Neither ``build_next`` nor any upstream stage runs here: the next
        command is built on first use, and the upstream reader it receives only
        builds this stream's command once it is read from.

        Args:
            build_next: Callable receiving the upstream reader and returning the next Command

        Returns:
            A new Stream wrapping the next Command
        """
        upstream = DeferredSource(lambda: self.command.reader)
        return Stream(factory=lambda: build_next(upstream))

    def read(self, size: int = -1) -> bytes:
        """
        Read the next chunk of the pipeline output.

        Args:
            size: Maximum number of bytes, or -1 for no limit

        Returns:
            Bytes produced so far, possibly fewer than requested; b"" at end of input
        """
        return self.command.read(size)

    def read_all(self) -> bytes:
        """Read until end of input and return everything read."""
        chunks: list[bytes] = []
        while True:
            chunk = self.read()
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)

    def to_string(self, encoding: str = "utf-8") -> str:
        return self.read_all().decode(encoding, errors="surrogateescape")

    def iter_lines(self) -> Iterator[bytes]:
        """
        Yield the output line by line, each with its trailing newline.

        A last line without a newline is yielded as is.
        """
        buffer = b""
        while True:
            chunk = self.read()
            if not chunk:
                break
            buffer += chunk
            start = 0
            while True:
                idx = buffer.find(b"\n", start)
                if idx < 0:
                    break
                yield buffer[start : idx + 1]
                start = idx + 1
            buffer = buffer[start:]
        if buffer:
            yield buffer

    def to(self, writer: BinaryIO, chunk_size: Optional[int] = None) -> int:
        """
        Copy the output into a binary writer.

        Args:
            writer: Destination, e.g. ``sys.stdout.buffer``
            chunk_size: Read size per call (default: settings.chunk_size)

        Returns:
            Number of bytes written

        Raises:
            StreamError: If chunk_size is not positive
        """
        size = settings.chunk_size if chunk_size is None else chunk_size
        if size <= 0:
            raise StreamError(f"chunk_size must be positive, got {size}")
        total = 0
        while True:
            chunk = self.read(size)
            if not chunk:
                break
            writer.write(chunk)
            total += len(chunk)
        return total

    def __repr__(self) -> str:
        if self._command is None:
            return "Stream(<pending>)"
        return f"Stream({self._command!r})"


def stdin() -> Stream:
    """
    Source stage reading the process standard input.

    ``sys.stdin`` is looked up at first read, so building a pipeline never
    touches it.
    """
    return Stream(Command("stdin", WrappedSource(factory=lambda: sys.stdin.buffer)))
