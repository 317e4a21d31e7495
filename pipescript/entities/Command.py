"""
Command domain entity: one stage of a pipeline.
"""

from typing import NamedTuple, Optional

from pipescript.exceptions import StreamError
from pipescript.ports.streams.byte_source_port import ByteSourcePort


class CommandError(NamedTuple):
    """A non-fatal failure recorded while a stage was being built."""

    cause: BaseException
    context: str

    def __str__(self) -> str:
        return f"{self.context}: {self.cause}"


class Command:
    """
    A named unit of work: a byte source plus the errors collected while preparing it.

    The reader is assigned exactly once, either through the constructor or by
    the stage logic before the command is handed out. Errors are append-only.
    """

    def __init__(self, name: str, reader: Optional[ByteSourcePort] = None):
        """
        Initialize the command.

        Args:
            name: Identifier used in diagnostics
            reader: Output of the stage, if already known
        """
        self.name = name
        self._reader = reader
        self._errors: list[CommandError] = []

    @property
    def reader(self) -> ByteSourcePort:
        """
        The stage output.

        Raises:
            StreamError: If no reader was assigned yet
        """
        if self._reader is None:
            raise StreamError(f"Command {self.name!r} has no reader")
        return self._reader

    @reader.setter
    def reader(self, reader: ByteSourcePort) -> None:
        if self._reader is not None:
            raise StreamError(f"Command {self.name!r} already has a reader")
        self._reader = reader

    @property
    def errors(self) -> tuple[CommandError, ...]:
        """Errors recorded by this stage, in the order they happened."""
        return tuple(self._errors)

    def append_error(self, err: BaseException, context: str) -> None:
        """
        Record a failure and carry on; the reader is left untouched.

        Args:
            err: The underlying exception
            context: Short description of what was being done, e.g. "stat path"
        """
        self._errors.append(CommandError(err, context))

    def error(self) -> Optional[StreamError]:
        """
        Aggregate the recorded errors into a single exception.

        Returns:
            None if nothing was recorded, otherwise a StreamError chaining the first cause
        """
        if not self._errors:
            return None
        details = "; ".join(str(e) for e in self._errors)
        aggregate = StreamError(f"{self.name}: {details}")
        aggregate.__cause__ = self._errors[0].cause
        return aggregate

    def read(self, size: int = -1) -> bytes:
        return self.reader.read(size)

    def __repr__(self) -> str:
        return f"Command(name={self.name!r}, errors={len(self._errors)})"
