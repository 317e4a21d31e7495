"""
Files domain entity: the result of a listing, as a stream and as entries.
"""

from typing import Iterator, Sequence

from pipescript.entities.Command import CommandError
from pipescript.entities.File import File
from pipescript.entities.Stream import Stream


class Files:
    """
    A list of files, usable either through ``entries`` or through ``stream``.

    Each line of the stream holds the path of one entry, in entry order.
    """

    __slots__ = ("stream", "entries")

    def __init__(self, stream: Stream, entries: Sequence[File]):
        self.stream = stream
        self.entries: tuple[File, ...] = tuple(entries)

    @property
    def errors(self) -> tuple[CommandError, ...]:
        return self.stream.errors

    def read(self, size: int = -1) -> bytes:
        return self.stream.read(size)

    def __iter__(self) -> Iterator[File]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"Files(entries={len(self.entries)}, errors={len(self.errors)})"
