"""
Lazy line reader over a list of File entities.
"""

import os
from typing import Sequence

from typing_extensions import override

from pipescript.entities.File import File
from pipescript.ports.streams.byte_source_port import ByteSourcePort


class FileListSource(ByteSourcePort):
    """
    Serves one "<path>\\n" line per File, in order, without building the whole text.

    Each read returns at most one line. When the caller asks for fewer bytes
    than the current line holds, the rest of the line is kept and returned by
    the following reads.
    """

    def __init__(self, files: Sequence[File]):
        """
        Initialize the reader.

        Args:
            files: Entries to serialize, one path per line
        """
        self._files = files
        self._seek = 0
        self._pending = b""

    def _next_line(self) -> bytes:
        line = self._files[self._seek].path + "\n"
        self._seek += 1
        return os.fsencode(line)

    @override
    def read(self, size: int = -1) -> bytes:
        if not self._pending:
            if self._seek >= len(self._files):
                return b""
            self._pending = self._next_line()
        if size < 0 or size >= len(self._pending):
            chunk, self._pending = self._pending, b""
        else:
            chunk, self._pending = self._pending[:size], self._pending[size:]
        return chunk
