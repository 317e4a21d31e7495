"""
File domain entities.
"""

import os
import stat
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class FileMetadata:
    """
    File system information for a single entry (file or directory).
    """

    name: str
    size: int
    mode: int
    is_dir: bool
    mod_time: datetime

    @classmethod
    def from_stat(cls, name: str, st: os.stat_result) -> "FileMetadata":
        """
        Build metadata from an ``os.stat_result``.

        Args:
            name: Base name of the entry
            st: Result of ``os.stat`` or ``os.DirEntry.stat``

        Returns:
            FileMetadata instance
        """
        return cls(
            name=name,
            size=st.st_size,
            mode=st.st_mode,
            is_dir=stat.S_ISDIR(st.st_mode),
            mod_time=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
        )

    @property
    def permissions(self) -> str:
        """The ``ls -l`` style mode string, e.g. ``-rw-r--r--``."""
        return stat.filemode(self.mode)


@dataclass(frozen=True)
class File:
    """
    A listed file system entry.

    ``path`` is relative or absolute depending on how the listing was invoked;
    it is never normalized.
    """

    path: str
    metadata: FileMetadata

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def size(self) -> int:
        return self.metadata.size

    @property
    def mode(self) -> int:
        return self.metadata.mode

    @property
    def is_dir(self) -> bool:
        return self.metadata.is_dir

    @property
    def mod_time(self) -> datetime:
        return self.metadata.mod_time

    def get_details(self) -> dict[str, Any]:
        """
        Get comprehensive file details.

        Returns:
            Dictionary with file information
        """
        return {
            "path": self.path,
            "name": self.name,
            "size": self.size,
            "mode": self.metadata.permissions,
            "is_dir": self.is_dir,
            "mod_time": self.mod_time.isoformat(),
            "directory": os.path.dirname(self.path),
        }

    def __str__(self) -> str:
        """String representation of the File."""
        kind = "directory" if self.is_dir else "file"
        return f"File(path='{self.path}', size={self.size}, type='{kind}')"
