"""
Local file system adapter implementation for file operations.
"""

import logging
import os

from typing_extensions import override

from pipescript.entities.File import FileMetadata
from pipescript.exceptions import FileRepositoryError
from pipescript.ports.files.file_repository_port import FileRepositoryPort


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def stat(self, path: str) -> FileMetadata:
        """
        Resolve a path into its metadata, following symlinks.

        Args:
            path: Relative or absolute path of a file or directory

        Returns:
            FileMetadata for the path

        Raises:
            FileRepositoryError: If the path cannot be resolved
        """
        try:
            st = os.stat(path)
        except OSError as e:
            raise FileRepositoryError(f"Cannot stat {path}: {e.strerror or e}") from e
        name = os.path.basename(os.path.normpath(path))
        return FileMetadata.from_stat(name, st)

    @override
    def read_dir(self, directory: str) -> list[FileMetadata]:
        """
        List the direct children of a directory, in scandir order.

        Args:
            directory: Path to the directory to enumerate

        Returns:
            Metadata of every child

        Raises:
            FileRepositoryError: If the directory cannot be enumerated
        """
        children: list[FileMetadata] = []
        try:
            with os.scandir(directory) as it:
                for entry in it:
                    # Children describe the entry itself, symlinks are not followed
                    try:
                        st = entry.stat(follow_symlinks=False)
                    except FileNotFoundError:
                        self._logger.warning(f"Entry vanished while listing: {entry.path}")
                        continue
                    children.append(FileMetadata.from_stat(entry.name, st))
        except OSError as e:
            raise FileRepositoryError(
                f"Cannot read directory {directory}: {e.strerror or e}"
            ) from e
        self._logger.debug(f"Read {len(children)} entries from {directory}")
        return children
