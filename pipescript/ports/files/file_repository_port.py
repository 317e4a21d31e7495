"""
File repository port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod

from pipescript.entities.File import FileMetadata


class FileRepositoryPort(ABC):
    """Port interface for file repository operations."""

    @abstractmethod
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
        pass

    @abstractmethod
    def read_dir(self, directory: str) -> list[FileMetadata]:
        """
        List the direct children of a directory.

        Args:
            directory: Path to the directory to enumerate

        Returns:
            Metadata of every child, in the order the file system reports them

        Raises:
            FileRepositoryError: If the directory cannot be enumerated
        """
        pass
