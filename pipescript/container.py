"""
Dependency injection container for managing pipescript dependencies.
"""

import logging

from pipescript.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from pipescript.ports.files.file_repository_port import FileRepositoryPort
from pipescript.use_cases.files.list_files import ListFilesUseCase


class DependencyContainer:
    """
    Container for managing dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_repository"]

    def get_list_files_use_case(self) -> ListFilesUseCase:
        """
        Get list files use case with injected dependencies.

        Returns:
            Configured ListFilesUseCase
        """
        if "list_files_use_case" not in self._instances:
            file_repository = self.get_file_repository()
            self._instances["list_files_use_case"] = ListFilesUseCase(
                file_repository, self._logger
            )
        return self._instances["list_files_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
