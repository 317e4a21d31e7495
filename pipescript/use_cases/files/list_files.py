"""
Use case for listing files, the `ls` pipeline stage.
"""

import logging
import os
from typing import Optional

from pipescript.adapters.streams.file_list_source import FileListSource
from pipescript.entities.Command import Command
from pipescript.entities.File import File
from pipescript.entities.Files import Files
from pipescript.entities.Stream import stdin
from pipescript.exceptions import FileRepositoryError
from pipescript.ports.files.file_repository_port import FileRepositoryPort


class ListFilesUseCase:
    """Use case for listing files and directories into a stream of paths."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, *paths: str) -> Files:
        """
        List files. Each line of the returned stream holds the path of one file.

        With no paths, the current directory is listed. A file path yields
        itself; a directory path yields its direct children joined onto it.
        Paths keep the form they were given in, relative or absolute, and
        paths reaching the same file are listed once per occurrence.

        A path that cannot be listed is recorded as an error on the stage
        ("stat path" or "read dir") and the remaining paths are still listed.

        Args:
            paths: Files or directories to list

        Returns:
            Files holding the entries and the matching stream
        """
        if not paths:
            paths = (os.curdir,)

        command = Command(f"ls ({list(paths)})")
        self._logger.info(f"Listing paths: {list(paths)}")

        entries: list[File] = []
        for path in paths:
            try:
                info = self._file_repository.stat(path)
            except FileRepositoryError as e:
                self._logger.debug(f"stat path failed for {path}: {e}")
                command.append_error(e, "stat path")
                continue

            if not info.is_dir:
                entries.append(File(path=path, metadata=info))
                continue

            try:
                children = self._file_repository.read_dir(path)
            except FileRepositoryError as e:
                self._logger.debug(f"read dir failed for {path}: {e}")
                command.append_error(e, "read dir")
                continue

            for child in children:
                entries.append(File(path=os.path.join(path, child.name), metadata=child))

        listed = tuple(entries)
        command.reader = FileListSource(listed)
        self._logger.info(f"Found {len(listed)} files, {len(command.errors)} errors")

        return Files(stream=stdin().pipe_to(lambda _: command), entries=listed)
