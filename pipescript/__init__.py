"""pipescript: shell-pipeline emulation with lazy, pull-based byte streams.

A pipeline starts at a source stage such as `stdin()` and grows with
`Stream.pipe_to`; nothing is read until the last stream is read from.
"""

from pipescript.container import container
from pipescript.entities.Command import Command, CommandError
from pipescript.entities.File import File, FileMetadata
from pipescript.entities.Files import Files
from pipescript.entities.Stream import Stream, stdin
from pipescript.exceptions import (
    BaseAppError,
    ConfigurationError,
    FileRepositoryError,
    StreamError,
)

__all__: list[str] = [
    "BaseAppError",
    "Command",
    "CommandError",
    "ConfigurationError",
    "File",
    "FileMetadata",
    "FileRepositoryError",
    "Files",
    "Stream",
    "StreamError",
    "ls",
    "stdin",
]


def ls(*paths: str) -> Files:
    """List files through the default container. Shell command: `ls`."""
    return container.get_list_files_use_case().execute(*paths)
