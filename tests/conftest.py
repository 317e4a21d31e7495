"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from pipescript.container import DependencyContainer

# name -> content; None marks a directory
_TREE = {
    "test1.txt": "This is a test file.",
    "test2.py": "print('Hello, world!')",
    "subdir": None,
    os.path.join("subdir", "test3.md"): "# Test Markdown\n\nThis is a test.",
}


@pytest.fixture
def temp_directory():
    """
    Temporary directory holding test1.txt, test2.py and subdir/test3.md.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        for name, content in _TREE.items():
            target = os.path.join(temp_dir, name)
            if content is None:
                os.makedirs(target)
                continue
            with open(target, "w") as f:
                f.write(content)

        yield temp_dir


@pytest.fixture
def mock_logger():
    """Mock logger, for asserting on log calls."""
    return MagicMock()


@pytest.fixture
def dependency_container(mock_logger):
    """
    Dependency container whose adapters and use cases share the mock logger.

    Returns:
        DependencyContainer instance
    """
    container = DependencyContainer()
    container._logger = mock_logger
    return container
