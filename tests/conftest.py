"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
import pytest
from unittest.mock import MagicMock

from cwdkit.container import DependencyContainer


@pytest.fixture(autouse=True)
def restore_cwd():
    """
    Put the working directory back after every test.

    Every test in this suite may move the process working directory.
    """
    original = os.getcwd()
    yield original
    os.chdir(original)


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory tree for testing directory changes.

    Layout::

        <root>/
            test1.txt
            subdir/
                nested/

    Returns:
        Real (symlink-free) path to the temporary directory
    """
    original = os.getcwd()
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_dir = os.path.realpath(temp_dir)

        with open(os.path.join(temp_dir, "test1.txt"), "w") as f:
            f.write("This is a test file.")

        os.makedirs(os.path.join(temp_dir, "subdir", "nested"))

        yield temp_dir

        # Leave the tree before it is removed
        os.chdir(original)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
