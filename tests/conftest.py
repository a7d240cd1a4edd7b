"""
Pytest configuration and shared fixtures.
"""

import io
import os
import tempfile
import pytest
from unittest.mock import MagicMock

from file_explorer.container import DependencyContainer
from file_explorer.entities.session import Session
from file_explorer.shell import make_console


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Layout:
        test1.txt        (20 bytes)
        test2.py         (22 bytes)
        subdir/test3.md  (32 bytes)

    Returns:
        Real path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_dir = os.path.realpath(temp_dir)
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def empty_directory(tmp_path):
    """Real path of an empty temporary directory."""
    return os.path.realpath(tmp_path)


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


@pytest.fixture
def session_factory():
    """Build sessions whose confirmation prompt returns a fixed answer."""

    def _make(cwd, answer=True):
        return Session(cwd, confirm=lambda question: answer)

    return _make


@pytest.fixture
def output():
    """In-memory text buffer and a console writing to it."""
    buffer = io.StringIO()
    return buffer, make_console(color=False, file=buffer, width=200)


@pytest.fixture
def make_file():
    """Create a file of a given size, creating parent directories as needed."""

    def _make(path, size=0, mtime=None):
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "wb") as f:
            f.write(b"0" * size)
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _make
