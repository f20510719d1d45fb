"""
Tests for the EnterDirectoryUseCase.
"""

import os
from unittest.mock import MagicMock

import pytest

from cwdkit.adapters.directory.local_directory_adapter import LocalDirectoryAdapter
from cwdkit.exceptions import DirectoryChangeError, DirectoryError
from cwdkit.ports.directory.directory_port import DirectoryPort
from cwdkit.use_cases.directory.enter_directory import EnterDirectoryUseCase


@pytest.fixture
def use_case(mock_logger):
    return EnterDirectoryUseCase(LocalDirectoryAdapter(mock_logger), mock_logger)


class TestEnterDirectoryUseCase:
    """Test cases for the EnterDirectoryUseCase."""

    def test_execute_returns_previous(self, use_case, temp_directory):
        """Entering a directory hands back where we came from."""
        os.chdir(temp_directory)
        target = os.path.join(temp_directory, "subdir")

        previous = use_case.execute(target)

        assert os.path.realpath(previous) == temp_directory
        assert os.path.realpath(os.getcwd()) == target

    def test_execute_round_trip(self, use_case, temp_directory):
        """Entering the returned directory restores the original one."""
        os.chdir(temp_directory)

        previous = use_case.execute("subdir")
        assert previous is not None
        use_case.execute(previous)

        assert os.path.realpath(os.getcwd()) == temp_directory

    def test_execute_failure(self, use_case, temp_directory, mock_logger):
        """A failed change returns None and leaves the directory alone."""
        os.chdir(temp_directory)

        assert use_case.execute("/this/path/does/not/exist") is None
        assert os.path.realpath(os.getcwd()) == temp_directory
        mock_logger.warning.assert_called_once_with(
            "Could not enter directory: /this/path/does/not/exist"
        )

    def test_execute_unreadable_current(self, mock_logger):
        """If the current directory cannot be read, nothing is changed."""
        mock_port = MagicMock(spec=DirectoryPort)
        mock_port.get_current.side_effect = DirectoryError("gone")

        result = EnterDirectoryUseCase(mock_port, mock_logger).execute("/tmp")

        assert result is None
        mock_port.set_current.assert_not_called()

    def test_scoped_restores_directory(self, use_case, temp_directory):
        os.chdir(temp_directory)
        target = os.path.join(temp_directory, "subdir", "nested")

        with use_case.scoped(target) as wd:
            assert os.path.realpath(wd.path) == target
            assert os.path.realpath(os.getcwd()) == target

        assert os.path.realpath(os.getcwd()) == temp_directory

    def test_scoped_restores_on_exception(self, use_case, temp_directory):
        os.chdir(temp_directory)

        with pytest.raises(RuntimeError, match="inside"):
            with use_case.scoped("subdir"):
                raise RuntimeError("inside")

        assert os.path.realpath(os.getcwd()) == temp_directory

    def test_scoped_nested(self, use_case, temp_directory):
        """Scopes nest on the same thread without deadlocking."""
        os.chdir(temp_directory)

        with use_case.scoped("subdir"):
            with use_case.scoped("nested"):
                assert os.path.realpath(os.getcwd()) == os.path.join(
                    temp_directory, "subdir", "nested"
                )
            assert os.path.realpath(os.getcwd()) == os.path.join(
                temp_directory, "subdir"
            )

        assert os.path.realpath(os.getcwd()) == temp_directory

    def test_scoped_cannot_enter(self, use_case, temp_directory):
        os.chdir(temp_directory)

        with pytest.raises(
            DirectoryChangeError, match="Cannot change working directory to: missing"
        ):
            with use_case.scoped("missing"):
                pytest.fail("block must not run")

        assert os.path.realpath(os.getcwd()) == temp_directory

    def test_scoped_cannot_return(self, mock_logger):
        """Failing to go back is logged, not raised."""
        mock_port = MagicMock(spec=DirectoryPort)
        mock_port.get_current.side_effect = ["/old", "/new"]
        mock_port.set_current.side_effect = [True, False]

        with EnterDirectoryUseCase(mock_port, mock_logger).scoped("/new") as wd:
            assert wd.path == "/new"

        mock_logger.error.assert_called_once_with("Could not return to directory: /old")
