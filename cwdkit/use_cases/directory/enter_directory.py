"""
Use case for entering a directory and returning to the previous one.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from cwdkit.adapters.directory.local_directory_adapter import CWD_LOCK
from cwdkit.entities.working_directory import WorkingDirectory
from cwdkit.exceptions import DirectoryChangeError, DirectoryError
from cwdkit.ports.directory.directory_port import DirectoryPort, PathArg


class EnterDirectoryUseCase:
    """
    Change into a directory while remembering where the caller came from.

    ``execute`` hands back the previous directory so the caller can return to
    it later; ``scoped`` does the round trip itself around a ``with`` block.
    """

    def __init__(
        self,
        directory_port: DirectoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            directory_port: Port for working-directory operations
            logger: Logger instance to use for logging
        """
        self._directory_port = directory_port
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: PathArg) -> Optional[str]:
        """
        Change into ``path``.

        Args:
            path: Directory to change into

        Returns:
            The previous working directory, or None if the change failed (the
            working directory is then unchanged)
        """
        with CWD_LOCK:
            try:
                previous = self._directory_port.get_current()
            except DirectoryError as e:
                self._logger.warning(f"Cannot enter {path}: {e}")
                return None
            if not self._directory_port.set_current(path):
                self._logger.warning(f"Could not enter directory: {path}")
                return None
        self._logger.info(f"Entered {path} (from {previous})")
        return previous

    @contextmanager
    def scoped(self, path: PathArg) -> Iterator[WorkingDirectory]:
        """
        Run a block with ``path`` as the working directory.

        The lock is held for the whole block so other callers going through
        this package cannot move the directory underneath it.

        Raises:
            DirectoryChangeError: If ``path`` cannot be entered
        """
        with CWD_LOCK:
            previous = self.execute(path)
            if previous is None:
                raise DirectoryChangeError(f"Cannot change working directory to: {path}")
            try:
                yield WorkingDirectory(self._directory_port.get_current())
            finally:
                if not self._directory_port.set_current(previous):
                    self._logger.error(f"Could not return to directory: {previous}")
                else:
                    self._logger.info(f"Returned to {previous}")
