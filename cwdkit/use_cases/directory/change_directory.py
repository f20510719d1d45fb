"""
Use case for changing the process working directory.
"""

import logging
from typing import Optional

from cwdkit.ports.directory.directory_port import DirectoryPort, PathArg


class ChangeDirectoryUseCase:
    """Use case for changing the process working directory."""

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

    def execute(self, path: PathArg) -> bool:
        """
        Change the process working directory.

        Args:
            path: Directory to change into

        Returns:
            True if the change succeeded, False otherwise
        """
        self._logger.info(f"Changing working directory to: {path}")
        ok = self._directory_port.set_current(path)
        if ok:
            self._logger.info(f"Working directory is now: {path}")
        else:
            self._logger.warning(f"Could not change working directory to: {path}")
        return ok
