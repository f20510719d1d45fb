"""
Use case for reading the process working directory.
"""

import logging
from typing import Optional

from cwdkit.entities.working_directory import WorkingDirectory
from cwdkit.exceptions import DirectoryError
from cwdkit.ports.directory.directory_port import DirectoryPort


class GetCurrentDirectoryUseCase:
    """Use case for reading the process working directory."""

    def __init__(
        self,
        directory_port: DirectoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._directory_port = directory_port
        self._logger = logger or logging.getLogger(__name__)

    def execute(self) -> WorkingDirectory:
        """
        Read the current working directory.

        Returns:
            WorkingDirectory snapshot

        Raises:
            DirectoryError: If the working directory cannot be read
        """
        try:
            return WorkingDirectory(self._directory_port.get_current())
        except DirectoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error reading working directory: {e}")
            raise DirectoryError(f"Failed to read working directory: {str(e)}")
