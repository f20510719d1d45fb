"""
Local operating-system adapter for the process working directory.

The working directory is process-wide state: a change made here is seen by
every thread of the process. Changes made through this module are serialized
on ``CWD_LOCK``; code that calls ``os.chdir`` directly bypasses it and races
with everything else.
"""

import logging
import os
import threading

from typing_extensions import override

from cwdkit.exceptions import DirectoryError
from cwdkit.ports.directory.directory_port import DirectoryPort, PathArg

# Re-entrant so a scoped change can hold it while calling set_current.
CWD_LOCK = threading.RLock()


def set_current_directory(path: PathArg) -> bool:
    """
    Change the process working directory to ``path``.

    Returns True if the operating system accepted the change, False otherwise.
    The failure reason is not reported, and an empty or non-path argument
    returns False without calling the operating system.
    """
    if not isinstance(path, (str, os.PathLike)):
        return False
    if not os.fspath(path):
        return False
    try:
        os.chdir(path)
    except (OSError, ValueError):
        return False
    return True


class LocalDirectoryAdapter(DirectoryPort):
    """Local implementation of the directory port backed by ``os.chdir``."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def set_current(self, path: PathArg) -> bool:
        with CWD_LOCK:
            return set_current_directory(path)

    @override
    def get_current(self) -> str:
        """
        Read the process working directory.

        Returns:
            Absolute path of the current working directory

        Raises:
            DirectoryError: If the directory was removed or is unreadable
        """
        try:
            return os.getcwd()
        except OSError as e:
            self._logger.warning(f"Could not read working directory: {e}")
            raise DirectoryError(f"Cannot read working directory: {str(e)}")
