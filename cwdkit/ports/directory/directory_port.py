"""
Directory port interface defining the contract for working-directory operations.
"""

import os
from abc import ABC, abstractmethod
from typing import Union

PathArg = Union[str, os.PathLike]


class DirectoryPort(ABC):
    """Port interface for the process working directory."""

    @abstractmethod
    def set_current(self, path: PathArg) -> bool:
        """
        Change the process working directory.

        Args:
            path: Directory to change into

        Returns:
            True if the change succeeded, False otherwise. Never raises for
            operating-system failures.
        """
        pass

    @abstractmethod
    def get_current(self) -> str:
        """
        Read the process working directory from the operating system.

        Returns:
            Absolute path of the current working directory

        Raises:
            DirectoryError: If the working directory cannot be read
        """
        pass
