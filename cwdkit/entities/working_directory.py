"""
WorkingDirectory domain entity.
"""

import os
from dataclasses import dataclass
from typing import Any

from cwdkit.exceptions import DirectoryError


@dataclass(frozen=True)
class WorkingDirectory:
    """
    Snapshot of the process working directory at the time it was read.

    The snapshot is not kept in sync with the OS: read it again through
    the directory port whenever the current value is needed.
    """

    path: str

    def __post_init__(self) -> None:
        if not self.path or not isinstance(self.path, str):
            raise DirectoryError("Path must be a non-empty string")
        if not os.path.isabs(self.path):
            raise DirectoryError(f"Working directory must be absolute: {self.path}")

    @property
    def name(self) -> str:
        """Last path component (empty for a filesystem root)."""
        return os.path.basename(os.path.normpath(self.path))

    @property
    def parent(self) -> str:
        return os.path.dirname(os.path.normpath(self.path))

    def get_details(self) -> dict[str, Any]:
        """
        Get the directory details.

        Returns:
            Dictionary with path, name and parent
        """
        return {
            "path": self.path,
            "name": self.name,
            "parent": self.parent,
        }

    def exists(self) -> bool:
        """
        Check if the directory still exists.

        Returns:
            True if the path is an existing directory, False otherwise
        """
        return os.path.isdir(self.path)

    def __str__(self) -> str:
        return self.path
