from __future__ import annotations

import os
from typing import Tuple

"""Workspace root utilities to constrain directory changes made through tools.

Environment variables:
- CWDKIT_WORKSPACE_ROOT: absolute path of the workspace root. Defaults to the working directory at startup.
- CWDKIT_WORKSPACE_ENFORCE: '1' to enforce root, '0' to disable guard (default).
"""


class WorkspaceGuard:
    def __init__(self, root: str, enforce: bool = False) -> None:
        self.root = os.path.realpath(os.path.expanduser(root))
        self.enforce = enforce

    @classmethod
    def from_settings(cls, settings) -> "WorkspaceGuard":
        return cls(settings.workspace_root, settings.workspace_enforce)

    def ensure_within_root(self, path: str) -> Tuple[bool, str]:
        """Return (ok, normalized_abs) if path is within root or enforcement disabled.

        Relative paths are resolved against the current working directory.
        """
        try:
            p = normalize_dir(path)
        except OSError:
            # working directory was removed
            return not self.enforce, os.fspath(path)
        if not self.enforce:
            return True, p
        if "\x00" in p:
            return False, p
        try:
            p = os.path.realpath(p)
            common = os.path.commonpath([self.root, p])
        except ValueError:
            # different drives on Windows
            return False, p
        return common == self.root, p


def normalize_dir(path: str) -> str:
    s = os.fspath(path)
    if not os.path.isabs(s):
        s = os.path.join(os.getcwd(), s)
    return os.path.normpath(s)
