"""
Tools "os.*" exposing the working-directory operations to tool callers.

This is the binding layer: it checks and unpacks the caller's arguments,
then hands a plain string to the use cases and passes their result back
unchanged. The workspace root check and the change it guards run under
one hold of CWD_LOCK.
"""

import logging
from typing import Any, Optional

from cwdkit.adapters.directory.local_directory_adapter import CWD_LOCK
from cwdkit.exceptions import ToolArgumentError
from cwdkit.ports.tools.tools_port import ToolsHandlerPort, ToolSpec
from cwdkit.use_cases.directory.change_directory import ChangeDirectoryUseCase
from cwdkit.use_cases.directory.enter_directory import EnterDirectoryUseCase
from cwdkit.use_cases.directory.get_current_directory import (
    GetCurrentDirectoryUseCase,
)
from cwdkit.utils.workspace import WorkspaceGuard


class OsToolsHandler(ToolsHandlerPort):
    """Handler for the os.chdir / os.cd / os.curdir tools."""

    def __init__(
        self,
        change_directory: ChangeDirectoryUseCase,
        enter_directory: EnterDirectoryUseCase,
        get_current_directory: GetCurrentDirectoryUseCase,
        guard: Optional[WorkspaceGuard] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._change_directory = change_directory
        self._enter_directory = enter_directory
        self._get_current_directory = get_current_directory
        self._guard = guard
        self._logger = logger or logging.getLogger(__name__)

    def available_tools(self) -> list[ToolSpec]:
        return [
            {
                "name": "os.chdir",
                "description": "Change the process working directory. Returns true on success, false otherwise.",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "path": {
                            "type": "string",
                            "description": "Directory to change into (absolute or relative)",
                        }
                    },
                    "required": ["path"],
                    "additionalProperties": False,
                },
            },
            {
                "name": "os.cd",
                "description": "Change the working directory and return the previous one (null on failure).",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "path": {
                            "type": "string",
                            "description": "Directory to change into (absolute or relative)",
                        }
                    },
                    "required": ["path"],
                    "additionalProperties": False,
                },
            },
            {
                "name": "os.curdir",
                "description": "Get the absolute path of the process working directory.",
                "parameters": {
                    "type": "object",
                    "properties": {},
                    "additionalProperties": False,
                },
            },
        ]

    def dispatch(self, name: str, arguments: dict[str, Any]) -> Any:
        if name == "os.chdir":
            path = self._require_path(name, arguments)
            with CWD_LOCK:
                if not self._allowed(path):
                    return False
                return self._change_directory.execute(path)

        if name == "os.cd":
            path = self._require_path(name, arguments)
            with CWD_LOCK:
                if not self._allowed(path):
                    return None
                return self._enter_directory.execute(path)

        if name == "os.curdir":
            return self._get_current_directory.execute().path

        raise ValueError(f"Unknown tool: {name}")

    def _require_path(self, name: str, arguments: dict[str, Any]) -> str:
        path = (arguments or {}).get("path")
        if not isinstance(path, str):
            raise ToolArgumentError(f"{name}: field 'path' (string) is required.")
        if not path:
            raise ToolArgumentError(f"{name}: field 'path' must not be empty.")
        return path

    def _allowed(self, path: str) -> bool:
        if self._guard is None or not self._guard.enforce:
            return True
        ok, resolved = self._guard.ensure_within_root(path)
        if not ok:
            self._logger.warning(
                f"Refusing to leave workspace root {self._guard.root}: {resolved}"
            )
        return ok
