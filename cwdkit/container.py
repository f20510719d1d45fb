"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import List

from cwdkit.adapters.directory.local_directory_adapter import LocalDirectoryAdapter
from cwdkit.config.settings import settings
from cwdkit.ports.directory.directory_port import DirectoryPort
from cwdkit.ports.tools.tools_port import ToolsHandlerPort, ToolSpec
from cwdkit.use_cases.directory.change_directory import ChangeDirectoryUseCase
from cwdkit.use_cases.directory.enter_directory import EnterDirectoryUseCase
from cwdkit.use_cases.directory.get_current_directory import (
    GetCurrentDirectoryUseCase,
)
from cwdkit.use_cases.tools.os_tools import OsToolsHandler
from cwdkit.utils.workspace import WorkspaceGuard


class CompositeToolsHandler(ToolsHandlerPort):
    """Combine several tool handlers into one exposing their specs and dispatch."""

    def __init__(self, *handlers: ToolsHandlerPort) -> None:
        self._handlers = list(handlers)

    def available_tools(self) -> list[ToolSpec]:
        tools: List[ToolSpec] = []
        for h in self._handlers:
            tools.extend(h.available_tools())
        return tools

    def dispatch(self, name: str, arguments: dict[str, object]) -> object:
        for h in self._handlers:
            try:
                return h.dispatch(name, arguments)
            except ValueError:
                # This handler doesn't know this tool; try next
                continue
        raise ValueError(f"No handler found for tool: {name}")


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_directory_adapter(self) -> DirectoryPort:
        """
        Get directory adapter instance.

        Returns:
            DirectoryPort implementation
        """
        if "directory_adapter" not in self._instances:
            self._instances["directory_adapter"] = LocalDirectoryAdapter(self._logger)
        return self._instances["directory_adapter"]

    def get_change_directory_use_case(self) -> ChangeDirectoryUseCase:
        """
        Get change directory use case with injected dependencies.

        Returns:
            Configured ChangeDirectoryUseCase
        """
        if "change_directory_use_case" not in self._instances:
            self._instances["change_directory_use_case"] = ChangeDirectoryUseCase(
                self.get_directory_adapter(), self._logger
            )
        return self._instances["change_directory_use_case"]

    def get_current_directory_use_case(self) -> GetCurrentDirectoryUseCase:
        if "current_directory_use_case" not in self._instances:
            self._instances["current_directory_use_case"] = GetCurrentDirectoryUseCase(
                self.get_directory_adapter(), self._logger
            )
        return self._instances["current_directory_use_case"]

    def get_enter_directory_use_case(self) -> EnterDirectoryUseCase:
        if "enter_directory_use_case" not in self._instances:
            self._instances["enter_directory_use_case"] = EnterDirectoryUseCase(
                self.get_directory_adapter(), self._logger
            )
        return self._instances["enter_directory_use_case"]

    def get_workspace_guard(self) -> WorkspaceGuard:
        if "workspace_guard" not in self._instances:
            self._instances["workspace_guard"] = WorkspaceGuard.from_settings(settings)
        return self._instances["workspace_guard"]

    def get_os_tools_handler(self) -> ToolsHandlerPort:
        """
        Registry of the 'os.*' tools backed by the directory use cases.
        """
        if "os_tools_handler" not in self._instances:
            self._instances["os_tools_handler"] = OsToolsHandler(
                self.get_change_directory_use_case(),
                self.get_enter_directory_use_case(),
                self.get_current_directory_use_case(),
                guard=self.get_workspace_guard(),
                logger=self._logger,
            )
        return self._instances["os_tools_handler"]

    def get_tools_handler(self) -> ToolsHandlerPort:
        """
        All tools exposed to callers, combined into one handler.
        """
        if "tools_handler" not in self._instances:
            self._instances["tools_handler"] = CompositeToolsHandler(
                self.get_os_tools_handler()
            )
        return self._instances["tools_handler"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
