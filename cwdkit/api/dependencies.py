"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from cwdkit.container import container
from cwdkit.ports.tools.tools_port import ToolsHandlerPort
from cwdkit.use_cases.directory.get_current_directory import (
    GetCurrentDirectoryUseCase,
)


def get_current_directory_uc() -> GetCurrentDirectoryUseCase:
    """
    Get the current directory use case from the container.

    Returns:
        GetCurrentDirectoryUseCase: The current directory use case instance
    """
    return container.get_current_directory_use_case()


def get_tools_handler() -> ToolsHandlerPort:
    """
    Get the combined tools handler from the container.

    Directory changes requested over HTTP go through it so they get the same
    argument checks and workspace guard as any other tool call.
    """
    return container.get_tools_handler()
