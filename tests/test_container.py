"""
Tests for the dependency container and the composite tools handler.
"""

from unittest.mock import MagicMock

import pytest

from cwdkit.adapters.directory.local_directory_adapter import LocalDirectoryAdapter
from cwdkit.container import CompositeToolsHandler
from cwdkit.exceptions import ToolArgumentError
from cwdkit.ports.tools.tools_port import ToolsHandlerPort
from cwdkit.use_cases.tools.os_tools import OsToolsHandler


class TestDependencyContainer:
    def test_instances_are_shared(self, dependency_container):
        adapter = dependency_container.get_directory_adapter()

        assert isinstance(adapter, LocalDirectoryAdapter)
        assert dependency_container.get_directory_adapter() is adapter
        assert (
            dependency_container.get_change_directory_use_case()._directory_port
            is adapter
        )
        assert (
            dependency_container.get_enter_directory_use_case()._directory_port
            is adapter
        )

    def test_logger_is_injected(self, dependency_container, mock_logger):
        assert dependency_container.get_directory_adapter()._logger is mock_logger
        assert dependency_container.get_change_directory_use_case()._logger is mock_logger

    def test_os_tools_handler(self, dependency_container):
        assert isinstance(dependency_container.get_os_tools_handler(), OsToolsHandler)

    def test_reset(self, dependency_container):
        adapter = dependency_container.get_directory_adapter()

        dependency_container.reset()

        assert dependency_container.get_directory_adapter() is not adapter


class TestCompositeToolsHandler:
    def test_available_tools_are_combined(self):
        first = MagicMock(spec=ToolsHandlerPort)
        first.available_tools.return_value = [{"name": "a"}]
        second = MagicMock(spec=ToolsHandlerPort)
        second.available_tools.return_value = [{"name": "b"}]

        tools = CompositeToolsHandler(first, second).available_tools()

        assert [t["name"] for t in tools] == ["a", "b"]

    def test_dispatch_falls_through_unknown(self):
        first = MagicMock(spec=ToolsHandlerPort)
        first.dispatch.side_effect = ValueError("Unknown tool: b")
        second = MagicMock(spec=ToolsHandlerPort)
        second.dispatch.return_value = "done"

        assert CompositeToolsHandler(first, second).dispatch("b", {}) == "done"

    def test_dispatch_argument_errors_propagate(self):
        first = MagicMock(spec=ToolsHandlerPort)
        first.dispatch.side_effect = ToolArgumentError("bad")
        second = MagicMock(spec=ToolsHandlerPort)

        with pytest.raises(ToolArgumentError, match="bad"):
            CompositeToolsHandler(first, second).dispatch("a", {})
        second.dispatch.assert_not_called()

    def test_dispatch_no_handler(self):
        first = MagicMock(spec=ToolsHandlerPort)
        first.dispatch.side_effect = ValueError("Unknown tool: x")

        with pytest.raises(ValueError, match="No handler found for tool: x"):
            CompositeToolsHandler(first).dispatch("x", {})
