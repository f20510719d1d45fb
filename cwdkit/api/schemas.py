"""
Pydantic models for API requests and responses.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class ChangeDirectoryRequest(BaseModel):
    """Schema for a working-directory change request."""

    path: str = Field(..., description="Directory to change into")


class ChangeDirectoryResponse(BaseModel):
    """Schema for a working-directory change result."""

    path: str = Field(..., description="Requested directory")
    ok: bool = Field(..., description="Whether the change succeeded")


class WorkingDirectoryInfo(BaseModel):
    """Schema for working directory information."""

    path: str = Field(..., description="Absolute path of the working directory")
    name: str = Field(..., description="Last path component")
    parent: str = Field(..., description="Parent directory")

    @classmethod
    def from_entity(cls, directory_entity):
        """Create a WorkingDirectoryInfo schema from a WorkingDirectory entity."""
        details = directory_entity.get_details()
        return cls(
            path=details["path"],
            name=details["name"],
            parent=details["parent"],
        )


class ToolSpecInfo(BaseModel):
    """Schema describing one available tool."""

    name: str = Field(..., description="Tool name")
    description: str = Field(..., description="What the tool does")
    parameters: dict[str, Any] = Field(..., description="JSON Schema of the arguments")


class ToolListResponse(BaseModel):
    """Schema for the list of available tools."""

    tools: List[ToolSpecInfo] = Field(..., description="Available tools")


class ToolDispatchRequest(BaseModel):
    """Schema for a tool invocation."""

    name: str = Field(..., description="Tool name, e.g. 'os.chdir'")
    arguments: dict[str, Any] = Field(
        default_factory=dict, description="Arguments passed to the tool"
    )


class ToolDispatchResponse(BaseModel):
    """Schema for a tool invocation result."""

    name: str = Field(..., description="Tool name")
    result: Optional[Any] = Field(None, description="Value returned by the tool")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
