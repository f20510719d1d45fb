"""
FastAPI router definitions for the API endpoints.
"""

from fastapi import APIRouter, HTTPException

from cwdkit.api.dependencies import get_current_directory_uc, get_tools_handler
from cwdkit.api.schemas import (
    ChangeDirectoryRequest,
    ChangeDirectoryResponse,
    ErrorResponse,
    ToolDispatchRequest,
    ToolDispatchResponse,
    ToolListResponse,
    ToolSpecInfo,
    WorkingDirectoryInfo,
)
from cwdkit.exceptions import DirectoryError, ToolArgumentError

router = APIRouter()


@router.post(
    "/os/chdir",
    response_model=ChangeDirectoryResponse,
    responses={400: {"model": ErrorResponse}},
)
def change_directory(body: ChangeDirectoryRequest):
    """
    Change the server process working directory.

    A directory that cannot be entered is not an HTTP error: the response
    carries ``ok=false`` and the working directory is left as it was.

    Raises:
        HTTPException: If the path argument is rejected
    """
    try:
        ok = get_tools_handler().dispatch("os.chdir", {"path": body.path})
    except ToolArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ChangeDirectoryResponse(path=body.path, ok=bool(ok))


@router.get(
    "/os/curdir",
    response_model=WorkingDirectoryInfo,
    responses={500: {"model": ErrorResponse}},
)
def current_directory():
    """
    Get the server process working directory.

    Raises:
        HTTPException: If the working directory cannot be read
    """
    try:
        directory = get_current_directory_uc().execute()
        return WorkingDirectoryInfo.from_entity(directory)
    except DirectoryError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/tools", response_model=ToolListResponse)
def list_tools():
    """List the tools that can be invoked through /tools/dispatch."""
    specs = get_tools_handler().available_tools()
    return ToolListResponse(tools=[ToolSpecInfo(**spec) for spec in specs])


@router.post(
    "/tools/dispatch",
    response_model=ToolDispatchResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def dispatch_tool(body: ToolDispatchRequest):
    """
    Invoke a tool by name.

    Args:
        body: Tool name and arguments

    Returns:
        ToolDispatchResponse: The value returned by the tool

    Raises:
        HTTPException: 400 for bad arguments, 404 for an unknown tool, 500 otherwise
    """
    try:
        result = get_tools_handler().dispatch(body.name, body.arguments)
    except ToolArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DirectoryError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return ToolDispatchResponse(name=body.name, result=result)
