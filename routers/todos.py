# routers/todos.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST, HTTP_405_METHOD_NOT_ALLOWED, HTTP_500_INTERNAL_SERVER_ERROR
)

from dependencies import get_store
from storage import StorageError, TodoStore

# --- Router Setup ---
router = APIRouter(
    prefix="/api/todos",
    tags=["Todos"],
)

ALLOWED_METHODS = ["GET", "POST"]

def server_error(error: Exception) -> JSONResponse:
    print(f"Error in todos API: {error}")
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error", "error": str(error)},
    )

# --- Endpoints ---

@router.get("")
async def read_todos(store: TodoStore = Depends(get_store)):
    """Returns the stored todo collection exactly as persisted."""
    try:
        return store.read_all()
    except StorageError as e:
        return server_error(e)

@router.post("")
async def replace_todos(request: Request, store: TodoStore = Depends(get_store)):
    """Overwrites the stored collection with the request body. The body is not validated."""
    try:
        todos = await request.json()
    except (ValueError, UnicodeDecodeError) as e:
        print(f"Rejected todos body: {e}")
        return JSONResponse(
            status_code=HTTP_400_BAD_REQUEST,
            content={"message": "Invalid JSON body", "error": str(e)},
        )

    try:
        store.replace_all(todos)
    except StorageError as e:
        return server_error(e)
    return {"message": "Todos updated successfully"}

@router.api_route("", methods=["PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"], include_in_schema=False)
async def method_not_allowed(request: Request):
    return PlainTextResponse(
        f"Method {request.method} Not Allowed",
        status_code=HTTP_405_METHOD_NOT_ALLOWED,
        headers={"Allow": ", ".join(ALLOWED_METHODS)},
    )
