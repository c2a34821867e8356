# main.py
import uvicorn
import os
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

# --- Environment loading ---
load_dotenv()

# --- Local Module Imports ---
# These must come after the dotenv load
from dependencies import get_store
from routers import todos

BASE_DIR = Path(__file__).parent

# --- App Lifecycle (Lifespan) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Creates an empty todo file on first start, so the initial load
    returns [] instead of an error.
    """
    print("Application starting up...")
    store = app.dependency_overrides.get(get_store, get_store)()
    store.initialize()

    yield

    print("Application shutting down...")


# --- FastAPI App Initialization ---
app = FastAPI(
    title="Todo List",
    description="A single-user task list persisted to a JSON file.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Mount Static Files ---
app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")

# --- Include API Routers ---
app.include_router(todos.router)

# --- Root Endpoint ---
@app.get("/")
async def read_root(request: Request):
    """Serves the main index.html file."""
    return FileResponse(BASE_DIR / "templates" / "index.html")

# --- Main Entry Point ---
if __name__ == "__main__":
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
