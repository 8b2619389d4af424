"""FastAPI application entry point."""

import os
import sys
import logging
import tomllib
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables from .env file
# Must be called before importing modules that read env vars (like api.security)
load_dotenv()

# Add src to path
# main.py is at /app/src/api/main.py
# src is at /app/src, so we go up 2 levels
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.routes import auth, health, math, users
from api.errors import register_exception_handlers
from api.middleware.auth import AuthGateMiddleware
from adapter.memory.user_repository import InMemoryUserRepository
from utils.logging import setup_structured_logging

# Set up structured JSON logging
setup_structured_logging()

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
_project_root = _src_path.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "Larlew Backend API"


app = FastAPI(
    title=SERVICE_NAME,
    description="Arithmetic and user registry endpoints",
    version=VERSION,
)

# Process-wide registry; handlers reach it through api.dependencies.get_user_repo
app.state.user_repository = InMemoryUserRepository()

register_exception_handlers(app)

# Added first so CORS wraps it and 401 responses still carry CORS headers
app.add_middleware(AuthGateMiddleware)

cors_origins_env = os.getenv("CORS_ORIGINS", "*")

# Parse origins: handle wildcard separately from explicit origin list
if cors_origins_env == "*":
    cors_origins = ["*"]
    allow_credentials = False  # Browsers don't support credentials with wildcard
    logger.warning(
        "CORS configured with wildcard origin ('*'). "
        "For production, set CORS_ORIGINS to specific domains (e.g., 'https://app.example.com')"
    )
else:
    cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]
    allow_credentials = True
    logger.info(f"CORS configured with specific origins: {cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routes
app.include_router(math.router)
app.include_router(users.router)
app.include_router(auth.router)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8080))
    # Application logs go through structured logging; uvicorn's access log would duplicate them
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        access_log=False
    )
