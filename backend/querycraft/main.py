"""
QueryCraft - FastAPI Application

Main entry point for the backend API server.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from querycraft.assistant.dependencies import get_gateway
from querycraft.assistant.router import router as assistant_router
from querycraft.config import get_settings
from querycraft.connections.router import router as connections_router
from querycraft.database import close_db, init_db
from querycraft.library.router import router as library_router
from querycraft.queries.router import router as queries_router
from querycraft.sqltools.router import router as sqltools_router
from querycraft.system.router import router as system_router
from querycraft.users.router import router as users_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler."""
    # Startup
    get_gateway()
    await init_db()
    yield
    # Shutdown
    await close_db()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Describe a database query in natural language and get SQL back,
    then explain, optimize, convert, debug or export it.
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Include routers
prefix = settings.api_prefix
app.include_router(system_router, prefix=prefix, tags=["System"])
app.include_router(assistant_router, prefix=prefix, tags=["Assistant"])
app.include_router(sqltools_router, prefix=prefix, tags=["SQL Tools"])
app.include_router(library_router, prefix=prefix, tags=["Library"])
app.include_router(users_router, prefix=f"{prefix}/users", tags=["Users"])
app.include_router(queries_router, prefix=prefix, tags=["Saved Queries"])
app.include_router(connections_router, prefix=prefix, tags=["Database Connections"])


@app.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """Root endpoint - health check."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
    }


def run() -> None:
    """Console entry point."""
    uvicorn.run("querycraft.main:app", host=settings.host, port=settings.port, reload=settings.debug)
