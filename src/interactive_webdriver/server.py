"""Main FastMCP server with lifespan management."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Optional

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from .config import Settings, settings
from .core.client import WebDriverClient, create_client
from .tools import create_tool_router, import_all_tools

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Lifespan context holding the services shared across tools."""

    client: WebDriverClient
    settings: Settings


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[AppContext]:
    """
    Build the wire protocol client on startup.

    The client holds no connections, so shutdown has nothing to release.
    Sessions created through the tools are left to their owners.
    """
    logger.info(f"Starting interactive WebDriver MCP server (server: {settings.server_url})")

    client = create_client(settings)

    try:
        yield AppContext(client=client, settings=settings)
    finally:
        logger.info("Interactive WebDriver MCP server stopped")


def create_server() -> FastMCP:
    """Create and configure the main MCP server (without tools - they're added async)."""
    return FastMCP(
        name="interactive-webdriver",
        instructions=(
            "Browser automation over the Selenium JSON wire protocol. "
            "Use create_session to start a browser, find_element to get element "
            "references, then act on them. Delete sessions with delete_session."
        ),
        lifespan=app_lifespan,
    )


async def setup_server(mcp: FastMCP) -> None:
    """Import all tool routers into the server (async)."""
    tool_router = create_tool_router()
    await import_all_tools(tool_router)
    await mcp.import_server(tool_router)


# Create the global server instance
mcp = create_server()


# Health check endpoint for Docker/Kubernetes
@mcp.custom_route("/health", methods=["GET"])
async def health_check(request: Request) -> Response:
    """Health check endpoint for container orchestration."""
    return JSONResponse({"status": "ok", "server_url": settings.server_url})


def run_server(
    server_url: Optional[str] = None,
    host: Optional[str] = None,
    port: Optional[int] = None,
) -> None:
    """Run the MCP server with HTTP transport, applying command line overrides."""
    if server_url:
        settings.server_url = server_url
    if host:
        settings.host = host
    if port:
        settings.port = port

    # Setup tools before running
    asyncio.run(setup_server(mcp))

    mcp.run(
        transport="http",
        host=settings.host,
        port=settings.port,
    )
