"""Meta and health check tools."""

from fastmcp import FastMCP, Context

from .. import __version__
from .common import get_context

meta_router = FastMCP(
    name="MetaTools",
    instructions="Health check and server information tools",
)


@meta_router.tool(
    description="Health check - verify server is running and get server info",
    tags={"meta", "health"},
)
async def ping(ctx: Context) -> dict:
    """
    Simple health check returning server status.

    Returns:
        Server status, version, and the WebDriver server URL in use
    """
    app_ctx = get_context(ctx)

    return {
        "status": "ok",
        "version": __version__,
        "server_url": app_ctx.client.server_url,
    }
