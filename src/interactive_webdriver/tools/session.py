"""Browser session lifecycle tools."""

from typing import Annotated, Optional
from pydantic import Field
from fastmcp import FastMCP, Context
import anyio

from ..core.exceptions import SessionNotCreatedError
from .common import get_client, get_context, outcome_result, tool_error

session_router = FastMCP(
    name="SessionTools",
    instructions="Create and delete WebDriver sessions",
)


@session_router.tool(
    description="Create a new browser session on the WebDriver server",
    tags={"session", "lifecycle"},
)
async def create_session(
    ctx: Context,
    browser: Annotated[
        Optional[str],
        Field(description="Browser name (chrome, firefox). Uses the server default if not specified."),
    ] = None,
) -> dict:
    """
    Create a new browser session.

    Returns a session_id that must be used in all subsequent tool calls.
    Sessions are not expired automatically; close them with delete_session.

    Args:
        browser: Browser name requested in the desired capabilities

    Returns:
        Session ID and browser name
    """
    try:
        app_ctx = get_context(ctx)
        browser = browser or app_ctx.settings.default_browser
        client = get_client(ctx)

        session_id = await anyio.to_thread.run_sync(lambda: client.create_session(browser))
        if not session_id:
            raise SessionNotCreatedError(browser)

        await ctx.info(f"Created {browser} session: {session_id}")

        return {
            "success": True,
            "session_id": session_id,
            "browser": browser,
        }

    except Exception as e:
        raise tool_error(e)


@session_router.tool(
    description="Delete a browser session and quit its browser",
    tags={"session", "lifecycle"},
)
async def delete_session(
    ctx: Context,
    session_id: Annotated[str, Field(description="Session ID to delete")],
) -> dict:
    """
    Delete a session. Deleting an unknown or already deleted session is not an error.

    Args:
        session_id: The session ID to delete

    Returns:
        Outcome of the delete command
    """
    client = get_client(ctx)
    outcome = await anyio.to_thread.run_sync(lambda: client.delete_session(session_id))
    await ctx.info(f"Deleted session: {session_id} ({outcome.value})")
    return outcome_result(session_id, "deleted", outcome)
