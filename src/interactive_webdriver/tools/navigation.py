"""Page navigation, frame and window tools."""

from typing import Annotated
from pydantic import Field
from fastmcp import FastMCP, Context
import anyio

from .common import get_client, outcome_result, tool_error

navigation_router = FastMCP(
    name="NavigationTools",
    instructions="Browser navigation, frame and window tools",
)


@navigation_router.tool(
    description="Navigate to a URL",
    tags={"navigation"},
)
async def navigate(
    ctx: Context,
    session_id: Annotated[str, Field(description="Active session ID")],
    url: Annotated[str, Field(description="URL to navigate to")],
) -> dict:
    """
    Navigate browser to the specified URL.

    Args:
        session_id: Active session ID from create_session
        url: Full URL to navigate to (e.g., "https://example.com")

    Returns:
        Outcome of the navigation command
    """
    client = get_client(ctx)
    outcome = await anyio.to_thread.run_sync(lambda: client.navigate_to_url(session_id, url))
    await ctx.info(f"Navigated to {url} ({outcome.value})")
    return outcome_result(session_id, "navigated", outcome, url=url)


@navigation_router.tool(
    description="Switch focus to a frame",
    tags={"navigation", "frame"},
)
async def switch_to_frame(
    ctx: Context,
    session_id: Annotated[str, Field(description="Active session ID")],
    frame_id: Annotated[str, Field(description="Identifier of the frame to focus")],
) -> dict:
    """Change focus to another frame on the page."""
    client = get_client(ctx)
    outcome = await anyio.to_thread.run_sync(lambda: client.switch_to_frame(session_id, frame_id))
    return outcome_result(session_id, "switched_frame", outcome, frame_id=frame_id)


@navigation_router.tool(
    description="List window handles; the first is the main window",
    tags={"navigation", "window"},
)
async def get_window_handles(
    ctx: Context,
    session_id: Annotated[str, Field(description="Active session ID")],
) -> dict:
    """
    List all window handles of the session.

    To address a popup, take the second handle of the list.

    Args:
        session_id: Active session ID

    Returns:
        Window handles, main window first
    """
    try:
        client = get_client(ctx)
        handles = await anyio.to_thread.run_sync(lambda: client.get_window_handles(session_id))

        return {
            "success": True,
            "session_id": session_id,
            "handles": handles,
            "count": len(handles),
        }

    except Exception as e:
        raise tool_error(e)


@navigation_router.tool(
    description="Switch focus to another window or popup",
    tags={"navigation", "window"},
)
async def switch_to_window(
    ctx: Context,
    session_id: Annotated[str, Field(description="Active session ID")],
    window_handle: Annotated[
        str,
        Field(description="Window handle from get_window_handles; empty for the default window"),
    ] = "",
) -> dict:
    """Change focus to another window."""
    client = get_client(ctx)
    outcome = await anyio.to_thread.run_sync(
        lambda: client.switch_to_window(session_id, window_handle)
    )
    return outcome_result(session_id, "switched_window", outcome, window_handle=window_handle)


@navigation_router.tool(
    description="Get the current page source",
    tags={"navigation", "dom"},
)
async def get_page_source(
    ctx: Context,
    session_id: Annotated[str, Field(description="Active session ID")],
) -> dict:
    """
    Get the full source of the current page.

    Args:
        session_id: Active session ID

    Returns:
        Page source and its length
    """
    try:
        client = get_client(ctx)
        source = await anyio.to_thread.run_sync(lambda: client.get_page_source(session_id))

        return {
            "success": True,
            "session_id": session_id,
            "source": source,
            "length": len(source),
        }

    except Exception as e:
        raise tool_error(e)
