"""JavaScript execution and alert dialog tools."""

from typing import Annotated
from pydantic import Field
from fastmcp import FastMCP, Context
import anyio

from ..core.responses import NO_ALERT_TEXT
from .common import get_client, outcome_result, tool_error

scripting_router = FastMCP(
    name="ScriptingTools",
    instructions="Execute JavaScript and handle alert dialogs",
)

# Maximum script length for safety
MAX_SCRIPT_LENGTH = 10000


@scripting_router.tool(
    description="Execute JavaScript code in the browser",
    tags={"script", "javascript"},
)
async def execute_script(
    ctx: Context,
    session_id: Annotated[str, Field(description="Active session ID")],
    script: Annotated[str, Field(description="JavaScript code to execute")],
) -> dict:
    """
    Execute JavaScript synchronously in the currently selected frame.

    Example scripts:
    - "return document.title"
    - "window.scrollTo(0, document.body.scrollHeight)"

    Args:
        session_id: Active session ID
        script: JavaScript code to execute

    Returns:
        Script result as text ("" when the script returns nothing)
    """
    try:
        if len(script) > MAX_SCRIPT_LENGTH:
            raise ValueError(
                f"Script too long ({len(script)} chars). "
                f"Maximum allowed: {MAX_SCRIPT_LENGTH}"
            )

        client = get_client(ctx)
        result = await anyio.to_thread.run_sync(
            lambda: client.execute_javascript(session_id, script)
        )

        return {
            "success": True,
            "session_id": session_id,
            "result": result,
        }

    except Exception as e:
        raise tool_error(e)


@scripting_router.tool(
    description="Get the text of the open alert, confirm or prompt dialog",
    tags={"script", "alert"},
)
async def get_alert_text(
    ctx: Context,
    session_id: Annotated[str, Field(description="Active session ID")],
) -> dict:
    """
    Read the text of the currently displayed dialog.

    Returns:
        alert_present and the dialog text (None when no dialog is open)
    """
    try:
        client = get_client(ctx)
        text = await anyio.to_thread.run_sync(lambda: client.get_alert_text(session_id))
        present = text != NO_ALERT_TEXT

        return {
            "success": True,
            "session_id": session_id,
            "alert_present": present,
            "text": text if present else None,
        }

    except Exception as e:
        raise tool_error(e)


@scripting_router.tool(
    description="Accept the open dialog (click OK)",
    tags={"script", "alert"},
)
async def accept_alert(
    ctx: Context,
    session_id: Annotated[str, Field(description="Active session ID")],
) -> dict:
    """Accept the currently displayed dialog."""
    client = get_client(ctx)
    outcome = await anyio.to_thread.run_sync(lambda: client.accept_alert(session_id))
    return outcome_result(session_id, "accepted_alert", outcome)


@scripting_router.tool(
    description="Dismiss the open dialog (click Cancel, or OK for plain alerts)",
    tags={"script", "alert"},
)
async def dismiss_alert(
    ctx: Context,
    session_id: Annotated[str, Field(description="Active session ID")],
) -> dict:
    """Dismiss the currently displayed dialog."""
    client = get_client(ctx)
    outcome = await anyio.to_thread.run_sync(lambda: client.dismiss_alert(session_id))
    return outcome_result(session_id, "dismissed_alert", outcome)
