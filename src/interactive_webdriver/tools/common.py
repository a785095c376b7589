"""Helpers shared by the tool routers."""

from fastmcp import Context
from fastmcp.exceptions import ToolError

from ..core.client import WebDriverClient
from ..core.responses import CommandOutcome
from ..utils.error_mapper import map_client_error, create_error_response, error_details


def get_context(ctx: Context):
    """Helper to retrieve app context from lifespan."""
    return ctx.request_context.lifespan_context


def get_client(ctx: Context) -> WebDriverClient:
    """Get the wire protocol client from the lifespan context."""
    return get_context(ctx).client


def outcome_result(session_id: str, action: str, outcome: CommandOutcome, **extra) -> dict:
    """Build the response for a best-effort command."""
    return {
        "success": outcome is CommandOutcome.ACKNOWLEDGED,
        "session_id": session_id,
        "action": action,
        "outcome": outcome.value,
        **extra,
    }


def tool_error(exc: Exception) -> ToolError:
    """Convert any exception into a ToolError carrying the structured payload."""
    error_code, message = map_client_error(exc)
    error_response = create_error_response(error_code, message, error_details(exc))
    return ToolError(str(error_response.to_dict()))
