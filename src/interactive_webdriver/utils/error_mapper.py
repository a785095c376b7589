"""Map client exceptions to structured MCP-friendly errors."""

from enum import Enum
from dataclasses import dataclass
from typing import Optional

import httpx

from ..core.exceptions import (
    MalformedResponseError,
    ServerConnectionError,
    SessionNotCreatedError,
    WebDriverClientError,
)


class ErrorCode(str, Enum):
    """MCP-compatible error codes for WebDriver commands."""

    # Session errors
    SESSION_NOT_CREATED = "SESSION_NOT_CREATED"

    # Server errors
    SERVER_UNREACHABLE = "SERVER_UNREACHABLE"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
    TIMEOUT = "TIMEOUT"

    # Generic errors
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


# Most specific classes first; lookup walks the MRO via isinstance
EXCEPTION_MAP: dict[type[Exception], ErrorCode] = {
    SessionNotCreatedError: ErrorCode.SESSION_NOT_CREATED,
    ServerConnectionError: ErrorCode.SERVER_UNREACHABLE,
    MalformedResponseError: ErrorCode.MALFORMED_RESPONSE,
    httpx.TimeoutException: ErrorCode.TIMEOUT,
    httpx.TransportError: ErrorCode.SERVER_UNREACHABLE,
    ValueError: ErrorCode.INVALID_ARGUMENT,
    WebDriverClientError: ErrorCode.INTERNAL_ERROR,
}

# Suggestions for each error code to help the caller recover
SUGGESTIONS: dict[ErrorCode, str] = {
    ErrorCode.SESSION_NOT_CREATED: (
        "The WebDriver server did not return a session ID. "
        "Check that the server is running and supports the requested browser."
    ),
    ErrorCode.SERVER_UNREACHABLE: (
        "Cannot connect to the WebDriver server. "
        "Verify the server URL is correct and the server is running."
    ),
    ErrorCode.MALFORMED_RESPONSE: (
        "The WebDriver server answered without the expected field. "
        "The session ID may be invalid or the session may have been deleted."
    ),
    ErrorCode.TIMEOUT: (
        "The WebDriver server did not answer in time. "
        "Increase the request timeout or check the server load."
    ),
    ErrorCode.INVALID_ARGUMENT: (
        "Invalid argument provided. Check parameter types and values."
    ),
}


@dataclass
class ToolErrorResponse:
    """Structured error response for MCP tools."""

    error_code: str
    message: str
    suggestion: Optional[str] = None
    details: Optional[dict] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for tool response."""
        result = {
            "success": False,
            "error": {
                "code": self.error_code,
                "message": self.message,
            },
        }
        if self.suggestion:
            result["error"]["suggestion"] = self.suggestion
        if self.details:
            result["error"]["details"] = self.details
        return result


def map_client_error(exc: Exception) -> tuple[ErrorCode, str]:
    """
    Map an exception to an MCP error code and message.

    Args:
        exc: The exception to map

    Returns:
        Tuple of (ErrorCode, error message)
    """
    exc_type = type(exc)

    # Check exact type first
    if exc_type in EXCEPTION_MAP:
        return EXCEPTION_MAP[exc_type], str(exc)

    # Check parent types
    for exc_class, code in EXCEPTION_MAP.items():
        if isinstance(exc, exc_class):
            return code, str(exc)

    # Fallback
    return ErrorCode.UNKNOWN_ERROR, str(exc)


def error_details(exc: Exception) -> Optional[dict]:
    """Structured fields carried by client exceptions, if any."""
    if isinstance(exc, MalformedResponseError):
        return {"command": exc.command, "detail": exc.detail}
    if isinstance(exc, ServerConnectionError):
        return {"server_url": exc.server_url}
    return None


def create_error_response(
    code: ErrorCode,
    message: str,
    details: Optional[dict] = None,
) -> ToolErrorResponse:
    """
    Create a structured error response with suggestion.

    Args:
        code: Error code
        message: Error message
        details: Optional additional details

    Returns:
        ToolErrorResponse with suggestion from SUGGESTIONS
    """
    return ToolErrorResponse(
        error_code=code.value,
        message=message,
        suggestion=SUGGESTIONS.get(code),
        details=details,
    )
