"""Core wire protocol client for the interactive WebDriver."""

from .exceptions import (
    WebDriverClientError,
    ServerConnectionError,
    MalformedResponseError,
    SessionNotCreatedError,
)
from .responses import CommandOutcome, ELEMENT_NOT_FOUND, NO_ALERT_TEXT
from .client import WebDriverClient, create_client

__all__ = [
    "WebDriverClientError",
    "ServerConnectionError",
    "MalformedResponseError",
    "SessionNotCreatedError",
    "CommandOutcome",
    "ELEMENT_NOT_FOUND",
    "NO_ALERT_TEXT",
    "WebDriverClient",
    "create_client",
]
