"""Domain-specific exceptions for the interactive WebDriver client."""


class WebDriverClientError(Exception):
    """Base exception for all interactive WebDriver client errors."""

    pass


class ServerConnectionError(WebDriverClientError):
    """Raised when the WebDriver server cannot be reached."""

    def __init__(self, server_url: str, message: str):
        self.server_url = server_url
        super().__init__(f"Failed to reach WebDriver server at {server_url}: {message}")


class MalformedResponseError(WebDriverClientError):
    """Raised when a response lacks a field the command needs."""

    def __init__(self, command: str, detail: str):
        self.command = command
        self.detail = detail
        super().__init__(f"Malformed response for {command}: {detail}")


class SessionNotCreatedError(WebDriverClientError):
    """Raised by the tool layer when the server hands back no session ID."""

    def __init__(self, browser: str):
        self.browser = browser
        super().__init__(f"WebDriver server did not create a {browser} session")
