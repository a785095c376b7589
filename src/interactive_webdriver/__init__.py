"""Client binding for the Selenium JSON wire protocol."""

from .core import (
    CommandOutcome,
    ELEMENT_NOT_FOUND,
    NO_ALERT_TEXT,
    WebDriverClient,
    create_client,
)

__version__ = "0.1.0"

__all__ = [
    "CommandOutcome",
    "ELEMENT_NOT_FOUND",
    "NO_ALERT_TEXT",
    "WebDriverClient",
    "create_client",
    "__version__",
]
