"""Shared utilities for the interactive WebDriver client."""

from .error_mapper import map_client_error, ErrorCode
from .locators import Locator, get_by_strategy, to_wire_strategy

__all__ = [
    "map_client_error",
    "ErrorCode",
    "Locator",
    "get_by_strategy",
    "to_wire_strategy",
]
