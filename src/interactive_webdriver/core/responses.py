"""Typed request and response bodies for the JSON wire protocol."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# Sentinel element reference for "locator did not resolve"
ELEMENT_NOT_FOUND = -1

# Legacy wire protocol status code for "no alert open"
NO_ALERT_OPEN_STATUS = 27
NO_ALERT_TEXT = "-1"


class CommandOutcome(str, Enum):
    """Result of a mutating command whose response body is ignored."""

    ACKNOWLEDGED = "acknowledged"
    REJECTED = "rejected"
    UNREACHABLE = "unreachable"
    NOT_ATTEMPTED = "not_attempted"

    @property
    def sent(self) -> bool:
        """Whether the request reached the server."""
        return self in (CommandOutcome.ACKNOWLEDGED, CommandOutcome.REJECTED)


class Platform(BaseModel):
    majorVersion: int = 0
    minorVersion: int = 0
    platformType: int = 0


class DesiredCapabilities(BaseModel):
    """Capabilities sent with a new session request."""

    browserName: str = "chrome"
    platform: Platform = Field(default_factory=Platform)
    version: str = ""
    isJavaScriptEnabled: bool = True

    def to_payload(self) -> dict:
        return {"desiredCapabilities": self.model_dump()}


class SessionCreatedResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    sessionId: Optional[str] = None

    @field_validator("sessionId", mode="before")
    @classmethod
    def numeric_id_as_text(cls, value: Any) -> Any:
        # Some servers hand out integer session IDs
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class ValueResponse(BaseModel):
    """
    Generic ``{status, value}`` envelope.

    ``value`` is optional; ``value_present`` distinguishes a missing key from
    an explicit JSON null.
    """

    model_config = ConfigDict(extra="ignore")

    status: Any = None
    value: Any = None

    @property
    def value_present(self) -> bool:
        return "value" in self.model_fields_set

    @property
    def no_alert_open(self) -> bool:
        return self.status is not None and str(self.status) == str(NO_ALERT_OPEN_STATUS)


class ElementValue(BaseModel):
    model_config = ConfigDict(extra="ignore")

    ELEMENT: Any = None


def decode_json(content: bytes) -> Optional[Any]:
    """Decode a JSON body, returning None when it is not JSON."""
    try:
        return json.loads(content)
    except (ValueError, UnicodeDecodeError):
        return None


def parse_value_response(content: bytes) -> Optional[ValueResponse]:
    """Decode a ``{status, value}`` body. None if the body is not a JSON object."""
    data = decode_json(content)
    if not isinstance(data, dict):
        return None
    return ValueResponse.model_validate(data)


def parse_session_id(content: bytes) -> str:
    """Extract ``sessionId`` from a new-session body, or "" when absent."""
    data = decode_json(content)
    if not isinstance(data, dict):
        return ""
    try:
        created = SessionCreatedResponse.model_validate(data)
    except ValidationError:
        return ""
    return created.sessionId or ""


def parse_element_reference(value: Any) -> int:
    """
    Read the ``ELEMENT`` field of a find-element ``value`` object.

    Returns:
        The element reference as an int, or ELEMENT_NOT_FOUND if the value
        is not an object or its ELEMENT field is missing or not an integer.
    """
    if not isinstance(value, dict):
        return ELEMENT_NOT_FOUND
    element = ElementValue.model_validate(value).ELEMENT
    if element is None or isinstance(element, bool):
        return ELEMENT_NOT_FOUND
    try:
        return int(str(element).strip())
    except ValueError:
        return ELEMENT_NOT_FOUND


def parse_visibility(value: Any) -> bool:
    """Interpret a displayed payload; anything other than true/"true" is False."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def stringify_value(value: Any) -> str:
    """Render a script result as text. None becomes ""."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)
