"""Blocking client for the Selenium JSON wire protocol."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar
from urllib.parse import quote

import httpx
from selenium.webdriver.common.by import By

from .exceptions import MalformedResponseError, ServerConnectionError
from .responses import (
    ELEMENT_NOT_FOUND,
    NO_ALERT_TEXT,
    CommandOutcome,
    DesiredCapabilities,
    ValueResponse,
    parse_element_reference,
    parse_session_id,
    parse_value_response,
    parse_visibility,
    stringify_value,
)
from ..utils.locators import (
    Locator,
    to_wire_strategy,
    select_option_text_xpath,
    select_option_xpath,
)

if TYPE_CHECKING:
    from ..config import Settings

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json;charset=utf-8"

T = TypeVar("T")


class WebDriverClient:
    """
    Issues JSON wire protocol commands against one WebDriver server.

    The client holds only its configuration. Every command opens its own
    httpx.Client, so one instance may be shared across threads and sessions.

    Commands follow three failure policies:

    - lookups (create_session, find_element) return a sentinel ("" or -1)
      instead of raising;
    - mutating commands never raise and report a CommandOutcome;
    - reads that need a response field raise MalformedResponseError when the
      field is missing and ServerConnectionError when the server is
      unreachable.
    """

    def __init__(
        self,
        server_url: str = "http://localhost:4444/",
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.server_url = server_url
        self.timeout = timeout
        # Shared by every per-command httpx.Client and closed with each of them
        self._transport = transport

    # ------------------------------------------------------------------
    # Transport helpers
    # ------------------------------------------------------------------

    def _open(self) -> httpx.Client:
        kwargs: dict[str, Any] = {"base_url": self.server_url}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.Client(**kwargs)

    def _send(self, method: str, path: str, payload: Optional[dict] = None) -> httpx.Response:
        """Send one request. Transport failures propagate as httpx.HTTPError."""
        headers = {}
        content = None
        if payload is not None:
            headers["Content-Type"] = JSON_CONTENT_TYPE
            content = json.dumps(payload).encode("utf-8")

        logger.debug(f"{method} {path}")
        with self._open() as client:
            response = client.request(method, path, content=content, headers=headers)
        logger.debug(f"{method} {path} -> {response.status_code}")
        return response

    def _command(self, method: str, path: str, payload: Optional[dict] = None) -> CommandOutcome:
        """Send a command whose response body is not needed. Never raises."""
        try:
            response = self._send(method, path, payload)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} did not reach {self.server_url}: {e}")
            return CommandOutcome.UNREACHABLE

        if response.is_success:
            return CommandOutcome.ACKNOWLEDGED

        logger.warning(f"{method} {path} rejected with HTTP {response.status_code}")
        return CommandOutcome.REJECTED

    def _read(self, command: str, path: str, payload: Optional[dict] = None) -> ValueResponse:
        """Send a command and decode its ``{status, value}`` body."""
        method = "GET" if payload is None else "POST"
        try:
            response = self._send(method, path, payload)
        except httpx.HTTPError as e:
            raise ServerConnectionError(self.server_url, str(e)) from e

        decoded = parse_value_response(response.content)
        if decoded is None:
            raise MalformedResponseError(
                command, f"HTTP {response.status_code} body is not a JSON object"
            )
        return decoded

    @staticmethod
    def _require_value(command: str, decoded: ValueResponse) -> str:
        if not decoded.value_present:
            raise MalformedResponseError(command, "response has no 'value'")
        if decoded.value is None:
            raise MalformedResponseError(command, "'value' is null")
        return stringify_value(decoded.value)

    def _read_value(self, command: str, path: str, payload: Optional[dict] = None) -> str:
        """Read a command's ``value`` field as text; it must be present and non-null."""
        return self._require_value(command, self._read(command, path, payload))

    @staticmethod
    def _session_path(session_id: str, suffix: str = "") -> str:
        path = f"wd/hub/session/{quote(session_id, safe='')}"
        return f"{path}/{suffix}" if suffix else path

    @classmethod
    def _element_path(cls, session_id: str, element_ref: int, suffix: str) -> str:
        return cls._session_path(session_id, f"element/{int(element_ref)}/{suffix}")

    def _with_element(
        self,
        session_id: str,
        selector_value: str,
        selector_type: str,
        action: Callable[[int], T],
        default: T,
    ) -> T:
        """Resolve a locator, then act on the reference; ``default`` if it does not resolve."""
        element_ref = self.find_element(session_id, selector_value, selector_type)
        if element_ref == ELEMENT_NOT_FOUND:
            logger.debug(f"No element for {selector_type}={selector_value}, skipping")
            return default
        return action(element_ref)

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    def create_session(self, browser: str = "chrome") -> str:
        """
        Create a new browser session.

        Args:
            browser: Browser name, e.g. "chrome" (default) or "firefox"

        Returns:
            The new session ID, or "" if the server did not answer 200 with
            a sessionId.
        """
        capabilities = DesiredCapabilities(browserName=browser)
        try:
            response = self._send("POST", "wd/hub/session", capabilities.to_payload())
        except httpx.HTTPError as e:
            logger.warning(f"Could not create {browser} session at {self.server_url}: {e}")
            return ""

        if response.status_code != httpx.codes.OK:
            logger.warning(f"Session creation rejected with HTTP {response.status_code}")
            return ""

        session_id = parse_session_id(response.content)
        if session_id:
            logger.info(f"Created {browser} session {session_id}")
        else:
            logger.warning("Session creation response carried no sessionId")
        return session_id

    def delete_session(self, session_id: str) -> CommandOutcome:
        """Quit the browser and delete the session on the server."""
        outcome = self._command("DELETE", self._session_path(session_id))
        logger.info(f"Deleted session {session_id} ({outcome.value})")
        return outcome

    # ------------------------------------------------------------------
    # Navigation, frames and windows
    # ------------------------------------------------------------------

    def navigate_to_url(self, session_id: str, url: str) -> CommandOutcome:
        return self._command("POST", self._session_path(session_id, "url"), {"url": url})

    def switch_to_frame(self, session_id: str, frame_id: str) -> CommandOutcome:
        return self._command("POST", self._session_path(session_id, "frame"), {"id": frame_id})

    def get_window_handles(self, session_id: str) -> list[str]:
        """
        List all window handles of the session.

        The first handle is the main window; popups follow it.
        """
        decoded = self._read("get_window_handles", self._session_path(session_id, "window_handles"))
        if not isinstance(decoded.value, list):
            raise MalformedResponseError("get_window_handles", "'value' is not a list")
        return ["" if handle is None else str(handle) for handle in decoded.value]

    def switch_to_window(self, session_id: str, window_handle: str = "") -> CommandOutcome:
        """Focus another window; an empty handle addresses the default window."""
        return self._command(
            "POST", self._session_path(session_id, "window"), {"name": window_handle}
        )

    def get_page_source(self, session_id: str) -> str:
        return self._read_value("get_page_source", self._session_path(session_id, "source"))

    # ------------------------------------------------------------------
    # Alerts and scripts
    # ------------------------------------------------------------------

    def get_alert_text(self, session_id: str) -> str:
        """
        Text of the open alert, confirm or prompt dialog.

        Returns:
            The dialog text, or "-1" when the server reports no open alert
            (status 27).
        """
        decoded = self._read("get_alert_text", self._session_path(session_id, "alert_text"))
        if decoded.no_alert_open:
            return NO_ALERT_TEXT
        return self._require_value("get_alert_text", decoded)

    def accept_alert(self, session_id: str) -> CommandOutcome:
        return self._command("POST", self._session_path(session_id, "accept_alert"))

    def dismiss_alert(self, session_id: str) -> CommandOutcome:
        return self._command("POST", self._session_path(session_id, "dismiss_alert"))

    def execute_javascript(self, session_id: str, script: str) -> str:
        """
        Run a synchronous script in the current frame.

        Returns:
            The script result as text: strings verbatim, other values as
            JSON, and "" when the script returned nothing.
        """
        decoded = self._read(
            "execute_javascript",
            self._session_path(session_id, "execute"),
            {"script": script, "args": []},
        )
        return stringify_value(decoded.value)

    # ------------------------------------------------------------------
    # Elements
    # ------------------------------------------------------------------

    def find_element(self, session_id: str, selector_value: str, selector_type: str = By.ID) -> int:
        """
        Search for an element from the document root.

        Args:
            session_id: Session to route the command to
            selector_value: The search target
            selector_type: "id" (default), "name", "link text",
                "partial link text", "tag name", "class name",
                "css selector" or "xpath" (short aliases such as "css" work too)

        Returns:
            The element reference, or -1 if the element was not found.
            Unknown strategies are sent as given, so a server that rejects
            them also yields -1.
        """
        locator = Locator(selector_value, to_wire_strategy(selector_type))
        try:
            response = self._send(
                "POST", self._session_path(session_id, "element"), locator.to_payload()
            )
        except httpx.HTTPError as e:
            logger.warning(f"find_element {locator} did not reach {self.server_url}: {e}")
            return ELEMENT_NOT_FOUND

        if response.status_code != httpx.codes.OK:
            return ELEMENT_NOT_FOUND

        decoded = parse_value_response(response.content)
        if decoded is None:
            return ELEMENT_NOT_FOUND
        return parse_element_reference(decoded.value)

    def get_element_text(self, session_id: str, selector_value: str, selector_type: str = By.ID) -> str:
        """Visible text of the located element, or "" if it is not found."""
        return self._with_element(
            session_id,
            selector_value,
            selector_type,
            lambda ref: self.get_element_text_by_ref(session_id, ref),
            "",
        )

    def get_element_text_by_ref(self, session_id: str, element_ref: int) -> str:
        return self._read_value(
            "get_element_text", self._element_path(session_id, element_ref, "text")
        )

    def set_element_text(
        self,
        session_id: str,
        element_text: str,
        selector_value: str,
        selector_type: str = By.ID,
    ) -> CommandOutcome:
        """Send keystrokes to the located element."""
        return self._with_element(
            session_id,
            selector_value,
            selector_type,
            lambda ref: self.set_element_text_by_ref(session_id, element_text, ref),
            CommandOutcome.NOT_ATTEMPTED,
        )

    def set_element_text_by_ref(self, session_id: str, element_text: str, element_ref: int) -> CommandOutcome:
        return self._command(
            "POST",
            self._element_path(session_id, element_ref, "value"),
            {"value": [element_text]},
        )

    def set_select_option(
        self,
        session_id: str,
        option_value: str,
        selector_value: str,
        selector_type: str = By.ID,
    ) -> CommandOutcome:
        """
        Pick the option with the given value in a select box.

        Args:
            option_value: value attribute of the option to select
            selector_value: The select box's name or id
            selector_type: "name", or anything else for "id"
        """
        xpath = select_option_xpath(selector_value, option_value, selector_type)
        return self.click_on_element(session_id, xpath, By.XPATH)

    def set_select_option_by_text(
        self,
        session_id: str,
        option_text: str,
        selector_value: str,
        selector_type: str = By.ID,
    ) -> CommandOutcome:
        """Pick the option whose whitespace-normalized text matches option_text."""
        xpath = select_option_text_xpath(selector_value, option_text, selector_type)
        return self.click_on_element(session_id, xpath, By.XPATH)

    def click_on_element(self, session_id: str, selector_value: str, selector_type: str = By.ID) -> CommandOutcome:
        return self._with_element(
            session_id,
            selector_value,
            selector_type,
            lambda ref: self.click_on_element_by_ref(session_id, ref),
            CommandOutcome.NOT_ATTEMPTED,
        )

    def click_on_element_by_ref(self, session_id: str, element_ref: int) -> CommandOutcome:
        return self._command("POST", self._element_path(session_id, element_ref, "click"))

    def clear_element_text(self, session_id: str, selector_value: str, selector_type: str = By.ID) -> CommandOutcome:
        """Clear a textarea or text input."""
        return self._with_element(
            session_id,
            selector_value,
            selector_type,
            lambda ref: self.clear_element_text_by_ref(session_id, ref),
            CommandOutcome.NOT_ATTEMPTED,
        )

    def clear_element_text_by_ref(self, session_id: str, element_ref: int) -> CommandOutcome:
        return self._command("POST", self._element_path(session_id, element_ref, "clear"))

    def is_element_visible(self, session_id: str, selector_value: str, selector_type: str = By.ID) -> bool:
        """Whether the located element is displayed; False if it is not found."""
        return self._with_element(
            session_id,
            selector_value,
            selector_type,
            lambda ref: self.is_element_visible_by_ref(session_id, ref),
            False,
        )

    def is_element_visible_by_ref(self, session_id: str, element_ref: int) -> bool:
        try:
            response = self._send("GET", self._element_path(session_id, element_ref, "displayed"))
        except httpx.HTTPError as e:
            raise ServerConnectionError(self.server_url, str(e)) from e

        decoded = parse_value_response(response.content)
        if decoded is None:
            return False
        return parse_visibility(decoded.value)


def create_client(settings: Optional[Settings] = None) -> WebDriverClient:
    """Build a client from settings (the process-wide settings if omitted)."""
    if settings is None:
        from ..config import settings as process_settings

        settings = process_settings
    return WebDriverClient(
        server_url=settings.normalized_server_url,
        timeout=settings.request_timeout_seconds,
    )
