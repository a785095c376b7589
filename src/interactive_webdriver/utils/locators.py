"""Locator strategies and XPath builders."""

from dataclasses import dataclass

from selenium.webdriver.common.by import By


# Map strategy names to Selenium By constants (which are the wire names)
STRATEGY_MAP = {
    "css": By.CSS_SELECTOR,
    "xpath": By.XPATH,
    "id": By.ID,
    "name": By.NAME,
    "class": By.CLASS_NAME,
    "tag": By.TAG_NAME,
    "link_text": By.LINK_TEXT,
    "partial_link_text": By.PARTIAL_LINK_TEXT,
}

WIRE_STRATEGIES = frozenset(STRATEGY_MAP.values())


def get_by_strategy(strategy: str) -> str:
    """
    Convert a strategy name to the wire protocol ``using`` value.

    Accepts both the short aliases (css, class, tag, link_text, ...) and the
    wire names themselves ("css selector", "class name", ...).

    Raises:
        ValueError: If strategy is not supported
    """
    normalized = strategy.strip().lower()
    if normalized in WIRE_STRATEGIES:
        return normalized
    if normalized not in STRATEGY_MAP:
        raise ValueError(
            f"Unsupported locator strategy: {strategy}. "
            f"Supported: {list(STRATEGY_MAP.keys())}"
        )
    return STRATEGY_MAP[normalized]


def to_wire_strategy(strategy: str) -> str:
    """
    Map a short alias to its wire name; any other name is sent verbatim.

    Unlike get_by_strategy this never raises, so an unknown strategy reaches
    the server and comes back as a failed lookup.
    """
    return STRATEGY_MAP.get(strategy, strategy)


@dataclass(frozen=True)
class Locator:
    """A (strategy, value) pair used to look up one element."""

    value: str
    strategy: str = By.ID

    def to_payload(self) -> dict:
        return {"using": self.strategy, "value": self.value}

    def __str__(self) -> str:
        return f"{self.strategy}={self.value}"


def _select_attribute(selector_type: str) -> str:
    # Only name is honoured; anything else addresses the select box by id
    return "name" if selector_type == By.NAME else "id"


def select_option_xpath(selector_value: str, option_value: str, selector_type: str = By.ID) -> str:
    """XPath of the option with the given value inside a select box. Values are not escaped."""
    attribute = _select_attribute(selector_type)
    return f"//select[@{attribute}='{selector_value}']/option[@value='{option_value}']"


def select_option_text_xpath(selector_value: str, option_text: str, selector_type: str = By.ID) -> str:
    """XPath of the option with the given visible text inside a select box. Values are not escaped."""
    attribute = _select_attribute(selector_type)
    return (
        f"//select[@{attribute}='{selector_value}']"
        f"/option[normalize-space(text())='{option_text}']"
    )
