"""Unit tests for locator strategies and XPath builders."""

import pytest
from selenium.webdriver.common.by import By

from interactive_webdriver.utils.locators import (
    Locator,
    get_by_strategy,
    select_option_text_xpath,
    select_option_xpath,
    to_wire_strategy,
)


class TestStrategies:
    """Tests for strategy name resolution."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("css", "css selector"),
            ("class", "class name"),
            ("tag", "tag name"),
            ("link_text", "link text"),
            ("partial_link_text", "partial link text"),
            ("XPATH", "xpath"),
            ("css selector", "css selector"),
            ("partial link text", "partial link text"),
            ("id", "id"),
            ("name", "name"),
        ],
    )
    def test_get_by_strategy(self, name, expected):
        assert get_by_strategy(name) == expected

    def test_unknown_strategy(self):
        with pytest.raises(ValueError) as exc:
            get_by_strategy("shadow")

        assert "shadow" in str(exc.value)

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("css", "css selector"),
            ("link_text", "link text"),
            ("xpath", "xpath"),
            ("shadow", "shadow"),
            ("XPATH", "XPATH"),
        ],
    )
    def test_to_wire_strategy_passes_unknown_names_through(self, name, expected):
        assert to_wire_strategy(name) == expected


class TestLocator:
    def test_payload(self):
        assert Locator("q", By.NAME).to_payload() == {"using": "name", "value": "q"}

    def test_defaults_to_id(self):
        assert Locator("login").strategy == "id"
        assert str(Locator("login")) == "id=login"


class TestSelectXPath:
    """Tests for select option XPath construction."""

    def test_by_value_and_name(self):
        assert select_option_xpath("color", "red", "name") == (
            "//select[@name='color']/option[@value='red']"
        )

    def test_other_types_use_id(self):
        assert select_option_xpath("color", "red", "xpath") == (
            "//select[@id='color']/option[@value='red']"
        )

    def test_by_text(self):
        assert select_option_text_xpath("size", "Extra Large", "name") == (
            "//select[@name='size']/option[normalize-space(text())='Extra Large']"
        )

    def test_values_are_not_escaped(self):
        """Quotes pass through verbatim and change the expression."""
        assert select_option_xpath("c", "it's") == "//select[@id='c']/option[@value='it's']"
