"""Exception hierarchy for the form bot."""

from __future__ import annotations

from webform_bot.domain.model.locator import Locator


class WebFormBotError(Exception):
    """Base exception for all form bot errors."""


class DriverError(WebFormBotError):
    """Raised when the browser automation library fails to perform an action."""


class ElementNotFoundError(DriverError):
    """Raised when a locator matches no element on the current page.

    Attributes:
        locator: The locator that was looked up.
    """

    def __init__(self, locator: Locator) -> None:
        self.locator = locator
        super().__init__(f"No element found for locator {locator}")
