from __future__ import annotations

from typing import Protocol

from webform_bot.domain.model.locator import Locator


class DriverProtocol(Protocol):
    """Lightweight driver interface used by the form submission job.

    The protocol intentionally exposes a very small surface so the
    application package does not depend on Selenium or Playwright. Concrete
    drivers live in `webform_bot/infrastructure/driver_adapter`.
    """

    def navigate(self, url: str) -> None:
        """Open the given absolute URL in the current browser window."""

    def title(self) -> str:
        """Return the title of the current page."""

    def set_implicit_wait(self, milliseconds: int) -> None:
        """Set how long element lookups keep polling before giving up."""

    def type_text(self, locator: Locator, text: str) -> None:
        """Send `text` as key presses to the element matching `locator`.

        Raises ElementNotFoundError when no element matches.
        """

    def click(self, locator: Locator) -> None:
        """Click the element matching `locator`.

        Raises ElementNotFoundError when no element matches.
        """

    def get_text(self, locator: Locator) -> str:
        """Return the visible text of the element matching `locator`.

        Raises ElementNotFoundError when no element matches.
        """

    def stop(self) -> None:
        """Stop the driver and close any associated browser/window."""
