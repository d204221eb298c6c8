import logging
from contextlib import contextmanager
from typing import Iterator

from webform_bot.domain.config import DriverConfig, Backend
from webform_bot.domain.protocols.driver_protocol import DriverProtocol

logger = logging.getLogger(__name__)


@contextmanager
def _stopping(driver: DriverProtocol) -> Iterator[DriverProtocol]:
    try:
        yield driver
    finally:
        logger.debug("Quitting browser session")
        driver.stop()


@contextmanager
def open_driver(driver_config: DriverConfig) -> Iterator[DriverProtocol]:
    """Start a browser session for the configured backend and always stop it on exit.

    Backend libraries are imported lazily so a Selenium run does not need
    Playwright's browsers installed and vice versa.
    """
    if driver_config.backend == Backend.PLAYWRIGHT:
        from playwright.sync_api import sync_playwright
        from webform_bot.infrastructure.driver_adapter.playwright_driver import PlaywrightDriver

        with sync_playwright() as playwright:
            with _stopping(PlaywrightDriver(playwright=playwright, driver_config=driver_config)) as driver:
                yield driver
        return

    from webform_bot.infrastructure.driver_adapter.selenium_driver import SeleniumDriver

    with _stopping(SeleniumDriver(driver_config=driver_config)) as driver:
        yield driver
