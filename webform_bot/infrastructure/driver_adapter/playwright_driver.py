import logging

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator as PlaywrightLocator
from playwright.sync_api import Playwright
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from webform_bot.domain.config import DriverConfig, Browser
from webform_bot.domain.errors import DriverError, ElementNotFoundError
from webform_bot.domain.model.locator import Locator, LocatorStrategy

logger = logging.getLogger(__name__)

# Page loads (goto, navigations triggered by a click) are not bounded by the element wait.
NAVIGATION_TIMEOUT_MS = 30_000

BROWSER_TYPES = {
    Browser.CHROME: "chromium",
    Browser.FIREFOX: "firefox",
}


def to_selector(locator: Locator) -> str:
    """Express a locator as a Playwright CSS selector."""
    if locator.strategy == LocatorStrategy.NAME:
        return f'[name="{locator.value}"]'
    if locator.strategy == LocatorStrategy.ID:
        return f'[id="{locator.value}"]'
    return locator.value


class PlaywrightDriver:
    def __init__(self, playwright: Playwright, driver_config: DriverConfig):
        self.playwright = playwright
        self.driver_config = driver_config
        browser_type = getattr(self.playwright, BROWSER_TYPES[driver_config.browser])
        try:
            self.browser = browser_type.launch(headless=driver_config.headless)
            self.page = self.browser.new_page()
            self.page.set_default_navigation_timeout(NAVIGATION_TIMEOUT_MS)
        except PlaywrightError as e:
            raise DriverError(f"Starting {driver_config.browser.value} failed: {e}") from e
        self._stopped = False

    def navigate(self, url: str) -> None:
        logger.debug(f"Navigating to: {url}")
        try:
            self.page.goto(url)
        except PlaywrightError as e:
            raise DriverError(f"Navigating to {url} failed: {e}") from e

    def title(self) -> str:
        try:
            return self.page.title()
        except PlaywrightError as e:
            raise DriverError(f"Reading page title failed: {e}") from e

    def set_implicit_wait(self, milliseconds: int) -> None:
        # Playwright auto-waits on every locator action; the default timeout bounds that wait.
        # 0 means "wait forever" to Playwright but "do not wait" to Selenium.
        self.page.set_default_timeout(max(milliseconds, 1))

    def _element(self, locator: Locator) -> PlaywrightLocator:
        return self.page.locator(to_selector(locator)).first

    def type_text(self, locator: Locator, text: str) -> None:
        try:
            self._element(locator).press_sequentially(text)
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(locator) from e
        except PlaywrightError as e:
            raise DriverError(f"Typing into {locator} failed: {e}") from e

    def click(self, locator: Locator) -> None:
        try:
            self._element(locator).click()
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(locator) from e
        except PlaywrightError as e:
            raise DriverError(f"Clicking {locator} failed: {e}") from e

        # Selenium's click returns once a triggered page load has finished; match that.
        try:
            self.page.wait_for_load_state("load")
        except PlaywrightError as e:
            raise DriverError(f"Waiting for the page to load after clicking {locator} failed: {e}") from e

    def get_text(self, locator: Locator) -> str:
        try:
            return self._element(locator).inner_text()
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(locator) from e
        except PlaywrightError as e:
            raise DriverError(f"Reading text of {locator} failed: {e}") from e

    def stop(self) -> None:
        if self._stopped:
            return
        self._stopped = True
        try:
            self.browser.close()
        except PlaywrightError as e:
            logger.warning(f"Failed to close browser cleanly: {e}")
