import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator

import requests
from selenium import webdriver
from selenium.common.exceptions import NoSuchElementException, WebDriverException
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.common.by import By
from selenium.webdriver.firefox.service import Service as FirefoxService
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager

from webform_bot.domain.config import DriverConfig, Browser
from webform_bot.domain.errors import DriverError, ElementNotFoundError
from webform_bot.domain.model.locator import Locator, LocatorStrategy

logger = logging.getLogger(__name__)

BY_STRATEGY: dict[LocatorStrategy, str] = {
    LocatorStrategy.NAME: By.NAME,
    LocatorStrategy.CSS: By.CSS_SELECTOR,
    LocatorStrategy.ID: By.ID,
}


@contextmanager
def _translate_errors(action: str) -> Iterator[None]:
    try:
        yield
    except WebDriverException as e:
        raise DriverError(f"{action} failed: {e.msg or e}") from e


def _install_driver_binary(manager_factory: Callable[[], Any]) -> str:
    """Download (or reuse the cached) driver binary through webdriver-manager."""
    try:
        return manager_factory().install()
    except (requests.exceptions.RequestException, ValueError, OSError) as e:
        raise DriverError(f"Resolving the browser driver binary failed: {e}") from e


def launch_webdriver(driver_config: DriverConfig) -> WebDriver:
    """Start a local browser session for the configured browser.

    With `use_webdriver_manager` the driver binary is downloaded and cached by
    webdriver-manager, otherwise Selenium Manager resolves it.
    """
    headless = driver_config.headless

    with _translate_errors(f"Starting {driver_config.browser.value}"):
        if driver_config.browser == Browser.FIREFOX:
            firefox_options = webdriver.FirefoxOptions()
            if headless:
                firefox_options.add_argument("-headless")
            if driver_config.use_webdriver_manager:
                firefox_service = FirefoxService(_install_driver_binary(GeckoDriverManager))
            else:
                firefox_service = FirefoxService()
            return webdriver.Firefox(service=firefox_service, options=firefox_options)

        chrome_options = webdriver.ChromeOptions()
        if headless:
            chrome_options.add_argument("--headless=new")
        if driver_config.use_webdriver_manager:
            chrome_service = ChromeService(_install_driver_binary(ChromeDriverManager))
        else:
            chrome_service = ChromeService()
        return webdriver.Chrome(service=chrome_service, options=chrome_options)


class SeleniumDriver:
    def __init__(self, driver_config: DriverConfig, web_driver: WebDriver | None = None):
        self.driver_config = driver_config
        self.web_driver = web_driver if web_driver is not None else launch_webdriver(driver_config)
        self._stopped = False
        logger.debug(f"Selenium session started ({driver_config.browser.value}, headless={driver_config.headless})")

    def navigate(self, url: str) -> None:
        logger.debug(f"Navigating to: {url}")
        with _translate_errors(f"Navigating to {url}"):
            self.web_driver.get(url)

    def title(self) -> str:
        with _translate_errors("Reading page title"):
            return self.web_driver.title

    def set_implicit_wait(self, milliseconds: int) -> None:
        with _translate_errors("Setting implicit wait"):
            self.web_driver.implicitly_wait(milliseconds / 1000)

    def _find(self, locator: Locator) -> WebElement:
        try:
            return self.web_driver.find_element(BY_STRATEGY[locator.strategy], locator.value)
        except NoSuchElementException as e:
            raise ElementNotFoundError(locator) from e
        except WebDriverException as e:
            raise DriverError(f"Looking up {locator} failed: {e.msg or e}") from e

    def type_text(self, locator: Locator, text: str) -> None:
        element = self._find(locator)
        with _translate_errors(f"Typing into {locator}"):
            element.send_keys(text)

    def click(self, locator: Locator) -> None:
        element = self._find(locator)
        with _translate_errors(f"Clicking {locator}"):
            element.click()

    def get_text(self, locator: Locator) -> str:
        element = self._find(locator)
        with _translate_errors(f"Reading text of {locator}"):
            return element.text

    def stop(self) -> None:
        if self._stopped:
            return
        self._stopped = True
        try:
            self.web_driver.quit()
        except WebDriverException as e:
            logger.warning(f"Failed to quit browser session cleanly: {e}")
