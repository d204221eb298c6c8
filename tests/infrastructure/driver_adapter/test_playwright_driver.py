from unittest.mock import MagicMock

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from webform_bot.domain.config import DriverConfig, Backend, Browser
from webform_bot.domain.errors import DriverError, ElementNotFoundError
from webform_bot.domain.model.locator import Locator
from webform_bot.infrastructure.driver_adapter.playwright_driver import PlaywrightDriver, to_selector, NAVIGATION_TIMEOUT_MS


@pytest.fixture
def playwright() -> MagicMock:
    return MagicMock()


@pytest.fixture
def driver(playwright: MagicMock) -> PlaywrightDriver:
    return PlaywrightDriver(playwright, DriverConfig(backend=Backend.PLAYWRIGHT))


def _page(playwright: MagicMock) -> MagicMock:
    return playwright.chromium.launch.return_value.new_page.return_value


@pytest.mark.parametrize(
    "locator,selector",
    [
        (Locator.by_name("my-text"), '[name="my-text"]'),
        (Locator.by_css("form button[type=submit]"), "form button[type=submit]"),
        (Locator.by_id("message"), '[id="message"]'),
    ],
)
def test_to_selector(locator: Locator, selector: str) -> None:
    assert to_selector(locator) == selector


def test_launches_configured_browser(playwright: MagicMock) -> None:
    PlaywrightDriver(playwright, DriverConfig(backend=Backend.PLAYWRIGHT, browser=Browser.FIREFOX, headless=True))

    playwright.firefox.launch.assert_called_once_with(headless=True)
    playwright.chromium.launch.assert_not_called()


def test_navigate_and_title(driver: PlaywrightDriver, playwright: MagicMock) -> None:
    page = _page(playwright)
    page.title.return_value = "Web form"

    driver.navigate("https://example.test/form")

    page.goto.assert_called_once_with("https://example.test/form")
    assert driver.title() == "Web form"


def test_implicit_wait_sets_default_timeout(driver: PlaywrightDriver, playwright: MagicMock) -> None:
    driver.set_implicit_wait(500)

    _page(playwright).set_default_timeout.assert_called_once_with(500)


def test_zero_implicit_wait_still_times_out(playwright: MagicMock) -> None:
    """A zero wait must fail fast instead of turning into Playwright's "no timeout"."""
    driver = PlaywrightDriver(playwright, DriverConfig(backend=Backend.PLAYWRIGHT, implicit_wait_ms=0))

    driver.set_implicit_wait(driver.driver_config.implicit_wait_ms)

    [timeout] = _page(playwright).set_default_timeout.call_args.args
    assert timeout > 0


def test_navigation_timeout_is_independent_of_element_wait(driver: PlaywrightDriver, playwright: MagicMock) -> None:
    page = _page(playwright)

    driver.set_implicit_wait(500)

    page.set_default_navigation_timeout.assert_called_once_with(NAVIGATION_TIMEOUT_MS)
    assert NAVIGATION_TIMEOUT_MS > 500


def test_click_waits_for_triggered_page_load(driver: PlaywrightDriver, playwright: MagicMock) -> None:
    page = _page(playwright)

    driver.click(Locator.by_css("button"))

    page.locator.return_value.first.click.assert_called_once_with()
    page.wait_for_load_state.assert_called_once_with("load")


def test_slow_page_load_after_click_is_a_driver_error(driver: PlaywrightDriver, playwright: MagicMock) -> None:
    _page(playwright).wait_for_load_state.side_effect = PlaywrightTimeoutError("Timeout 30000ms exceeded.")

    with pytest.raises(DriverError) as exc_info:
        driver.click(Locator.by_css("button"))

    assert not isinstance(exc_info.value, ElementNotFoundError)


def test_element_actions_use_first_match(driver: PlaywrightDriver, playwright: MagicMock) -> None:
    page = _page(playwright)
    element = page.locator.return_value.first
    element.inner_text.return_value = "Received!"

    driver.type_text(Locator.by_name("my-text"), "Selenium")
    driver.click(Locator.by_css("button"))
    text = driver.get_text(Locator.by_id("message"))

    assert [c.args[0] for c in page.locator.call_args_list] == ['[name="my-text"]', "button", '[id="message"]']
    element.press_sequentially.assert_called_once_with("Selenium")
    element.click.assert_called_once_with()
    assert text == "Received!"


def test_timeout_becomes_element_not_found(driver: PlaywrightDriver, playwright: MagicMock) -> None:
    _page(playwright).locator.return_value.first.click.side_effect = PlaywrightTimeoutError("Timeout 500ms exceeded.")

    with pytest.raises(ElementNotFoundError) as exc_info:
        driver.click(Locator.by_css("button"))

    assert exc_info.value.locator == Locator.by_css("button")


def test_other_errors_become_driver_errors(driver: PlaywrightDriver, playwright: MagicMock) -> None:
    _page(playwright).goto.side_effect = PlaywrightError("net::ERR_NAME_NOT_RESOLVED")

    with pytest.raises(DriverError, match="ERR_NAME_NOT_RESOLVED"):
        driver.navigate("https://nowhere.invalid")


def test_stop_closes_browser_once(driver: PlaywrightDriver, playwright: MagicMock) -> None:
    driver.stop()
    driver.stop()

    playwright.chromium.launch.return_value.close.assert_called_once_with()
