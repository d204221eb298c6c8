from dataclasses import dataclass, field
from enum import Enum

from webform_bot.domain.model.locator import Locator

DEFAULT_FORM_URL = "https://www.selenium.dev/selenium/web/web-form.html"


class Backend(Enum):
    SELENIUM = "selenium"
    PLAYWRIGHT = "playwright"


class Browser(Enum):
    CHROME = "chrome"
    FIREFOX = "firefox"


@dataclass(frozen=True)
class DriverConfig:
    """Configuration for the browser driver."""
    backend: Backend = Backend.SELENIUM
    browser: Browser = Browser.CHROME
    headless: bool = False
    implicit_wait_ms: int = 500
    use_webdriver_manager: bool = True

    def __post_init__(self):
        if self.implicit_wait_ms < 0:
            raise ValueError(f"implicit_wait_ms must not be negative, got: {self.implicit_wait_ms}")


@dataclass(frozen=True)
class FormConfig:
    """Target page and the form interaction performed on it."""
    url: str = DEFAULT_FORM_URL
    text_field_name: str = "my-text"
    text: str = "Selenium"
    submit_selector: str = "button"
    message_id: str = "message"
    expected_message: str | None = "Received!"

    @property
    def text_field_locator(self) -> Locator:
        return Locator.by_name(self.text_field_name)

    @property
    def submit_locator(self) -> Locator:
        return Locator.by_css(self.submit_selector)

    @property
    def message_locator(self) -> Locator:
        return Locator.by_id(self.message_id)


@dataclass(frozen=True)
class Config:
    """Main configuration containing log level and nested config objects."""
    log_level: str = "INFO"
    driver_config: DriverConfig = field(default_factory=DriverConfig)
    form_config: FormConfig = field(default_factory=FormConfig)
