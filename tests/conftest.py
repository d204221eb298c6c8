import pytest

from webform_bot.domain.errors import ElementNotFoundError
from webform_bot.domain.model.locator import Locator
from webform_bot.domain.protocols.driver_protocol import DriverProtocol


class _FakeDriver(DriverProtocol):
    def __init__(
        self,
        *,
        page_title: str = "Web form",
        message: str = "Received!",
        missing: set[Locator] | None = None,
        raise_on_navigate: BaseException | None = None,
    ) -> None:
        self.page_title = page_title
        self.message = message
        self.missing = missing or set()
        self.raise_on_navigate = raise_on_navigate

        # recording
        self.calls: list[tuple] = []
        self.stop_calls = 0

    def _check(self, locator: Locator) -> None:
        if locator in self.missing:
            raise ElementNotFoundError(locator)

    # DriverProtocol
    def navigate(self, url: str) -> None:
        self.calls.append(("navigate", url))
        if self.raise_on_navigate is not None:
            raise self.raise_on_navigate

    def title(self) -> str:
        self.calls.append(("title",))
        return self.page_title

    def set_implicit_wait(self, milliseconds: int) -> None:
        self.calls.append(("set_implicit_wait", milliseconds))

    def type_text(self, locator: Locator, text: str) -> None:
        self._check(locator)
        self.calls.append(("type_text", locator, text))

    def click(self, locator: Locator) -> None:
        self._check(locator)
        self.calls.append(("click", locator))

    def get_text(self, locator: Locator) -> str:
        self._check(locator)
        self.calls.append(("get_text", locator))
        return self.message

    def stop(self) -> None:
        self.stop_calls += 1

    @property
    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def fake_driver_factory():
    """Return a factory that constructs a configured FakeDriver.

    Usage:
        driver = fake_driver_factory(message='Nope', missing={Locator.by_id('message')})
    """

    def _factory(**kwargs):
        return _FakeDriver(**kwargs)

    return _factory
