from dataclasses import dataclass
from enum import Enum


class LocatorStrategy(Enum):
    NAME = "name"
    CSS = "css"
    ID = "id"


@dataclass(frozen=True)
class Locator:
    """How to find one element on the page."""
    strategy: LocatorStrategy
    value: str

    @classmethod
    def by_name(cls, name: str) -> "Locator":
        return cls(LocatorStrategy.NAME, name)

    @classmethod
    def by_css(cls, selector: str) -> "Locator":
        return cls(LocatorStrategy.CSS, selector)

    @classmethod
    def by_id(cls, element_id: str) -> "Locator":
        return cls(LocatorStrategy.ID, element_id)

    def __str__(self) -> str:
        return f"{self.strategy.value}={self.value!r}"
