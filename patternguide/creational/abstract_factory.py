"""
Abstract Factory pattern: one factory per family of related products.

A ``GUIFactory`` builds buttons and checkboxes that belong to the same theme,
so an ``Application`` configured with one factory can never mix light and
dark widgets.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Type

from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class Button(ABC):
    theme: str = ""

    def __init__(self, label: str):
        self.label = label
        self.clicks = 0

    @abstractmethod
    def render(self) -> str:
        ...

    def click(self) -> str:
        self.clicks += 1
        return f"{self.theme} button '{self.label}' clicked ({self.clicks})"


class Checkbox(ABC):
    theme: str = ""

    def __init__(self, label: str, checked: bool = False):
        self.label = label
        self.checked = checked

    @abstractmethod
    def render(self) -> str:
        ...

    def toggle(self) -> bool:
        self.checked = not self.checked
        return self.checked


class LightButton(Button):
    theme = "light"

    def render(self) -> str:
        return f"[ {self.label} ] (white background, dark text)"


class DarkButton(Button):
    theme = "dark"

    def render(self) -> str:
        return f"[ {self.label} ] (charcoal background, light text)"


class LightCheckbox(Checkbox):
    theme = "light"

    def render(self) -> str:
        mark = "x" if self.checked else " "
        return f"[{mark}] {self.label} (light outline)"


class DarkCheckbox(Checkbox):
    theme = "dark"

    def render(self) -> str:
        mark = "x" if self.checked else " "
        return f"[{mark}] {self.label} (glowing outline)"


class GUIFactory(ABC):
    """Abstract factory for a family of widgets."""

    theme: str = ""

    @abstractmethod
    def create_button(self, label: str) -> Button:
        ...

    @abstractmethod
    def create_checkbox(self, label: str) -> Checkbox:
        ...


class LightThemeFactory(GUIFactory):
    theme = "light"

    def create_button(self, label: str) -> Button:
        return LightButton(label)

    def create_checkbox(self, label: str) -> Checkbox:
        return LightCheckbox(label)


class DarkThemeFactory(GUIFactory):
    theme = "dark"

    def create_button(self, label: str) -> Button:
        return DarkButton(label)

    def create_checkbox(self, label: str) -> Checkbox:
        return DarkCheckbox(label)


THEME_FACTORIES: Dict[str, Type[GUIFactory]] = {
    LightThemeFactory.theme: LightThemeFactory,
    DarkThemeFactory.theme: DarkThemeFactory,
}


def factory_for_theme(theme: str) -> GUIFactory:
    """Return the widget factory for a theme name (case-insensitive)."""
    key = (theme or "").strip().lower()
    if key not in THEME_FACTORIES:
        raise InvalidArgumentError(
            f"Unknown theme: {theme!r}. Available: {sorted(THEME_FACTORIES)}"
        )
    return THEME_FACTORIES[key]()


class Application:
    """Client code; it only knows the abstract factory and product interfaces."""

    def __init__(self, factory: GUIFactory):
        self.factory = factory
        self.button = factory.create_button("Submit")
        self.checkbox = factory.create_checkbox("Remember me")
        logger.debug("Application built with %s", type(factory).__name__)

    def render(self) -> List[str]:
        return [self.checkbox.render(), self.button.render()]


def demo(transcript) -> None:
    transcript.write("Abstract Factory: widgets from one family stay consistent")
    for theme in sorted(THEME_FACTORIES):
        app = Application(factory_for_theme(theme))
        app.checkbox.toggle()
        transcript.write(f"  {theme} theme:")
        for line in app.render():
            transcript.write(f"    {line}")

    try:
        factory_for_theme("neon")
    except InvalidArgumentError as e:
        transcript.write(f"  rejected: {e}")
