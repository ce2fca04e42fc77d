"""Colour theme preference, persisted and resolved against the system setting."""

from __future__ import annotations

from enum import Enum

from taskboard.storage import Storage

THEME_KEY = "todo_theme"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"

    @classmethod
    def from_str(cls, value: str) -> "Theme":
        """Parse a stored theme name; anything unknown means light."""
        if value == "dark":
            return cls.DARK
        if value == "system":
            return cls.SYSTEM
        return cls.LIGHT

    def resolve(self, prefers_dark: bool) -> "Theme":
        """Turn the system choice into light or dark."""
        if self is Theme.SYSTEM:
            return Theme.DARK if prefers_dark else Theme.LIGHT
        return self


class ThemeStore:
    """The chosen theme, the system preference and the theme currently applied."""

    def __init__(
        self,
        storage: Storage,
        theme: Theme = Theme.SYSTEM,
        prefers_dark: bool = False,
    ) -> None:
        self.storage = storage
        self.theme = theme
        self.prefers_dark = prefers_dark
        self.applied_theme = theme.resolve(prefers_dark)

    def set_theme(self, theme: Theme) -> None:
        """Choose a theme, persist it and apply it."""
        self.theme = theme
        self.storage.set_item(THEME_KEY, theme.value)
        self.apply()

    def toggle(self) -> None:
        self.set_theme(Theme.DARK if self.theme is Theme.LIGHT else Theme.LIGHT)

    def apply(self) -> Theme:
        """Apply the resolved theme and return it."""
        self.applied_theme = self.effective_theme()
        return self.applied_theme

    def effective_theme(self) -> Theme:
        return self.theme.resolve(self.prefers_dark)

    def is_dark(self) -> bool:
        return self.effective_theme() is Theme.DARK

    def is_light(self) -> bool:
        return self.effective_theme() is Theme.LIGHT

    def on_system_theme_change(self, dark: bool) -> None:
        """Track a change of the system preference; it only shows when following it."""
        self.prefers_dark = dark
        if self.theme is Theme.SYSTEM:
            self.applied_theme = Theme.DARK if dark else Theme.LIGHT


def create_theme_store(storage: Storage, prefers_dark: bool) -> ThemeStore:
    """Restore the stored theme (default: follow the system) and apply it."""
    stored = storage.get_item(THEME_KEY)
    initial = Theme.from_str(stored) if stored is not None else Theme.SYSTEM
    store = ThemeStore(storage, initial, prefers_dark)
    store.set_theme(initial)
    return store