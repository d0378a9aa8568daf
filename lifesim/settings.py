"""Display settings: interface scale and colour theme."""

from __future__ import annotations

import enum
from dataclasses import dataclass

SCALING_FACTORS: tuple[tuple[float, str], ...] = (
    (0.5, "50%"),
    (0.75, "75%"),
    (1.0, "100%"),
    (1.25, "125%"),
    (1.5, "150%"),
    (2.0, "200%"),
)


class Theme(enum.Enum):
    """Colour theme choices."""

    DARK = "Dark"
    LIGHT = "Light"
    SYSTEM = "System"


@dataclass
class Settings:
    """Current scale and theme, and whether the settings window is open."""

    scale: float = 1.0
    theme: Theme = Theme.DARK
    is_open: bool = False

    def toggle(self) -> bool:
        """Open the settings window if closed, close it if open; return the new state."""
        self.is_open = not self.is_open
        return self.is_open

    def close(self) -> None:
        """Close the settings window."""
        self.is_open = False

    def select_scale(self, scale: float) -> None:
        """Use ``scale`` as the interface zoom factor."""
        self.scale = scale

    def set_theme(self, theme: Theme) -> Theme:
        """Switch to ``theme`` and return the theme actually applied."""
        self.theme = Theme(theme)
        return self.effective_theme()

    def effective_theme(self) -> Theme:
        """The theme to render with; the system choice falls back to dark."""
        return Theme.DARK if self.theme is Theme.SYSTEM else self.theme

    def scale_options(self) -> list[tuple[float, str, bool]]:
        """Each offered scale with its label and whether it is the current one."""
        return [(factor, label, factor == self.scale) for factor, label in SCALING_FACTORS]