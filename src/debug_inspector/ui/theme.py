"""
ImGui Theme System

Visual styling for the inspector window, with built-in palettes and
optional JSON overrides from assets/config/themes/.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Tuple

import imgui

from ..config.settings import THEME_OVERRIDES, UI_SCALE

logger = logging.getLogger(__name__)

Color3 = Tuple[float, float, float]


@dataclass
class ColorPalette:
    """Color palette for a theme."""

    primary: Color3 = (0.57, 0.77, 0.55)      # Sage green
    primary_dark: Color3 = (0.47, 0.67, 0.45)
    primary_light: Color3 = (0.67, 0.87, 0.65)

    bg_primary: Color3 = (0.15, 0.15, 0.15)
    bg_secondary: Color3 = (0.20, 0.20, 0.20)
    bg_tertiary: Color3 = (0.25, 0.25, 0.25)

    text_primary: Color3 = (0.95, 0.95, 0.95)
    text_disabled: Color3 = (0.50, 0.50, 0.50)

    border: Color3 = (0.40, 0.40, 0.40)


@dataclass
class ThemeConfig:
    """Complete theme configuration."""

    name: str = "sage_green"
    colors: ColorPalette = field(default_factory=ColorPalette)
    frame_padding: float = 4.0
    item_spacing: float = 6.0
    frame_rounding: float = 3.0
    window_padding: float = 8.0
    alpha: float = 1.0
    scale: float = UI_SCALE

    @classmethod
    def from_dict(cls, data: Dict) -> ThemeConfig:
        """Load theme from dictionary (JSON compatible)."""
        colors_data = {
            key: tuple(val) if isinstance(val, list) else val
            for key, val in data.get("colors", {}).items()
        }
        defaults = cls()
        return cls(
            name=data.get("name", defaults.name),
            colors=ColorPalette(**colors_data),
            frame_padding=data.get("frame_padding", defaults.frame_padding),
            item_spacing=data.get("item_spacing", defaults.item_spacing),
            frame_rounding=data.get("frame_rounding", defaults.frame_rounding),
            window_padding=data.get("window_padding", defaults.window_padding),
            alpha=data.get("alpha", defaults.alpha),
            scale=data.get("scale", defaults.scale),
        )


BUILTIN_THEMES = {
    "sage_green": ColorPalette(),
    "dark": ColorPalette(
        primary=(0.40, 0.40, 0.40),
        primary_dark=(0.30, 0.30, 0.30),
        primary_light=(0.50, 0.50, 0.50),
        bg_primary=(0.10, 0.10, 0.10),
    ),
}


def resolve_theme(theme_name: str) -> ThemeConfig:
    """
    Find a theme by name: JSON overrides first, then built-ins.

    Unknown names fall back to "sage_green".
    """
    if theme_name in THEME_OVERRIDES:
        return ThemeConfig.from_dict(THEME_OVERRIDES[theme_name])
    if theme_name in BUILTIN_THEMES:
        return ThemeConfig(name=theme_name, colors=BUILTIN_THEMES[theme_name])

    logger.warning("Theme '%s' not found, using 'sage_green'", theme_name)
    return ThemeConfig(name="sage_green", colors=BUILTIN_THEMES["sage_green"])


class ThemeManager:
    """Applies a theme to the current ImGui context."""

    def __init__(self, theme_name: str = "sage_green"):
        self.current_theme = resolve_theme(theme_name)
        self.apply_theme(self.current_theme)

    def apply_theme(self, theme: ThemeConfig) -> None:
        """
        Apply theme colors and styling to ImGui.

        Args:
            theme: ThemeConfig to apply
        """
        self.current_theme = theme
        style = imgui.get_style()
        colors = theme.colors

        style.colors[imgui.COLOR_WINDOW_BACKGROUND] = colors.bg_primary + (theme.alpha,)
        style.colors[imgui.COLOR_CHILD_BACKGROUND] = colors.bg_secondary + (theme.alpha,)
        style.colors[imgui.COLOR_BORDER] = colors.border + (1.0,)

        style.colors[imgui.COLOR_BUTTON] = colors.primary_dark + (1.0,)
        style.colors[imgui.COLOR_BUTTON_HOVERED] = colors.primary + (1.0,)
        style.colors[imgui.COLOR_BUTTON_ACTIVE] = colors.primary_light + (1.0,)

        style.colors[imgui.COLOR_TEXT] = colors.text_primary + (1.0,)
        style.colors[imgui.COLOR_TEXT_DISABLED] = colors.text_disabled + (1.0,)

        style.colors[imgui.COLOR_FRAME_BACKGROUND] = colors.bg_tertiary + (0.9,)
        style.colors[imgui.COLOR_FRAME_BACKGROUND_HOVERED] = colors.bg_secondary + (1.0,)
        style.colors[imgui.COLOR_FRAME_BACKGROUND_ACTIVE] = colors.bg_tertiary + (1.0,)
        style.colors[imgui.COLOR_CHECK_MARK] = colors.primary_light + (1.0,)

        scale = theme.scale
        style.frame_padding = (theme.frame_padding * scale, theme.frame_padding * scale)
        style.item_spacing = (theme.item_spacing * scale, theme.item_spacing * scale)
        style.frame_rounding = theme.frame_rounding * scale
        style.window_padding = (theme.window_padding * scale, theme.window_padding * scale)
        imgui.get_io().font_global_scale = scale

    def switch_theme(self, theme_name: str) -> None:
        self.apply_theme(resolve_theme(theme_name))
