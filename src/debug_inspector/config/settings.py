"""
Debugging Inspector Configuration Settings

All configuration constants for the editor and the inspector.
Modify these values to change inspector behavior.
"""

import json
import logging
from pathlib import Path

# ============================================================================
# Project Paths
# ============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ASSETS_DIR = PROJECT_ROOT / "assets"
CONFIG_DIR = ASSETS_DIR / "config"
THEMES_DIR = CONFIG_DIR / "themes"

# ============================================================================
# Window Configuration
# ============================================================================

WINDOW_SIZE = (1280, 800)  # Width, Height
ASPECT_RATIO = None        # Free aspect ratio (editor window)
WINDOW_TITLE = "Debugging Inspector"
RESIZABLE = True

# OpenGL version (4.1 is max for macOS)
GL_VERSION = (4, 1)

CLEAR_COLOR = (0.12, 0.12, 0.12)

# ============================================================================
# Inspector Settings
# ============================================================================

INSPECTOR_TITLE = "--Debugging Inspector--"
INSPECTOR_WINDOW_NAME = "Inspector"

# Auto refresh marks the inspected target dirty on every redraw
AUTO_REFRESH_DEFAULT = True

INSPECTOR_PANEL_WIDTH = 420   # Docked on the right side of the window
INDENT_WIDTH = 16.0           # Pixels per nesting level
TEXT_FIELD_MAX_LENGTH = 256   # Buffer size for ImGui text fields

# Nested inspectable objects deeper than this render as plain text
MAX_NESTING_DEPTH = 8

# ============================================================================
# Scene Settings
# ============================================================================

SAMPLE_OBJECT_COUNT = 3  # Sample components created by the demo scene

# ============================================================================
# UI Theme Settings
# ============================================================================

UI_THEME = "sage_green"  # Available: "sage_green", "dark"
UI_SCALE = 1.0

# ============================================================================
# Logging
# ============================================================================

LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def _load_theme_overrides() -> dict:
    """
    Load optional theme overrides from assets/config/themes/*.json.

    Returns:
        Dict of theme name -> theme data (empty if no files exist)
    """
    overrides = {}
    if not THEMES_DIR.exists():
        return overrides

    for theme_path in sorted(THEMES_DIR.glob("*.json")):
        try:
            with open(theme_path, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logging.getLogger(__name__).warning("Could not load theme file %s: %s", theme_path, e)
            continue
        overrides[data.get("name", theme_path.stem)] = data

    return overrides


THEME_OVERRIDES = _load_theme_overrides()


def configure_logging(level: int = LOG_LEVEL) -> None:
    """Apply the project log format and level to the root logger."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
