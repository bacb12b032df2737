# zfinder/gui/resources.py

import logging
import sys
from pathlib import Path

from PySide6.QtCore import QSize
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QApplication, QStyle

from zfinder.core.icon_classifier import CATEGORY_SYMBOLS, ExtensionCategory
from zfinder.core.pins import Pin

# Asset problems (missing icons, a broken bundle) are reported here.
logger = logging.getLogger(__name__)


# --- Resource Path Resolution ---
def get_resource_path(relative_path: str) -> Path:
    """
    Gets the absolute path to a resource, both when running from source and
    from a PyInstaller bundle (which unpacks into `sys._MEIPASS`).
    """
    try:
        # PyInstaller unpacks bundled files here.
        base_path = Path(sys._MEIPASS)
    except AttributeError:
        # Running from source: the project root is three levels up.
        base_path = Path(__file__).resolve().parent.parent.parent

    return base_path / relative_path


# --- Asset Locations and Sizes ---
ASSETS_PATH = get_resource_path('assets')
ICONS_PATH = ASSETS_PATH / 'icons'

# Every category symbol plus the chrome icons used by the two pages.
REQUIRED_ICONS = sorted(set(CATEGORY_SYMBOLS.values())) + [
    "app_icon", "folder", "pin", "unpin", "back", "open"
]
# Drawn for any icon whose file is missing; it is also the generic category icon.
FALLBACK_ICON_NAME = "doc"
ICON_SIZE = QSize(20, 20)
LARGE_ICON_SIZE = QSize(64, 64)

# name -> QIcon, filled lazily by get_icon.
_icon_cache = {}


# --- Asset Management Functions ---

def validate_assets():
    """Logs a warning for every required icon missing from assets/icons."""
    logger.info("Validating GUI assets...")
    missing_icons = [name for name in REQUIRED_ICONS if not (ICONS_PATH / f"{name}.svg").exists()]
    if missing_icons:
        logger.warning(f"Missing required icons in '{ICONS_PATH}': {', '.join(missing_icons)}")
    else:
        logger.info("All required icons found.")


def _stock_icon() -> QIcon:
    # Without a QApplication there is no style to ask.
    app = QApplication.instance()
    if app is None:
        return QIcon()
    return app.style().standardIcon(QStyle.SP_FileIcon)


def get_icon(name: str) -> QIcon:
    """
    Creates and caches a QIcon from assets/icons/<name>.svg.

    Missing icons fall back to FALLBACK_ICON_NAME, and from there to the
    style's stock file icon.
    """
    if name in _icon_cache:
        return _icon_cache[name]

    icon_path = ICONS_PATH / f"{name}.svg"
    if not icon_path.exists():
        logger.warning(f"Icon '{name}.svg' not found. Using fallback.")
        # The fallback itself is missing: stop here instead of recursing.
        if name == FALLBACK_ICON_NAME:
            return _stock_icon()
        return get_icon(FALLBACK_ICON_NAME)

    icon = QIcon(str(icon_path))
    _icon_cache[name] = icon
    return icon


# --- Domain Icons ---

def icon_for_category(category: ExtensionCategory) -> QIcon:
    return get_icon(CATEGORY_SYMBOLS[category])


def icon_for_pin(pin: Pin) -> QIcon:
    """Folders get the folder icon; everything else is drawn by its category."""
    if Path(pin.path).is_dir():
        return get_icon("folder")
    return icon_for_category(pin.category)
