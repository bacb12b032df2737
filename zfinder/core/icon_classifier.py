# zfinder/core/icon_classifier.py

from enum import Enum
from pathlib import PurePath
from typing import Dict, FrozenSet


class ExtensionCategory(Enum):
    """The icon bucket a file extension falls into."""
    PHOTO = "photo"
    DOCUMENT = "document"
    SPREADSHEET = "spreadsheet"
    PRESENTATION = "presentation"
    AUDIO = "audio"
    VIDEO = "video"
    ARCHIVE = "archive"
    EXECUTABLE = "executable"
    GENERIC = "generic"


# --- The Classification Table ---
# Keys never carry a leading dot and are always lower-case.
CATEGORY_EXTENSIONS: Dict[ExtensionCategory, FrozenSet[str]] = {
    ExtensionCategory.PHOTO: frozenset("jpg jpeg png gif svg".split()),
    ExtensionCategory.DOCUMENT: frozenset("doc docx pdf txt rtf".split()),
    ExtensionCategory.SPREADSHEET: frozenset("xls xlsx csv tsv json".split()),
    ExtensionCategory.PRESENTATION: frozenset("ppt pptx key odp".split()),
    ExtensionCategory.AUDIO: frozenset("mp3 wav flac aac".split()),
    ExtensionCategory.VIDEO: frozenset("mp4 mov avi mkv".split()),
    ExtensionCategory.ARCHIVE: frozenset("zip tar rar 7z".split()),
    ExtensionCategory.EXECUTABLE: frozenset("app exe sh bat".split()),
}

# The symbol each category is drawn with. These double as icon file names
# under assets/icons.
CATEGORY_SYMBOLS: Dict[ExtensionCategory, str] = {
    ExtensionCategory.PHOTO: "photo",
    ExtensionCategory.DOCUMENT: "doc.plaintext",
    ExtensionCategory.SPREADSHEET: "filemenu.and.selection",
    ExtensionCategory.PRESENTATION: "slider.horizontal.below.rectangle",
    ExtensionCategory.AUDIO: "music.note",
    ExtensionCategory.VIDEO: "film",
    ExtensionCategory.ARCHIVE: "doc.zipper",
    ExtensionCategory.EXECUTABLE: "app",
    ExtensionCategory.GENERIC: "doc",
}

# Reverse index built once at import time: extension -> category.
_EXTENSION_INDEX: Dict[str, ExtensionCategory] = {
    ext: category
    for category, extensions in CATEGORY_EXTENSIONS.items()
    for ext in extensions
}


def normalize_extension(extension: str) -> str:
    """
    Lower-cases an extension and strips a single leading dot.

    Example:
        '.JPG' -> 'jpg', 'Tar' -> 'tar', '' -> ''
    """
    if not extension:
        return ""
    key = extension.lower()
    if key.startswith("."):
        key = key[1:]
    return key


def classify(extension: str) -> ExtensionCategory:
    """
    Maps a file extension to its ExtensionCategory.

    The lookup is case-insensitive and ignores a leading dot. Anything that
    is not in the classification table, including the empty string, is
    GENERIC. This function never raises.

    Args:
        extension: A file extension such as 'jpg', '.PDF' or ''.

    Returns:
        The matching ExtensionCategory.
    """
    return _EXTENSION_INDEX.get(normalize_extension(extension), ExtensionCategory.GENERIC)


def classify_path(path) -> ExtensionCategory:
    """Classifies a path by its final suffix ('archive.tar.gz' -> '.gz')."""
    return classify(PurePath(str(path)).suffix)


def symbol_for(extension: str) -> str:
    """Returns the icon symbol name for an extension."""
    return CATEGORY_SYMBOLS[classify(extension)]
