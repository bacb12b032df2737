# zfinder/core/pins.py

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Tuple

from .icon_classifier import ExtensionCategory, classify_path
from .observable import ObservableCell

logger = logging.getLogger(__name__)


# eq=False keeps the default identity comparison: two pins on the same path
# are still two different pins.
@dataclass(eq=False)
class Pin:
    """A user-saved filesystem location."""
    path: str
    label: str | None = None

    @classmethod
    def from_path(cls, path, label: str | None = None) -> "Pin":
        """Creates a pin from any path-like, made absolute with '~' expanded."""
        absolute = Path(path).expanduser().absolute()
        return cls(str(absolute), label)

    @property
    def name(self) -> str:
        """The label if one was given, otherwise the last path component."""
        if self.label:
            return self.label
        return Path(self.path).name or self.path

    @property
    def category(self) -> ExtensionCategory:
        """The icon category of the final suffix; folders are usually GENERIC."""
        return classify_path(self.path)

    def exists(self) -> bool:
        """Whether the pinned location is currently on disk."""
        try:
            return Path(self.path).exists()
        except OSError as e:
            logger.debug(f"Could not stat pinned path '{self.path}': {e}")
            return False


class PinBoard:
    """
    The in-memory, ordered collection of pins shown in the pin list.

    Subscribers receive the new tuple of pins whenever a pin is added or
    removed.
    """

    def __init__(self, pins=()):
        self._cell = ObservableCell(tuple(pins))

    @property
    def pins(self) -> Tuple[Pin, ...]:
        return self._cell.value

    def add(self, pin: Pin) -> Pin:
        """Appends a pin. Adding a pin that is already on the board does nothing."""
        if pin not in self.pins:
            self._cell.set(self.pins + (pin,))
            logger.info(f"Pinned '{pin.path}'.")
        return pin

    def add_path(self, path, label: str | None = None) -> Pin:
        return self.add(Pin.from_path(path, label))

    def remove(self, pin: Pin) -> bool:
        """Removes a pin. Returns False if it was not on the board."""
        if pin not in self.pins:
            logger.debug(f"Ignoring removal of unknown pin '{pin.path}'.")
            return False
        self._cell.set(tuple(p for p in self.pins if p is not pin))
        logger.info(f"Unpinned '{pin.path}'.")
        return True

    def subscribe(self, listener: Callable[[Tuple[Pin, ...]], None]) -> Callable[[], None]:
        return self._cell.subscribe(listener)

    def __len__(self):
        return len(self.pins)

    def __iter__(self):
        return iter(self.pins)
