# zfinder/core/selection.py

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Union

from .observable import Binding, ObservableCell
from .pins import Pin

logger = logging.getLogger(__name__)


# --- Selection State ---
# A closed sum type: the controller only ever holds one of these two.

@dataclass(frozen=True)
class NoSelection:
    """Nothing is selected; the pin list is showing."""


@dataclass(frozen=True)
class Selected:
    """Exactly one pin is selected; its detail view is showing."""
    pin: Pin


Selection = Union[NoSelection, Selected]

NO_SELECTION = NoSelection()


class ViewKind(Enum):
    """The two views the main window can show."""
    PIN_LIST = auto()
    DETAIL = auto()


def view_for(selection: Selection) -> ViewKind:
    """Maps a selection state to the view that renders it."""
    if isinstance(selection, Selected):
        return ViewKind.DETAIL
    return ViewKind.PIN_LIST


class SelectionController:
    """
    Owns the current selection and the transitions between selection states.

    `select` is applied immediately and must be called from the UI-owned
    context. `clear` may be called from anywhere: it is posted to the
    dispatcher and only takes effect when that context runs its pending work,
    after anything that was already queued. `request_open` hands a path to the
    opener and never touches the selection.
    """

    def __init__(self, dispatcher, opener: Callable[[str], None]):
        """
        Args:
            dispatcher: Any object with a `post(callback)` method that runs
                        callbacks in order on the UI-owned context.
            opener: The "open this path in the system file browser" function.
        """
        self.dispatcher = dispatcher
        self.opener = opener
        self._selection = ObservableCell(NO_SELECTION)

    # --- Read-only State ---

    @property
    def selection(self) -> Selection:
        return self._selection.value

    @property
    def selected_pin(self) -> Pin | None:
        selection = self._selection.value
        return selection.pin if isinstance(selection, Selected) else None

    @property
    def view(self) -> ViewKind:
        return view_for(self._selection.value)

    def subscribe(self, listener: Callable[[Selection], None]) -> Callable[[], None]:
        """Calls `listener(selection)` after every selection change."""
        return self._selection.subscribe(listener)

    def binding(self) -> Binding:
        """
        A Binding over the selected pin (None when nothing is selected).

        Writing a pin through it selects that pin; writing None clears the
        selection through the dispatcher like `clear` does.
        """
        def write(pin):
            if pin is None:
                self.clear()
            else:
                self.select(pin)

        return Binding(lambda: self.selected_pin, write)

    # --- Transitions ---

    def select(self, pin: Pin):
        """Selects `pin`, replacing any previous selection."""
        logger.debug(f"Selecting pin '{pin.path}'.")
        self._selection.set(Selected(pin))

    def clear(self):
        """Schedules a return to NoSelection on the UI-owned context."""
        self.dispatcher.post(self._apply_clear)

    def _apply_clear(self):
        if isinstance(self._selection.value, Selected):
            logger.debug("Selection cleared.")
        self._selection.set(NO_SELECTION)

    # --- Side Effects ---

    def request_open(self, path: str):
        """
        Asks the opener to show `path` in the system file browser.

        The path is not checked for existence. Any failure inside the opener
        is logged and goes no further.
        """
        logger.info(f"Requesting open for '{path}'.")
        try:
            self.opener(path)
        except Exception as e:
            logger.warning(f"Opener failed for '{path}': {e}", exc_info=True)
