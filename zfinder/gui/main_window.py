# zfinder/gui/main_window.py

import logging
import sys
from pathlib import Path

from PySide6.QtCore import QUrl, Slot
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import QApplication, QMainWindow, QStackedWidget

from zfinder.core.pins import PinBoard
from zfinder.core.selection import SelectionController, ViewKind
from zfinder.core.opener import SystemOpener
from zfinder.core.settings import AppSettings, DEFAULT_SETTINGS_PATH, load_settings, save_settings
from zfinder.core.view_tree import render
from zfinder.utils.logger import setup_logging
from .detail_page import DetailPage
from .dispatcher import QtDispatcher
from .pin_list_page import PinListPage
from .resources import get_icon, validate_assets

logger = logging.getLogger(__name__)

WINDOW_TITLE = "ZFinder"


class QtOpener:
    """Opens paths through QDesktopServices, the platform's file browser."""

    def __call__(self, path: str):
        if not QDesktopServices.openUrl(QUrl.fromLocalFile(path)):
            logger.warning(f"The desktop refused to open '{path}'.")


def make_opener(settings: AppSettings):
    """A configured open_command wins; otherwise the desktop services opener."""
    if settings.open_command:
        return SystemOpener.from_settings(settings)
    return QtOpener()


class MainWindow(QMainWindow):
    """
    Shows either the pin list or one pin's details, depending on the
    controller's selection. The window owns the controller for its lifetime
    and drops its subscriptions when it closes.

    When built with a `settings_path`, closing the window writes its size
    back to that file if the user resized it.
    """

    def __init__(self, board: PinBoard | None = None, settings: AppSettings | None = None,
                 opener=None, settings_path: Path | None = None):
        super().__init__()
        self.settings = settings or AppSettings()
        self.settings_path = settings_path
        self.board = board if board is not None else PinBoard()

        self.setWindowTitle(WINDOW_TITLE)
        self.setWindowIcon(get_icon("app_icon"))
        self.resize(self.settings.window_width, self.settings.window_height)

        # --- State ---
        self.dispatcher = QtDispatcher(self)
        self.controller = SelectionController(self.dispatcher, opener or make_opener(self.settings))

        # --- Pages ---
        selected_pin = self.controller.binding().on_update(self._on_pin_written)
        self.pin_list_page = PinListPage(self.board, selected_pin, self.controller.request_open)
        self.detail_page = DetailPage(
            reset_selected_pin=self.controller.clear,
            open_finder=self.controller.request_open,
            shake_amount=self.settings.shake_amount,
            shakes_per_unit=self.settings.shakes_per_unit,
        )
        self.stack = QStackedWidget()
        self.stack.addWidget(self.pin_list_page)
        self.stack.addWidget(self.detail_page)
        self.setCentralWidget(self.stack)

        self._unsubscribers = [
            self.controller.subscribe(lambda _selection: self.refresh()),
            self.board.subscribe(lambda _pins: self.refresh()),
        ]
        self.refresh()

    def current_view(self) -> ViewKind:
        """The view currently on screen."""
        if self.stack.currentWidget() is self.detail_page:
            return ViewKind.DETAIL
        return ViewKind.PIN_LIST

    def refresh(self):
        """Re-renders from the current selection and pins."""
        node = render(self.controller.selection, self.board.pins)
        if node.kind == ViewKind.DETAIL:
            self.detail_page.show_node(node)
            self.stack.setCurrentWidget(self.detail_page)
            self.setWindowTitle(f"{WINDOW_TITLE} - {node.pin.name}")
        else:
            self.pin_list_page.refresh()
            self.stack.setCurrentWidget(self.pin_list_page)
            self.setWindowTitle(WINDOW_TITLE)

    @Slot()
    def _on_pin_written(self):
        pin = self.controller.selected_pin
        if pin is not None:
            self.statusBar().showMessage(pin.path, 3000)

    def save_window_size(self) -> bool:
        """Persists the current window size. Returns True if the file was written."""
        if self.settings_path is None:
            return False
        size = self.size()
        if (size.width(), size.height()) == (self.settings.window_width, self.settings.window_height):
            return False
        self.settings.window_width = size.width()
        self.settings.window_height = size.height()
        return save_settings(self.settings, self.settings_path)

    def closeEvent(self, event):
        self.save_window_size()
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        event.accept()


def run_gui(pin_paths=(), settings_path: Path | None = None):
    """
    Entry point for the GUI: configure logging, build the window and run the
    Qt event loop until the window closes.

    Args:
        pin_paths: Paths to pin at startup.
        settings_path: Optional settings file, defaults to config/settings.json.
    """
    settings = load_settings(settings_path)
    setup_logging(settings)
    validate_assets()

    app = QApplication.instance() or QApplication(sys.argv)

    board = PinBoard()
    for path in pin_paths:
        board.add_path(path)

    window = MainWindow(board, settings, settings_path=settings_path or DEFAULT_SETTINGS_PATH)
    window.show()

    sys.exit(app.exec())
