# zfinder/gui/pin_list_page.py

from pathlib import Path
from typing import Callable

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QBrush
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QListWidget, QListWidgetItem, QPushButton,
    QFileDialog, QAbstractItemView
)

from zfinder.core.pins import Pin, PinBoard
from zfinder.core.observable import Binding
from .resources import get_icon, icon_for_pin, ICON_SIZE

# Item data role under which each list row keeps its Pin.
PIN_ROLE = Qt.UserRole


class PinListPage(QWidget):
    """
    The list of pins. Activating a row writes that pin through the
    `selected_pin` binding; the buttons add, remove and open pins.
    """

    def __init__(self, board: PinBoard, selected_pin: Binding, open_finder: Callable[[str], None],
                 parent=None):
        super().__init__(parent)
        self.board = board
        self.selected_pin = selected_pin
        self.open_finder = open_finder
        self.last_browse_dir = str(Path.home())
        self._init_ui()
        self._connect_signals()

    def _init_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(15, 15, 15, 15)
        main_layout.setSpacing(10)

        self.title_label = QLabel("Pins")
        self.title_label.setObjectName("PageTitle")

        self.pin_list = QListWidget()
        self.pin_list.setSelectionMode(QAbstractItemView.SingleSelection)
        self.pin_list.setIconSize(ICON_SIZE)

        self.empty_label = QLabel("No pins yet. Use \"Pin File...\" or \"Pin Folder...\" to add one.")
        self.empty_label.setWordWrap(True)

        button_layout = QHBoxLayout()
        self.pin_file_button = QPushButton(" Pin File...")
        self.pin_folder_button = QPushButton(" Pin Folder...")
        self.unpin_button = QPushButton(" Unpin")
        self.open_button = QPushButton(" Open")
        self.pin_file_button.setIcon(get_icon("pin"))
        self.pin_folder_button.setIcon(get_icon("folder"))
        self.unpin_button.setIcon(get_icon("unpin"))
        self.open_button.setIcon(get_icon("open"))
        for button in (self.pin_file_button, self.pin_folder_button, self.unpin_button, self.open_button):
            button.setIconSize(ICON_SIZE)
        button_layout.addWidget(self.pin_file_button)
        button_layout.addWidget(self.pin_folder_button)
        button_layout.addStretch()
        button_layout.addWidget(self.unpin_button)
        button_layout.addWidget(self.open_button)

        main_layout.addWidget(self.title_label)
        main_layout.addWidget(self.pin_list)
        main_layout.addWidget(self.empty_label)
        main_layout.addLayout(button_layout)

        self.refresh()

    def _connect_signals(self):
        self.pin_list.itemActivated.connect(self._on_item_activated)
        self.pin_list.itemSelectionChanged.connect(self._update_button_states)
        self.pin_file_button.clicked.connect(self._pin_file)
        self.pin_folder_button.clicked.connect(self._pin_folder)
        self.unpin_button.clicked.connect(self._unpin_selected)
        self.open_button.clicked.connect(self._open_selected)

    # --- Public API ---

    def refresh(self):
        """Rebuilds the rows from the board."""
        self.pin_list.clear()
        for pin in self.board.pins:
            item = QListWidgetItem(icon_for_pin(pin), pin.name)
            item.setToolTip(pin.path)
            item.setData(PIN_ROLE, pin)
            if not pin.exists():
                item.setForeground(QBrush(Qt.gray))
                item.setToolTip(f"{pin.path} (not found)")
            self.pin_list.addItem(item)
        self.empty_label.setVisible(len(self.board) == 0)
        self._update_button_states()

    def current_pin(self) -> Pin | None:
        item = self.pin_list.currentItem()
        if item is None or not item.isSelected():
            return None
        return item.data(PIN_ROLE)

    # --- Slots ---

    @Slot(QListWidgetItem)
    def _on_item_activated(self, item: QListWidgetItem):
        pin = item.data(PIN_ROLE)
        if pin is not None:
            self.selected_pin.value = pin

    @Slot()
    def _update_button_states(self):
        has_selection = self.current_pin() is not None
        self.unpin_button.setEnabled(has_selection)
        self.open_button.setEnabled(has_selection)

    @Slot()
    def _pin_file(self):
        file_path, _ = QFileDialog.getOpenFileName(self, "Select a File to Pin", self.last_browse_dir)
        if file_path:
            self._add_pin(file_path)

    @Slot()
    def _pin_folder(self):
        dir_path = QFileDialog.getExistingDirectory(self, "Select a Folder to Pin", self.last_browse_dir)
        if dir_path:
            self._add_pin(dir_path)

    def _add_pin(self, path: str):
        self.last_browse_dir = str(Path(path).parent)
        self.board.add_path(path)

    @Slot()
    def _unpin_selected(self):
        pin = self.current_pin()
        if pin is not None:
            self.board.remove(pin)

    @Slot()
    def _open_selected(self):
        pin = self.current_pin()
        if pin is not None:
            self.open_finder(pin.path)
