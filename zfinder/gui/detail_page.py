# zfinder/gui/detail_page.py

from typing import Callable

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QSpacerItem, QSizePolicy
)

from zfinder.core.view_tree import ViewNode, MISSING
from .effects import ShakeAnimator
from .resources import get_icon, icon_for_pin, ICON_SIZE, LARGE_ICON_SIZE

MISSING_TEXT = "This location no longer exists."


class DetailPage(QWidget):
    """
    Shows one pin. It knows nothing about the controller: going back and
    opening the pin are the two callbacks it is built with.
    """

    def __init__(self, reset_selected_pin: Callable[[], None], open_finder: Callable[[str], None],
                 shake_amount: float = 5.0, shakes_per_unit: int = 5, parent=None):
        super().__init__(parent)
        self.reset_selected_pin = reset_selected_pin
        self.open_finder = open_finder
        self.node: ViewNode | None = None
        self._init_ui()
        self.shaker = ShakeAnimator(self.open_button, shake_amount, shakes_per_unit)

        self.back_button.clicked.connect(self._on_back_clicked)
        self.open_button.clicked.connect(self._on_open_clicked)

    def _init_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(15, 15, 15, 15)
        main_layout.setSpacing(10)

        top_layout = QHBoxLayout()
        self.back_button = QPushButton(" Pins")
        self.back_button.setIcon(get_icon("back"))
        self.back_button.setIconSize(ICON_SIZE)
        top_layout.addWidget(self.back_button)
        top_layout.addStretch()

        self.icon_label = QLabel()
        self.icon_label.setAlignment(Qt.AlignCenter)
        self.name_label = QLabel()
        self.name_label.setObjectName("PageTitle")
        self.name_label.setAlignment(Qt.AlignCenter)
        self.path_label = QLabel()
        self.path_label.setWordWrap(True)
        self.path_label.setAlignment(Qt.AlignCenter)
        self.path_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.category_label = QLabel()
        self.category_label.setAlignment(Qt.AlignCenter)
        self.status_label = QLabel()
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setStyleSheet("color: #BF616A;")

        self.open_button = QPushButton(" Open in File Browser")
        self.open_button.setIcon(get_icon("open"))
        self.open_button.setIconSize(ICON_SIZE)

        open_layout = QHBoxLayout()
        open_layout.addStretch()
        open_layout.addWidget(self.open_button)
        open_layout.addStretch()

        main_layout.addLayout(top_layout)
        main_layout.addWidget(self.icon_label)
        main_layout.addWidget(self.name_label)
        main_layout.addWidget(self.path_label)
        main_layout.addWidget(self.category_label)
        main_layout.addWidget(self.status_label)
        main_layout.addLayout(open_layout)
        main_layout.addSpacerItem(QSpacerItem(20, 40, QSizePolicy.Minimum, QSizePolicy.Expanding))

    def show_node(self, node: ViewNode):
        """Fills the page from a detail ViewNode."""
        self.node = node
        pin = node.pin
        self.icon_label.setPixmap(icon_for_pin(pin).pixmap(LARGE_ICON_SIZE))
        self.name_label.setText(pin.name)
        self.path_label.setText(pin.path)
        self.category_label.setText(pin.category.value.capitalize())
        self.status_label.setText(MISSING_TEXT if node.has(MISSING) else "")

    @Slot()
    def _on_back_clicked(self):
        self.reset_selected_pin()

    @Slot()
    def _on_open_clicked(self):
        if self.node is None:
            return
        pin = self.node.pin
        # The location may have gone away since the page was rendered.
        if self.node.has(MISSING) or not pin.exists():
            self.status_label.setText(MISSING_TEXT)
            self.shaker.shake()
        self.open_finder(pin.path)
