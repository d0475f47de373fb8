"""
Item frame widget for PyQt6.

Frame around one list item: position label, move/duplicate/delete controls
and the child block's own widget.
"""

from typing import Callable, Dict, Optional

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel, QSizePolicy
)
from PyQt6.QtCore import pyqtSignal

from pyqt_listedit.protocols import InsertionView, ItemView, get_list_editor_config
from pyqt_listedit.theming import ColorScheme, StyleSheetGenerator
from pyqt_listedit.widgets.child_blocks import PyQtWidgetMeta


class ItemFrame(QWidget, ItemView, metaclass=PyQtWidgetMeta):
    """
    PyQt6 item frame.

    Buttons emit signals only; the owning item handle decides what they mean.
    """

    # Signals
    move_up_requested = pyqtSignal()
    move_down_requested = pyqtSignal()
    duplicate_requested = pyqtSignal()
    delete_requested = pyqtSignal()

    def __init__(self, child_widget: QWidget, index: int, strings: Optional[Dict[str, str]] = None,
                 color_scheme: Optional[ColorScheme] = None, parent=None):
        """
        Initialize the item frame.

        Args:
            child_widget: Widget of the child block hosted by this frame
            index: Item index in the list
            strings: Per-list button label overrides
            color_scheme: Color scheme for UI components
            parent: Parent widget
        """
        super().__init__(parent)
        self.color_scheme = color_scheme or ColorScheme()
        self.child_widget = child_widget
        self.strings = strings or {}
        self.index = index
        self.deleted = False
        self.buttons: Dict[str, QPushButton] = {}

        self.setup_ui()
        self.set_index(index)

    def setup_ui(self):
        """Setup the user interface."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 6, 8, 6)
        layout.setSpacing(4)

        layout.addWidget(self.create_header())
        layout.addWidget(self.child_widget)

        # Only take the vertical space the child needs; the list scrolls
        self.setSizePolicy(QSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Minimum))
        self.setStyleSheet(StyleSheetGenerator(self.color_scheme).generate_item_frame_style())

    def create_header(self) -> QWidget:
        """
        Create header with the position label and control buttons.

        Returns:
            Widget containing label and buttons
        """
        header = QWidget()
        layout = QHBoxLayout(header)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self.index_label = QLabel()
        layout.addWidget(self.index_label)
        layout.addStretch()

        config = get_list_editor_config()
        button_configs = [
            ("↑", "move_up", "MOVE_UP", self.move_up_requested),
            ("↓", "move_down", "MOVE_DOWN", self.move_down_requested),
            (None, "duplicate", "DUPLICATE", self.duplicate_requested),
            (None, "delete", "DELETE", self.delete_requested),
        ]
        for label, action, string_key, signal in button_configs:
            text = config.get_string(string_key, self.strings)
            button = QPushButton(label or text)
            button.setToolTip(text)
            button.clicked.connect(lambda checked=False, s=signal: s.emit())
            self.buttons[action] = button
            layout.addWidget(button)

        return header

    def set_index(self, index: int) -> None:
        self.index = index
        self.index_label.setText(f"#{index + 1}")

    def set_move_up_enabled(self, enabled: bool) -> None:
        self.buttons["move_up"].setEnabled(enabled)

    def set_move_down_enabled(self, enabled: bool) -> None:
        self.buttons["move_down"].setEnabled(enabled)

    def connect_actions(self, on_move_up: Callable[[], None], on_move_down: Callable[[], None],
                        on_duplicate: Callable[[], None], on_delete: Callable[[], None]) -> None:
        self.move_up_requested.connect(on_move_up)
        self.move_down_requested.connect(on_move_down)
        self.duplicate_requested.connect(on_duplicate)
        self.delete_requested.connect(on_delete)

    def mark_deleted(self, animate: bool = False) -> None:
        # No animation support; user-triggered removals just disappear
        self.deleted = True
        detach_from_layout(self)
        self.deleteLater()


class InsertButton(QPushButton, InsertionView, metaclass=PyQtWidgetMeta):
    """'+' control shown at every gap between items."""

    def __init__(self, index: int, strings: Optional[Dict[str, str]] = None,
                 color_scheme: Optional[ColorScheme] = None, parent=None):
        super().__init__("+", parent)
        self.index = index
        self.removed = False
        text = get_list_editor_config().get_string("ADD", strings)
        self.setToolTip(text)
        self.setAccessibleName(text)
        self.setStyleSheet(StyleSheetGenerator(color_scheme or ColorScheme()).generate_add_button_style())

    def set_index(self, index: int) -> None:
        self.index = index
        self.setProperty("insertIndex", index)

    def remove(self) -> None:
        self.removed = True
        detach_from_layout(self)
        self.deleteLater()

    def connect_insert(self, callback: Callable[[], None]) -> None:
        self.clicked.connect(lambda checked=False: callback())


def detach_from_layout(widget: QWidget) -> None:
    """Take a widget out of its parent's layout and hide it until deletion."""
    parent = widget.parentWidget()
    if parent is not None and parent.layout() is not None:
        parent.layout().removeWidget(widget)
    widget.hide()
