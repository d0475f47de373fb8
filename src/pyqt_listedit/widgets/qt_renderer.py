"""Qt renderer: places item frames and '+' buttons in a QVBoxLayout."""

import logging
from typing import Any, Dict, Optional, Sequence

from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from pyqt_listedit.protocols import ChildBlock, SequenceRenderer
from pyqt_listedit.theming import ColorScheme
from pyqt_listedit.widgets.item_frame import InsertButton, ItemFrame

logger = logging.getLogger(__name__)


class QtSequenceRenderer(SequenceRenderer):
    """
    Renderer backed by a QVBoxLayout.

    Layout position equals slot: the layout holds exactly the live views in
    interleaved order [+, item, +, item, ..., +].
    """

    def __init__(self, layout: QVBoxLayout, strings: Optional[Dict[str, str]] = None,
                 color_scheme: Optional[ColorScheme] = None, help_label: Optional[QLabel] = None):
        self.layout = layout
        self.strings = strings or {}
        self.color_scheme = color_scheme or ColorScheme()
        self.help_label = help_label
        self.count = 0

    def clear(self) -> None:
        while self.layout.count():
            child = self.layout.takeAt(0)
            widget = child.widget()
            if widget is not None:
                widget.hide()
                widget.deleteLater()  # Schedule for deletion instead of just orphaning

    def create_insertion_view(self, slot: int, index: int) -> InsertButton:
        button = InsertButton(index, strings=self.strings, color_scheme=self.color_scheme)
        self.layout.insertWidget(slot, button)
        return button

    def create_item_view(self, slot: int, index: int, child: ChildBlock) -> ItemFrame:
        if not isinstance(child, QWidget):
            raise TypeError(f"QtSequenceRenderer needs QWidget children, got {type(child).__name__}")
        frame = ItemFrame(child, index, strings=self.strings, color_scheme=self.color_scheme)
        self.layout.insertWidget(slot, frame)
        return frame

    def reorder(self, views: Sequence[Any]) -> None:
        """Reorder existing widgets without recreating them."""
        # First remove all from layout (but don't delete them)
        for view in views:
            self.layout.removeWidget(view)
        # Re-add in correct order
        for view in views:
            self.layout.addWidget(view)

    def set_count(self, count: int) -> None:
        self.count = count

    def set_help_text(self, help_text: Optional[str], help_icon: Optional[str] = None) -> None:
        if self.help_label is None:
            logger.debug("No help label attached; help text not shown")
            return
        # Help text is left unescaped so hosts can use rich text
        self.help_label.setText(f"{help_icon} {help_text}" if help_icon else help_text or "")
        self.help_label.setVisible(bool(help_text))

    def widgets(self) -> list:
        """Widgets currently in the layout, in visual order."""
        return [self.layout.itemAt(i).widget() for i in range(self.layout.count())]

