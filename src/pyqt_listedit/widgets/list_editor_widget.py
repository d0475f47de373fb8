"""
List Editor Widget for PyQt6.

Hosts a SequenceEditor: help text, a scrollable column of item frames with a
'+' button at every gap, and Qt signals for hosts that need to react to
structural changes.
"""

import logging
from typing import Any, List, Optional, Sequence

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel, QScrollArea
from PyQt6.QtCore import Qt, pyqtSignal

from pyqt_listedit.core import ListValidationError, SequenceEditor
from pyqt_listedit.protocols import ListBlockDefinition
from pyqt_listedit.theming import ColorScheme, StyleSheetGenerator
from pyqt_listedit.widgets.qt_renderer import QtSequenceRenderer

logger = logging.getLogger(__name__)


class ListEditorWidget(QWidget):
    """
    Reorderable list editor widget.

    All structural work is done by the wrapped SequenceEditor; this widget
    only provides the Qt surface and re-emits changes as a signal.
    """

    # Signals
    list_changed = pyqtSignal()

    def __init__(self, definition: ListBlockDefinition, prefix: str,
                 initial_state: Optional[Sequence[Any]] = None,
                 initial_error: Optional[Sequence[ListValidationError]] = None,
                 color_scheme: Optional[ColorScheme] = None, parent=None):
        """
        Initialize the list editor widget.

        Args:
            definition: List definition (child type, default state, meta)
            prefix: Form-field prefix of the list
            initial_state: Child states to load
            initial_error: Validation errors to show right after loading
            color_scheme: Color scheme for UI components
            parent: Parent widget
        """
        super().__init__(parent)
        self.definition = definition
        self.prefix = prefix
        self.color_scheme = color_scheme or ColorScheme()

        self.setup_ui()

        self.renderer = QtSequenceRenderer(
            self.item_layout,
            strings=definition.meta.strings,
            color_scheme=self.color_scheme,
            help_label=self.help_label,
        )
        self.editor: SequenceEditor = definition.render(
            self.renderer, prefix, initial_state, initial_error,
            on_change=self._on_editor_changed,
        )

        logger.debug(f"List editor widget '{prefix}' initialized with {len(self.editor)} items")

    def setup_ui(self):
        """Setup the user interface."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self.help_label = QLabel()
        self.help_label.setObjectName("listHelpText")
        self.help_label.setWordWrap(True)
        self.help_label.setVisible(False)
        layout.addWidget(self.help_label)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)

        self.item_container = QWidget()
        self.item_container.setObjectName("listContainer")
        if self.definition.meta.classname:
            self.item_container.setProperty("classname", self.definition.meta.classname)
        self.item_layout = QVBoxLayout(self.item_container)
        self.item_layout.setAlignment(Qt.AlignmentFlag.AlignTop)
        self.item_layout.setSpacing(4)

        self.scroll_area.setWidget(self.item_container)
        layout.addWidget(self.scroll_area)

        self.setStyleSheet(StyleSheetGenerator(self.color_scheme).generate_container_style())

    def _on_editor_changed(self):
        # Called from SequenceEditor.__init__ before self.editor is bound
        if hasattr(self, "editor"):
            self.list_changed.emit()

    # Host API, delegated to the sequence editor

    @property
    def count(self) -> int:
        """Value of the '<prefix>-count' form field."""
        return self.editor.count

    def get_state(self) -> List[Any]:
        return self.editor.get_state()

    def set_state(self, values: Sequence[Any]) -> None:
        self.editor.set_state(values)

    def get_value(self) -> List[Any]:
        return self.editor.get_value()

    def set_error(self, errors: Sequence[ListValidationError]) -> None:
        self.editor.set_error(errors)

    def focus(self) -> None:
        self.editor.focus()

    def add_item(self) -> None:
        """Append a default item, as if the last '+' button was clicked."""
        self.editor.request_insert_at(len(self.editor))
