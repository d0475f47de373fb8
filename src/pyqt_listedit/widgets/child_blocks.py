"""
Qt child blocks: editable units that live inside list items.

Adapters that wrap Qt input widgets to implement the ChildBlock ABC:
- QLineEdit.text() / QSpinBox.value() → .get_state()
- QLineEdit.setText() / QSpinBox.setValue() → .set_state()
- stylesheet + tooltip → .set_error()
"""

from abc import ABCMeta
from typing import Any, Optional

from PyQt6.QtWidgets import QLineEdit, QSpinBox
from PyQt6.QtGui import QWheelEvent
from PyQt6.QtCore import QObject

from pyqt_listedit.protocols import ChildBlock, ChildBlockDefinition
from pyqt_listedit.theming import ColorScheme, StyleSheetGenerator

# PyQt-specific metaclass that combines ABCMeta with Qt's metaclass
# Order matters: ABCMeta behaviour must survive Qt's wrapper type
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


def format_error(error: Any) -> str:
    """Render an opaque error payload as tooltip text."""
    if error is None:
        return ""
    if isinstance(error, (list, tuple)):
        return "\n".join(str(e) for e in error)
    if isinstance(error, dict) and "messages" in error:
        return "\n".join(str(m) for m in error["messages"])
    return str(error)


class _ErrorStylingMixin:
    """Shared error display: red border from the scheme plus a tooltip."""

    def _init_error_styling(self, color_scheme: Optional[ColorScheme]):
        self._styles = StyleSheetGenerator(color_scheme or ColorScheme())
        self.error = None
        self.setStyleSheet(self._styles.generate_input_style(has_error=False))

    def set_error(self, error: Any) -> None:
        self.error = error
        self.setToolTip(format_error(error))
        self.setStyleSheet(self._styles.generate_input_style(has_error=error is not None))

    def focus(self) -> None:
        self.setFocus()


class TextChildBlock(_ErrorStylingMixin, QLineEdit, ChildBlock, metaclass=PyQtWidgetMeta):
    """
    Single-line text child.

    State is the raw text; the external value is the stripped text, or None
    when blank.
    """

    def __init__(self, prefix: str, initial_state: Any = None, placeholder: str = "",
                 color_scheme: Optional[ColorScheme] = None, parent=None):
        super().__init__(parent)
        self.setObjectName(prefix)
        self.setPlaceholderText(placeholder)
        self._init_error_styling(color_scheme)
        self.set_state(initial_state)

    def get_state(self) -> Any:
        return self.text()

    def set_state(self, state: Any) -> None:
        self.setText("" if state is None else str(state))

    def get_value(self) -> Any:
        text = self.text().strip()
        return None if text == "" else text


class IntegerChildBlock(_ErrorStylingMixin, QSpinBox, ChildBlock, metaclass=PyQtWidgetMeta):
    """Integer child. Ignores wheel events so scrolling the list can't change values."""

    def __init__(self, prefix: str, initial_state: Any = None, minimum: int = -2147483648,
                 maximum: int = 2147483647, color_scheme: Optional[ColorScheme] = None, parent=None):
        super().__init__(parent)
        self.setObjectName(prefix)
        self.setRange(minimum, maximum)
        self._init_error_styling(color_scheme)
        self.set_state(initial_state)

    def get_state(self) -> Any:
        return self.value()

    def set_state(self, state: Any) -> None:
        self.setValue(self.minimum() if state is None else int(state))

    def get_value(self) -> Any:
        return self.value()

    def wheelEvent(self, event: QWheelEvent):
        event.ignore()


class TextBlockDefinition(ChildBlockDefinition):

    def __init__(self, name: str = "text", placeholder: str = "", color_scheme: Optional[ColorScheme] = None):
        self.name = name
        self.placeholder = placeholder
        self.color_scheme = color_scheme

    def render(self, prefix: str, initial_state: Any) -> TextChildBlock:
        return TextChildBlock(prefix, initial_state, placeholder=self.placeholder, color_scheme=self.color_scheme)


class IntegerBlockDefinition(ChildBlockDefinition):

    def __init__(self, name: str = "integer", minimum: int = -2147483648, maximum: int = 2147483647,
                 color_scheme: Optional[ColorScheme] = None):
        self.name = name
        self.minimum = minimum
        self.maximum = maximum
        self.color_scheme = color_scheme

    def render(self, prefix: str, initial_state: Any) -> IntegerChildBlock:
        return IntegerChildBlock(prefix, initial_state, minimum=self.minimum, maximum=self.maximum,
                                 color_scheme=self.color_scheme)
