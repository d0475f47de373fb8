"""
PyQt6 list editor widgets.

Qt implementations of the renderer contracts: item frames, '+' insertion
buttons, child blocks, and the hosting ListEditorWidget.
"""

from .child_blocks import (
    PyQtWidgetMeta,
    TextChildBlock,
    IntegerChildBlock,
    TextBlockDefinition,
    IntegerBlockDefinition,
    format_error,
)
from .item_frame import ItemFrame, InsertButton
from .qt_renderer import QtSequenceRenderer
from .list_editor_widget import ListEditorWidget

__all__ = [
    "PyQtWidgetMeta",
    "TextChildBlock",
    "IntegerChildBlock",
    "TextBlockDefinition",
    "IntegerBlockDefinition",
    "format_error",
    "ItemFrame",
    "InsertButton",
    "QtSequenceRenderer",
    "ListEditorWidget",
]
