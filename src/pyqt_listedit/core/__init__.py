"""
Core list state.

Pure Python state management for reorderable lists, with zero Qt imports.
The sequence editor, its item handles and insertion points, the intents they
exchange, and a headless renderer for running without a display.
"""

from .exceptions import SequenceEditorError, InvalidIndexError, ErrorRoutingError, UnknownIntentError
from .intents import (
    Direction,
    InsertRequested,
    DeleteRequested,
    MoveRequested,
    DuplicateRequested,
    ListIntent,
)
from .validation import ListValidationError
from .item_handle import ItemHandle
from .insertion_point import InsertionPoint
from .item_factory import ItemFactory, ListItemFactory, item_slot, insertion_slot
from .sequence_editor import SequenceEditor
from .headless_renderer import (
    HeadlessRenderer,
    HeadlessItemView,
    HeadlessInsertionView,
    ValueChildBlock,
    ValueBlockDefinition,
)

__all__ = [
    "SequenceEditorError",
    "InvalidIndexError",
    "ErrorRoutingError",
    "UnknownIntentError",
    "Direction",
    "InsertRequested",
    "DeleteRequested",
    "MoveRequested",
    "DuplicateRequested",
    "ListIntent",
    "ListValidationError",
    "ItemHandle",
    "InsertionPoint",
    "ItemFactory",
    "ListItemFactory",
    "item_slot",
    "insertion_slot",
    "SequenceEditor",
    "HeadlessRenderer",
    "HeadlessItemView",
    "HeadlessInsertionView",
    "ValueChildBlock",
    "ValueBlockDefinition",
]
