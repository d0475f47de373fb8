"""
Item factory strategy.

The sequence editor never constructs items or insertion points directly. It
asks an ItemFactory, so list variants (for example lists whose insertion
points offer a menu of child types) can swap in their own construction
without touching the editor's bookkeeping.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Tuple, TYPE_CHECKING

from pyqt_listedit.core.insertion_point import InsertionPoint
from pyqt_listedit.core.intents import InsertRequested, ListIntent
from pyqt_listedit.core.item_handle import ItemHandle
from pyqt_listedit.protocols.widget_protocols import ChildBlockDefinition, SequenceRenderer

if TYPE_CHECKING:
    from pyqt_listedit.protocols.list_block import ListBlockDefinition


def item_slot(index: int) -> int:
    """Slot of item `index` in the interleaved visual order."""
    return 2 * index + 1


def insertion_slot(index: int) -> int:
    """Slot of insertion point `index` in the interleaved visual order."""
    return 2 * index


class ItemFactory(ABC):
    """Base factory: builds handles, insertion points and their views."""

    @abstractmethod
    def child_data_for_insertion(self, definition: "ListBlockDefinition",
                                 intent: Optional[InsertRequested] = None) -> Tuple[ChildBlockDefinition, Any]:
        """
        Resolve what a user-requested insertion should create.

        Args:
            definition: The list definition
            intent: The insertion request (variants may carry extra data on it)

        Returns:
            Tuple of (child block definition, initial state)
        """
        pass

    def create_item(self, renderer: SequenceRenderer, child_def: ChildBlockDefinition,
                    initial_state: Any, index: int, item_id: int, prefix: str,
                    on_intent: Callable[[ListIntent], None]) -> ItemHandle:
        child = child_def.render(prefix, initial_state)
        view = renderer.create_item_view(item_slot(index), index, child)
        return ItemHandle(child, view, index, item_id, prefix, on_intent=on_intent)

    def create_insertion_point(self, renderer: SequenceRenderer, index: int,
                               on_request_insert: Callable[[InsertRequested], None]) -> InsertionPoint:
        view = renderer.create_insertion_view(insertion_slot(index), index)
        return InsertionPoint(view, index, on_request_insert=on_request_insert)


class ListItemFactory(ItemFactory):
    """Factory for plain lists: one fixed child type, no data from the insertion point."""

    def child_data_for_insertion(self, definition, intent=None):
        return definition.child_block_def, definition.initial_child_state
