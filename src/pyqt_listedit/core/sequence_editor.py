"""
Sequence editor: state core of a reorderable list editor.

Owns two co-indexed collections:

    insertion_points: [ins 0, ins 1, ..., ins n]    (n + 1 entries)
    items:            [item 0, ..., item n-1]       (n entries)

Insertion point i sits immediately before item i. Every public operation
leaves both collections contiguously indexed and leaves the move affordances
consistent with position (first item cannot move up, last cannot move down).
"""

import copy
import logging
from typing import Any, Callable, Iterable, List, Optional, Sequence

from pyqt_listedit.core.exceptions import ErrorRoutingError, InvalidIndexError, UnknownIntentError
from pyqt_listedit.core.insertion_point import InsertionPoint
from pyqt_listedit.core.intents import (
    DeleteRequested, DuplicateRequested, InsertRequested, ListIntent, MoveRequested,
)
from pyqt_listedit.core.item_factory import ItemFactory, ListItemFactory
from pyqt_listedit.core.item_handle import ItemHandle
from pyqt_listedit.core.validation import ListValidationError
from pyqt_listedit.protocols.list_block import ListBlockDefinition
from pyqt_listedit.protocols.list_config import ERROR_POLICY_IGNORE, get_list_editor_config
from pyqt_listedit.protocols.widget_protocols import ChildBlockDefinition, SequenceRenderer

logger = logging.getLogger(__name__)


class SequenceEditor:
    """
    Insert/delete/duplicate/move/serialize for a flat list of child blocks.

    Structural mutations come from two directions: the host calling the
    public methods, and views emitting intents that arrive through dispatch().
    Either way this class is the single writer of both collections.
    """

    def __init__(self, definition: ListBlockDefinition, renderer: SequenceRenderer, prefix: str,
                 initial_state: Optional[Sequence[Any]] = None,
                 initial_error: Optional[Sequence[ListValidationError]] = None,
                 item_factory: Optional[ItemFactory] = None,
                 on_change: Optional[Callable[[], None]] = None):
        """
        Initialize the sequence editor.

        Args:
            definition: List definition (child type, default child state, meta)
            renderer: Renderer that creates and places views
            prefix: Form-field prefix; item prefixes are "<prefix>-<id>"
            initial_state: Child states to load
            initial_error: Validation errors applied right after loading
            item_factory: Strategy that builds items and insertion points
            on_change: Called after every structural mutation
        """
        self.definition = definition
        self.renderer = renderer
        self.prefix = prefix
        self.item_factory = item_factory or ListItemFactory()
        self.on_change = on_change

        self.items: List[ItemHandle] = []
        self.insertion_points: List[InsertionPoint] = []
        self.next_item_id = 0

        config = get_list_editor_config()
        if config.show_help_text and definition.meta.help_text:
            self.renderer.set_help_text(definition.meta.help_text, definition.meta.help_icon)

        self.set_state(initial_state or [])

        if initial_error is not None:
            self.set_error(initial_error)

        logger.debug(f"Sequence editor '{prefix}' initialized with {len(self.items)} items")

    # ========== QUERIES ==========

    def __len__(self) -> int:
        return len(self.items)

    @property
    def count(self) -> int:
        """Number of ids minted so far (the '<prefix>-count' form value)."""
        return self.next_item_id

    def get_state(self) -> List[Any]:
        return [item.get_state() for item in self.items]

    def get_value(self) -> List[Any]:
        return [item.get_value() for item in self.items]

    # ========== LOAD / RESET ==========

    def clear(self) -> None:
        """Drop every item and reset to a single insertion point."""
        # Old handles must stop emitting before their views are gone
        for item in self.items:
            item.mark_deleted(animate=False)
        for point in self.insertion_points:
            point.delete()
        self.renderer.clear()
        self.items = []
        self.next_item_id = 0
        self.renderer.set_count(0)
        self.insertion_points = [self._create_insertion_point(0)]

    def set_state(self, values: Iterable[Any]) -> None:
        """Replace the whole list. Every item gets a fresh id."""
        self.clear()
        for value in values:
            self._insert(self.definition.child_block_def, value, len(self.items), animate=False)
        self._changed()

    # ========== MUTATIONS ==========

    def insert(self, value: Any, index: int, animate: bool = False) -> ItemHandle:
        """
        Insert a new item with the given state at `index` (0..n).

        The insertion point already at `index` stays in place, immediately
        before the new item; a new insertion point is created right after it.
        """
        self._check_index(index, len(self.items), "insert")
        handle = self._insert(self.definition.child_block_def, value, index, animate=animate)
        self._changed()
        return handle

    def request_insert_at(self, index: int, intent: Optional[InsertRequested] = None) -> ItemHandle:
        """Insert the default child at `index` and focus it (user 'add' action)."""
        self._check_index(index, len(self.items), "insert")
        child_def, initial_state = self.item_factory.child_data_for_insertion(
            self.definition, intent or InsertRequested(index))
        handle = self._insert(child_def, copy.deepcopy(initial_state), index,
                              animate=get_list_editor_config().animate_user_actions)
        self._changed()
        handle.focus()
        return handle

    def duplicate(self, index: int) -> ItemHandle:
        """Insert a copy of item `index` right after it, with a new id, and focus it."""
        self._check_index(index, len(self.items) - 1, "duplicate")
        source = self.items[index]
        handle = self._insert(self.definition.child_block_def, copy.deepcopy(source.get_state()), index + 1,
                              animate=get_list_editor_config().animate_user_actions)
        self._changed()
        handle.focus()
        return handle

    def delete(self, index: int, animate: Optional[bool] = None) -> None:
        """Remove item `index` and the insertion point immediately before it."""
        self._check_index(index, len(self.items) - 1, "delete")
        if animate is None:
            animate = get_list_editor_config().animate_user_actions

        removed = self.items.pop(index)
        removed_point = self.insertion_points.pop(index)
        removed.mark_deleted(animate=animate)
        removed_point.delete()

        for i in range(index, len(self.items)):
            self.items[i].set_index(i)
        for i in range(index, len(self.insertion_points)):
            self.insertion_points[i].set_index(i)

        if self.items:
            if index == 0:
                # The new first item cannot move up
                self.items[0].disable_move_up()
            if index == len(self.items):
                # The new last item cannot move down
                self.items[-1].disable_move_down()

        logger.debug(f"Deleted item {removed.id} at index {index} from '{self.prefix}'")
        self._changed()

    def move(self, old_index: int, new_index: int) -> None:
        """Move item `old_index` (with the insertion point before it) to `new_index`."""
        max_index = len(self.items) - 1
        self._check_index(old_index, max_index, "move")
        self._check_index(new_index, max_index, "move")
        if old_index == new_index:
            return

        item = self.items.pop(old_index)
        point = self.insertion_points.pop(old_index)
        self.items.insert(new_index, item)
        self.insertion_points.insert(new_index, point)

        low, high = min(old_index, new_index), max(old_index, new_index)
        for i in range(low, high + 1):
            self.insertion_points[i].set_index(i)
            self.items[i].set_index(i)

        # Only positions 0 and n-1 carry special affordances, so besides the
        # moved item only the occupants of the extremes and their inner
        # neighbours can have changed.
        self._sync_affordances(0, 1, max_index - 1, max_index, old_index, new_index)

        self.renderer.reorder(self._views_in_order())
        logger.debug(f"Moved item {item.id} in '{self.prefix}' from {old_index} to {new_index}")
        self._changed()

    def dispatch(self, intent: ListIntent) -> None:
        """Single handler for intents emitted by item handles and insertion points."""
        if isinstance(intent, InsertRequested):
            self.request_insert_at(intent.index, intent)
        elif isinstance(intent, DeleteRequested):
            self.delete(intent.index)
        elif isinstance(intent, DuplicateRequested):
            self.duplicate(intent.index)
        elif isinstance(intent, MoveRequested):
            self.move(intent.index, intent.target_index)
        else:
            raise UnknownIntentError(f"Not a list intent: {intent!r}")

    # ========== ERRORS / FOCUS ==========

    def set_error(self, errors: Sequence[ListValidationError]) -> None:
        """
        Route per-item error payloads to their items.

        A list value gets at most one aggregate error; any other number of
        errors is ignored. Indices are checked before anything is routed.
        """
        if len(errors) != 1:
            logger.debug(f"Ignoring error report of length {len(errors)} for '{self.prefix}'")
            return
        item_errors = errors[0].item_errors

        out_of_range = [i for i in item_errors if not 0 <= i < len(self.items)]
        if out_of_range:
            if get_list_editor_config().error_index_policy == ERROR_POLICY_IGNORE:
                logger.warning(f"Dropping errors for missing items {out_of_range} in '{self.prefix}'")
            else:
                raise ErrorRoutingError(
                    f"Errors reported for items {out_of_range} but '{self.prefix}' has {len(self.items)} items")

        for index, payload in item_errors.items():
            if 0 <= index < len(self.items):
                self.items[index].set_error(payload)

    def focus(self) -> None:
        if self.items:
            self.items[0].focus()

    # ========== INTERNALS ==========

    def _insert(self, child_def: ChildBlockDefinition, initial_state: Any, index: int,
                animate: bool = False) -> ItemHandle:
        item_id = self.next_item_id
        self.next_item_id += 1

        # Shuffle up indexes of everything above the insertion position
        for i in range(index, len(self.items)):
            self.items[i].set_index(i + 1)
        for i in range(index + 1, len(self.insertion_points)):
            self.insertion_points[i].set_index(i + 1)

        handle = self.item_factory.create_item(
            self.renderer, child_def, initial_state, index, item_id,
            f"{self.prefix}-{item_id}", on_intent=self.dispatch)
        self.items.insert(index, handle)
        point = self._create_insertion_point(index + 1)
        self.insertion_points.insert(index + 1, point)

        self.renderer.set_count(self.next_item_id)
        self._sync_affordances(index - 1, index, index + 1)

        logger.debug(f"Inserted item {item_id} at index {index} in '{self.prefix}' (animate={animate})")
        return handle

    def _create_insertion_point(self, index: int) -> InsertionPoint:
        return self.item_factory.create_insertion_point(self.renderer, index, self.dispatch)

    def _sync_affordances(self, *positions: int) -> None:
        last = len(self.items) - 1
        for i in set(positions):
            if 0 <= i <= last:
                item = self.items[i]
                if i > 0:
                    item.enable_move_up()
                else:
                    item.disable_move_up()
                if i < last:
                    item.enable_move_down()
                else:
                    item.disable_move_down()

    def _views_in_order(self) -> list:
        views = []
        for point, item in zip(self.insertion_points, self.items):
            views.append(point.view)
            views.append(item.view)
        views.append(self.insertion_points[-1].view)
        return views

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()

    @staticmethod
    def _check_index(index: int, upper: int, operation: str) -> None:
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index <= upper:
            raise InvalidIndexError(f"{operation}: index {index!r} outside [0, {upper}]")
