"""
Item handle: the editor-facing wrapper around one list element.

Holds the element's position, its stable identity and its move affordances,
and forwards state/value/error/focus to the wrapped child block.
"""

import logging
from typing import Any, Callable, Optional

from pyqt_listedit.core.intents import (
    DeleteRequested, Direction, DuplicateRequested, ListIntent, MoveRequested,
)
from pyqt_listedit.protocols.widget_protocols import ChildBlock, ItemView

logger = logging.getLogger(__name__)


class ItemHandle:
    """
    Wrapper for one item inside a sequence editor.

    The index is only ever changed by the owning editor. The id is assigned at
    creation and never changes, so hosts can key rows and form fields on it
    across reorderings. Both move affordances start disabled; the editor
    enables them once the item's position is known.
    """

    def __init__(self, child: ChildBlock, view: ItemView, index: int, item_id: int, prefix: str,
                 on_intent: Optional[Callable[[ListIntent], None]] = None):
        self.child = child
        self.view = view
        self._index = index
        self._id = item_id
        self._prefix = prefix
        self._on_intent = on_intent
        self.can_move_up = False
        self.can_move_down = False
        self.deleted = False

        self.view.set_index(index)
        self.view.set_move_up_enabled(False)
        self.view.set_move_down_enabled(False)
        self.view.connect_actions(
            on_move_up=self.request_move_up,
            on_move_down=self.request_move_down,
            on_duplicate=self.request_duplicate,
            on_delete=self.request_delete,
        )

    @property
    def id(self) -> int:
        return self._id

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def index(self) -> int:
        return self._index

    def get_index(self) -> int:
        return self._index

    def set_index(self, index: int) -> None:
        self._index = index
        self.view.set_index(index)

    # Move affordances

    def enable_move_up(self) -> None:
        self.can_move_up = True
        self.view.set_move_up_enabled(True)

    def disable_move_up(self) -> None:
        self.can_move_up = False
        self.view.set_move_up_enabled(False)

    def enable_move_down(self) -> None:
        self.can_move_down = True
        self.view.set_move_down_enabled(True)

    def disable_move_down(self) -> None:
        self.can_move_down = False
        self.view.set_move_down_enabled(False)

    # Child delegation

    def get_state(self) -> Any:
        return self.child.get_state()

    def set_state(self, state: Any) -> None:
        self.child.set_state(state)

    def get_value(self) -> Any:
        return self.child.get_value()

    def set_error(self, error: Any) -> None:
        self.child.set_error(error)

    def focus(self) -> None:
        self.child.focus()

    def mark_deleted(self, animate: bool = False) -> None:
        """Tell the view to go away. The handle is not reused after this."""
        self.deleted = True
        self.view.mark_deleted(animate=animate)

    # Intents

    def _emit(self, intent: ListIntent) -> None:
        if self.deleted:
            logger.debug(f"Ignoring {intent} from deleted item {self._id}")
            return
        if self._on_intent is not None:
            self._on_intent(intent)

    def request_move_up(self) -> None:
        if self.can_move_up:
            self._emit(MoveRequested(self._index, Direction.UP))

    def request_move_down(self) -> None:
        if self.can_move_down:
            self._emit(MoveRequested(self._index, Direction.DOWN))

    def request_duplicate(self) -> None:
        self._emit(DuplicateRequested(self._index))

    def request_delete(self) -> None:
        self._emit(DeleteRequested(self._index))

    def __repr__(self) -> str:
        return f"ItemHandle(id={self._id}, index={self._index}, prefix={self._prefix!r})"
