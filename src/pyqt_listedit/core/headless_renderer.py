"""
Headless renderer and child blocks.

Keep every view in plain Python lists so the sequence editor can run without
a display: server-side form handling, scripted edits, and tests. Each view
records what it was told to show, which makes the renderer contract easy to
observe.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence

from pyqt_listedit.protocols.widget_protocols import (
    ChildBlock, ChildBlockDefinition, InsertionView, ItemView, SequenceRenderer,
)


class HeadlessItemView(ItemView):

    def __init__(self, renderer: "HeadlessRenderer", index: int, child: ChildBlock):
        self._renderer = renderer
        self.index = index
        self.child = child
        self.move_up_enabled = False
        self.move_down_enabled = False
        self.deleted = False
        self.animated_delete = False
        self._actions = {}

    def set_index(self, index: int) -> None:
        self.index = index

    def set_move_up_enabled(self, enabled: bool) -> None:
        self.move_up_enabled = enabled

    def set_move_down_enabled(self, enabled: bool) -> None:
        self.move_down_enabled = enabled

    def mark_deleted(self, animate: bool = False) -> None:
        self.deleted = True
        self.animated_delete = animate
        self._renderer.discard(self)

    def connect_actions(self, on_move_up, on_move_down, on_duplicate, on_delete) -> None:
        self._actions = {
            "move_up": on_move_up,
            "move_down": on_move_down,
            "duplicate": on_duplicate,
            "delete": on_delete,
        }

    def click(self, action: str) -> None:
        """Simulate the user pressing one of the item's controls."""
        self._actions[action]()


class HeadlessInsertionView(InsertionView):

    def __init__(self, renderer: "HeadlessRenderer", index: int):
        self._renderer = renderer
        self.index = index
        self.removed = False
        self._on_insert: Optional[Callable[[], None]] = None

    def set_index(self, index: int) -> None:
        self.index = index

    def remove(self) -> None:
        self.removed = True
        self._renderer.discard(self)

    def connect_insert(self, callback: Callable[[], None]) -> None:
        self._on_insert = callback

    def click(self) -> None:
        """Simulate the user pressing the 'add' control."""
        if self._on_insert is not None:
            self._on_insert()


class HeadlessRenderer(SequenceRenderer):
    """Renderer that keeps views in interleaved visual order in `self.views`."""

    def __init__(self):
        self.views: List[Any] = []
        self.count = 0
        self.help_text: Optional[str] = None

    def clear(self) -> None:
        self.views = []

    def create_insertion_view(self, slot: int, index: int) -> HeadlessInsertionView:
        view = HeadlessInsertionView(self, index)
        self.views.insert(slot, view)
        return view

    def create_item_view(self, slot: int, index: int, child: ChildBlock) -> HeadlessItemView:
        view = HeadlessItemView(self, index, child)
        self.views.insert(slot, view)
        return view

    def reorder(self, views: Sequence[Any]) -> None:
        self.views = list(views)

    def set_count(self, count: int) -> None:
        self.count = count

    def set_help_text(self, help_text, help_icon=None) -> None:
        self.help_text = help_text

    def discard(self, view: Any) -> None:
        if view in self.views:
            self.views.remove(view)


@dataclass
class ValueChildBlock(ChildBlock):
    """
    Child block holding a plain value.

    State is deep-copied in and out so two children never share mutable
    state. An optional `to_value` transform produces the external value.
    """

    prefix: str
    state: Any = None
    to_value: Optional[Callable[[Any], Any]] = None
    error: Any = None
    focused: bool = False

    def __post_init__(self):
        self.state = copy.deepcopy(self.state)

    def get_state(self) -> Any:
        return copy.deepcopy(self.state)

    def set_state(self, state: Any) -> None:
        self.state = copy.deepcopy(state)

    def get_value(self) -> Any:
        if self.to_value is not None:
            return self.to_value(self.state)
        return self.get_state()

    def set_error(self, error: Any) -> None:
        self.error = error

    def focus(self) -> None:
        self.focused = True


@dataclass
class ValueBlockDefinition(ChildBlockDefinition):
    """Definition producing ValueChildBlock children."""

    name: str = "value"
    to_value: Optional[Callable[[Any], Any]] = None
    rendered: List[ValueChildBlock] = field(default_factory=list, repr=False)

    def render(self, prefix: str, initial_state: Any) -> ValueChildBlock:
        child = ValueChildBlock(prefix=prefix, state=initial_state, to_value=self.to_value)
        self.rendered.append(child)
        return child
