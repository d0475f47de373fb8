"""Insertion point: a gap between items where a new item can be created."""

from typing import Callable, Optional

from pyqt_listedit.core.intents import InsertRequested
from pyqt_listedit.protocols.widget_protocols import InsertionView


class InsertionPoint:
    """
    Represents a position where a new list item can be inserted.

    Insertion point i sits immediately before item i; the last one sits after
    the last item. The insert callback is wired once by the owning editor.
    """

    def __init__(self, view: InsertionView, index: int,
                 on_request_insert: Optional[Callable[[InsertRequested], None]] = None):
        self.view = view
        self._index = index
        self._on_request_insert = on_request_insert
        self.deleted = False

        self.view.set_index(index)
        self.view.connect_insert(self.request_insert)

    @property
    def index(self) -> int:
        return self._index

    def get_index(self) -> int:
        return self._index

    def set_index(self, index: int) -> None:
        self._index = index
        self.view.set_index(index)

    def request_insert(self) -> None:
        """Called by the view when the user asks for an item here."""
        if self._on_request_insert is not None and not self.deleted:
            self._on_request_insert(InsertRequested(self._index))

    def delete(self) -> None:
        self.deleted = True
        self.view.remove()

    def __repr__(self) -> str:
        return f"InsertionPoint(index={self._index})"
