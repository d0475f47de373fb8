"""
ABC contracts for the collaborators of the sequence editor.

The sequence editor owns list structure only. Everything it does not own is
reached through the contracts below:
- ChildBlock / ChildBlockDefinition: the editable unit inside one list item
- ItemView / InsertionView: the visual affordances for items and gaps
- SequenceRenderer: creates, orders and clears those views

Design Philosophy:
- Explicit inheritance over duck typing
- Fail-loud over fail-silent
- Views are told what to show, they never decide list structure
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence


class ChildBlock(ABC):
    """
    ABC for the editable unit wrapped by one list item.

    A child owns its own state and its own error display. The list editor
    only moves children around and asks them for their state.
    """

    @abstractmethod
    def get_state(self) -> Any:
        """
        Get the serializable state of the child.

        Returns:
            State that can be passed back to set_state() or to a new child
        """
        pass

    @abstractmethod
    def set_state(self, state: Any) -> None:
        """
        Replace the child's state.

        Args:
            state: State previously returned by get_state()
        """
        pass

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the externally facing value of the child.

        Returns:
            Value handed to validators and backends. May differ from state.
        """
        pass

    @abstractmethod
    def set_error(self, error: Any) -> None:
        """
        Display a validation error payload. None clears the error.

        Args:
            error: Opaque payload produced by the external validator
        """
        pass

    @abstractmethod
    def focus(self) -> None:
        """Move input focus into the child."""
        pass


class ChildBlockDefinition(ABC):
    """ABC for a child type: knows how to build a ChildBlock."""

    name: str = ""

    @abstractmethod
    def render(self, prefix: str, initial_state: Any) -> ChildBlock:
        """
        Build a child block.

        Args:
            prefix: Form-field prefix unique to the item (e.g. "tags-3")
            initial_state: State the child starts with

        Returns:
            A new ChildBlock
        """
        pass


class ItemView(ABC):
    """
    ABC for the visual frame around one list item.

    Shows the position, the move/duplicate/delete controls and hosts the
    child's own presentation.
    """

    @abstractmethod
    def set_index(self, index: int) -> None:
        """Show the item's current position."""
        pass

    @abstractmethod
    def set_move_up_enabled(self, enabled: bool) -> None:
        pass

    @abstractmethod
    def set_move_down_enabled(self, enabled: bool) -> None:
        pass

    @abstractmethod
    def mark_deleted(self, animate: bool = False) -> None:
        """
        Remove the item from display.

        Args:
            animate: Whether the removal was user-triggered and may be animated
        """
        pass

    @abstractmethod
    def connect_actions(self, on_move_up: Callable[[], None], on_move_down: Callable[[], None],
                        on_duplicate: Callable[[], None], on_delete: Callable[[], None]) -> None:
        """
        Wire the item's controls to the owning handle.

        Called exactly once, right after the view is created.
        """
        pass


class InsertionView(ABC):
    """ABC for the visual affordance of a gap where an item can be inserted."""

    @abstractmethod
    def set_index(self, index: int) -> None:
        pass

    @abstractmethod
    def remove(self) -> None:
        """Remove the affordance from display."""
        pass

    @abstractmethod
    def connect_insert(self, callback: Callable[[], None]) -> None:
        """Wire the 'insert here' control. Called exactly once."""
        pass


class SequenceRenderer(ABC):
    """
    ABC for the component that places item and insertion views.

    Views are addressed by slot in the interleaved visual order
    [insertion 0, item 0, insertion 1, item 1, ..., insertion n]:
    insertion point i lives at slot 2*i and item i at slot 2*i + 1.
    """

    @abstractmethod
    def clear(self) -> None:
        """Remove every view."""
        pass

    @abstractmethod
    def create_insertion_view(self, slot: int, index: int) -> InsertionView:
        """
        Create an insertion affordance at the given slot.

        Args:
            slot: Position in the interleaved visual order
            index: Index of the insertion point
        """
        pass

    @abstractmethod
    def create_item_view(self, slot: int, index: int, child: ChildBlock) -> ItemView:
        """
        Create an item frame hosting the given child at the given slot.

        Args:
            slot: Position in the interleaved visual order
            index: Index of the item
            child: The child block the frame hosts
        """
        pass

    @abstractmethod
    def reorder(self, views: Sequence[Any]) -> None:
        """
        Re-place existing views so they appear in the given order.

        Args:
            views: Every live view in interleaved visual order
        """
        pass

    def set_count(self, count: int) -> None:
        """Publish the item counter (e.g. a hidden '<prefix>-count' field)."""
        pass

    def set_help_text(self, help_text: Optional[str], help_icon: Optional[str] = None) -> None:
        """Display list-level help text. Renderers without help display ignore it."""
        pass
