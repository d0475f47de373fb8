"""List block definition: the child type and presentation metadata of a list."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, TYPE_CHECKING

from .widget_protocols import ChildBlockDefinition, SequenceRenderer

if TYPE_CHECKING:
    from pyqt_listedit.core.sequence_editor import SequenceEditor
    from pyqt_listedit.core.validation import ListValidationError


@dataclass
class ListBlockMeta:
    """
    Presentation metadata for a list.

    Attributes:
        strings: Per-list overrides for button labels (see ListEditorConfig.strings)
        help_text: Help text shown above the list (left unescaped)
        help_icon: Optional icon markup shown next to the help text
        classname: Extra CSS/QSS class name for the list container
    """

    strings: Dict[str, str] = field(default_factory=dict)
    help_text: Optional[str] = None
    help_icon: Optional[str] = None
    classname: str = ""


@dataclass
class ListBlockDefinition:
    """
    Definition of a list of homogeneous child blocks.

    Attributes:
        name: Name of the list type
        child_block_def: Definition used to build every child
        initial_child_state: State given to children created by an 'insert' action
        meta: Presentation metadata
    """

    name: str
    child_block_def: ChildBlockDefinition
    initial_child_state: Any = None
    meta: ListBlockMeta = field(default_factory=ListBlockMeta)

    def render(self, renderer: SequenceRenderer, prefix: str,
               initial_state: Optional[Sequence[Any]] = None,
               initial_error: Optional[Sequence["ListValidationError"]] = None,
               **kwargs) -> "SequenceEditor":
        """
        Build a live sequence editor for this definition.

        Args:
            renderer: Renderer that places item and insertion views
            prefix: Form-field prefix for the list (items get "<prefix>-<id>")
            initial_state: Child states to load
            initial_error: Validation errors to apply right after loading
            **kwargs: Passed through to SequenceEditor (item_factory, on_change)
        """
        from pyqt_listedit.core.sequence_editor import SequenceEditor
        return SequenceEditor(self, renderer, prefix, initial_state, initial_error, **kwargs)
