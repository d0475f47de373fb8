"""
pyqt-listedit: reorderable list editing for PyQt6.

State core for editors that let a user insert, delete, duplicate and reorder
homogeneous child items, plus a PyQt6 rendering of it.

Architecture:
- Tier 1 (Core): Pure Python sequence state, zero Qt imports
- Tier 2 (Protocols): Child/view/renderer ABCs, list definition, config
- Tier 3 (Theming): Color scheme and stylesheet generation
- Tier 4 (Widgets): PyQt6 renderer and ListEditorWidget

Key Features:
- Two co-indexed collections (items, insertion points) kept consistent
- Move affordances always in sync with position
- Stable per-item ids for form-field naming across reorderings
- Validation errors routed to the right item
"""

__version__ = "0.1.0"

from pyqt_listedit.core import (
    SequenceEditor,
    ItemHandle,
    InsertionPoint,
    ListValidationError,
    HeadlessRenderer,
)
from pyqt_listedit.protocols import ListBlockDefinition, ListBlockMeta, ListEditorConfig

# Qt widgets are not imported here so the core stays usable without a display
__all__ = [
    "__version__",
    "SequenceEditor",
    "ItemHandle",
    "InsertionPoint",
    "ListValidationError",
    "HeadlessRenderer",
    "ListBlockDefinition",
    "ListBlockMeta",
    "ListEditorConfig",
]
