"""
Collaborator contracts and configuration.

ABC-based contracts for everything the sequence editor does not own
(children, views, renderer), the list definition, and the global
configuration hook. Nothing here imports Qt.
"""

from .widget_protocols import (
    ChildBlock,
    ChildBlockDefinition,
    ItemView,
    InsertionView,
    SequenceRenderer,
)
from .list_config import (
    ListEditorConfig,
    DEFAULT_STRINGS,
    ERROR_POLICY_RAISE,
    ERROR_POLICY_IGNORE,
    set_list_editor_config,
    get_list_editor_config,
)
from .list_block import ListBlockDefinition, ListBlockMeta

__all__ = [
    "ChildBlock",
    "ChildBlockDefinition",
    "ItemView",
    "InsertionView",
    "SequenceRenderer",
    "ListEditorConfig",
    "DEFAULT_STRINGS",
    "ERROR_POLICY_RAISE",
    "ERROR_POLICY_IGNORE",
    "set_list_editor_config",
    "get_list_editor_config",
    "ListBlockDefinition",
    "ListBlockMeta",
]
