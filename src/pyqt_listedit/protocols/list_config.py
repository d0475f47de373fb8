"""Base configuration class for list editors.

Provides hooks for applications to customize list editor behavior.
"""

from typing import Dict, Optional
from dataclasses import dataclass, field


DEFAULT_STRINGS: Dict[str, str] = {
    "ADD": "Add",
    "MOVE_UP": "Move up",
    "MOVE_DOWN": "Move down",
    "DUPLICATE": "Duplicate",
    "DELETE": "Delete",
}

ERROR_POLICY_RAISE = "raise"
ERROR_POLICY_IGNORE = "ignore"


@dataclass
class ListEditorConfig:
    """Base configuration for list editor behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        strings: Button labels/tooltips keyed by action name
        animate_user_actions: Whether user-triggered inserts/deletes ask views to animate
        show_help_text: Whether list-level help text is displayed
        error_index_policy: What set_error does with an item index that does not exist,
            "raise" (fail fast) or "ignore" (drop the payload)
    """

    strings: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_STRINGS))
    animate_user_actions: bool = True
    show_help_text: bool = True
    error_index_policy: str = ERROR_POLICY_RAISE

    def __post_init__(self):
        if self.error_index_policy not in (ERROR_POLICY_RAISE, ERROR_POLICY_IGNORE):
            raise ValueError(f"Unknown error_index_policy: {self.error_index_policy!r}")

    def get_string(self, key: str, overrides: Optional[Dict[str, str]] = None) -> str:
        """Resolve a UI string, preferring per-list overrides."""
        if overrides and key in overrides:
            return overrides[key]
        return self.strings.get(key, DEFAULT_STRINGS.get(key, key))


# Global config instance (set by application)
_list_config: Optional[ListEditorConfig] = None


def set_list_editor_config(config: Optional[ListEditorConfig]) -> None:
    """Set the global list editor configuration.

    Args:
        config: ListEditorConfig instance, or None to restore defaults
    """
    global _list_config
    _list_config = config


def get_list_editor_config() -> ListEditorConfig:
    """Get the current list editor configuration.

    Returns:
        Current ListEditorConfig or default if not set
    """
    if _list_config is None:
        return ListEditorConfig()
    return _list_config
