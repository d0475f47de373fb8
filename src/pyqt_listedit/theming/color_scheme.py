"""
PyQt6 Color Scheme for list editors.

Centralized color management for the list editor widgets with dark/light
variants and JSON configuration.
"""

import json
import logging
from dataclasses import dataclass
from typing import Tuple, Dict, Optional
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class ColorScheme:
    """
    Color scheme for list editor widgets with semantic color names.

    Colors are RGB tuples so schemes can be compared, serialized and
    overridden field by field.
    """

    # ========== BASE UI ARCHITECTURE COLORS ==========

    window_bg: Tuple[int, int, int] = (43, 43, 43)      # #2b2b2b - List container background
    panel_bg: Tuple[int, int, int] = (30, 30, 30)       # #1e1e1e - Item frame background
    border_color: Tuple[int, int, int] = (85, 85, 85)   # #555555 - Item frame border
    border_light: Tuple[int, int, int] = (102, 102, 102) # #666666 - Secondary borders

    # ========== TEXT HIERARCHY COLORS ==========

    text_primary: Tuple[int, int, int] = (255, 255, 255)   # #ffffff - Primary text
    text_secondary: Tuple[int, int, int] = (204, 204, 204) # #cccccc - Help text, index labels
    text_accent: Tuple[int, int, int] = (0, 170, 255)      # #00aaff - Accent text/titles
    text_disabled: Tuple[int, int, int] = (102, 102, 102)  # #666666 - Disabled text

    # ========== INTERACTIVE ELEMENT COLORS ==========

    button_normal_bg: Tuple[int, int, int] = (64, 64, 64)    # #404040 - Normal button background
    button_hover_bg: Tuple[int, int, int] = (80, 80, 80)     # #505050 - Button hover state
    button_pressed_bg: Tuple[int, int, int] = (48, 48, 48)   # #303030 - Button pressed state
    button_disabled_bg: Tuple[int, int, int] = (42, 42, 42)  # #2a2a2a - Disabled move buttons
    button_text: Tuple[int, int, int] = (255, 255, 255)      # #ffffff - Button text
    button_disabled_text: Tuple[int, int, int] = (102, 102, 102) # #666666 - Disabled button text

    input_bg: Tuple[int, int, int] = (64, 64, 64)        # #404040 - Input field background
    input_border: Tuple[int, int, int] = (102, 102, 102) # #666666 - Input field border
    input_text: Tuple[int, int, int] = (255, 255, 255)   # #ffffff - Input field text
    input_focus_border: Tuple[int, int, int] = (0, 170, 255) # #00aaff - Focused input border

    # ========== STATUS COMMUNICATION COLORS ==========

    status_error: Tuple[int, int, int] = (255, 0, 0)     # #ff0000 - Item error border/text
    add_button_bg: Tuple[int, int, int] = (0, 120, 212)  # #0078d4 - "+" insertion control

    def to_hex(self, color_tuple: Tuple[int, int, int]) -> str:
        """
        Convert RGB tuple to hex color string.

        Args:
            color_tuple: RGB color tuple (r, g, b)

        Returns:
            str: Hex color string (e.g., "#ff0000")
        """
        r, g, b = color_tuple
        return f"#{r:02x}{g:02x}{b:02x}"

    @classmethod
    def create_dark_theme(cls) -> 'ColorScheme':
        """Dark theme (the default), with slightly brighter secondary text."""
        return cls(text_secondary=(220, 220, 220))

    @classmethod
    def create_light_theme(cls) -> 'ColorScheme':
        """
        Create a light theme variant with adjusted colors for light backgrounds.

        Returns:
            ColorScheme: Light theme color scheme
        """
        return cls(
            window_bg=(245, 245, 245),
            panel_bg=(255, 255, 255),
            border_color=(180, 180, 180),
            border_light=(160, 160, 160),

            text_primary=(0, 0, 0),
            text_secondary=(80, 80, 80),
            text_accent=(0, 100, 200),
            text_disabled=(160, 160, 160),

            button_normal_bg=(230, 230, 230),
            button_hover_bg=(210, 210, 210),
            button_pressed_bg=(190, 190, 190),
            button_disabled_bg=(250, 250, 250),
            button_text=(0, 0, 0),
            button_disabled_text=(160, 160, 160),

            input_bg=(255, 255, 255),
            input_border=(180, 180, 180),
            input_text=(0, 0, 0),
            input_focus_border=(0, 100, 200),

            status_error=(200, 0, 0),           # Darker red for contrast
            add_button_bg=(0, 120, 215),
        )

    @classmethod
    def load_color_scheme_from_config(cls, config_path: Optional[str] = None) -> 'ColorScheme':
        """
        Load color scheme from external configuration file.

        Unknown keys are ignored; a missing or unreadable file gives the default scheme.

        Args:
            config_path: Path to JSON config file (optional)

        Returns:
            ColorScheme: Loaded color scheme or default if file not found
        """
        if config_path and Path(config_path).exists():
            try:
                with open(config_path, 'r') as f:
                    config = json.load(f)

                scheme_kwargs = {}
                for key, value in config.items():
                    if key in cls.__dataclass_fields__ and isinstance(value, list) and len(value) == 3:
                        scheme_kwargs[key] = tuple(value)

                return cls(**scheme_kwargs)

            except (OSError, ValueError) as e:
                logger.warning(f"Failed to load color scheme from {config_path}: {e}")

        return cls()

    def get_color_dict(self) -> Dict[str, Tuple[int, int, int]]:
        """
        Get all colors as a dictionary for serialization or inspection.

        Returns:
            Dict[str, Tuple[int, int, int]]: Dictionary of color name to RGB tuple
        """
        return {name: getattr(self, name) for name in self.__dataclass_fields__}

    def save_to_json(self, config_path: str) -> None:
        """
        Save color scheme to JSON configuration file.

        Args:
            config_path: Path to save JSON config file
        """
        json_dict = {k: list(v) for k, v in self.get_color_dict().items()}
        with open(config_path, 'w') as f:
            json.dump(json_dict, f, indent=2, sort_keys=True)
        logger.info(f"Color scheme saved to {config_path}")
