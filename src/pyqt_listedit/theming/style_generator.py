"""
QStyleSheet Generator for list editors.

Generates QStyleSheet strings for the list editor widgets from a ColorScheme.
"""

from .color_scheme import ColorScheme


class StyleSheetGenerator:
    """
    Generates QStyleSheet strings from ColorScheme objects.

    One method per widget role in the list editor, so widgets never
    hardcode colors.
    """

    def __init__(self, color_scheme: ColorScheme):
        """
        Initialize the style generator with a color scheme.

        Args:
            color_scheme: ColorScheme instance to use for styling
        """
        self.color_scheme = color_scheme

    def generate_container_style(self) -> str:
        """
        Generate QStyleSheet for the list container and its help text.

        Returns:
            str: QStyleSheet for the list container
        """
        cs = self.color_scheme
        return f"""
            QWidget#listContainer {{
                background-color: {cs.to_hex(cs.window_bg)};
            }}
            QLabel#listHelpText {{
                color: {cs.to_hex(cs.text_secondary)};
                font-style: italic;
                padding: 4px;
            }}
        """

    def generate_item_frame_style(self) -> str:
        """
        Generate QStyleSheet for one item frame and its control buttons.

        Returns:
            str: QStyleSheet for ItemFrame
        """
        cs = self.color_scheme
        return f"""
            ItemFrame {{
                background-color: {cs.to_hex(cs.panel_bg)};
                border: 1px solid {cs.to_hex(cs.border_color)};
                border-radius: 4px;
            }}
            QLabel {{
                color: {cs.to_hex(cs.text_secondary)};
            }}
            QPushButton {{
                background-color: {cs.to_hex(cs.button_normal_bg)};
                color: {cs.to_hex(cs.button_text)};
                border: none;
                border-radius: 3px;
                padding: 4px 8px;
            }}
            QPushButton:hover {{
                background-color: {cs.to_hex(cs.button_hover_bg)};
            }}
            QPushButton:pressed {{
                background-color: {cs.to_hex(cs.button_pressed_bg)};
            }}
            QPushButton:disabled {{
                background-color: {cs.to_hex(cs.button_disabled_bg)};
                color: {cs.to_hex(cs.button_disabled_text)};
            }}
        """

    def generate_add_button_style(self) -> str:
        cs = self.color_scheme
        return f"""
            QPushButton {{
                background-color: transparent;
                color: {cs.to_hex(cs.text_disabled)};
                border: 1px dashed {cs.to_hex(cs.border_light)};
                border-radius: 3px;
                padding: 2px;
            }}
            QPushButton:hover {{
                background-color: {cs.to_hex(cs.add_button_bg)};
                color: {cs.to_hex(cs.button_text)};
            }}
        """

    def generate_input_style(self, has_error: bool = False) -> str:
        """
        Generate QStyleSheet for a child editor input.

        Args:
            has_error: Whether the input currently shows a validation error

        Returns:
            str: QStyleSheet for QLineEdit/QSpinBox children
        """
        cs = self.color_scheme
        border = cs.status_error if has_error else cs.input_border
        focus_border = cs.status_error if has_error else cs.input_focus_border
        return f"""
            QLineEdit, QSpinBox {{
                background-color: {cs.to_hex(cs.input_bg)};
                color: {cs.to_hex(cs.input_text)};
                border: 1px solid {cs.to_hex(border)};
                border-radius: 3px;
                padding: 5px;
            }}
            QLineEdit:focus, QSpinBox:focus {{
                border: 1px solid {cs.to_hex(focus_border)};
            }}
        """
