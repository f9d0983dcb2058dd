#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
NoteStack Color Configuration
Centralized color scheme for the NoteStack GUI application.
"""


class NoteStackColors:
    """Color constants for the NoteStack theme."""

    # Primary Brand Colors
    ACCENT = "#FF6B35"              # Main accent orange
    ACCENT_PRESSED = "#E55A2B"
    ERROR = "#FF4500"               # Error text and destructive buttons

    # Background Colors
    MAIN_BACKGROUND = "#2B3A52"     # Desaturated blue main background
    PANEL_BACKGROUND = "#34435A"    # Blue-gray for panels

    # UI Element Colors
    SOFT_ORANGE = "#CC8B66"         # Soft orange for borders
    SOFT_ORANGE_HOVER = "#E6A085"   # Hover state for soft orange

    # Text Colors
    PRIMARY_TEXT = "#FFFFFF"
    SECONDARY_TEXT = "#CCCCCC"

    @classmethod
    def get_stylesheet(cls, element_type="default"):
        """Get common stylesheets for different element types."""
        if element_type == "main_background":
            return f"background-color: {cls.MAIN_BACKGROUND};"

        elif element_type == "panel":
            return f"background-color: {cls.PANEL_BACKGROUND};"

        elif element_type == "input_field":
            return f"""
                QLineEdit, QTextEdit {{
                    border: 1px solid {cls.SOFT_ORANGE};
                    border-radius: 5px;
                    padding: 6px;
                    font-size: 14px;
                    background-color: {cls.PANEL_BACKGROUND};
                    color: {cls.PRIMARY_TEXT};
                }}
                QLineEdit:focus, QTextEdit:focus {{
                    border-color: {cls.ACCENT};
                }}
            """

        elif element_type == "input_field_error":
            return f"""
                QLineEdit, QTextEdit {{
                    border: 2px solid {cls.ERROR};
                    border-radius: 5px;
                    padding: 6px;
                    font-size: 14px;
                    background-color: {cls.PANEL_BACKGROUND};
                    color: {cls.PRIMARY_TEXT};
                }}
            """

        elif element_type == "button":
            return cls._button_stylesheet(cls.ACCENT, cls.SOFT_ORANGE_HOVER)

        elif element_type == "danger_button":
            return cls._button_stylesheet(cls.ERROR, cls.ACCENT)

        elif element_type == "error_text":
            return f"color: {cls.ERROR}; font-size: 11px;"

        return ""

    @classmethod
    def _button_stylesheet(cls, background: str, hover: str) -> str:
        return f"""
            QPushButton {{
                background-color: {background};
                color: {cls.PRIMARY_TEXT};
                border: none;
                border-radius: 6px;
                padding: 8px 12px;
                font-size: 14px;
                font-weight: bold;
            }}
            QPushButton:hover {{
                background-color: {hover};
            }}
            QPushButton:pressed {{
                background-color: {cls.ACCENT_PRESSED};
            }}
            QPushButton:disabled {{
                background-color: #666666;
                color: #999999;
            }}
        """
