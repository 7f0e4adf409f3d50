# -*- coding: utf-8 -*-
"""
Action Button Component - Reusable button with consistent styling.

Used by the wizard footer, the host window call to action and dialogs.
"""

from PyQt5.QtWidgets import QPushButton
from PyQt5.QtCore import Qt

from ui.design_system import BorderRadius, Colors


class ActionButton(QPushButton):
    """
    Reusable action button with consistent styling.

    Variants:
    - primary: accent button - for main actions (Next Step, Submit)
    - secondary: text-only button - for secondary actions (Back)
    - ghost: icon-sized transparent button (close "×")

    Usage:
        btn = ActionButton("Next Step", variant="primary")
        btn = ActionButton("Back", variant="secondary", width=96)
    """

    VARIANTS = ("primary", "secondary", "ghost")

    def __init__(
        self,
        text: str,
        variant: str = "primary",
        width: int = 140,
        height: int = 44,
        parent=None
    ):
        """
        Initialize action button.

        Args:
            text: Button text
            variant: "primary", "secondary" or "ghost"
            width: Button width in pixels (default: 140)
            height: Button height in pixels (default: 44)
            parent: Parent widget
        """
        super().__init__(text, parent)

        self.setFixedSize(width, height)
        self.setCursor(Qt.PointingHandCursor)
        self.variant = variant
        self._apply_style(variant)

    def _apply_style(self, variant: str):
        """Apply button styling based on variant."""
        if variant == "primary":
            self.setStyleSheet(f"""
                QPushButton {{
                    background-color: {Colors.ACCENT};
                    color: white;
                    border: none;
                    padding: 8px 16px;
                    border-radius: {BorderRadius.MD}px;
                    font-size: 13px;
                }}
                QPushButton:hover {{
                    background-color: {Colors.ACCENT_HOVER};
                }}
                QPushButton:disabled {{
                    background-color: rgba(124, 58, 237, 128);
                    color: rgba(255, 255, 255, 160);
                }}
            """)
        elif variant == "secondary":
            self.setStyleSheet(f"""
                QPushButton {{
                    background-color: transparent;
                    color: {Colors.TEXT_PRIMARY};
                    border: none;
                    font-size: 13px;
                }}
                QPushButton:hover {{
                    color: {Colors.ACCENT};
                }}
                QPushButton:disabled {{
                    color: {Colors.TEXT_DISABLED};
                }}
            """)
        elif variant == "ghost":
            self.setStyleSheet(f"""
                QPushButton {{
                    background-color: transparent;
                    color: {Colors.TEXT_SECONDARY};
                    border: none;
                    font-size: 20px;
                }}
                QPushButton:hover {{
                    color: {Colors.TEXT_PRIMARY};
                }}
                QPushButton:disabled {{
                    color: {Colors.TEXT_DISABLED};
                }}
            """)
        else:
            raise ValueError(f"Invalid variant: {variant}. Must be one of {', '.join(self.VARIANTS)}")
