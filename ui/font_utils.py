# -*- coding: utf-8 -*-
"""
Font Utilities
Centralized font management.

Usage:
    from ui.font_utils import create_font, FontManager

    title_font = create_font(size=FontManager.SIZE_TITLE, weight=FontManager.WEIGHT_BOLD)
    label.setFont(title_font)
"""

from typing import List, Optional

from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import QApplication


class FontManager:
    """Single source of truth for font families, sizes and weights."""

    PRIMARY_FONT_FAMILY = "Inter"
    FALLBACK_FONT_FAMILIES = ["Segoe UI", "Helvetica Neue", "Arial"]
    # Used when the interface is switched to Arabic
    ARABIC_FONT_FAMILY = "IBM Plex Sans Arabic"

    # Default sizes (in points)
    SIZE_SMALL = 8
    SIZE_BODY = 10
    SIZE_SUBHEADING = 12
    SIZE_HEADING = 14
    SIZE_TITLE = 18
    SIZE_LARGE_TITLE = 28

    # Weights (QFont scale)
    WEIGHT_REGULAR = QFont.Normal
    WEIGHT_MEDIUM = QFont.Medium
    WEIGHT_SEMIBOLD = QFont.DemiBold
    WEIGHT_BOLD = QFont.Bold

    @staticmethod
    def families() -> List[str]:
        from services.translation_manager import is_rtl
        if is_rtl():
            return [FontManager.ARABIC_FONT_FAMILY] + FontManager.FALLBACK_FONT_FAMILIES
        return [FontManager.PRIMARY_FONT_FAMILY] + FontManager.FALLBACK_FONT_FAMILIES

    @staticmethod
    def create_font(
        size: int = SIZE_BODY,
        weight: int = WEIGHT_REGULAR,
        families: Optional[List[str]] = None
    ) -> QFont:
        """
        Create a QFont with the application families.

        Args:
            size: Font size in points (default: 10pt)
            weight: Font weight (default: QFont.Normal)
            families: Custom font family list
        """
        font = QFont()
        font.setFamilies(families or FontManager.families())
        font.setPointSize(size)
        font.setWeight(weight)
        return font

    @staticmethod
    def set_application_default():
        """Set default font for entire application (call once at startup)."""
        QApplication.setFont(FontManager.create_font())


def create_font(
    size: int = FontManager.SIZE_BODY,
    weight: int = FontManager.WEIGHT_REGULAR,
    families: Optional[List[str]] = None
) -> QFont:
    """Convenience wrapper for FontManager.create_font()."""
    return FontManager.create_font(size, weight, families)


def set_application_default_font():
    """Convenience wrapper for FontManager.set_application_default()."""
    FontManager.set_application_default()
