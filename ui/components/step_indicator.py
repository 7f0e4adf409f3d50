# -*- coding: utf-8 -*-
"""
Step Indicator Component - numbered circles with step titles.

Steps before the current one show a check mark; the current and earlier
steps use the accent color.
"""

from typing import List, Sequence

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel
from PyQt5.QtCore import Qt

from ui.design_system import Colors
from ui.font_utils import create_font, FontManager

CHECK_MARK = "✓"
CHEVRON = "›"


class StepIndicator(QWidget):
    """Horizontal progress indicator for a wizard."""

    CIRCLE_SIZE = 32

    def __init__(self, steps: Sequence, parent=None):
        """
        Args:
            steps: Step definitions (id, title, description)
            parent: Parent widget
        """
        super().__init__(parent)
        self.steps = list(steps)
        self._circles: List[QLabel] = []
        self._current_number = 1

        self._setup_ui()
        self.set_current_step(1)

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)

        for position, step in enumerate(self.steps):
            circle = QLabel(str(step.id))
            circle.setAlignment(Qt.AlignCenter)
            circle.setFixedSize(self.CIRCLE_SIZE, self.CIRCLE_SIZE)
            circle.setFont(create_font(size=FontManager.SIZE_BODY, weight=FontManager.WEIGHT_MEDIUM))
            self._circles.append(circle)
            layout.addWidget(circle)

            text_box = QVBoxLayout()
            text_box.setSpacing(2)
            title = QLabel(step.title)
            title.setFont(create_font(size=FontManager.SIZE_BODY, weight=FontManager.WEIGHT_MEDIUM))
            title.setStyleSheet(f"background: transparent; color: {Colors.TEXT_PRIMARY};")
            description = QLabel(step.description)
            description.setFont(create_font(size=FontManager.SIZE_SMALL))
            description.setStyleSheet(f"background: transparent; color: {Colors.TEXT_SECONDARY};")
            text_box.addWidget(title)
            text_box.addWidget(description)
            layout.addLayout(text_box)

            if position < len(self.steps) - 1:
                chevron = QLabel(CHEVRON)
                chevron.setStyleSheet(f"background: transparent; color: {Colors.STEP_INACTIVE};")
                layout.addWidget(chevron)

        layout.addStretch()

    def set_current_step(self, step_number: int):
        """Highlight steps up to step_number (1-based)."""
        self._current_number = step_number
        for step, circle in zip(self.steps, self._circles):
            reached = step_number >= step.id
            circle.setText(CHECK_MARK if step_number > step.id else str(step.id))
            background = Colors.STEP_ACTIVE if reached else Colors.STEP_INACTIVE
            circle.setStyleSheet(f"""
                QLabel {{
                    background-color: {background};
                    color: {Colors.TEXT_PRIMARY};
                    border-radius: {self.CIRCLE_SIZE // 2}px;
                }}
            """)

    def circle_text(self, step_number: int) -> str:
        return self._circles[step_number - 1].text()
