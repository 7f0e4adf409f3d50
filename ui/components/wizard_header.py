# -*- coding: utf-8 -*-
"""
Wizard Header Component - title, "Step n of N" and a close button.
"""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QLabel
from PyQt5.QtCore import pyqtSignal

from services.translation_manager import tr
from ui.components.action_button import ActionButton
from ui.design_system import Colors
from ui.font_utils import create_font, FontManager


class WizardHeader(QWidget):
    """
    Wizard header component.

    Signals:
        close_clicked: Emitted when the close (×) button is clicked

    Usage:
        header = WizardHeader(title="Start Your Project")
        header.close_clicked.connect(controller.close)
    """

    close_clicked = pyqtSignal()

    def __init__(self, title: str, parent=None):
        """
        Initialize wizard header.

        Args:
            title: Main title text
            parent: Parent widget
        """
        super().__init__(parent)
        self.title_text = title

        self._setup_ui()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self.title_label = QLabel(self.title_text)
        self.title_label.setFont(create_font(size=FontManager.SIZE_TITLE, weight=FontManager.WEIGHT_BOLD))
        self.title_label.setStyleSheet(f"background: transparent; color: {Colors.TEXT_PRIMARY};")
        layout.addWidget(self.title_label)

        layout.addStretch()

        self.progress_label = QLabel("")
        self.progress_label.setStyleSheet(f"background: transparent; color: {Colors.TEXT_SECONDARY};")
        layout.addWidget(self.progress_label)

        self.btn_close = ActionButton("×", variant="ghost", width=32, height=32)
        self.btn_close.clicked.connect(self.close_clicked.emit)
        layout.addWidget(self.btn_close)

    def set_progress(self, current: int, total: int):
        self.progress_label.setText(tr("wizard.progress", current=current, total=total))

    def set_close_enabled(self, enabled: bool):
        """Close is disabled while a submission is running."""
        self.btn_close.setEnabled(enabled)
