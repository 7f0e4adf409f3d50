# -*- coding: utf-8 -*-
"""
Wizard Footer Component - Back on the left, Next Step / Submit on the right.
"""

from PyQt5.QtWidgets import QWidget, QHBoxLayout
from PyQt5.QtCore import pyqtSignal

from services.translation_manager import tr
from ui.components.action_button import ActionButton


class WizardFooter(QWidget):
    """
    Wizard footer component.

    The same primary button acts as "Next Step" on intermediate steps and
    as "Submit" on the last one.

    Signals:
        previous_clicked: Emitted when Back is clicked
        next_clicked: Emitted when Next Step is clicked
        submit_clicked: Emitted when Submit is clicked
    """

    # Signals
    previous_clicked = pyqtSignal()
    next_clicked = pyqtSignal()
    submit_clicked = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._is_last_step = False

        self._setup_ui()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)

        self.btn_previous = ActionButton(tr("button.back"), variant="secondary", width=96)
        self.btn_previous.clicked.connect(self.previous_clicked.emit)
        layout.addWidget(self.btn_previous)

        layout.addStretch()

        self.btn_next = ActionButton(tr("button.next"), variant="primary", width=160)
        self.btn_next.clicked.connect(self._on_primary_clicked)
        layout.addWidget(self.btn_next)

    def _on_primary_clicked(self):
        if self._is_last_step:
            self.submit_clicked.emit()
        else:
            self.next_clicked.emit()

    def set_last_step(self, is_last_step: bool, submitting: bool = False, failed: bool = False):
        """Switch the primary button between Next Step, Submit and Retry."""
        self._is_last_step = is_last_step
        if not is_last_step:
            self.btn_next.setText(tr("button.next"))
        elif submitting:
            self.btn_next.setText(tr("button.submitting"))
        elif failed:
            self.btn_next.setText(tr("button.retry"))
        else:
            self.btn_next.setText(tr("button.submit"))

    def set_next_enabled(self, enabled: bool):
        """Enable/disable the primary button."""
        self.btn_next.setEnabled(enabled)

    def set_previous_visible(self, visible: bool):
        """Back is hidden on the first step."""
        self.btn_previous.setVisible(visible)

    def set_previous_enabled(self, enabled: bool):
        self.btn_previous.setEnabled(enabled)
