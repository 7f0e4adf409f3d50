# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for wizard step pages.

Step pages never mutate wizard state themselves. They report edits through
field_changed and are refreshed from the controller's state snapshots.

All step pages implement:
- setup_ui(): Create the step's widgets
- populate_data(): Show the given form data without re-emitting edits
- set_editable(): Freeze inputs while a submission is running
"""

from abc import ABCMeta, abstractmethod
from typing import Optional

from PyQt5.QtWidgets import QWidget, QVBoxLayout
from PyQt5.QtCore import pyqtSignal

from models.intake import FormData
from ui.design_system import Spacing


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizard step pages.

    Signals:
        field_changed(str, object): form field key and its new value
    """

    field_changed = pyqtSignal(str, object)

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._populating = False

        # Main layout
        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(0, 0, 0, 0)
        self.main_layout.setSpacing(Spacing.FORM_FIELD_SPACING)

        self.setup_ui()
        self.main_layout.addStretch()

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """Create the step's widgets inside self.main_layout."""
        pass

    @abstractmethod
    def _apply_data(self, form_data: FormData):
        """Copy form data into the widgets."""
        pass

    @abstractmethod
    def set_editable(self, editable: bool):
        pass

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def populate_data(self, form_data: FormData):
        """Show form data; widget change handlers stay silent meanwhile."""
        self._populating = True
        try:
            self._apply_data(form_data)
        finally:
            self._populating = False

    def emit_field_changed(self, key: str, value):
        """Report a user edit (ignored while populating)."""
        if not self._populating:
            self.field_changed.emit(key, value)
