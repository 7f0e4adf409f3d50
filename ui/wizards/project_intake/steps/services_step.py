# -*- coding: utf-8 -*-
"""
Services Step - Step 2 of the Project Intake Wizard.
"""

from typing import Dict

from PyQt5.QtWidgets import QCheckBox, QGridLayout, QLabel

from models.intake import FormData, SERVICE_OPTIONS
from services.translation_manager import tr
from ui.design_system import ComponentStyles, Spacing
from ui.font_utils import create_font, FontManager
from ui.wizards.framework import BaseStep


class ServicesStep(BaseStep):
    """Step 2: pick one or more services (two-column checkbox grid)."""

    COLUMNS = 2

    def setup_ui(self):
        label = QLabel(tr("field.services"))
        label.setFont(create_font(size=FontManager.SIZE_BODY, weight=FontManager.WEIGHT_MEDIUM))
        label.setStyleSheet(ComponentStyles.FIELD_LABEL)
        self.main_layout.addWidget(label)

        grid = QGridLayout()
        grid.setSpacing(Spacing.MD)
        self.checkboxes: Dict[str, QCheckBox] = {}
        for position, service in enumerate(SERVICE_OPTIONS):
            checkbox = QCheckBox(service)
            checkbox.setStyleSheet(ComponentStyles.SERVICE_OPTION)
            checkbox.toggled.connect(self._on_toggled)
            self.checkboxes[service] = checkbox
            grid.addWidget(checkbox, position // self.COLUMNS, position % self.COLUMNS)
        self.main_layout.addLayout(grid)

    def _on_toggled(self, _checked: bool):
        selected = {name for name, box in self.checkboxes.items() if box.isChecked()}
        self.emit_field_changed("services", selected)

    def _apply_data(self, form_data: FormData):
        for name, box in self.checkboxes.items():
            box.setChecked(name in form_data.services)

    def set_editable(self, editable: bool):
        for box in self.checkboxes.values():
            box.setEnabled(editable)
