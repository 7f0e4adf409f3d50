# -*- coding: utf-8 -*-
"""
Budget & Timeline Step - Step 3 of the Project Intake Wizard.
"""

from PyQt5.QtWidgets import QComboBox, QLabel

from models.intake import BUDGET_CHOICES, Budget, FormData, TIMELINE_CHOICES, Timeline
from services.translation_manager import tr
from ui.design_system import ComponentStyles
from ui.font_utils import create_font, FontManager
from ui.wizards.framework import BaseStep


class BudgetTimelineStep(BaseStep):
    """Step 3: budget range and timeline selects."""

    def setup_ui(self):
        self.budget_combo = self._add_select(
            tr("field.budget"), tr("field.budget.placeholder"), Budget.UNSET, BUDGET_CHOICES
        )
        self.budget_combo.currentIndexChanged.connect(
            lambda _index: self.emit_field_changed("budget", self.budget_combo.currentData())
        )

        self.timeline_combo = self._add_select(
            tr("field.timeline"), tr("field.timeline.placeholder"), Timeline.UNSET, TIMELINE_CHOICES
        )
        self.timeline_combo.currentIndexChanged.connect(
            lambda _index: self.emit_field_changed("timeline", self.timeline_combo.currentData())
        )

    def _add_select(self, label_text, placeholder, unset_value, choices) -> QComboBox:
        label = QLabel(label_text)
        label.setFont(create_font(size=FontManager.SIZE_BODY, weight=FontManager.WEIGHT_MEDIUM))
        label.setStyleSheet(ComponentStyles.FIELD_LABEL)
        self.main_layout.addWidget(label)

        combo = QComboBox()
        combo.setStyleSheet(ComponentStyles.TEXT_INPUT)
        combo.addItem(placeholder, unset_value.value)
        for value, display in choices:
            combo.addItem(display, value.value)
        self.main_layout.addWidget(combo)
        return combo

    def _apply_data(self, form_data: FormData):
        self.budget_combo.setCurrentIndex(max(0, self.budget_combo.findData(form_data.budget.value)))
        self.timeline_combo.setCurrentIndex(max(0, self.timeline_combo.findData(form_data.timeline.value)))

    def set_editable(self, editable: bool):
        self.budget_combo.setEnabled(editable)
        self.timeline_combo.setEnabled(editable)
