# -*- coding: utf-8 -*-
"""
Project Details Step - Step 1 of the Project Intake Wizard.

Collects the project name and a free-text description.
"""

from PyQt5.QtWidgets import QLabel, QLineEdit, QTextEdit

from models.intake import FormData
from services.translation_manager import tr
from ui.design_system import ComponentStyles
from ui.font_utils import create_font, FontManager
from ui.wizards.framework import BaseStep


class ProjectDetailsStep(BaseStep):
    """Step 1: project name and description."""

    def setup_ui(self):
        name_label = QLabel(tr("field.project_name"))
        name_label.setFont(create_font(size=FontManager.SIZE_BODY, weight=FontManager.WEIGHT_MEDIUM))
        name_label.setStyleSheet(ComponentStyles.FIELD_LABEL)
        self.main_layout.addWidget(name_label)

        self.project_name_input = QLineEdit()
        self.project_name_input.setPlaceholderText(tr("field.project_name.placeholder"))
        self.project_name_input.setStyleSheet(ComponentStyles.TEXT_INPUT)
        self.project_name_input.textChanged.connect(
            lambda text: self.emit_field_changed("project_name", text)
        )
        self.main_layout.addWidget(self.project_name_input)

        description_label = QLabel(tr("field.description"))
        description_label.setFont(create_font(size=FontManager.SIZE_BODY, weight=FontManager.WEIGHT_MEDIUM))
        description_label.setStyleSheet(ComponentStyles.FIELD_LABEL)
        self.main_layout.addWidget(description_label)

        self.description_input = QTextEdit()
        self.description_input.setPlaceholderText(tr("field.description.placeholder"))
        self.description_input.setAcceptRichText(False)
        self.description_input.setFixedHeight(120)
        self.description_input.setStyleSheet(ComponentStyles.TEXT_INPUT)
        self.description_input.textChanged.connect(
            lambda: self.emit_field_changed("description", self.description_input.toPlainText())
        )
        self.main_layout.addWidget(self.description_input)

    def _apply_data(self, form_data: FormData):
        # Only touch widgets whose text differs, keeping the cursor in place
        if self.project_name_input.text() != form_data.project_name:
            self.project_name_input.setText(form_data.project_name)
        if self.description_input.toPlainText() != form_data.description:
            self.description_input.setPlainText(form_data.description)

    def set_editable(self, editable: bool):
        self.project_name_input.setEnabled(editable)
        self.description_input.setEnabled(editable)
