# -*- coding: utf-8 -*-
"""
Project Intake Wizard - modal dialog rendering IntakeWizardController state.

The dialog holds no wizard state of its own: every user action becomes a
controller intent, and every repaint starts from a WizardState snapshot.
Page transitions slide in from the side given by the snapshot's direction.
"""

from typing import List, Optional

from PyQt5.QtCore import QPoint, QPropertyAnimation, QEasingCurve, Qt, pyqtSignal
from PyQt5.QtWidgets import QDialog, QLabel, QStackedWidget, QVBoxLayout, QWidget

from app.config import Config
from controllers.intake_wizard_controller import IntakeWizardController
from models.intake import Direction, WizardState
from services.exceptions import ValidationException
from services.translation_manager import get_layout_direction, tr
from ui.components.step_indicator import StepIndicator
from ui.components.wizard_footer import WizardFooter
from ui.components.wizard_header import WizardHeader
from ui.design_system import Colors, ComponentStyles, Spacing
from ui.error_handler import ErrorHandler
from ui.font_utils import create_font, FontManager
from ui.wizards.framework import BaseStep
from ui.wizards.project_intake.steps import BudgetTimelineStep, ProjectDetailsStep, ServicesStep
from utils.logger import get_logger

logger = get_logger(__name__)


class SuccessPanel(QWidget):
    """Shown while the wizard waits to close after a successful submission."""

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setSpacing(Spacing.MD)
        layout.addStretch()

        icon = QLabel("✓")
        icon.setAlignment(Qt.AlignCenter)
        icon.setFont(create_font(size=FontManager.SIZE_LARGE_TITLE, weight=FontManager.WEIGHT_BOLD))
        icon.setStyleSheet(f"background: transparent; color: {Colors.SUCCESS};")
        layout.addWidget(icon)

        title = QLabel(tr("success.submitted.title"))
        title.setAlignment(Qt.AlignCenter)
        title.setFont(create_font(size=FontManager.SIZE_HEADING, weight=FontManager.WEIGHT_SEMIBOLD))
        title.setStyleSheet(f"background: transparent; color: {Colors.TEXT_PRIMARY};")
        layout.addWidget(title)

        message = QLabel(tr("success.submitted"))
        message.setAlignment(Qt.AlignCenter)
        message.setWordWrap(True)
        message.setStyleSheet(f"background: transparent; color: {Colors.TEXT_SECONDARY};")
        layout.addWidget(message)

        self.reference_label = QLabel("")
        self.reference_label.setAlignment(Qt.AlignCenter)
        self.reference_label.setStyleSheet(f"background: transparent; color: {Colors.TEXT_SECONDARY};")
        layout.addWidget(self.reference_label)

        layout.addStretch()

    def set_reference(self, reference_number: str):
        text = tr("success.reference", reference=reference_number) if reference_number else ""
        self.reference_label.setText(text)


class IntakeWizardDialog(QDialog):
    """
    "Start Your Project" wizard.

    Signals:
        step_transition(int, str): new step index and direction value,
            emitted when a slide animation starts
    """

    step_transition = pyqtSignal(int, str)

    def __init__(self, controller: IntakeWizardController, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.controller = controller
        self._shown_index = 0
        self._transition: Optional[QPropertyAnimation] = None

        self.setWindowTitle(tr("wizard.title"))
        self.setModal(True)
        self.setLayoutDirection(get_layout_direction())
        self.setMinimumSize(Config.WIZARD_WIDTH, Config.WIZARD_MIN_HEIGHT)

        self._setup_ui()

        controller.state_changed.connect(self.render_state)
        controller.dismissed.connect(self._on_dismissed)
        controller.validation_failed.connect(self._on_validation_failed)

        self.render_state(controller.get_state())

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        self.setStyleSheet(f"QDialog {{ background-color: {Colors.BACKGROUND}; }}" + ComponentStyles.DIALOG)

        outer = QVBoxLayout(self)
        outer.setContentsMargins(Spacing.LG, Spacing.LG, Spacing.LG, Spacing.LG)

        card = QWidget()
        card.setObjectName("intakeWizardCard")
        card.setAttribute(Qt.WA_StyledBackground, True)
        outer.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(Spacing.LG, Spacing.LG, Spacing.LG, Spacing.LG)
        layout.setSpacing(Spacing.XL)

        self.header = WizardHeader(tr("wizard.title"))
        self.header.close_clicked.connect(self.controller.close)
        layout.addWidget(self.header)

        self.step_indicator = StepIndicator(self.controller.steps)
        layout.addWidget(self.step_indicator)

        self.step_pages: List[BaseStep] = [
            ProjectDetailsStep(),
            ServicesStep(),
            BudgetTimelineStep(),
        ]
        self.stack = QStackedWidget()
        for page in self.step_pages:
            page.field_changed.connect(self._on_field_changed)
            self.stack.addWidget(page)
        self.success_panel = SuccessPanel()
        self.stack.addWidget(self.success_panel)
        layout.addWidget(self.stack, 1)

        self.error_label = QLabel("")
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(f"background: transparent; color: {Colors.ERROR};")
        self.error_label.hide()
        layout.addWidget(self.error_label)

        self.footer = WizardFooter()
        self.footer.previous_clicked.connect(self.controller.retreat)
        self.footer.next_clicked.connect(self.controller.advance)
        self.footer.submit_clicked.connect(self.controller.submit)
        layout.addWidget(self.footer)

    # =========================================================================
    # Rendering
    # =========================================================================

    def render_state(self, state: WizardState):
        """Repaint the dialog from a controller snapshot."""
        self.header.set_close_enabled(not state.is_submitting)
        self.header.set_progress(state.step_number, state.step_count)
        self.step_indicator.set_current_step(state.step_number)

        if state.is_succeeded:
            self.success_panel.set_reference(state.reference_number)
            self.stack.setCurrentWidget(self.success_panel)
            self.footer.hide()
            self.error_label.hide()
            return

        self.footer.show()
        page = self.step_pages[state.current_step_index]
        page.populate_data(state.form_data)
        page.set_editable(state.is_editable)

        if self.stack.currentWidget() is not page:
            self.stack.setCurrentWidget(page)
            if state.current_step_index != self._shown_index and state.direction != Direction.NONE:
                self._slide_in(page, state.current_step_index, state.direction)
        self._shown_index = state.current_step_index

        self.footer.set_last_step(state.is_last_step, state.is_submitting, state.is_failed)
        self.footer.set_previous_visible(not state.is_first_step)
        self.footer.set_previous_enabled(not state.is_submitting)
        if state.is_last_step:
            self.footer.set_next_enabled(self.controller.can_submit)
        else:
            self.footer.set_next_enabled(self.controller.can_advance)

        self.error_label.setText(state.last_error)
        self.error_label.setVisible(bool(state.last_error))

    def _slide_in(self, page: QWidget, index: int, direction: Direction):
        """Slide the new page in from the right (forward) or left (backward)."""
        if self._transition is not None:
            self._transition.stop()
        offset = Config.STEP_SLIDE_OFFSET if direction == Direction.FORWARD else -Config.STEP_SLIDE_OFFSET
        animation = QPropertyAnimation(page, b"pos", self)
        animation.setDuration(Config.STEP_SLIDE_DURATION_MS)
        animation.setStartValue(QPoint(offset, 0))
        animation.setEndValue(QPoint(0, 0))
        animation.setEasingCurve(QEasingCurve.OutCubic)
        animation.start()
        self._transition = animation
        self.step_transition.emit(index, direction.value)

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _on_field_changed(self, key: str, value):
        try:
            self.controller.update_field(key, value)
        except ValidationException as e:
            ErrorHandler.handle(e, self, context="intake")

    def _on_validation_failed(self, result):
        logger.debug(f"Validation blocked progress: {result.errors}")

    def _on_dismissed(self):
        if self._transition is not None:
            self._transition.stop()
        self.done(QDialog.Rejected)

    def reject(self):
        """Esc and the window close button go through the controller."""
        self.controller.close()
