# -*- coding: utf-8 -*-
"""
Main application window.

Hosts the agency landing panel and its "Start Your Project" call to action,
which opens the Project Intake Wizard.
"""

from typing import Optional

from PyQt5.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QLabel
from PyQt5.QtCore import Qt

from .config import Config
from controllers.intake_wizard_controller import IntakeWizardController
from services.translation_manager import get_layout_direction, tr
from ui.components.action_button import ActionButton
from ui.design_system import Colors, Spacing
from ui.font_utils import create_font, FontManager
from ui.wizards.project_intake import IntakeWizardDialog
from utils.logger import get_logger

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, controller: Optional[IntakeWizardController] = None, parent=None):
        super().__init__(parent)
        self.intake_controller = controller or IntakeWizardController(parent=self)
        self.intake_controller.dismissed.connect(self._on_wizard_dismissed)
        self.intake_wizard: Optional[IntakeWizardDialog] = None

        self._setup_window()
        self._create_widgets()

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle(Config.APP_TITLE)
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)
        self.setLayoutDirection(get_layout_direction())
        self.setStyleSheet(f"QMainWindow {{ background-color: {Colors.BACKGROUND}; }}")

    def _create_widgets(self):
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(Spacing.XL, Spacing.XL, Spacing.XL, Spacing.XL)
        layout.setSpacing(Spacing.LG)
        layout.addStretch()

        headline = QLabel(tr("home.headline"))
        headline.setAlignment(Qt.AlignCenter)
        headline.setWordWrap(True)
        headline.setFont(create_font(size=FontManager.SIZE_LARGE_TITLE, weight=FontManager.WEIGHT_BOLD))
        headline.setStyleSheet(f"color: {Colors.TEXT_PRIMARY};")
        layout.addWidget(headline)

        tagline = QLabel(tr("home.tagline"))
        tagline.setAlignment(Qt.AlignCenter)
        tagline.setStyleSheet(f"color: {Colors.TEXT_SECONDARY};")
        layout.addWidget(tagline)

        self.btn_start_project = ActionButton(tr("button.start_project"), variant="primary", width=200, height=48)
        self.btn_start_project.clicked.connect(self.open_intake_wizard)
        layout.addWidget(self.btn_start_project, 0, Qt.AlignCenter)

        layout.addStretch()
        self.setCentralWidget(central)

    def open_intake_wizard(self):
        """Show the intake wizard with a fresh session."""
        if not self.intake_controller.open():
            logger.debug("Intake wizard busy, not reopening")
            return
        if self.intake_wizard is None:
            self.intake_wizard = IntakeWizardDialog(self.intake_controller, self)
        self.intake_wizard.show()
        self.intake_wizard.raise_()

    def _on_wizard_dismissed(self):
        logger.debug("Intake wizard dismissed")

    def closeEvent(self, event):
        """Detach the wizard from its timer and worker before the window goes."""
        self.intake_controller.teardown()
        if not self.intake_controller.wait_for_workers():
            logger.warning("Submission worker still running at shutdown")
        super().closeEvent(event)
