# -*- coding: utf-8 -*-
"""
Nexa Studio Controllers
=======================
Controller layer between the UI (dialogs, pages) and the services.

Controllers provide:
- State owned outside of widgets
- Qt signals for UI updates
- Validation and business rules

Usage:
    from controllers import IntakeWizardController

    controller = IntakeWizardController()
    controller.update_field("project_name", "Acme")
    controller.state_changed.connect(dialog.render_state)
"""

from controllers.base_controller import BaseController
from controllers.intake_wizard_controller import IntakeWizardController

__all__ = [
    'BaseController',
    'IntakeWizardController',
]
