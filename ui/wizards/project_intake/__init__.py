# -*- coding: utf-8 -*-
"""
Project Intake Wizard Package.

"Start Your Project" flow: project details, services, budget & timeline,
then an asynchronous submission. State lives in
controllers.intake_wizard_controller; this package only renders it.
"""

from .intake_wizard import IntakeWizardDialog, SuccessPanel

__all__ = [
    'IntakeWizardDialog',
    'SuccessPanel'
]
