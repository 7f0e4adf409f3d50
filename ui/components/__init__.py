# -*- coding: utf-8 -*-
"""
Nexa Studio UI Components
"""

from .action_button import ActionButton
from .step_indicator import StepIndicator
from .wizard_footer import WizardFooter
from .wizard_header import WizardHeader

__all__ = [
    "ActionButton",
    "StepIndicator",
    "WizardFooter",
    "WizardHeader",
]
